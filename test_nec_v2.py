import unittest
from core.models import Phase, ConductorMaterial, InsulationRating, DistanceUnit, DropStatus
from standards.nec_logic import MotorProtectionSizer, VoltageDropAnalyzer, WireSizer, select_standard_size
from standards.nec_tables import BREAKER_RATINGS, FUSE_RATINGS, MOTOR_FLA_430_250

class TestMotorProtection(unittest.TestCase):

    def test_10hp_460v(self):
        print("\n--- TEST: Motor 10 HP @ 460 V ---")
        res = MotorProtectionSizer.size("10", "460")
        print(res)
        self.assertEqual(res.fla, 14)
        self.assertEqual(res.horsepower, "10")
        self.assertAlmostEqual(res.min_conductor_ampacity, 17.5)
        # 14 AWG carries 20 A at 75C
        self.assertEqual(res.conductor_awg, "14")
        self.assertAlmostEqual(res.overload_range[0], 16.1)
        self.assertAlmostEqual(res.overload_range[1], 17.5)
        # 14 * 2.5 = 35 A exactly
        self.assertEqual(res.breaker_rating, 35)
        # 14 * 1.75 = 24.5 A -> next standard 25 A
        self.assertEqual(res.fuse_rating, 25)
        self.assertEqual(res.nema_starter, "NEMA 1")

    def test_voltage_suffix_and_fractional_hp(self):
        res = MotorProtectionSizer.size(0.5, "230V")
        self.assertEqual(res.voltage, 230)
        self.assertEqual(res.horsepower, "0.5")
        self.assertEqual(res.fla, 2.2)
        self.assertEqual(res.breaker_rating, 15)
        self.assertEqual(res.fuse_rating, 6)
        self.assertEqual(res.nema_starter, "NEMA 00")

    def test_not_in_table(self):
        self.assertIsNone(MotorProtectionSizer.size(10, 480))
        self.assertIsNone(MotorProtectionSizer.size(0.33, 460))
        self.assertIsNone(MotorProtectionSizer.size("", 460))
        self.assertIsNone(MotorProtectionSizer.size(10, "abc"))

    def test_large_motor_saturates(self):
        # 285 A * 2.5 = 712.5 A -> 800 A
        res = MotorProtectionSizer.size(100, 200)
        self.assertEqual(res.breaker_rating, 800)
        self.assertEqual(res.fuse_rating, 500)
        self.assertEqual(res.conductor_awg, "500")
        self.assertEqual(res.nema_starter, "N/A")

    def test_ratings_never_below_requirement(self):
        for voltage, row in MOTOR_FLA_430_250.items():
            last_breaker = last_fuse = 0
            for hp in sorted(row):
                res = MotorProtectionSizer.size(hp, voltage)
                self.assertGreaterEqual(res.breaker_rating, min(res.fla * 2.5, BREAKER_RATINGS[-1]) - 1e-9)
                self.assertGreaterEqual(res.fuse_rating, min(res.fla * 1.75, FUSE_RATINGS[-1]) - 1e-9)
                self.assertGreaterEqual(res.breaker_rating, last_breaker)
                self.assertGreaterEqual(res.fuse_rating, last_fuse)
                last_breaker, last_fuse = res.breaker_rating, res.fuse_rating

    def test_same_inputs_same_result(self):
        self.assertEqual(MotorProtectionSizer.size("7.5", "460V"), MotorProtectionSizer.size(7.5, 460))

    def test_select_standard_size(self):
        self.assertEqual(select_standard_size(35.0, BREAKER_RATINGS), 35)
        self.assertEqual(select_standard_size(35.0000001, BREAKER_RATINGS), 35)
        self.assertEqual(select_standard_size(35.01, BREAKER_RATINGS), 40)
        self.assertEqual(select_standard_size(2, FUSE_RATINGS), 3)
        self.assertEqual(select_standard_size(9000, BREAKER_RATINGS), 6000)

    def test_overload_setting(self):
        s = MotorProtectionSizer.overload_setting(10, 1.15)
        self.assertAlmostEqual(s.max_setting_amps, 12.5)
        self.assertAlmostEqual(s.service_factor_amps, 11.5)
        self.assertIn("125%", s.reference_notes)

        s = MotorProtectionSizer.overload_setting("10", "1.0")
        self.assertAlmostEqual(s.max_setting_amps, 11.5)
        self.assertIn("115%", s.reference_notes)

        self.assertIsNone(MotorProtectionSizer.overload_setting(0, 1.15))
        self.assertIsNone(MotorProtectionSizer.overload_setting(10, ""))

class TestVoltageDrop(unittest.TestCase):

    def test_acceptable_three_phase(self):
        print("\n--- TEST: Caída de tensión 460 V, 14 A, 12 AWG, 150 ft ---")
        res = VoltageDropAnalyzer.analyze(460, Phase.THREE, 14, ConductorMaterial.COPPER, "12", 150)
        print(f"VD: {res.drop_volts:.3f} V ({res.drop_percent:.3f}%) | {res.formula}")
        # sqrt(3) * 12.9 * 14 * 150 / 6530
        self.assertAlmostEqual(res.drop_volts, 7.1855, places=3)
        self.assertAlmostEqual(res.drop_percent, 1.562, places=3)
        self.assertAlmostEqual(res.load_voltage, 460 - res.drop_volts)
        self.assertEqual(res.status, DropStatus.ACCEPTABLE)
        self.assertIsNone(res.suggestion)
        self.assertIn("6530CM", res.formula)
        self.assertIn("√3", res.formula)

    def test_unacceptable_with_suggestion(self):
        print("\n--- TEST: Caída de tensión 120 V, 20 A, 14 AWG, 200 ft ---")
        res = VoltageDropAnalyzer.analyze("120", Phase.SINGLE, "20", ConductorMaterial.COPPER, "14", "200")
        print(f"VD: {res.drop_percent:.2f}% -> sugerido {res.suggestion}")
        # 2 * 12.9 * 20 * 200 / 4110
        self.assertAlmostEqual(res.drop_volts, 25.109, places=2)
        self.assertEqual(res.status, DropStatus.UNACCEPTABLE)
        # 6 AWG still gives 3.28 %, 4 AWG is the first under 3 %
        self.assertEqual(res.suggestion, "4")

    def test_no_gauge_is_large_enough(self):
        res = VoltageDropAnalyzer.analyze(24, Phase.SINGLE, 100, ConductorMaterial.ALUMINUM, "10", 1000)
        self.assertEqual(res.status, DropStatus.UNACCEPTABLE)
        self.assertIsNone(res.suggestion)

    def test_classification_thresholds(self):
        self.assertEqual(VoltageDropAnalyzer.classify(2.99), DropStatus.ACCEPTABLE)
        self.assertEqual(VoltageDropAnalyzer.classify(3.0), DropStatus.CAUTION)
        self.assertEqual(VoltageDropAnalyzer.classify(5.0), DropStatus.CAUTION)
        self.assertEqual(VoltageDropAnalyzer.classify(5.01), DropStatus.UNACCEPTABLE)

    def test_caution_gets_no_suggestion(self):
        # 2 * 12.9 * 20 * 60 / 6530 = 4.74 V -> 3.95 %
        res = VoltageDropAnalyzer.analyze(120, Phase.SINGLE, 20, ConductorMaterial.COPPER, "12", 60)
        self.assertEqual(res.status, DropStatus.CAUTION)
        self.assertIsNone(res.suggestion)

    def test_meters(self):
        ft = VoltageDropAnalyzer.analyze(460, Phase.THREE, 14, ConductorMaterial.COPPER, "12", 150)
        m = VoltageDropAnalyzer.analyze(460, Phase.THREE, 14, ConductorMaterial.COPPER, "12", 45.72,
                                        DistanceUnit.METERS)
        self.assertAlmostEqual(ft.drop_volts, m.drop_volts, places=3)

    def test_unknown_distance_unit(self):
        self.assertIsNone(VoltageDropAnalyzer.analyze(460, Phase.THREE, 14, ConductorMaterial.COPPER, "12", 150,
                                                      "furlong"))

    def test_same_inputs_same_result(self):
        args = (208, Phase.SINGLE, 30, ConductorMaterial.ALUMINUM, "8", 220)
        self.assertEqual(VoltageDropAnalyzer.analyze(*args), VoltageDropAnalyzer.analyze(*args))
        self.assertEqual(WireSizer.select_wire(57, ConductorMaterial.ALUMINUM), WireSizer.select_wire("57", ConductorMaterial.ALUMINUM))

    def test_aluminum_drops_more(self):
        cu = VoltageDropAnalyzer.analyze(480, Phase.THREE, 50, ConductorMaterial.COPPER, "6", 300)
        al = VoltageDropAnalyzer.analyze(480, Phase.THREE, 50, ConductorMaterial.ALUMINUM, "6", 300)
        self.assertGreater(al.drop_volts, cu.drop_volts)

    def test_invalid_inputs(self):
        args = (Phase.THREE, 14, ConductorMaterial.COPPER, "12", 150)
        self.assertIsNone(VoltageDropAnalyzer.analyze(0, *args))
        self.assertIsNone(VoltageDropAnalyzer.analyze("", *args))
        self.assertIsNone(VoltageDropAnalyzer.analyze(460, Phase.THREE, -1, ConductorMaterial.COPPER, "12", 150))
        self.assertIsNone(VoltageDropAnalyzer.analyze(460, Phase.THREE, 14, ConductorMaterial.COPPER, "13", 150))
        self.assertIsNone(VoltageDropAnalyzer.analyze(460, Phase.THREE, 14, ConductorMaterial.COPPER, "12", "x"))

class TestWireSizer(unittest.TestCase):
    def test_copper_columns(self):
        self.assertEqual(WireSizer.select_wire(28), ("10", 35))
        self.assertEqual(WireSizer.select_wire(28, rating=InsulationRating.TEMP_60), ("10", 30))
        self.assertEqual(WireSizer.select_wire(28, rating=InsulationRating.TEMP_90), ("12", 30))
        self.assertEqual(WireSizer.select_wire(20), ("14", 20))

    def test_aluminum(self):
        self.assertEqual(WireSizer.select_wire("28", ConductorMaterial.ALUMINUM), ("10", 30))

    def test_out_of_range(self):
        self.assertIsNone(WireSizer.select_wire(500))
        self.assertIsNone(WireSizer.select_wire(0))
        self.assertIsNone(WireSizer.select_wire("abc"))

if __name__ == '__main__':
    unittest.main()
