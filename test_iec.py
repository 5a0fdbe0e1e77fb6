import unittest
from core.models import RtdStatus, MountingType, EnclosureMaterial, EnclosureGeometry
from core.components import HeatSource, total_heat_watts
from standards.iec import RtdLinearizer, EnclosureThermalModel

class TestRtdLinearizer(unittest.TestCase):
    def test_known_points(self):
        res = RtdLinearizer.resistance_to_temperature("107.79")
        self.assertEqual(res.status, RtdStatus.OK)
        self.assertAlmostEqual(res.temperature_c, 20.0, delta=0.05)
        self.assertEqual(RtdLinearizer.display(res), "19.99")

        res = RtdLinearizer.resistance_to_temperature(138.5055)
        self.assertAlmostEqual(res.temperature_c, 100.0, places=6)
        self.assertEqual(RtdLinearizer.display(res), "100.00")

    def test_r0_is_zero_degrees(self):
        res = RtdLinearizer.resistance_to_temperature(100)
        self.assertEqual(res.status, RtdStatus.OK)
        self.assertEqual(RtdLinearizer.display(res), "0.00")

    def test_round_trip(self):
        for t in [0.0, 25.0, 150.0, 400.0, 850.0]:
            r = RtdLinearizer.temperature_to_resistance(t)
            res = RtdLinearizer.resistance_to_temperature(r)
            self.assertAlmostEqual(res.temperature_c, t, places=6)

    def test_below_range(self):
        res = RtdLinearizer.resistance_to_temperature(99.9)
        self.assertEqual(res.status, RtdStatus.BELOW_RANGE)
        self.assertIsNone(res.temperature_c)
        self.assertEqual(RtdLinearizer.display(res), RtdLinearizer.BELOW_RANGE_MESSAGE)
        self.assertIsNone(RtdLinearizer.temperature_to_resistance(-10))

    def test_invalid(self):
        for bad in ["", "abc", -5, None]:
            res = RtdLinearizer.resistance_to_temperature(bad)
            self.assertEqual(res.status, RtdStatus.INVALID, bad)
            self.assertEqual(RtdLinearizer.display(res), "")
        # Past the vertex of the quadratic there is no real root
        self.assertEqual(RtdLinearizer.resistance_to_temperature(1000).status, RtdStatus.INVALID)

    def test_huge_temperature_gives_no_resistance(self):
        self.assertIsNone(RtdLinearizer.temperature_to_resistance("1e200"))
        self.assertIsNone(RtdLinearizer.temperature_to_resistance(1e308))

    def test_same_input_same_result(self):
        self.assertEqual(RtdLinearizer.resistance_to_temperature("119.4"), RtdLinearizer.resistance_to_temperature("119.4"))

class TestEnclosureThermal(unittest.TestCase):
    def test_cooling_required(self):
        print("\n--- TEST: Gabinete 2000x800x600, 1500 W ---")
        res = EnclosureThermalModel.calculate(2000, 800, 600, 35, 25, 1500)
        print(res)
        # 1.8*1.6 + 1.8*1.2 + 1.4*0.48
        self.assertAlmostEqual(res.surface_area_m2, 5.712)
        self.assertEqual(res.delta_t, 10)
        self.assertAlmostEqual(res.passive_loss_w, 314.16)
        self.assertAlmostEqual(res.required_cooling_w, 1185.84)
        self.assertTrue(res.cooling_required)
        self.assertAlmostEqual(res.airflow_cfm, 374.725, places=3)
        self.assertAlmostEqual(res.cooling_btu_hr, 4043.71, places=2)
        self.assertEqual(res.recommended_btu_hr, 4100)

    def test_no_cooling_needed(self):
        res = EnclosureThermalModel.calculate("2000", "800", "600", "35", "25", "200")
        self.assertFalse(res.cooling_required)
        self.assertLess(res.required_cooling_w, 0)
        self.assertIsNone(res.airflow_cfm)
        self.assertIsNone(res.recommended_btu_hr)

    def test_mounting_reduces_area(self):
        g = EnclosureGeometry(2000, 800, 600)
        free = EnclosureThermalModel.effective_area(g, MountingType.FREE_STANDING)
        wall = EnclosureThermalModel.effective_area(g, MountingType.WALL_MOUNTED)
        ground = EnclosureThermalModel.effective_area(g, MountingType.GROUND_MOUNTED)
        both = EnclosureThermalModel.effective_area(g, MountingType.GROUND_AND_WALL)
        self.assertAlmostEqual(wall, 5.072)
        self.assertAlmostEqual(ground, 5.376)
        self.assertAlmostEqual(both, 4.736)
        self.assertLess(wall, free)
        self.assertLess(ground, free)
        self.assertLess(both, min(wall, ground))

    def test_material(self):
        steel = EnclosureThermalModel.calculate(1200, 800, 300, 40, 30, 500)
        alu = EnclosureThermalModel.calculate(1200, 800, 300, 40, 30, 500, material=EnclosureMaterial.ALUMINUM)
        poly = EnclosureThermalModel.calculate(1200, 800, 300, 40, 30, 500, material=EnclosureMaterial.POLYCARBONATE)
        self.assertGreater(alu.passive_loss_w, steel.passive_loss_w)
        self.assertLess(poly.passive_loss_w, steel.passive_loss_w)

    def test_rejected_inputs(self):
        self.assertIsNone(EnclosureThermalModel.calculate(2000, 800, 600, 25, 25, 1500))
        self.assertIsNone(EnclosureThermalModel.calculate(2000, 800, 600, 25, 35, 1500))
        self.assertIsNone(EnclosureThermalModel.calculate(0, 800, 600, 35, 25, 1500))
        self.assertIsNone(EnclosureThermalModel.calculate(2000, 800, 600, 35, 25, -1))
        self.assertIsNone(EnclosureThermalModel.calculate(2000, "", 600, 35, 25, 1500))

    def test_overflowing_inputs_give_no_result(self):
        self.assertIsNone(EnclosureThermalModel.calculate(2000, 800, 600, 35, 25, "1e308"))
        self.assertIsNone(EnclosureThermalModel.calculate("1e308", "1e308", 600, 35, 25, 1500))
        self.assertIsNone(EnclosureThermalModel.calculate(2000, 800, 600, "1e308", "-1e308", 1500))

    def test_same_inputs_same_result(self):
        args = (1200, 800, 300, 40, 30, 900, MountingType.WALL_MOUNTED, EnclosureMaterial.STAINLESS_STEEL)
        self.assertEqual(EnclosureThermalModel.calculate(*args), EnclosureThermalModel.calculate(*args))

class TestHeatSources(unittest.TestCase):
    def test_catalog(self):
        plc = HeatSource.from_catalog("PLC CPU (CompactLogix)", 2)
        vfd = HeatSource.from_catalog("VFD (10 HP, 7.5 kW)")
        self.assertEqual(plc.total_watts, 24)
        self.assertEqual(total_heat_watts([plc, vfd]), 274)
        with self.assertRaises(ValueError):
            HeatSource.from_catalog("Flux capacitor")

    def test_empty_entries_add_nothing(self):
        self.assertEqual(HeatSource("Spare", 50, 0).total_watts, 0)
        self.assertEqual(HeatSource("Blank", 0, 3).total_watts, 0)
        self.assertEqual(total_heat_watts([]), 0)

if __name__ == '__main__':
    unittest.main()
