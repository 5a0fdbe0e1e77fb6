import sys
import datetime
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from core.models import (Phase, ConductorMaterial, InsulationRating, DistanceUnit, QuantityFamily,
                         MountingType, EnclosureMaterial, RawPreset, ScaleRange, RtdStatus,
                         EncoderMode, Mechanism, LinearUnit, SpeedUnit)
from core.converters import UnitConverter
from core.scaling import ScalingSetup, LinearScaler
from core.components import DcLoad
from core.settings import configure_logging
from standards.nec_logic import MotorProtectionSizer, VoltageDropAnalyzer, MotorFlaEstimator, WireSizer
from standards.nec_tables import TABLES_VERSION as NEC_VERSION, MOTOR_FLA_430_250
from standards.iec import RtdLinearizer, EnclosureThermalModel
from standards.control import DcPowerSupplySizer, EncoderResolution, OhmsLaw
from standards.control_tables import DC_LOAD_CATALOG

def ask(prompt, default=""):
    text = input(f"{prompt} [{default}]: ").strip()
    return text or default

def ask_choice(prompt, options, default=1):
    """options: list of (label, value). Returns the chosen value."""
    for i, (label, _) in enumerate(options, 1):
        print(f"  ({i}) {label}")
    try:
        idx = int(ask(prompt, str(default)))
    except ValueError:
        idx = 0
    if not 1 <= idx <= len(options):
        print("Opción inválida, se usa el valor por defecto.")
        idx = default
    return options[idx - 1][1]

PHASES = [("Trifásico", Phase.THREE), ("Monofásico", Phase.SINGLE)]
MATERIALS = [("Cobre", ConductorMaterial.COPPER), ("Aluminio", ConductorMaterial.ALUMINUM)]

# Each calculator returns rows of (Parameter, Value) for the report
def run_scaling():
    presets = [("Personalizado", RawPreset.CUSTOM), ("Rockwell 4-20 mA", RawPreset.ROCKWELL_4_20MA),
               ("Siemens 4-20 mA", RawPreset.SIEMENS_4_20MA), ("4-20 mA", RawPreset.CURRENT_4_20MA)]
    preset = ask_choice("Tarjeta de entrada", presets, 2)
    setup = ScalingSetup(raw=ScaleRange(0, 100), eng=ScaleRange(0, 100)).with_raw_preset(preset)
    if setup.raw_editable:
        raw_range = LinearScaler.parse_range(ask("Raw mín", "0"), ask("Raw máx", "100"))
        if raw_range is None:
            print("Rango raw inválido.")
            return []
        setup = setup.with_raw_range(raw_range.min, raw_range.max)
    eng_range = LinearScaler.parse_range(ask("Ingeniería mín", "0"), ask("Ingeniería máx", "100"))
    if eng_range is None:
        print("Rango de ingeniería inválido.")
        return []
    setup = setup.with_eng_range(eng_range.min, eng_range.max)

    raw = ask("Valor raw", "0")
    eng = LinearScaler.raw_to_eng_display(raw, setup)
    print(f"Ingeniería: {eng or 'Sin resultado'}")
    snippet = LinearScaler.code_snippet("Structured Text", setup)
    if snippet:
        print(snippet)
    return [("Raw", f"{setup.raw.min} .. {setup.raw.max}"), ("Ingeniería", f"{setup.eng.min} .. {setup.eng.max}"),
            ("Valor raw", raw), ("Valor ingeniería", eng)]

def run_units():
    families = [(f.value, f) for f in QuantityFamily]
    family = ask_choice("Magnitud", families)
    units = UnitConverter.units(family)
    unit = ask_choice("Unidad de origen", [(u, u) for u in units])
    value = ask("Valor", "1")
    results = UnitConverter.convert_all(family, unit, value)
    if not any(results.values()):
        print("Valor inválido.")
        return []
    for u, text in results.items():
        print(f"  {text:>14} {u}")
    return [(u, text) for u, text in results.items()]

def run_rtd():
    resistance = ask("Resistencia PT100 (ohm)", "107.79")
    result = RtdLinearizer.resistance_to_temperature(resistance)
    if result.status is RtdStatus.INVALID:
        print("Resistencia inválida.")
        return []
    text = RtdLinearizer.display(result)
    print(f"Temperatura: {text} °C" if result.status is RtdStatus.OK else text)
    return [("R (ohm)", resistance), ("T (C)", text)]

def run_motor_protection():
    voltage = ask_choice("Voltaje", [(f"{v} V", v) for v in sorted(MOTOR_FLA_430_250)], 4)
    hp = ask("Potencia (HP)", "10")
    res = MotorProtectionSizer.size(hp, voltage)
    if res is None:
        print("No disponible en NEC 430.250 para esa combinación.")
        return []
    lo, hi = res.overload_range
    print(f"FLA: {res.fla} A | Conductor: {res.conductor_awg} AWG (>= {res.min_conductor_ampacity:.2f} A)")
    print(f"Sobrecarga: {lo:.2f} - {hi:.2f} A | Breaker: {res.breaker_rating} A | Fusible: {res.fuse_rating} A | {res.nema_starter}")
    return [("HP", res.horsepower), ("Voltaje", res.voltage), ("FLA", res.fla),
            ("Conductor", res.conductor_awg), ("Sobrecarga mín", round(lo, 2)), ("Sobrecarga máx", round(hi, 2)),
            ("Breaker", res.breaker_rating), ("Fusible", res.fuse_rating), ("Arrancador", res.nema_starter)]

def run_thermal():
    h, w, d = ask("Alto (mm)", "1200"), ask("Ancho (mm)", "800"), ask("Profundidad (mm)", "300")
    t_int, t_ext = ask("T. interna máx (C)", "35"), ask("T. ambiente (C)", "25")
    heat = ask("Calor interno (W)", "500")
    mounting = ask_choice("Montaje", [(m.value, m) for m in MountingType])
    material = ask_choice("Material", [(m.value, m) for m in EnclosureMaterial])
    res = EnclosureThermalModel.calculate(h, w, d, t_int, t_ext, heat, mounting, material)
    if res is None:
        print("Sin resultado: verifique dimensiones y que la T. ambiente sea menor que la interna.")
        return []
    print(f"Área efectiva: {res.surface_area_m2:.2f} m2 | Disipación pasiva: {res.passive_loss_w:.0f} W")
    if res.cooling_required:
        print(f"Enfriamiento: {res.required_cooling_w:.0f} W | {res.airflow_cfm:.0f} CFM | {res.recommended_btu_hr} BTU/h")
    else:
        print("No requiere enfriamiento activo.")
    return [("Área m2", round(res.surface_area_m2, 3)), ("Pasivo W", round(res.passive_loss_w, 1)),
            ("Requerido W", round(res.required_cooling_w, 1)), ("CFM", res.airflow_cfm), ("BTU/h", res.recommended_btu_hr)]

def run_voltage_drop():
    voltage = ask("Voltaje (V)", "460")
    phase = ask_choice("Fases", PHASES)
    current = ask("Corriente (A)", "14")
    material = ask_choice("Material", MATERIALS)
    gauge = ask("Calibre (AWG/kcmil)", "12")
    distance = ask("Distancia un sentido", "150")
    unit = ask_choice("Unidad", [("ft", DistanceUnit.FEET), ("m", DistanceUnit.METERS)])
    res = VoltageDropAnalyzer.analyze(voltage, phase, current, material, gauge, distance, unit)
    if res is None:
        print("Datos inválidos (valores positivos y calibre de la tabla).")
        return []
    warn = " (!)" if res.drop_percent > 3.0 else ""
    print(f"Caída: {res.drop_volts:.2f} V ({res.drop_percent:.2f}%){warn} | {res.status.value} | {res.formula}")
    if res.suggestion:
        print(f"Calibre sugerido: {res.suggestion}")
    return [("Caída V", round(res.drop_volts, 3)), ("Caída %", round(res.drop_percent, 3)),
            ("Estado", res.status.value), ("Sugerido", res.suggestion or "-")]

def run_motor_fla():
    hp, voltage = ask("Potencia (HP)", "10"), ask("Voltaje (V)", "480")
    phase = ask_choice("Fases", PHASES)
    eff, pf = ask("Eficiencia (%)", "89.5"), ask("Factor de potencia", "0.85")
    fla = MotorFlaEstimator.estimate_display(hp, voltage, phase, eff, pf)
    print(f"FLA estimada: {fla} A" if fla else "Datos inválidos: V, eficiencia y FP distintos de cero.")
    return [("HP", hp), ("Voltaje", voltage), ("FLA", fla)] if fla else []

def run_wire_sizing():
    amps = ask("Corriente (A)", "28")
    material = ask_choice("Material", MATERIALS)
    rating = ask_choice("Aislamiento", [("60 C", InsulationRating.TEMP_60), ("75 C", InsulationRating.TEMP_75),
                                         ("90 C", InsulationRating.TEMP_90)], 2)
    wire = WireSizer.select_wire(amps, material, rating)
    if wire is None:
        print("Corriente inválida o fuera de la tabla NEC 310.16.")
        return []
    print(f"Calibre: {wire[0]} ({wire[1]} A)")
    return [("Corriente", amps), ("Calibre", wire[0]), ("Ampacidad", wire[1])]

def run_dc_supply():
    names = list(DC_LOAD_CATALOG)
    loads = []
    while True:
        qty = ask("Cantidad (Enter para terminar)", "")
        if not qty:
            break
        name = ask_choice("Dispositivo", [(n, n) for n in names])
        try:
            loads.append(DcLoad.from_catalog(name, int(qty)))
        except ValueError:
            print("Cantidad inválida.")
    res = DcPowerSupplySizer.size(loads, ask("Factor de seguridad (%)", "25"), ask("Reserva (%)", "20"))
    if res is None:
        print("Sin cargas válidas o márgenes negativos.")
        return []
    print(f"Nominal: {res.total_nominal_a:.2f} A | Pico: {res.peak_inrush_a:.2f} A | Requerido: {res.required_a:.2f} A")
    print(f"Fuente recomendada: {res.recommended_a} A")
    return [("Nominal A", round(res.total_nominal_a, 3)), ("Pico A", round(res.peak_inrush_a, 3)),
            ("Requerido A", round(res.required_a, 3)), ("Fuente A", res.recommended_a)]

def run_encoder():
    ppr = ask("PPR", "1024")
    mode = ask_choice("Modo", [("1x", EncoderMode.X1), ("4x", EncoderMode.X4)], 2)
    mechanism = ask_choice("Mecanismo", [(m.value, m) for m in Mechanism], 3)
    kwargs = {}
    if mechanism is Mechanism.GEARBOX:
        kwargs.update(gear_in=ask("Relación entrada", "10"), gear_out=ask("Relación salida", "1"))
    elif mechanism is Mechanism.LEADSCREW:
        kwargs.update(pitch=ask("Paso", "5"))
    elif mechanism is not Mechanism.DIRECT:
        kwargs.update(diameter=ask("Diámetro", "50"))
    if "pitch" in kwargs or "diameter" in kwargs:
        kwargs["unit"] = ask_choice("Unidad", [(u.value, u) for u in LinearUnit])
    speed_unit = ask_choice("Unidad de velocidad", [(u.value, u) for u in SpeedUnit])
    speed = ask("Velocidad", "60")
    res = EncoderResolution.calculate(ppr, mode, mechanism, speed=speed, speed_unit=speed_unit, **kwargs)
    if res is None:
        print("PPR o dimensiones inválidas.")
        return []
    print(f"Cuentas/rev: {res.counts_per_rev:g} | Resolución: {res.resolution:.6g} {res.unit} | "
          f"Escala: {res.scale_factor:.6g} cuentas/{res.unit}")
    if res.frequency_status is not None:
        print(f"Frecuencia: {res.required_frequency_hz:.0f} Hz | {res.frequency_status.value}")
    return [("Cuentas/rev", res.counts_per_rev), ("Resolución", res.resolution), ("Unidad", res.unit),
            ("Frecuencia Hz", res.required_frequency_hz)]

def run_ohms_law():
    print("Ingrese exactamente dos valores (deje vacío el resto).")
    v, i = ask("Voltaje (V)"), ask("Corriente (A)")
    r, p = ask("Resistencia (ohm)"), ask("Potencia (W)")
    res = OhmsLaw.solve(v or None, i or None, r or None, p or None)
    if res is None:
        print("Se necesitan exactamente dos valores positivos.")
        return []
    print(f"V = {res.voltage:.4g} | I = {res.current:.4g} | R = {res.resistance:.4g} | P = {res.power:.4g}  ({res.formula})")
    return [("V", res.voltage), ("I", res.current), ("R", res.resistance), ("P", res.power)]

CALCULATORS = [
    ("Escalado PLC", run_scaling),
    ("Conversión de unidades", run_units),
    ("RTD PT100", run_rtd),
    ("Protección de motor (NEC 430)", run_motor_protection),
    ("Carga térmica de gabinete", run_thermal),
    ("Caída de tensión", run_voltage_drop),
    ("Corriente de motor (FLA)", run_motor_fla),
    ("Calibre de conductor (NEC 310.16)", run_wire_sizing),
    ("Fuente 24 VDC", run_dc_supply),
    ("Resolución de encoder", run_encoder),
    ("Ley de Ohm", run_ohms_law),
]

def export_to_excel(results):
    wb = Workbook()
    ws = wb.active
    ws.title = "Resultados"
    ws.append(["CÁLCULOS DE AUTOMATIZACIÓN"])
    ws.append(["Fecha:", datetime.datetime.now().strftime("%Y-%m-%d %H:%M")])
    ws.append(["Tablas:", NEC_VERSION])
    ws.append([])
    ws.append(["Calculadora", "Parámetro", "Valor"])

    header_fill = PatternFill(start_color="DDDDDD", end_color="DDDDDD", fill_type="solid")
    for cell in ws[ws.max_row]:
        cell.font = Font(bold=True)
        cell.fill = header_fill

    for name, rows in results:
        for param, value in rows:
            ws.append([name, param, value])

    for col in ws.columns:
        ws.column_dimensions[col[0].column_letter].width = 25

    filename = f"Calculos_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    wb.save(filename)
    print(f"\n[INFO] Excel generado: {filename}")
    return filename

def main():
    configure_logging()
    print("==========================================================")
    print(" CALCULADORAS DE AUTOMATIZACIÓN INDUSTRIAL")
    print("==========================================================")

    results = []
    while True:
        print("\n--- Menú ---")
        for i, (name, _) in enumerate(CALCULATORS, 1):
            print(f"  ({i}) {name}")
        choice = input("Seleccione una calculadora (Enter para salir): ").strip()
        if not choice:
            break
        try:
            idx = int(choice)
        except ValueError:
            idx = 0
        if not 1 <= idx <= len(CALCULATORS):
            print("Opción inválida.")
            continue
        name, runner = CALCULATORS[idx - 1]

        print(f"\n[{name}]")
        rows = runner()
        if rows:
            results.append((name, rows))

    if not results:
        print("No se realizaron cálculos.")
        sys.exit()

    if input("\n¿Exportar reporte a Excel? (s/n): ").lower() == 's':
        export_to_excel(results)

if __name__ == "__main__":
    main()
