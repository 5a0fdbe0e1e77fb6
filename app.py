import streamlit as st
import pandas as pd
import io
from core.models import (Phase, ConductorMaterial, InsulationRating, DistanceUnit, DropStatus, RtdStatus,
                         QuantityFamily, MountingType, EnclosureMaterial, RawPreset, EngPreset, ScaleRange,
                         EncoderMode, Mechanism, LinearUnit, SpeedUnit, FrequencyStatus)
from core.converters import UnitConverter, parse_number, format_quantity
from core.scaling import ScalingSetup, LinearScaler, format_literal
from core.components import HeatSource, DcLoad, total_heat_watts
from core.settings import configure_logging
from standards.nec_logic import MotorProtectionSizer, VoltageDropAnalyzer, MotorFlaEstimator, WireSizer
from standards.nec_tables import MOTOR_FLA_430_250, CIRCULAR_MILS
from standards.iec import RtdLinearizer, EnclosureThermalModel
from standards.iec_tables import HEAT_SOURCE_CATALOG
from standards.instrument_tables import SNIPPET_TEMPLATES
from standards.control import DcPowerSupplySizer, EncoderResolution, OhmsLaw
from standards.control_tables import DC_LOAD_CATALOG, DEFAULT_SAFETY_PERCENT, DEFAULT_GROWTH_PERCENT

configure_logging()

# --- Page Config ---
st.set_page_config(
    page_title="Calculadoras de Automatización",
    page_icon="⚡",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main-header { font-family: 'Inter', sans-serif; color: #1E3A8A; font-weight: 700; }
    .stDataFrame { border-radius: 10px; overflow: hidden; }
</style>
""", unsafe_allow_html=True)

RAW_LABELS = {
    RawPreset.CUSTOM: "Personalizado",
    RawPreset.CURRENT_4_20MA: "4-20 mA",
    RawPreset.VOLTAGE_0_10V: "0-10 V",
    RawPreset.ROCKWELL_4_20MA: "Rockwell 4-20 mA (4000-20000)",
    RawPreset.SIEMENS_4_20MA: "Siemens 4-20 mA (0-27648)",
    RawPreset.UNSIGNED_12: "12 bits (0-4095)",
    RawPreset.UNSIGNED_14: "14 bits (0-16383)",
    RawPreset.UNSIGNED_16: "16 bits (0-65535)",
    RawPreset.SIGNED_15: "15 bits + signo (-32768-32767)",
    RawPreset.ROCKWELL_10V: "Rockwell ±10 V (±10000)",
    RawPreset.SIEMENS_10V: "Siemens ±10 V (±27648)",
}

ENG_LABELS = {
    EngPreset.CUSTOM: "Personalizado",
    EngPreset.PERCENT: "Porcentaje 0-100 %",
    EngPreset.FREQ_60HZ: "Frecuencia 0-60 Hz",
    EngPreset.SPEED_1800RPM: "Velocidad 0-1800 RPM",
    EngPreset.TORQUE_300: "Torque 0-300 %",
    EngPreset.PSI_150: "Presión 0-150 PSI",
    EngPreset.CELSIUS_100: "Temperatura 0-100 °C",
    EngPreset.FAHRENHEIT_212: "Temperatura 32-212 °F",
    EngPreset.GPM_500: "Caudal 0-500 GPM",
    EngPreset.LITERS_1000: "Volumen 0-1000 L",
}

FAMILY_LABELS = {
    QuantityFamily.PRESSURE: "Presión",
    QuantityFamily.TEMPERATURE: "Temperatura",
    QuantityFamily.FLOW: "Caudal",
    QuantityFamily.DISTANCE: "Distancia",
    QuantityFamily.TORQUE: "Torque",
}

MOUNTING_LABELS = {
    MountingType.FREE_STANDING: "Autosoportado (libre)",
    MountingType.WALL_MOUNTED: "Montaje en pared",
    MountingType.GROUND_MOUNTED: "Sobre piso",
    MountingType.GROUND_AND_WALL: "Sobre piso y contra pared",
}

MECHANISM_LABELS = {
    Mechanism.DIRECT: "Directo (eje)",
    Mechanism.GEARBOX: "Reductor",
    Mechanism.LEADSCREW: "Tornillo de bolas",
    Mechanism.PULLEY: "Polea / banda",
    Mechanism.RACK: "Piñón y cremallera",
}

STATUS_LABELS = {
    DropStatus.ACCEPTABLE: "Aceptable (< 3 %)",
    DropStatus.CAUTION: "Precaución (3-5 %)",
    DropStatus.UNACCEPTABLE: "Inaceptable (> 5 %)",
}

if "heat_sources" not in st.session_state:
    st.session_state.heat_sources = []
if "dc_loads" not in st.session_state:
    st.session_state.dc_loads = []

# Sheets collected from every tab for the Excel download
report = {}

# --- Helper: Export Excel ---
def to_excel(sheets):
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        for name, df in sheets.items():
            df.to_excel(writer, index=False, sheet_name=name[:31])
    return output.getvalue()

st.markdown("<h1 class='main-header'>⚡ Calculadoras de Automatización Industrial</h1>", unsafe_allow_html=True)
st.markdown("---")

(tab_scaling, tab_units, tab_rtd, tab_motor, tab_thermal,
 tab_vd, tab_fla, tab_wire, tab_dc, tab_encoder, tab_ohm) = st.tabs([
    "📈 Escalado PLC", "🔁 Unidades", "🌡️ RTD PT100", "⚙️ Protección Motor",
    "🔥 Carga Térmica", "📉 Caída de Tensión", "🔌 Corriente Motor", "🧵 Calibre",
    "🔋 Fuente 24 VDC", "🎯 Encoder", "Ω Ley de Ohm"
])

# --- Escalado PLC ---
with tab_scaling:
    c_raw, c_eng = st.columns(2)
    raw_preset = c_raw.selectbox("Señal / tarjeta de entrada", list(RawPreset), format_func=RAW_LABELS.get,
                                 index=list(RawPreset).index(RawPreset.ROCKWELL_4_20MA))
    eng_preset = c_eng.selectbox("Unidad de ingeniería", list(EngPreset), format_func=ENG_LABELS.get,
                                 index=list(EngPreset).index(EngPreset.FREQ_60HZ))

    setup = ScalingSetup(raw=ScaleRange(4000, 20000), eng=ScaleRange(0, 60))
    setup = setup.with_raw_preset(raw_preset).with_eng_preset(eng_preset)

    r1, r2, e1, e2 = st.columns(4)
    # Preset keys reset the fields whenever the preset changes
    raw_min_txt = r1.text_input("Raw mín", format_literal(setup.raw.min), disabled=not setup.raw_editable,
                                key=f"raw_min_{raw_preset.value}")
    raw_max_txt = r2.text_input("Raw máx", format_literal(setup.raw.max), disabled=not setup.raw_editable,
                                key=f"raw_max_{raw_preset.value}")
    eng_min_txt = e1.text_input(f"Mín ({setup.eng_unit})", format_literal(setup.eng.min), key=f"eng_min_{eng_preset.value}")
    eng_max_txt = e2.text_input(f"Máx ({setup.eng_unit})", format_literal(setup.eng.max), key=f"eng_max_{eng_preset.value}")

    raw_range = LinearScaler.parse_range(raw_min_txt, raw_max_txt)
    eng_range = LinearScaler.parse_range(eng_min_txt, eng_max_txt)

    if raw_range is None or eng_range is None:
        st.error("Ingrese rangos numéricos válidos.")
    else:
        if setup.raw_editable:
            setup = setup.with_raw_range(raw_range.min, raw_range.max)
        setup = setup.with_eng_range(eng_range.min, eng_range.max)

        t1, t2 = st.columns(2)
        raw_in = t1.text_input(f"Raw → Ingeniería ({setup.raw_unit})", format_literal(setup.raw.min))
        eng_out = LinearScaler.raw_to_eng_display(raw_in, setup)
        t1.metric(f"Valor ({setup.eng_unit})", eng_out or "—")

        eng_in = t2.text_input(f"Ingeniería → Raw ({setup.eng_unit})", format_literal(setup.eng.min))
        raw_out = LinearScaler.eng_to_raw_display(eng_in, setup)
        t2.metric(f"Valor ({setup.raw_unit})", raw_out or "—")

        language = st.selectbox("Código de ejemplo", list(SNIPPET_TEMPLATES.keys()))
        snippet = LinearScaler.code_snippet(language, setup)
        if snippet:
            st.code(snippet)
        else:
            st.warning("Los rangos mín y máx no pueden ser iguales.")

        rows = LinearScaler.scaling_table(setup)
        if rows:
            df_scaling = pd.DataFrame(rows).rename(columns={
                "percent": "%", "raw": f"Raw ({setup.raw_unit})", "eng": f"Ingeniería ({setup.eng_unit})"})
            st.dataframe(df_scaling, use_container_width=True)
            report["Escalado"] = df_scaling

# --- Unidades ---
with tab_units:
    c_f, c_u, c_v = st.columns([1.5, 1, 1.5])
    family = c_f.selectbox("Magnitud", list(QuantityFamily), format_func=FAMILY_LABELS.get)
    unit = c_u.selectbox("Unidad de origen", UnitConverter.units(family), key=f"unit_{family.value}")
    value = c_v.text_input("Valor", "1", key=f"value_{family.value}")

    converted = UnitConverter.convert_all(family, unit, value)
    if not any(converted.values()):
        st.warning("Ingrese un valor numérico.")
    cols = st.columns(len(converted))
    for col, (u, text) in zip(cols, converted.items()):
        col.metric(u, text or "—")
    report["Unidades"] = pd.DataFrame([{"Magnitud": FAMILY_LABELS[family], "Unidad": u, "Valor": t}
                                       for u, t in converted.items()])

# --- RTD PT100 ---
with tab_rtd:
    resistance = st.text_input("Resistencia medida (Ω)", "107.79")
    rtd = RtdLinearizer.resistance_to_temperature(resistance)
    if rtd.status is RtdStatus.OK:
        st.metric("Temperatura (°C)", RtdLinearizer.display(rtd))
    elif rtd.status is RtdStatus.BELOW_RANGE:
        st.info(RtdLinearizer.display(rtd))
    else:
        st.error("Ingrese una resistencia válida.")
    report["RTD"] = pd.DataFrame([{"R (Ω)": resistance, "Estado": rtd.status.value,
                                   "T (°C)": RtdLinearizer.display(rtd)}])

# --- Protección de Motor ---
with tab_motor:
    c_v, c_hp = st.columns(2)
    m_voltage = c_v.selectbox("Voltaje (3F)", sorted(MOTOR_FLA_430_250.keys()), index=3)
    m_hp = c_hp.selectbox("HP", sorted(MOTOR_FLA_430_250[m_voltage].keys()), index=8,
                          format_func=lambda h: format_quantity(h, 2))
    motor = MotorProtectionSizer.size(m_hp, m_voltage)
    if motor is None:
        st.warning("Combinación HP / voltaje no disponible en NEC 430.250.")
    else:
        m1, m2, m3, m4 = st.columns(4)
        m1.metric("FLA (A)", format_quantity(motor.fla, 2))
        m2.metric("Conductor (AWG)", motor.conductor_awg, f"≥ {motor.min_conductor_ampacity:.2f} A")
        m3.metric("Breaker (A)", motor.breaker_rating)
        m4.metric("Fusible (A)", motor.fuse_rating)
        lo, hi = motor.overload_range
        st.write(f"Rango de relé de sobrecarga: **{lo:.2f} - {hi:.2f} A** | Arrancador: **{motor.nema_starter}**")

        with st.expander("Ajuste de sobrecarga por placa (NEC 430.32)"):
            o1, o2 = st.columns(2)
            nameplate = o1.text_input("Corriente nominal de placa (A)", format_quantity(motor.fla, 2))
            sf = o2.text_input("Factor de servicio", "1.15")
            setting = MotorProtectionSizer.overload_setting(nameplate, sf)
            if setting:
                st.write(f"Corriente con FS: **{setting.service_factor_amps:.2f} A** | "
                         f"Ajuste máximo: **{setting.max_setting_amps:.2f} A** ({setting.reference_notes})")
            else:
                st.error("Ingrese corriente y factor de servicio positivos.")

        report["Motor"] = pd.DataFrame([{
            "HP": motor.horsepower, "Voltaje": motor.voltage, "FLA": motor.fla,
            "Ampacidad mín": motor.min_conductor_ampacity, "Conductor": motor.conductor_awg,
            "Sobrecarga mín": lo, "Sobrecarga máx": hi, "Breaker": motor.breaker_rating,
            "Fusible": motor.fuse_rating, "Arrancador": motor.nema_starter
        }])

# --- Carga Térmica ---
with tab_thermal:
    st.markdown("##### 📦 Gabinete")
    d1, d2, d3 = st.columns(3)
    height = d1.text_input("Alto (mm)", "1200")
    width = d2.text_input("Ancho (mm)", "800")
    depth = d3.text_input("Profundidad (mm)", "300")
    k1, k2, k3, k4 = st.columns(4)
    t_int = k1.text_input("T. interna máx (°C)", "35")
    t_ext = k2.text_input("T. ambiente (°C)", "25")
    mounting = k3.selectbox("Montaje", list(MountingType), format_func=MOUNTING_LABELS.get)
    material = k4.selectbox("Material", list(EnclosureMaterial), format_func=lambda m: m.value)

    st.markdown("##### 🔥 Componentes")
    a1, a2, a3 = st.columns([3, 1, 1])
    component = a1.selectbox("Componente", list(HEAT_SOURCE_CATALOG.keys()))
    qty = a2.number_input("Cantidad", 1, 100, 1)
    if a3.button("Agregar", use_container_width=True):
        st.session_state.heat_sources.append(HeatSource.from_catalog(component, int(qty)))
        st.rerun()

    sources = st.session_state.heat_sources
    if sources:
        st.dataframe(pd.DataFrame([{"Componente": s.name, "W": s.watts, "Cant": s.quantity, "Total W": s.total_watts}
                                   for s in sources]), use_container_width=True)
        if st.button("🗑️ Borrar componentes"):
            st.session_state.heat_sources = []
            st.rerun()
    extra = st.text_input("Calor adicional (W)", "0")

    extra_w = parse_number(extra)
    heat = total_heat_watts(sources) + (extra_w or 0.0)

    thermal = EnclosureThermalModel.calculate(height, width, depth, t_int, t_ext, heat, mounting, material)
    if thermal is None:
        st.error("Verifique dimensiones y temperaturas: la ambiente debe ser menor que la interna.")
    else:
        h1, h2, h3 = st.columns(3)
        h1.metric("Área efectiva (m²)", f"{thermal.surface_area_m2:.2f}")
        h2.metric("Calor interno (W)", f"{thermal.internal_heat_w:.0f}")
        h3.metric("Disipación pasiva (W)", f"{thermal.passive_loss_w:.0f}")
        if thermal.cooling_required:
            st.warning(f"Se requiere enfriamiento activo: {thermal.required_cooling_w:.0f} W | "
                       f"Ventilación ≈ {thermal.airflow_cfm:.0f} CFM | "
                       f"Aire acondicionado ≥ {thermal.recommended_btu_hr} BTU/h")
        else:
            st.success("La disipación natural del gabinete es suficiente.")
        report["Térmico"] = pd.DataFrame([{
            "Área m2": thermal.surface_area_m2, "dT": thermal.delta_t, "Calor W": thermal.internal_heat_w,
            "Pasivo W": thermal.passive_loss_w, "Requerido W": thermal.required_cooling_w,
            "CFM": thermal.airflow_cfm, "BTU/h": thermal.recommended_btu_hr
        }])

# --- Caída de Tensión ---
with tab_vd:
    v1, v2, v3, v4 = st.columns(4)
    vd_voltage = v1.text_input("Voltaje (V)", "460")
    vd_phase = v2.radio("Fases", [Phase.THREE, Phase.SINGLE], format_func=lambda p: str(p.value), horizontal=True)
    vd_current = v3.text_input("Corriente (A)", "14")
    vd_material = v4.selectbox("Material", list(ConductorMaterial), format_func=lambda m: m.value, key="vd_material")
    w1, w2, w3 = st.columns(3)
    vd_gauge = w1.selectbox("Calibre (AWG/kcmil)", list(CIRCULAR_MILS.keys()), index=3)
    vd_distance = w2.text_input("Distancia (un sentido)", "150")
    vd_unit = w3.selectbox("Unidad", list(DistanceUnit), format_func=lambda u: u.value)

    drop = VoltageDropAnalyzer.analyze(vd_voltage, vd_phase, vd_current, vd_material, vd_gauge, vd_distance, vd_unit)
    if drop is None:
        st.error("Ingrese valores positivos para voltaje, corriente y distancia.")
    else:
        x1, x2, x3 = st.columns(3)
        x1.metric("Caída (V)", f"{drop.drop_volts:.2f}")
        x2.metric("Caída (%)", f"{drop.drop_percent:.2f}")
        x3.metric("Tensión en carga (V)", f"{drop.load_voltage:.1f}")
        st.caption(drop.formula)
        if drop.status is DropStatus.UNACCEPTABLE:
            st.error(STATUS_LABELS[drop.status])
            if drop.suggestion:
                st.info(f"Calibre sugerido: {drop.suggestion} AWG/kcmil")
            else:
                st.info("Ningún calibre de la tabla baja la caída a menos de 3 %.")
        elif drop.status is DropStatus.CAUTION:
            st.warning(STATUS_LABELS[drop.status])
        else:
            st.success(STATUS_LABELS[drop.status])
        report["Caída de tensión"] = pd.DataFrame([{
            "V": vd_voltage, "Fases": vd_phase.value, "I": vd_current, "Material": vd_material.value,
            "Calibre": vd_gauge, "Distancia": f"{vd_distance} {vd_unit.value}", "Caída V": drop.drop_volts,
            "Caída %": drop.drop_percent, "Estado": drop.status.value, "Sugerido": drop.suggestion
        }])

# --- Corriente de Motor ---
with tab_fla:
    f1, f2, f3 = st.columns(3)
    fla_hp = f1.text_input("HP", "10")
    fla_voltage = f2.text_input("Voltaje (V)", "480")
    fla_phase = f3.radio("Fases", [Phase.THREE, Phase.SINGLE], format_func=lambda p: str(p.value),
                         horizontal=True, key="fla_phase")
    g1, g2 = st.columns(2)
    fla_eff = g1.text_input("Eficiencia (%)", "89.5")
    fla_pf = g2.text_input("Factor de potencia", "0.85")
    fla = MotorFlaEstimator.estimate_display(fla_hp, fla_voltage, fla_phase, fla_eff, fla_pf)
    if fla:
        st.metric("FLA estimada (A)", fla)
        report["FLA"] = pd.DataFrame([{"HP": fla_hp, "V": fla_voltage, "Fases": fla_phase.value,
                                       "Eficiencia %": fla_eff, "FP": fla_pf, "FLA": fla}])
    else:
        st.error("Voltaje, eficiencia y factor de potencia deben ser números distintos de cero.")

# --- Calibre ---
with tab_wire:
    s1, s2, s3 = st.columns(3)
    ws_amps = s1.text_input("Corriente de carga (A)", "28")
    ws_material = s2.selectbox("Material", list(ConductorMaterial), format_func=lambda m: m.value, key="ws_material")
    ws_rating = s3.selectbox("Aislamiento", list(InsulationRating), index=1, format_func=lambda r: f"{r.value} °C")
    wire = WireSizer.select_wire(ws_amps, ws_material, ws_rating)
    if wire:
        st.metric("Calibre (AWG/kcmil)", wire[0], f"{wire[1]} A")
        report["Calibre"] = pd.DataFrame([{"I": ws_amps, "Material": ws_material.value,
                                           "Aislamiento": ws_rating.value, "Calibre": wire[0], "Ampacidad": wire[1]}])
    else:
        st.error("Corriente inválida o fuera de la tabla NEC 310.16.")

# --- Fuente 24 VDC ---
with tab_dc:
    b1, b2, b3 = st.columns([3, 1, 1])
    dc_item = b1.selectbox("Dispositivo", list(DC_LOAD_CATALOG.keys()))
    dc_qty = b2.number_input("Cantidad", 1, 500, 1, key="dc_qty")
    if b3.button("Agregar", use_container_width=True, key="dc_add"):
        st.session_state.dc_loads.append(DcLoad.from_catalog(dc_item, int(dc_qty)))
        st.rerun()

    with st.expander("➕ Dispositivo personalizado"):
        u1, u2, u3, u4 = st.columns([2, 1, 1, 1])
        custom_name = u1.text_input("Descripción", "Carga")
        custom_nom = u2.text_input("Nominal (mA)", "100")
        custom_inr = u3.text_input("Arranque (mA)", "0")
        if u4.button("Agregar", key="dc_custom"):
            nom, inr = parse_number(custom_nom), parse_number(custom_inr)
            if nom is None or nom <= 0:
                st.error("Ingrese un consumo nominal positivo.")
            else:
                st.session_state.dc_loads.append(DcLoad(custom_name, nom, max(inr or 0.0, 0.0)))
                st.rerun()

    dc_loads = st.session_state.dc_loads
    if dc_loads:
        st.dataframe(pd.DataFrame([{"Dispositivo": l.name, "Cant": l.quantity, "Nominal mA": l.nominal_ma,
                                    "Arranque mA": l.inrush_ma, "Total mA": l.total_ma} for l in dc_loads]),
                     use_container_width=True)
        if st.button("🗑️ Borrar dispositivos"):
            st.session_state.dc_loads = []
            st.rerun()

    p1, p2 = st.columns(2)
    dc_safety = p1.text_input("Factor de seguridad (%)", format_literal(DEFAULT_SAFETY_PERCENT))
    dc_growth = p2.text_input("Reserva de crecimiento (%)", format_literal(DEFAULT_GROWTH_PERCENT))
    supply = DcPowerSupplySizer.size(dc_loads, dc_safety, dc_growth)
    if supply is None:
        st.info("Agregue al menos un dispositivo y márgenes no negativos.")
    else:
        q1, q2, q3, q4 = st.columns(4)
        q1.metric("Consumo nominal (A)", f"{supply.total_nominal_a:.2f}")
        q2.metric("Pico de arranque (A)", f"{supply.peak_inrush_a:.2f}")
        q3.metric("Requerido (A)", f"{supply.required_a:.2f}")
        q4.metric("Fuente recomendada", f"{format_literal(supply.recommended_a)} A")
        if supply.required_a > supply.recommended_a:
            st.warning("La carga supera la fuente estándar más grande: divida en varias fuentes.")
        report["Fuente DC"] = pd.DataFrame([{"Nominal A": supply.total_nominal_a, "Pico A": supply.peak_inrush_a,
                                             "Requerido A": supply.required_a,
                                             "Recomendada A": supply.recommended_a}])

# --- Encoder ---
with tab_encoder:
    n1, n2, n3 = st.columns(3)
    enc_ppr = n1.text_input("Pulsos por revolución (PPR)", "1024")
    enc_mode = n2.radio("Modo de conteo", list(EncoderMode), index=1, format_func=lambda m: f"{m.value}x",
                        horizontal=True)
    enc_mech = n3.selectbox("Mecanismo", list(Mechanism), index=2, format_func=MECHANISM_LABELS.get)

    enc_gear_in = enc_gear_out = "1"
    enc_size = None
    enc_unit = LinearUnit.MM
    if enc_mech is Mechanism.GEARBOX:
        y1, y2 = st.columns(2)
        enc_gear_in = y1.text_input("Relación entrada", "10")
        enc_gear_out = y2.text_input("Relación salida", "1")
    elif enc_mech is not Mechanism.DIRECT:
        y1, y2 = st.columns(2)
        size_label = "Paso (por rev)" if enc_mech is Mechanism.LEADSCREW else "Diámetro"
        enc_size = y1.text_input(size_label, "5" if enc_mech is Mechanism.LEADSCREW else "50")
        enc_unit = y2.selectbox("Unidad", list(LinearUnit), format_func=lambda u: u.value)

    z1, z2 = st.columns(2)
    enc_speed = z1.text_input("Velocidad deseada", "250")
    enc_speed_unit = z2.selectbox("Unidad de velocidad", list(SpeedUnit), index=1, format_func=lambda u: u.value)

    encoder = EncoderResolution.calculate(enc_ppr, enc_mode, enc_mech, enc_gear_in, enc_gear_out,
                                          pitch=enc_size, diameter=enc_size, unit=enc_unit,
                                          speed=enc_speed, speed_unit=enc_speed_unit)
    if encoder is None:
        st.error("Ingrese PPR y dimensiones positivas.")
    else:
        e1, e2, e3 = st.columns(3)
        e1.metric("Cuentas por revolución", format_quantity(encoder.counts_per_rev, 2))
        e2.metric(f"Resolución ({encoder.unit}/cuenta)", f"{encoder.resolution:.6g}")
        e3.metric(f"Factor de escala (cuentas/{encoder.unit})", f"{encoder.scale_factor:.6g}")
        if encoder.frequency_status is not None:
            freq_text = f"Frecuencia requerida: {encoder.required_frequency_hz:,.0f} Hz"
            if encoder.frequency_status is FrequencyStatus.CRITICAL:
                st.error(freq_text + " | Requiere contador rápido (HSC).")
            elif encoder.frequency_status is FrequencyStatus.CAUTION:
                st.warning(freq_text + " | Verifique el filtro de la entrada.")
            else:
                st.success(freq_text + " | Entrada estándar suficiente.")
        elif encoder.angular and enc_speed_unit is not SpeedUnit.RPM:
            st.info("En ejes rotativos la frecuencia se calcula con velocidad en RPM.")

        c_dist, c_counts = st.columns(2)
        lookup_dist = c_dist.text_input(f"Distancia ({encoder.unit}) → cuentas", "")
        if lookup_dist:
            c_dist.write(f"**{EncoderResolution.counts_for_distance(lookup_dist, encoder)}** cuentas")
        lookup_counts = c_counts.text_input(f"Cuentas → distancia ({encoder.unit})", "")
        if lookup_counts:
            dist = EncoderResolution.distance_for_counts(lookup_counts, encoder)
            c_counts.write(f"**{'' if dist is None else f'{dist:.5g}'}** {encoder.unit}")

        report["Encoder"] = pd.DataFrame([{
            "PPR": enc_ppr, "Modo": f"{enc_mode.value}x", "Mecanismo": enc_mech.value,
            "Cuentas/rev": encoder.counts_per_rev, "Resolución": encoder.resolution, "Unidad": encoder.unit,
            "Escala": encoder.scale_factor, "Frecuencia Hz": encoder.required_frequency_hz
        }])

# --- Ley de Ohm ---
with tab_ohm:
    st.caption("Ingrese exactamente dos valores.")
    o1, o2, o3, o4 = st.columns(4)
    ohm_v = o1.text_input("Voltaje (V)", "24")
    ohm_i = o2.text_input("Corriente (A)", "")
    ohm_r = o3.text_input("Resistencia (Ω)", "")
    ohm_p = o4.text_input("Potencia (W)", "12")
    ohm = OhmsLaw.solve(ohm_v, ohm_i, ohm_r, ohm_p)
    if ohm is None:
        st.warning("Se necesitan exactamente dos valores positivos.")
    else:
        k1, k2, k3, k4 = st.columns(4)
        k1.metric("V", f"{ohm.voltage:.4g}")
        k2.metric("A", f"{ohm.current:.4g}")
        k3.metric("Ω", f"{ohm.resistance:.4g}")
        k4.metric("W", f"{ohm.power:.4g}")
        st.caption(ohm.formula)
        report["Ley de Ohm"] = pd.DataFrame([{"V": ohm.voltage, "I": ohm.current, "R": ohm.resistance,
                                              "P": ohm.power, "Fórmula": ohm.formula}])

# --- Export ---
with st.sidebar:
    st.title("Reporte")
    st.info("Los resultados se recalculan con cada cambio de entrada.")
    if report:
        st.download_button(
            "📥 Descargar Resultados (Excel)",
            data=to_excel(report),
            file_name="calculos_automatizacion.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            use_container_width=True
        )
