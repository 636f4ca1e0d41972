#!/usr/bin/env python3
"""
Streamlit web application for the Pipe Head Loss Calculator.
Provides interactive inputs with per-field units, results and the pressure
loss profile chart.

Run locally:
  streamlit run app.py
"""

import streamlit as st

from headloss.calculator import compute
from headloss.fluid_properties import (
    CUSTOM_FLUID,
    get_fluid_name,
    get_fluid_options,
    get_fluid_properties,
)
from headloss.formatting import editable_value, format_result, regime_label
from headloss.inputs import pipe_spec_from_inputs, resolve_fluid
from headloss.pipe_materials import get_material_name, get_material_options, get_material_roughness
from headloss.units import (
    DisplayQuantity,
    QuantityFamily,
    UnitSystem,
    default_units,
    display_unit,
    display_value,
    from_si,
    to_si,
    units_available,
)
from headloss.visualization import pressure_profile_figure, profile_dataframe

# Starting values, each with the unit it is written in
DEFAULT_INPUTS = {
    QuantityFamily.LENGTH: (100.0, 'm'),
    QuantityFamily.DIAMETER: (50.0, 'mm'),
    QuantityFamily.FLOW_RATE: (10.0, 'L/s'),
}

# Page configuration
st.set_page_config(
    page_title="Pipe Head Loss Calculator",
    page_icon="💧",
    layout="wide",
    initial_sidebar_state="expanded"
)


def unit_input(label, family, system, value, value_unit, key, disabled=False, help=None):
    """
    Number input with a unit selector next to it.

    The quantity is kept in SI in session state, starting from ``value`` given
    in ``value_unit``. Changing the unit or unit system re-expresses it in the
    newly selected unit. Returns (entered value, selected unit).
    """
    si_key, value_key, shown_key = f"{key}_si", f"{key}_value", f"{key}_shown"
    if si_key not in st.session_state:
        st.session_state[si_key] = to_si(value, value_unit, family)

    col1, col2 = st.columns([3, 1])
    with col2:
        unit = st.selectbox(
            "Unit",
            units_available(family, system),
            index=units_available(family, system).index(default_units(system)[family]),
            key=f"{key}_unit_{system.value}",
            label_visibility="hidden",
        )

    shown_unit, _ = st.session_state.get(shown_key, (None, None))
    if shown_unit != unit or value_key not in st.session_state:
        st.session_state[value_key] = editable_value(from_si(st.session_state[si_key], unit, family))
        st.session_state[shown_key] = (unit, st.session_state[value_key])

    with col1:
        entered = st.number_input(
            label,
            min_value=0.0,
            format="%g",
            key=value_key,
            disabled=disabled,
            help=help,
        )

    # Only a real edit replaces the stored SI value
    if entered != st.session_state[shown_key][1]:
        st.session_state[si_key] = to_si(entered, unit, family)
        st.session_state[shown_key] = (unit, entered)
    return entered, unit


def main():
    """Main Streamlit application."""

    st.title("💧 Pipe Head Loss Calculator")
    st.markdown("**Darcy-Weisbach friction loss for steady, incompressible flow in a circular pipe**")
    st.divider()

    with st.sidebar:
        st.header("⚙️ Parameters")

        system = UnitSystem(st.radio(
            "Unit System",
            [s.value for s in UnitSystem],
            horizontal=True,
        ))

        # Pipe
        st.subheader("🔧 Pipe")
        length, length_unit = unit_input(
            "Pipe Length", QuantityFamily.LENGTH, system,
            *DEFAULT_INPUTS[QuantityFamily.LENGTH], key="length",
        )
        diameter, diameter_unit = unit_input(
            "Internal Diameter", QuantityFamily.DIAMETER, system,
            *DEFAULT_INPUTS[QuantityFamily.DIAMETER], key="diameter",
        )

        material_options = get_material_options()
        material = st.selectbox(
            "Pipe Material",
            material_options,
            format_func=get_material_name,
            help="Sets the absolute roughness; edit the value below to override it"
        )
        roughness, roughness_unit = unit_input(
            "Absolute Roughness", QuantityFamily.ROUGHNESS, system,
            get_material_roughness(material), 'mm', key=f"roughness_{material}",
        )

        # Fluid
        st.subheader("🌊 Fluid")
        fluid_options = [CUSTOM_FLUID] + get_fluid_options()
        fluid = st.selectbox(
            "Fluid",
            fluid_options,
            index=1,
            format_func=get_fluid_name,
            help="Reference fluids fix density and viscosity"
        )
        is_custom = fluid == CUSTOM_FLUID
        ref_density, ref_viscosity = get_fluid_properties(get_fluid_options()[0] if is_custom else fluid)

        flow_rate, flow_unit = unit_input(
            "Flow Rate", QuantityFamily.FLOW_RATE, system,
            *DEFAULT_INPUTS[QuantityFamily.FLOW_RATE], key="flow_rate",
        )
        viscosity, viscosity_unit = unit_input(
            "Kinematic Viscosity", QuantityFamily.VISCOSITY, system,
            ref_viscosity, 'cSt', key=f"viscosity_{fluid}", disabled=not is_custom,
        )
        density, density_unit = unit_input(
            "Density", QuantityFamily.DENSITY, system,
            ref_density, 'kg/m³', key=f"density_{fluid}", disabled=not is_custom,
        )

        st.divider()
        run_calculation = st.button("🚀 Calculate", type="primary", use_container_width=True)

    if not run_calculation:
        st.info("👈 Set the pipe and fluid parameters in the sidebar, then press **Calculate**.")
        return

    units = {
        QuantityFamily.LENGTH: length_unit,
        QuantityFamily.DIAMETER: diameter_unit,
        QuantityFamily.ROUGHNESS: roughness_unit,
        QuantityFamily.FLOW_RATE: flow_unit,
        QuantityFamily.VISCOSITY: viscosity_unit,
        QuantityFamily.DENSITY: density_unit,
    }
    pipe = pipe_spec_from_inputs(length, diameter, roughness, units)
    fluid_spec = resolve_fluid(fluid, flow_rate, units,
                               kinematic_viscosity=viscosity, density=density)

    with st.spinner("Calculating..."):
        result = compute(pipe, fluid_spec)

    if result is None:
        st.warning("Length, diameter and flow rate must all be greater than zero.")
        return

    st.header("📊 Results")
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric(
            f"Head Loss ({display_unit(system, DisplayQuantity.HEAD_LOSS)})",
            format_result(display_value(result.head_loss, system, DisplayQuantity.HEAD_LOSS)),
        )
        st.metric("Reynolds Number", f"{result.reynolds_number:,.0f}")
    with col2:
        st.metric(
            f"Pressure Drop ({display_unit(system, DisplayQuantity.PRESSURE_BAR)})",
            format_result(display_value(result.pressure_drop_bar, system, DisplayQuantity.PRESSURE_BAR)),
        )
        st.metric("Friction Factor", format_result(result.friction_factor))
    with col3:
        st.metric(
            f"Velocity ({display_unit(system, DisplayQuantity.VELOCITY)})",
            format_result(display_value(result.velocity, system, DisplayQuantity.VELOCITY)),
        )
        st.metric("Flow Regime", regime_label(result.flow_regime))

    if system is UnitSystem.SI:
        st.caption(f"Absolute pressure drop: {format_result(result.pressure_drop_pa)} Pa")

    st.header("📈 Pressure Loss Profile")
    st.plotly_chart(pressure_profile_figure(result, system), use_container_width=True)

    df = profile_dataframe(result, system)
    with st.expander("Profile data"):
        st.dataframe(df, use_container_width=True, hide_index=True)
    st.download_button(
        "📄 Download profile CSV",
        df.to_csv(index=False),
        file_name="pressure_profile.csv",
        mime="text/csv",
    )


if __name__ == "__main__":
    main()
