#!/usr/bin/env python3
"""
Gradio web app for the Pipe Head Loss Calculator.

Features:
- SI / Imperial unit systems with a unit selector per input
- Pipe material and reference fluid presets, or a custom fluid
- Results table and interactive Plotly pressure profile

Run locally:
  python gradio_app.py

Run with a public share link:
  python gradio_app.py --share
"""
import argparse
import logging
import os
from typing import Tuple

import gradio as gr
import pandas as pd

from headloss.calculator import compute
from headloss.fluid_properties import (
    CUSTOM_FLUID,
    get_fluid_name,
    get_fluid_options,
    get_fluid_properties,
)
from headloss.formatting import editable_value, format_result, regime_label, results_table
from headloss.inputs import pipe_spec_from_inputs, resolve_fluid
from headloss.pipe_materials import (
    DEFAULT_MATERIAL,
    get_material_name,
    get_material_options,
    get_material_roughness,
)
from headloss.units import (
    QuantityFamily,
    UnitSystem,
    convert,
    default_units,
    units_available,
)
from headloss.visualization import pressure_profile_figure, profile_dataframe

FAMILIES = [
    QuantityFamily.LENGTH,
    QuantityFamily.DIAMETER,
    QuantityFamily.ROUGHNESS,
    QuantityFamily.FLOW_RATE,
    QuantityFamily.VISCOSITY,
    QuantityFamily.DENSITY,
]


def warning_outputs(message: str) -> Tuple:
    empty = pd.DataFrame(columns=['Quantity', 'Value'])
    return f"### ⚠️ {message}", empty, None, pd.DataFrame()


def change_unit(value, old_unit: str, new_unit: str) -> Tuple:
    """
    Re-express an entered value in a newly selected unit.

    Returns (value in ``new_unit``, ``new_unit``) so the unit can be kept as
    the field's last unit. Empty fields stay empty.
    """
    if value is None or old_unit == new_unit:
        return value, new_unit
    return editable_value(convert(value, old_unit, new_unit)), new_unit


def compute_results(
    system_name: str,
    length: float, length_unit: str,
    diameter: float, diameter_unit: str,
    roughness: float, roughness_unit: str,
    flow_rate: float, flow_unit: str,
    fluid_key: str,
    viscosity: float, viscosity_unit: str,
    density: float, density_unit: str,
) -> Tuple:
    """Run a calculation from raw UI values and build every output."""
    system = UnitSystem(system_name)
    units = dict(zip(FAMILIES, [
        length_unit, diameter_unit, roughness_unit, flow_unit, viscosity_unit, density_unit,
    ]))

    pipe = pipe_spec_from_inputs(length or 0, diameter or 0, roughness or 0, units)
    try:
        fluid = resolve_fluid(fluid_key, flow_rate or 0, units,
                              kinematic_viscosity=viscosity, density=density)
    except ValueError as e:
        return warning_outputs(str(e))
    result = compute(pipe, fluid)

    if result is None:
        return warning_outputs("Length, diameter and flow rate must all be greater than zero.")

    summary_md = "\n".join([
        "### Summary",
        f"- **Fluid**: {get_fluid_name(fluid_key)}",
        f"- **Flow Regime**: {regime_label(result.flow_regime)} (Re = {result.reynolds_number:,.0f})",
        f"- **Friction Factor**: {format_result(result.friction_factor)}",
    ])
    return (
        summary_md,
        results_table(result, system),
        pressure_profile_figure(result, system),
        profile_dataframe(result, system),
    )


def build_interface(port: int, share: bool = False):
    """Build the Gradio interface and launch it."""
    fluid_choices = [(get_fluid_name(f), f) for f in [CUSTOM_FLUID] + get_fluid_options()]
    material_choices = [(get_material_name(m), m) for m in get_material_options()]
    si_units = default_units(UnitSystem.SI)
    water_density, water_viscosity = get_fluid_properties(get_fluid_options()[0])

    def unit_dropdown(family):
        return gr.Dropdown(
            choices=list(units_available(family, UnitSystem.SI)),
            value=si_units[family],
            label="Unit",
            scale=1,
        )

    with gr.Blocks(title="Pipe Head Loss Calculator", theme=gr.themes.Default()) as demo:
        gr.Markdown("# 💧 Pipe Head Loss Calculator")
        gr.Markdown("Darcy-Weisbach friction loss with laminar / Swamee-Jain friction factor.")

        with gr.Row():
            with gr.Column(scale=1):
                system = gr.Radio(
                    choices=[s.value for s in UnitSystem], value=UnitSystem.SI.value,
                    label="Unit System",
                )

                gr.Markdown("## 🔧 Pipe")
                with gr.Row():
                    length = gr.Number(label="Pipe Length", value=100.0, scale=3)
                    length_unit = unit_dropdown(QuantityFamily.LENGTH)
                with gr.Row():
                    diameter = gr.Number(label="Internal Diameter", value=50.0, scale=3)
                    diameter_unit = unit_dropdown(QuantityFamily.DIAMETER)
                material = gr.Dropdown(choices=material_choices, value=DEFAULT_MATERIAL,
                                       label="Pipe Material")
                with gr.Row():
                    roughness = gr.Number(label="Absolute Roughness",
                                          value=get_material_roughness(DEFAULT_MATERIAL), scale=3)
                    roughness_unit = unit_dropdown(QuantityFamily.ROUGHNESS)

                gr.Markdown("## 🌊 Fluid")
                fluid = gr.Dropdown(choices=fluid_choices, value=get_fluid_options()[0], label="Fluid")
                with gr.Row():
                    flow_rate = gr.Number(label="Flow Rate", value=10.0, scale=3)
                    flow_unit = unit_dropdown(QuantityFamily.FLOW_RATE)
                with gr.Row():
                    viscosity = gr.Number(label="Kinematic Viscosity", value=water_viscosity,
                                          interactive=False, scale=3)
                    viscosity_unit = unit_dropdown(QuantityFamily.VISCOSITY)
                with gr.Row():
                    density = gr.Number(label="Density", value=water_density,
                                        interactive=False, scale=3)
                    density_unit = unit_dropdown(QuantityFamily.DENSITY)

                run_btn = gr.Button("🚀 Calculate", variant="primary", size="lg")

            with gr.Column(scale=2):
                summary = gr.Markdown()
                results = gr.Dataframe(label="Results", interactive=False)
                gr.Markdown("## 📊 Pressure Loss Profile")
                profile_chart = gr.Plot(label="Pressure Loss vs Distance")
                profile_table = gr.Dataframe(label="Profile Data", interactive=False)

        # Value fields in FAMILIES order
        fields = [
            (length, length_unit),
            (diameter, diameter_unit),
            (roughness, roughness_unit),
            (flow_rate, flow_unit),
            (viscosity, viscosity_unit),
            (density, density_unit),
        ]

        # Event handlers
        def on_system_change(system_name):
            selected = UnitSystem(system_name)
            defaults = default_units(selected)
            return [
                gr.update(choices=list(units_available(family, selected)), value=defaults[family])
                for family in FAMILIES
            ]

        def on_material_change(material_key, unit):
            return editable_value(convert(get_material_roughness(material_key), 'mm', unit))

        def on_fluid_change(fluid_key, nu_unit, rho_unit):
            if fluid_key == CUSTOM_FLUID:
                return gr.update(interactive=True), gr.update(interactive=True)
            rho, nu = get_fluid_properties(fluid_key)
            return (
                gr.update(value=editable_value(convert(nu, 'cSt', nu_unit)), interactive=False),
                gr.update(value=editable_value(convert(rho, 'kg/m³', rho_unit)), interactive=False),
            )

        # A system switch sets each dropdown, whose change then converts its field
        system.change(fn=on_system_change, inputs=[system], outputs=[u for _, u in fields])
        for family, (field, unit) in zip(FAMILIES, fields):
            last_unit = gr.State(si_units[family])
            unit.change(fn=change_unit, inputs=[field, last_unit, unit], outputs=[field, last_unit])

        material.change(fn=on_material_change, inputs=[material, roughness_unit], outputs=[roughness])
        fluid.change(fn=on_fluid_change, inputs=[fluid, viscosity_unit, density_unit],
                     outputs=[viscosity, density])

        run_btn.click(
            fn=compute_results,
            inputs=[
                system,
                length, length_unit,
                diameter, diameter_unit,
                roughness, roughness_unit,
                flow_rate, flow_unit,
                fluid,
                viscosity, viscosity_unit,
                density, density_unit,
            ],
            outputs=[summary, results, profile_chart, profile_table],
        )

    demo.launch(server_name="0.0.0.0", server_port=port, share=share)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Pipe Head Loss Calculator")
    parser.add_argument("--share", action="store_true", help="Create a public share link")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    port = int(os.getenv("PORT", "7860"))
    print(f"🚀 Starting Pipe Head Loss Calculator on port {port}")
    build_interface(port=port, share=args.share)
