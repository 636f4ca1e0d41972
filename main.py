#!/usr/bin/env python3
"""
Pipe Head Loss Calculator - CLI

Darcy-Weisbach head loss and pressure drop for a straight circular pipe,
with a pressure loss profile along its length.

Examples:
  python main.py --length 100 --diameter 50 --flow-rate 10
  python main.py --units imperial --length 328 --diameter 2 --flow-rate 160 --fluid glycol_30
  python main.py --length 100 --diameter 50 --flow-rate 10 --fluid custom \\
      --density 850 --viscosity 12 --csv profile.csv --plot profile.html

Run without --length/--diameter/--flow-rate to be prompted for every input.
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

import pandas as pd

from headloss.calculator import compute
from headloss.fluid_properties import (
    CUSTOM_FLUID,
    get_fluid_name,
    get_fluid_options,
    get_fluid_properties,
)
from headloss.formatting import results_table
from headloss.inputs import pipe_spec_from_inputs, resolve_fluid, units_for
from headloss.pipe_materials import (
    DEFAULT_MATERIAL,
    get_material_name,
    get_material_options,
    get_material_roughness,
)
from headloss.units import QuantityFamily, convert, parse_unit_system

logger = logging.getLogger(__name__)

UNIT_FLAGS = {
    QuantityFamily.LENGTH: 'length_unit',
    QuantityFamily.DIAMETER: 'diameter_unit',
    QuantityFamily.ROUGHNESS: 'roughness_unit',
    QuantityFamily.FLOW_RATE: 'flow_unit',
    QuantityFamily.DENSITY: 'density_unit',
    QuantityFamily.VISCOSITY: 'viscosity_unit',
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pipe Head Loss Calculator (Darcy-Weisbach)")
    parser.add_argument("--units", default="si", help="Unit system: si or imperial (default: si)")
    parser.add_argument("--length", type=float, help="Pipe length")
    parser.add_argument("--diameter", type=float, help="Internal pipe diameter")
    parser.add_argument("--roughness", type=float,
                        help="Absolute roughness (default: from --material)")
    parser.add_argument("--material", choices=get_material_options(), default=DEFAULT_MATERIAL,
                        help=f"Pipe material for roughness (default: {DEFAULT_MATERIAL})")
    parser.add_argument("--flow-rate", type=float, dest="flow_rate", help="Volumetric flow rate")
    parser.add_argument("--fluid", choices=get_fluid_options() + [CUSTOM_FLUID], default="water_20c",
                        help="Reference fluid, or 'custom' with --density and --viscosity")
    parser.add_argument("--density", type=float, help="Custom fluid density")
    parser.add_argument("--viscosity", type=float, help="Custom fluid kinematic viscosity")
    parser.add_argument("--length-unit", dest="length_unit")
    parser.add_argument("--diameter-unit", dest="diameter_unit")
    parser.add_argument("--roughness-unit", dest="roughness_unit")
    parser.add_argument("--flow-unit", dest="flow_unit")
    parser.add_argument("--density-unit", dest="density_unit")
    parser.add_argument("--viscosity-unit", dest="viscosity_unit")
    parser.add_argument("--csv", help="Write the pressure profile to this CSV file")
    parser.add_argument("--plot", help="Write the pressure profile chart to this HTML file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def ask_float(prompt: str, default: Optional[float] = None, allow_zero: bool = False) -> float:
    """Prompt until a valid number is entered."""
    while True:
        raw = input(prompt).strip()
        if not raw and default is not None:
            return default
        try:
            value = float(raw)
            if value > 0 or (allow_zero and value == 0):
                return value
            print("Value must be positive." if not allow_zero else "Value must be non-negative.")
        except ValueError:
            print("Please enter a valid number.")


def ask_choice(title: str, options: List[str], names: Dict[str, str], default: int = 1) -> str:
    print(f"\n{title}")
    for i, key in enumerate(options, 1):
        print(f"{i}. {names[key]}")
    while True:
        try:
            choice = input(f"Select [default {default}]: ").strip() or str(default)
            idx = int(choice) - 1
            if 0 <= idx < len(options):
                return options[idx]
            print("Invalid selection. Please try again.")
        except ValueError:
            print("Please enter a valid number.")


def prompt_inputs(args: argparse.Namespace, units: Dict[QuantityFamily, str]) -> None:
    """Fill missing values on ``args`` interactively."""
    print("="*50)
    print("💧 PIPE HEAD LOSS CALCULATOR")
    print("="*50)

    args.length = ask_float(f"Pipe length ({units[QuantityFamily.LENGTH]}): ")
    args.diameter = ask_float(f"Internal diameter ({units[QuantityFamily.DIAMETER]}): ")

    materials = get_material_options()
    args.material = ask_choice("🔧 PIPE MATERIAL:", materials,
                               {m: get_material_name(m) for m in materials})
    material_roughness = convert(get_material_roughness(args.material), 'mm',
                                 units[QuantityFamily.ROUGHNESS])
    args.roughness = ask_float(
        f"Absolute roughness ({units[QuantityFamily.ROUGHNESS]}) [default {material_roughness:.6g}]: ",
        default=material_roughness, allow_zero=True,
    )

    args.flow_rate = ask_float(f"Flow rate ({units[QuantityFamily.FLOW_RATE]}): ")

    fluids = get_fluid_options() + [CUSTOM_FLUID]
    args.fluid = ask_choice("💧 FLUID SELECTION:", fluids, {f: get_fluid_name(f) for f in fluids})
    if args.fluid == CUSTOM_FLUID:
        args.density = ask_float(f"Density ({units[QuantityFamily.DENSITY]}): ")
        args.viscosity = ask_float(f"Kinematic viscosity ({units[QuantityFamily.VISCOSITY]}): ")
    else:
        density, viscosity = get_fluid_properties(args.fluid)
        print(f"✅ Using {get_fluid_name(args.fluid)} (ρ={density} kg/m³, ν={viscosity} cSt)")


def print_results(table: pd.DataFrame, fluid_label: str) -> None:
    print("\n" + "="*50)
    print("📊 HEAD LOSS RESULTS")
    print("="*50)
    print(f"Fluid: {fluid_label}")
    for _, row in table.iterrows():
        print(f"{row['Quantity']}: {row['Value']}")


def run(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        system = parse_unit_system(args.units)
    except ValueError as e:
        parser.error(str(e))

    overrides = {
        family: getattr(args, attr)
        for family, attr in UNIT_FLAGS.items()
        if getattr(args, attr)
    }
    try:
        units = units_for(system, overrides)
    except ValueError as e:
        parser.error(str(e))

    if args.length is None or args.diameter is None or args.flow_rate is None:
        prompt_inputs(args, units)

    roughness = args.roughness
    if roughness is None:
        roughness = convert(get_material_roughness(args.material), 'mm',
                            units[QuantityFamily.ROUGHNESS])

    try:
        pipe = pipe_spec_from_inputs(args.length, args.diameter, roughness, units)
        fluid = resolve_fluid(args.fluid, args.flow_rate, units,
                              kinematic_viscosity=args.viscosity, density=args.density)
    except ValueError as e:
        parser.error(str(e))

    logger.debug("SI inputs: %s %s", pipe, fluid)
    result = compute(pipe, fluid)
    if result is None:
        print("❌ Length, diameter and flow rate must all be greater than zero.")
        return 1

    print_results(results_table(result, system), get_fluid_name(args.fluid))

    if args.csv or args.plot:
        from headloss.visualization import pressure_profile_figure, profile_dataframe

        if args.csv:
            profile_dataframe(result, system).to_csv(args.csv, index=False)
            print(f"\n📄 Pressure profile written to {args.csv}")
        if args.plot:
            pressure_profile_figure(result, system).write_html(args.plot)
            print(f"📈 Pressure profile chart written to {args.plot}")

    return 0


if __name__ == "__main__":
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\n\n🛑 Operation cancelled by user.")
        sys.exit(0)
