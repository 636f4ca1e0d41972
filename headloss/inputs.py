"""
Translate user-entered values into the SI value objects the calculator takes.

Callers pass values together with a mapping of the unit chosen for each
quantity family (see ``units_for``).
"""

from typing import Dict, Mapping, Optional

from .calculator import FluidSpec, PipeSpec
from .fluid_properties import CUSTOM_FLUID, get_fluid_properties
from .units import QuantityFamily, UnitSystem, default_units, to_si, units_available


def units_for(system: UnitSystem, overrides: Optional[Mapping[QuantityFamily, str]] = None) -> Dict[QuantityFamily, str]:
    """
    Return the input unit per family: the system defaults with ``overrides`` applied.

    Raises:
        ValueError: If an override is not offered in ``system``.
    """
    units = dict(default_units(system))
    for family, unit in (overrides or {}).items():
        if unit not in units_available(family, system):
            raise ValueError(
                f"Unit '{unit}' is not available for {family.value} in {system.value}"
            )
        units[family] = unit
    return units


def pipe_spec_from_inputs(length: float, diameter: float, roughness: float,
                          units: Mapping[QuantityFamily, str]) -> PipeSpec:
    return PipeSpec(
        length=to_si(length, units[QuantityFamily.LENGTH], QuantityFamily.LENGTH),
        diameter=to_si(diameter, units[QuantityFamily.DIAMETER], QuantityFamily.DIAMETER),
        roughness=to_si(roughness, units[QuantityFamily.ROUGHNESS], QuantityFamily.ROUGHNESS),
    )


def fluid_spec_from_inputs(flow_rate: float, kinematic_viscosity: float, density: float,
                           units: Mapping[QuantityFamily, str]) -> FluidSpec:
    return FluidSpec(
        flow_rate=to_si(flow_rate, units[QuantityFamily.FLOW_RATE], QuantityFamily.FLOW_RATE),
        kinematic_viscosity=to_si(kinematic_viscosity, units[QuantityFamily.VISCOSITY], QuantityFamily.VISCOSITY),
        density=to_si(density, units[QuantityFamily.DENSITY], QuantityFamily.DENSITY),
    )


def resolve_fluid(
    fluid_key: str,
    flow_rate: float,
    units: Mapping[QuantityFamily, str],
    kinematic_viscosity: Optional[float] = None,
    density: Optional[float] = None,
) -> FluidSpec:
    """
    Build a FluidSpec from a named reference fluid or from custom properties.

    A named fluid fixes density and viscosity, so any values passed for them
    are ignored. The custom fluid takes both from the arguments, expressed in
    ``units``. The flow rate is always the user's.

    Raises:
        ValueError: If the fluid key is unknown, or a custom fluid is missing
            its density or viscosity.
    """
    if fluid_key == CUSTOM_FLUID:
        if kinematic_viscosity is None or density is None:
            raise ValueError("Custom fluid requires both density and kinematic viscosity")
        return fluid_spec_from_inputs(flow_rate, kinematic_viscosity, density, units)

    # Reference table is stored in kg/m³ and cSt
    rho, nu_cst = get_fluid_properties(fluid_key)
    return FluidSpec(
        flow_rate=to_si(flow_rate, units[QuantityFamily.FLOW_RATE], QuantityFamily.FLOW_RATE),
        kinematic_viscosity=to_si(nu_cst, 'cSt', QuantityFamily.VISCOSITY),
        density=to_si(rho, 'kg/m³', QuantityFamily.DENSITY),
    )
