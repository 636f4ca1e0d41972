"""
Unit conversion between the input quantity families and display of results.

Two separate tables live here:

- Input families (length, diameter, roughness, flow rate, density, kinematic
  viscosity). Every unit has a fixed multiplicative factor to its family's
  base unit and any two units of one family convert through that base.
- Result display. The engine reports velocity, head loss and pressure in SI;
  for the Imperial system each of these has exactly one display unit and a
  fixed factor.

All tables are read-only mappings. Nothing here rounds; rounding belongs to
``headloss.formatting``.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, NamedTuple, Optional, Tuple


class UnitSystem(Enum):
    SI = "SI"
    IMPERIAL = "Imperial"


class QuantityFamily(Enum):
    LENGTH = "length"
    DIAMETER = "diameter"
    ROUGHNESS = "roughness"
    FLOW_RATE = "flowRate"
    DENSITY = "density"
    VISCOSITY = "kinematicViscosity"


class DisplayQuantity(Enum):
    VELOCITY = "velocity"
    HEAD_LOSS = "headLoss"
    PRESSURE_BAR = "pressureDropBar"
    PRESSURE_PA = "pressureDropPascal"
    LENGTH = "length"


# Length-type families share one table (base: m)
_LENGTH_FACTORS = MappingProxyType({
    'm': 1.0,
    'cm': 0.01,
    'mm': 0.001,
    'µm': 1e-6,
    'ft': 0.3048,
    'in': 0.0254,
})

CONVERSION_FACTORS: Mapping[QuantityFamily, Mapping[str, float]] = MappingProxyType({
    QuantityFamily.LENGTH: _LENGTH_FACTORS,
    QuantityFamily.DIAMETER: _LENGTH_FACTORS,
    QuantityFamily.ROUGHNESS: _LENGTH_FACTORS,
    # base: L/s
    QuantityFamily.FLOW_RATE: MappingProxyType({
        'L/s': 1.0,
        'm³/h': 1000 / 3600,
        'GPM': 0.0630902,
        'ft³/s': 28.3168,
        'm³/s': 1000.0,
    }),
    # base: kg/m³
    QuantityFamily.DENSITY: MappingProxyType({
        'kg/m³': 1.0,
        'lb/ft³': 16.0185,
    }),
    # base: cSt
    QuantityFamily.VISCOSITY: MappingProxyType({
        'cSt': 1.0,
        'm²/s': 1e6,
    }),
})

# Units offered to the user per family and unit system, in display order
AVAILABLE_UNITS: Mapping[QuantityFamily, Mapping[UnitSystem, Tuple[str, ...]]] = MappingProxyType({
    QuantityFamily.LENGTH: MappingProxyType({UnitSystem.SI: ('m', 'cm'), UnitSystem.IMPERIAL: ('ft', 'in')}),
    QuantityFamily.DIAMETER: MappingProxyType({UnitSystem.SI: ('mm', 'cm'), UnitSystem.IMPERIAL: ('in',)}),
    QuantityFamily.ROUGHNESS: MappingProxyType({UnitSystem.SI: ('mm', 'µm'), UnitSystem.IMPERIAL: ('in',)}),
    QuantityFamily.FLOW_RATE: MappingProxyType({UnitSystem.SI: ('L/s', 'm³/h'), UnitSystem.IMPERIAL: ('GPM', 'ft³/s')}),
    QuantityFamily.DENSITY: MappingProxyType({UnitSystem.SI: ('kg/m³',), UnitSystem.IMPERIAL: ('lb/ft³',)}),
    QuantityFamily.VISCOSITY: MappingProxyType({UnitSystem.SI: ('cSt', 'm²/s'), UnitSystem.IMPERIAL: ('cSt',)}),
})

# Kinematic viscosity stays in cSt for both systems
DEFAULT_UNITS: Mapping[UnitSystem, Mapping[QuantityFamily, str]] = MappingProxyType({
    UnitSystem.SI: MappingProxyType({
        QuantityFamily.LENGTH: 'm',
        QuantityFamily.DIAMETER: 'mm',
        QuantityFamily.ROUGHNESS: 'mm',
        QuantityFamily.FLOW_RATE: 'L/s',
        QuantityFamily.DENSITY: 'kg/m³',
        QuantityFamily.VISCOSITY: 'cSt',
    }),
    UnitSystem.IMPERIAL: MappingProxyType({
        QuantityFamily.LENGTH: 'ft',
        QuantityFamily.DIAMETER: 'in',
        QuantityFamily.ROUGHNESS: 'in',
        QuantityFamily.FLOW_RATE: 'GPM',
        QuantityFamily.DENSITY: 'lb/ft³',
        QuantityFamily.VISCOSITY: 'cSt',
    }),
})

# Units the calculation engine works in
SI_UNITS: Mapping[QuantityFamily, str] = MappingProxyType({
    QuantityFamily.LENGTH: 'm',
    QuantityFamily.DIAMETER: 'm',
    QuantityFamily.ROUGHNESS: 'm',
    QuantityFamily.FLOW_RATE: 'm³/s',
    QuantityFamily.DENSITY: 'kg/m³',
    QuantityFamily.VISCOSITY: 'm²/s',
})

DISPLAY_UNITS: Mapping[UnitSystem, Mapping[DisplayQuantity, str]] = MappingProxyType({
    UnitSystem.SI: MappingProxyType({
        DisplayQuantity.VELOCITY: 'm/s',
        DisplayQuantity.HEAD_LOSS: 'm',
        DisplayQuantity.PRESSURE_BAR: 'bar',
        DisplayQuantity.PRESSURE_PA: 'Pa',
        DisplayQuantity.LENGTH: 'm',
    }),
    UnitSystem.IMPERIAL: MappingProxyType({
        DisplayQuantity.VELOCITY: 'ft/s',
        DisplayQuantity.HEAD_LOSS: 'ft',
        DisplayQuantity.PRESSURE_BAR: 'psi',
        DisplayQuantity.PRESSURE_PA: 'psi',
        DisplayQuantity.LENGTH: 'ft',
    }),
})

# SI result -> Imperial display unit
IMPERIAL_DISPLAY_FACTORS: Mapping[DisplayQuantity, float] = MappingProxyType({
    DisplayQuantity.VELOCITY: 3.28084,
    DisplayQuantity.HEAD_LOSS: 3.28084,
    DisplayQuantity.PRESSURE_BAR: 14.5038,
    DisplayQuantity.PRESSURE_PA: 0.000145038,
    DisplayQuantity.LENGTH: 3.28084,
})

_UNIT_FACTORS: Dict[str, float] = {
    unit: factor
    for factors in CONVERSION_FACTORS.values()
    for unit, factor in factors.items()
}


def family_of(unit: str) -> FrozenSet[QuantityFamily]:
    """Return the quantity families that accept ``unit`` (empty if unknown)."""
    return frozenset(
        family for family, factors in CONVERSION_FACTORS.items() if unit in factors
    )


def convert(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert ``value`` between two units of the same quantity family.

    The value is scaled to the family's base unit and back out to the target
    unit. Converting a unit to itself returns ``value`` untouched.

    Raises:
        KeyError: If either unit tag is unknown.
        AssertionError: If the units belong to different families.
    """
    if from_unit == to_unit:
        return value

    from_factor = _UNIT_FACTORS[from_unit]
    to_factor = _UNIT_FACTORS[to_unit]
    assert family_of(from_unit) & family_of(to_unit), (
        f"Cannot convert {from_unit!r} to {to_unit!r}: different quantity families"
    )

    value_in_base = value * from_factor
    return value_in_base / to_factor


def to_si(value: float, unit: str, family: QuantityFamily) -> float:
    """Convert a user value to the unit the calculation engine expects."""
    return convert(value, unit, SI_UNITS[family])


def from_si(value: float, unit: str, family: QuantityFamily) -> float:
    """Convert an engine value back to a user-selected unit."""
    return convert(value, SI_UNITS[family], unit)


def units_available(family: QuantityFamily, system: UnitSystem) -> Tuple[str, ...]:
    """Return the selectable units for a family in the given unit system."""
    return AVAILABLE_UNITS[family][system]


def default_units(system: UnitSystem) -> Mapping[QuantityFamily, str]:
    """Return the default unit of every input family for a unit system."""
    return DEFAULT_UNITS[system]


def display_value(si_value: float, system: UnitSystem, quantity: DisplayQuantity) -> float:
    """Convert an SI result value to the display unit of ``system``."""
    if system is UnitSystem.SI:
        return si_value
    return si_value * IMPERIAL_DISPLAY_FACTORS[quantity]


def display_unit(system: UnitSystem, quantity: DisplayQuantity) -> str:
    """Return the unit label used when showing ``quantity`` in ``system``."""
    return DISPLAY_UNITS[system][quantity]


def parse_unit_system(name: Optional[str]) -> UnitSystem:
    """
    Parse a unit system name such as 'SI', 'si', 'imperial' or 'US'.

    Raises:
        ValueError: If the name is not recognised.
    """
    key = (name or '').strip().lower()
    if key == 'si':
        return UnitSystem.SI
    if key in ('imperial', 'us', 'us customary'):
        return UnitSystem.IMPERIAL
    raise ValueError(f"Unknown unit system: {name}")


class UnitQuantity(NamedTuple):
    """A value tagged with its unit, scoped to one quantity family."""

    value: float
    unit: str
    family: QuantityFamily

    def to(self, unit: str) -> 'UnitQuantity':
        assert unit in CONVERSION_FACTORS[self.family], (
            f"{unit!r} is not a {self.family.value} unit"
        )
        return UnitQuantity(convert(self.value, self.unit, unit), unit, self.family)

    def to_si(self) -> float:
        return to_si(self.value, self.unit, self.family)
