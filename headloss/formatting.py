"""
Presentation rounding and labelled result tables.

The calculation engine never rounds its scalar results; these helpers are
applied only when values are shown to a user.
"""

from typing import Dict

import pandas as pd

from .calculator import CalculationResult
from .friction import FlowRegime
from .units import DisplayQuantity, UnitSystem, display_unit, display_value


def editable_value(value: float) -> float:
    """Trim a converted input value to 6 significant figures for an edit field."""
    return float(f"{value:.6g}")


def format_result(value: float) -> str:
    """
    Format a result with thousands separators and 2 to 4 decimals.

    >>> format_result(1234.56789)
    '1,234.5679'
    >>> format_result(5.1)
    '5.10'
    """
    whole, _, frac = f"{value:,.4f}".partition('.')
    frac = frac.rstrip('0').ljust(2, '0')
    return f"{whole}.{frac}"


def format_pressure_axis(value: float, system: UnitSystem) -> str:
    """Axis tick label for a pressure loss given in the display unit of ``system``."""
    if system is UnitSystem.IMPERIAL:
        return f"{value:.1f}"
    if value == 0:
        return '0 Pa'
    magnitude = abs(value)
    if magnitude >= 1e5:
        return f"{value / 1e5:.1f} bar"
    if magnitude >= 1e3:
        return f"{value / 1e3:.1f} kPa"
    return f"{value:.0f} Pa"


def regime_label(regime: FlowRegime) -> str:
    return regime.value


def results_summary(result: CalculationResult, system: UnitSystem) -> Dict[str, object]:
    """
    Return the results keyed by label with the display unit in the label.

    Values are converted to ``system`` but not rounded. The absolute
    pressure in Pa is only listed for SI; in Imperial both pressures are psi.
    """
    def label(name, quantity):
        return f"{name} ({display_unit(system, quantity)})"

    summary = {
        label("Head Loss", DisplayQuantity.HEAD_LOSS):
            display_value(result.head_loss, system, DisplayQuantity.HEAD_LOSS),
        label("Pressure Drop", DisplayQuantity.PRESSURE_BAR):
            display_value(result.pressure_drop_bar, system, DisplayQuantity.PRESSURE_BAR),
    }
    if system is UnitSystem.SI:
        summary[label("Pressure Drop", DisplayQuantity.PRESSURE_PA)] = result.pressure_drop_pa
    summary.update({
        label("Velocity", DisplayQuantity.VELOCITY):
            display_value(result.velocity, system, DisplayQuantity.VELOCITY),
        "Reynolds Number": result.reynolds_number,
        "Friction Factor": result.friction_factor,
        "Flow Regime": regime_label(result.flow_regime),
    })
    return summary


def results_table(result: CalculationResult, system: UnitSystem) -> pd.DataFrame:
    """Results as a two-column DataFrame of formatted strings."""
    rows = []
    for name, value in results_summary(result, system).items():
        if isinstance(value, str):
            text = value
        elif name == "Reynolds Number":
            text = f"{value:,.0f}"
        else:
            text = format_result(value)
        rows.append({'Quantity': name, 'Value': text})
    return pd.DataFrame(rows, columns=['Quantity', 'Value'])
