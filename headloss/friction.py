"""
Darcy friction factor and flow regime selection.

Regimes by Reynolds number:
    Re < 2300            laminar, f = 64 / Re
    2300 <= Re <= 4000   transitional, Swamee-Jain used as an approximation
    Re > 4000            turbulent, Swamee-Jain
"""

import math
from enum import Enum
from typing import Tuple

from .constants import LAMINAR_LIMIT, TURBULENT_LIMIT


class FlowRegime(Enum):
    LAMINAR = "Laminar"
    TRANSITIONAL = "Transitional"
    TURBULENT = "Turbulent"


def classify_regime(re: float) -> FlowRegime:
    """Classify the flow regime from the Reynolds number."""
    if re < LAMINAR_LIMIT:
        return FlowRegime.LAMINAR
    if re <= TURBULENT_LIMIT:
        return FlowRegime.TRANSITIONAL
    return FlowRegime.TURBULENT


def laminar_friction_factor(re: float) -> float:
    return 64 / re


def swamee_jain_friction_factor(re: float, roughness: float, diameter: float) -> float:
    """
    Swamee-Jain explicit approximation of the Colebrook equation:

        f = 0.25 / [log10(ε / (3.7 D) + 5.74 / Re^0.9)]²

    Args:
        re: Reynolds number
        roughness: Absolute roughness ε (m)
        diameter: Internal diameter D (m)
    """
    log_term = math.log10(roughness / (3.7 * diameter) + 5.74 / re ** 0.9)
    return 0.25 / log_term ** 2


def friction_factor(re: float, roughness: float, diameter: float) -> Tuple[float, FlowRegime]:
    """
    Return the Darcy friction factor and the regime it was computed for.

    The transitional band deliberately reuses the turbulent correlation.
    """
    regime = classify_regime(re)
    if regime is FlowRegime.LAMINAR:
        return laminar_friction_factor(re), regime
    return swamee_jain_friction_factor(re, roughness, diameter), regime
