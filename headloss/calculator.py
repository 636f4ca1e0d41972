"""
Head loss and pressure drop for a straight circular pipe (Darcy-Weisbach).

Everything in this module works in SI units:
    length, diameter, roughness  m
    flow rate                    m³/s
    kinematic viscosity          m²/s
    density                      kg/m³
Conversion from user units happens in ``headloss.inputs`` before a
calculation and conversion for display happens after it.
"""

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .constants import GRAVITY, PASCALS_PER_BAR, PROFILE_DECIMALS, PROFILE_STEPS
from .friction import FlowRegime, friction_factor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipeSpec:
    """Pipe geometry in metres."""
    length: float
    diameter: float
    roughness: float


@dataclass(frozen=True)
class FluidSpec:
    """Flow rate (m³/s) and fluid properties (m²/s, kg/m³)."""
    flow_rate: float
    kinematic_viscosity: float
    density: float


class ProfilePoint(NamedTuple):
    distance: float  # m
    pressure_loss: float  # Pa


@dataclass(frozen=True)
class CalculationResult:
    velocity: float  # m/s
    reynolds_number: float
    friction_factor: float
    flow_regime: FlowRegime
    head_loss: float  # m
    pressure_drop_pa: float
    pressure_drop_bar: float
    pressure_profile: Tuple[ProfilePoint, ...]


def pipe_area(diameter: float) -> float:
    return math.pi * (diameter / 2) ** 2


def reynolds_number(velocity: float, diameter: float, kinematic_viscosity: float) -> float:
    return velocity * diameter / kinematic_viscosity


def head_loss(f: float, length: float, diameter: float, velocity: float) -> float:
    """Darcy-Weisbach head loss (m) over ``length``."""
    return f * (length / diameter) * (velocity ** 2 / (2 * GRAVITY))


def round_half_up(value: float, decimals: int = PROFILE_DECIMALS) -> float:
    """
    Round the exact binary value of ``value``, ties away from zero.

    >>> round_half_up(0.125)
    0.13
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def pressure_profile(
    f: float,
    velocity: float,
    pipe: PipeSpec,
    density: float,
    steps: int = PROFILE_STEPS,
) -> Tuple[ProfilePoint, ...]:
    """
    Sample the cumulative pressure loss along the pipe.

    Velocity and friction factor are constant along a straight pipe in steady
    flow, so each sample is the head loss over the partial distance. Returns
    ``steps + 1`` points from 0 to ``pipe.length``, rounded for display.

    Args:
        f: Darcy friction factor
        velocity: Mean velocity (m/s)
        pipe: Pipe geometry
        density: Fluid density (kg/m³)
        steps: Number of equal segments

    Returns:
        Tuple of ProfilePoint(distance m, pressure_loss Pa)
    """
    distances = (pipe.length / steps) * np.arange(steps + 1)
    partial_head = f * (distances / pipe.diameter) * (velocity ** 2 / (2 * GRAVITY))
    losses = partial_head * density * GRAVITY

    return tuple(
        ProfilePoint(round_half_up(d), round_half_up(p))
        for d, p in zip(distances.tolist(), losses.tolist())
    )


def compute(pipe: PipeSpec, fluid: FluidSpec) -> Optional[CalculationResult]:
    """
    Run the full head loss calculation for one pipe and fluid.

    Returns None when diameter, length or flow rate is not positive: the
    inputs are incomplete rather than wrong. Roughness, viscosity and density
    are trusted as given.
    """
    if pipe.diameter <= 0 or pipe.length <= 0 or fluid.flow_rate <= 0:
        logger.debug("Not computable: %s, %s", pipe, fluid)
        return None

    area = pipe_area(pipe.diameter)
    velocity = fluid.flow_rate / area
    re = reynolds_number(velocity, pipe.diameter, fluid.kinematic_viscosity)
    f, regime = friction_factor(re, pipe.roughness, pipe.diameter)
    logger.debug("Re=%.1f regime=%s f=%.6f", re, regime.value, f)

    hf = head_loss(f, pipe.length, pipe.diameter, velocity)
    dp_pa = hf * fluid.density * GRAVITY

    return CalculationResult(
        velocity=velocity,
        reynolds_number=re,
        friction_factor=f,
        flow_regime=regime,
        head_loss=hf,
        pressure_drop_pa=dp_pa,
        pressure_drop_bar=dp_pa / PASCALS_PER_BAR,
        pressure_profile=pressure_profile(f, velocity, pipe, fluid.density),
    )
