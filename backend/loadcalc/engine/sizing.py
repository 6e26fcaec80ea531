"""
Standard size selection and single-phase circuit formulas.

Formulas:
  Current:       I = P / (V × pf)
  Breaker:       smallest standard rating ≥ 1.25 × I
  Wire:          smallest standard cross-section ≥ I / J  (J = current density)
  Voltage drop:  ΔU% = 2 × L × I × ρ / (V × A) × 100

Size lookups saturate at the largest table entry instead of failing.
"""

import logging
from typing import Sequence, TypeVar

from loadcalc.config import (
    CableType,
    CABLE_RESISTIVITY,
    CURRENT_DENSITY,
    STANDARD_BREAKER_SIZES,
    STANDARD_WIRE_SIZES,
    BREAKER_SAFETY_MARGIN,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)


def find_next_standard_size(value: float, standard_sizes: Sequence[T]) -> T:
    """
    Return the smallest entry of an ascending size table that is ≥ value.

    If value exceeds every entry, the largest entry is returned.
    """
    for size in standard_sizes:
        if size >= value:
            return size
    largest = standard_sizes[-1]
    logger.debug("Required size %.3f exceeds table maximum %s, saturating", value, largest)
    return largest


def circuit_current(power: float, voltage: float, power_factor: float | None) -> float:
    """Single-phase current in amperes. Zero when power or power factor is not positive."""
    if power > 0 and power_factor is not None and power_factor > 0:
        return power / (voltage * power_factor)
    return 0.0


def select_breaker_size(current: float) -> int:
    """Breaker rating with the fixed 25% margin."""
    return find_next_standard_size(current * BREAKER_SAFETY_MARGIN, STANDARD_BREAKER_SIZES)


def select_wire_size(current: float, cable_type: CableType) -> float:
    """Conductor cross-section (mm²) from the material's current density."""
    required = current / CURRENT_DENSITY[cable_type] if current > 0 else 0.0
    return find_next_standard_size(required, STANDARD_WIRE_SIZES)


def voltage_drop_percent(
    cable_length: float,
    current: float,
    voltage: float,
    wire_size: float,
    cable_type: CableType,
) -> float:
    """
    Percentage voltage drop over a single-phase run.

    The factor of 2 covers the supply and return conductors.
    """
    if wire_size <= 0:
        return 0.0
    resistivity = CABLE_RESISTIVITY[cable_type]
    return (2 * cable_length * current * resistivity) / (voltage * wire_size) * 100
