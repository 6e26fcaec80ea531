"""
Pydantic models for calculation results.

All result models are frozen; one CalculationResults corresponds to exactly
one engine invocation.
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field

from loadcalc.models.project import Circuit, ProjectInfo


class WarningKey(str, Enum):
    VOLTAGE_DROP_EXCEEDED = "voltage_drop_exceeded"  # params: name, value, limit
    BREAKER_UNDERSIZED = "breaker_undersized"        # params: name, breaker, current


class AppWarning(BaseModel):
    """Structured warning: a message key plus substitution params."""

    model_config = {"frozen": True}

    key: WarningKey
    params: dict[str, Union[str, float, int]] = Field(default_factory=dict)


class CircuitResult(Circuit):
    """A circuit with its derived electrical values."""

    model_config = {"frozen": True}

    current: float       # A
    breaker_size: int    # A, from STANDARD_BREAKER_SIZES
    wire_size: float     # mm², from STANDARD_WIRE_SIZES
    voltage_drop: float  # %


class BreakerQuantity(BaseModel):
    model_config = {"frozen": True}

    size: int   # A
    count: int


class CableQuantity(BaseModel):
    model_config = {"frozen": True}

    size: float    # mm²
    length: float  # m


class MaterialQuantities(BaseModel):
    """Bill of materials, each group sorted ascending by size."""

    model_config = {"frozen": True}

    cable_lengths_by_size: list[CableQuantity] = Field(default_factory=list)
    breakers: list[BreakerQuantity] = Field(default_factory=list)
    panels: int = 1


class CalculationResults(BaseModel):
    """Full output of one calculation run."""

    model_config = {"frozen": True}

    project_info: ProjectInfo
    total_load_kw: float       # display figure, includes demand and safety factors
    total_current: float       # A, from demanded apparent power
    main_breaker_size: int     # A
    main_feeder_wire_size: float  # mm²
    circuit_results: list[CircuitResult] = Field(default_factory=list)
    warnings: list[AppWarning] = Field(default_factory=list)
    quantities: MaterialQuantities = Field(default_factory=MaterialQuantities)
