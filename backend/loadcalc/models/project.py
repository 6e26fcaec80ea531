"""
Pydantic models for the project input submitted by the calculation form.

Numeric circuit fields are intentionally unconstrained: degenerate values
(zero power, zero power factor, negative length) are accepted and produce
degenerate results. User-facing checks, including supply voltage and
non-finite numbers, live in engine.validation.
"""

from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field

from loadcalc.config import (
    BuildingType,
    CableType,
    CircuitType,
    InstallationMethod,
    DEFAULT_AMBIENT_TEMP,
    DEFAULT_BUILDING_TYPE,
    DEFAULT_CABLE_TYPE,
    DEFAULT_DEMAND_FACTOR,
    DEFAULT_INSTALLATION_METHOD,
    DEFAULT_MAX_LOAD_PERCENTAGE,
    DEFAULT_SAFETY_FACTOR,
    DEFAULT_VOLTAGE,
    FREQUENCY_HZ,
)


def new_circuit_id() -> str:
    """Generate an opaque circuit identifier."""
    return f"c{uuid4().hex[:12]}"


class ProjectInfo(BaseModel):
    """Project identity and supply parameters."""

    project_name: str = ""
    building_type: BuildingType = DEFAULT_BUILDING_TYPE
    voltage: float = Field(DEFAULT_VOLTAGE, description="Supply voltage (V)")
    frequency: int = FREQUENCY_HZ  # Hz, informational


class Circuit(BaseModel):
    """One branch circuit to be sized."""

    id: str = Field(default_factory=new_circuit_id)
    name: str = ""
    type: CircuitType = CircuitType.UNSPECIFIED
    power: float = 0.0  # W
    power_factor: Optional[float] = 0.9  # None/0 handled by the engine
    cable_length: float = 10.0  # one-way run, m


class WiringInfo(BaseModel):
    """Wiring assumptions shared by every circuit and the main feeder."""

    cable_type: CableType = DEFAULT_CABLE_TYPE
    installation_method: InstallationMethod = DEFAULT_INSTALLATION_METHOD  # informational
    ambient_temp: float = DEFAULT_AMBIENT_TEMP  # °C, informational


class PanelInfo(BaseModel):
    demand_factor: float = DEFAULT_DEMAND_FACTOR


class Specifications(BaseModel):
    safety_factor: float = DEFAULT_SAFETY_FACTOR
    # Reference value only; breaker sizing uses BREAKER_SAFETY_MARGIN
    max_load_percentage: float = DEFAULT_MAX_LOAD_PERCENTAGE


class ProjectInput(BaseModel):
    """Complete project description passed to the calculation engine."""

    project_info: ProjectInfo = Field(default_factory=ProjectInfo)
    circuits: list[Circuit] = Field(default_factory=list)
    wiring_info: WiringInfo = Field(default_factory=WiringInfo)
    panel_info: PanelInfo = Field(default_factory=PanelInfo)
    specifications: Specifications = Field(default_factory=Specifications)
