"""
Pydantic models for circuit templates and form options.
"""

from enum import Enum

from pydantic import BaseModel, Field

from loadcalc.config import CircuitType, Language
from loadcalc.models.project import Circuit, ProjectInput


class TemplateKey(str, Enum):
    LIGHTING = "LIGHTING"
    GENERAL_SOCKETS = "GENERAL_SOCKETS"
    AC_1_5_TON = "AC_1_5_TON"
    WATER_HEATER = "WATER_HEATER"
    CUSTOM = "CUSTOM"


class CircuitTemplate(BaseModel):
    """Preset values for a new circuit."""

    model_config = {"frozen": True}

    key: TemplateKey
    name_key: str
    type: CircuitType
    power: float
    power_factor: float
    cable_length: float


class TemplateCircuitInput(BaseModel):
    """Request to add a circuit from a template to an existing list."""

    template: TemplateKey
    existing_circuits: list[Circuit] = Field(default_factory=list)
    language: Language = Language.EN


class FormOptions(BaseModel):
    """Selectable values for the project form."""

    building_types: list[str]
    voltages: list[int]
    circuit_types: list[str]
    cable_types: list[str]
    installation_methods: list[str]
    languages: list[str]
    templates: list[CircuitTemplate]
    default_project: ProjectInput
