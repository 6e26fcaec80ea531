"""
Pydantic models for project input validation.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class IssueKey(str, Enum):
    PROJECT_NAME_REQUIRED = "project_name_required"
    UNSUPPORTED_VOLTAGE = "unsupported_voltage"    # params: voltage
    CIRCUITS_REQUIRED = "circuits_required"
    CIRCUIT_NAME_REQUIRED = "circuit_name_required"  # params: number
    CIRCUIT_POWER_INVALID = "circuit_power_invalid"  # params: name
    VALUE_NOT_FINITE = "value_not_finite"          # params: field


class ValidationIssue(BaseModel):
    """A single reason the project cannot be submitted."""

    model_config = {"frozen": True}

    key: IssueKey
    params: dict[str, Union[str, float, int]] = Field(default_factory=dict)
    message: Optional[str] = None  # localized text, filled in by the API layer


class ValidationOutput(BaseModel):
    valid: bool
    issues: list[ValidationIssue] = Field(default_factory=list)
