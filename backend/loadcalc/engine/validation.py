"""
Submission checks for a project, applied before calling the calculator.

Issues carry only JSON-safe params: a non-finite number is reported by the
path of the field that holds it, never by its value.
"""

import math

from loadcalc.config import SUPPORTED_VOLTAGES, Language
from loadcalc.engine.localization import translate
from loadcalc.models.project import ProjectInput
from loadcalc.models.validation import IssueKey, ValidationIssue


def _not_finite(field: str) -> ValidationIssue:
    return ValidationIssue(key=IssueKey.VALUE_NOT_FINITE, params={"field": field})


def validate_project(
    project: ProjectInput,
    language: Language = Language.EN,
) -> list[ValidationIssue]:
    """
    Return every reason the project cannot be calculated, in form order.

    An empty list means the project is ready for calculate().
    """
    issues: list[ValidationIssue] = []
    info = project.project_info

    if not info.project_name.strip():
        issues.append(ValidationIssue(key=IssueKey.PROJECT_NAME_REQUIRED))

    if not math.isfinite(info.voltage):
        issues.append(_not_finite("project_info.voltage"))
    elif info.voltage not in SUPPORTED_VOLTAGES:
        issues.append(ValidationIssue(
            key=IssueKey.UNSUPPORTED_VOLTAGE,
            params={"voltage": info.voltage},
        ))

    if not project.circuits:
        issues.append(ValidationIssue(key=IssueKey.CIRCUITS_REQUIRED))

    for number, circuit in enumerate(project.circuits, start=1):
        if not circuit.name.strip():
            issues.append(ValidationIssue(
                key=IssueKey.CIRCUIT_NAME_REQUIRED,
                params={"number": number},
            ))
        if not math.isfinite(circuit.power) or circuit.power <= 0:
            name = circuit.name or f"{translate('circuit', language=language)} {number}"
            issues.append(ValidationIssue(
                key=IssueKey.CIRCUIT_POWER_INVALID,
                params={"name": name},
            ))
        if circuit.power_factor is not None and not math.isfinite(circuit.power_factor):
            issues.append(_not_finite(f"circuits.{number}.power_factor"))
        if not math.isfinite(circuit.cable_length):
            issues.append(_not_finite(f"circuits.{number}.cable_length"))

    shared = {
        "wiring_info.ambient_temp": project.wiring_info.ambient_temp,
        "panel_info.demand_factor": project.panel_info.demand_factor,
        "specifications.safety_factor": project.specifications.safety_factor,
        "specifications.max_load_percentage": project.specifications.max_load_percentage,
    }
    for field, value in shared.items():
        if not math.isfinite(value):
            issues.append(_not_finite(field))

    return issues
