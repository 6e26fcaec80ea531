"""
API routes for load calculation and input validation.
"""

from fastapi import APIRouter, HTTPException

from loadcalc.config import Language
from loadcalc.models.project import ProjectInput
from loadcalc.models.results import CalculationResults
from loadcalc.models.validation import ValidationIssue, ValidationOutput
from loadcalc.engine.calculator import calculate
from loadcalc.engine.localization import format_issue
from loadcalc.engine.validation import validate_project

router = APIRouter(prefix="/api/v1", tags=["calculation"])


def _localized_issues(project: ProjectInput, language: Language) -> list[ValidationIssue]:
    return [
        issue.model_copy(update={"message": format_issue(issue, language)})
        for issue in validate_project(project, language)
    ]


@router.post("/calculate", response_model=CalculationResults)
async def calculate_project(
    data: ProjectInput, language: Language = Language.EN
) -> CalculationResults:
    """
    Size every circuit, the main breaker and the main feeder.

    The project is validated first; any issue is returned as a 422 with the
    localized messages in `detail`.
    """
    issues = _localized_issues(data, language)
    if issues:
        raise HTTPException(
            status_code=422,
            detail=[issue.model_dump(mode="json") for issue in issues],
        )
    try:
        return calculate(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/validate", response_model=ValidationOutput)
async def validate(
    data: ProjectInput, language: Language = Language.EN
) -> ValidationOutput:
    """Check whether a project is ready to be calculated."""
    issues = _localized_issues(data, language)
    return ValidationOutput(valid=not issues, issues=issues)
