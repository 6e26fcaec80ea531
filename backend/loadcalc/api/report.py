"""
API route for the localized results report.
"""

from fastapi import APIRouter, HTTPException

from loadcalc.models.report import ReportInput, ResultsReport
from loadcalc.engine.report_generator import build_report

router = APIRouter(prefix="/api/v1", tags=["report"])


@router.post("/report", response_model=ResultsReport)
async def create_report(body: ReportInput) -> ResultsReport:
    """Build a display-ready report for a calculation result."""
    try:
        return build_report(body)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc))
