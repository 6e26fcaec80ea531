"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from loadcalc.api.calculate import router as calculate_router
from loadcalc.api.presets import router as presets_router
from loadcalc.api.report import router as report_router

router = APIRouter()
router.include_router(calculate_router)
router.include_router(presets_router)
router.include_router(report_router)
