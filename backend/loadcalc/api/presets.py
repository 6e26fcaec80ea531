"""
API routes for circuit templates and form options.
"""

from fastapi import APIRouter

from loadcalc.models.presets import CircuitTemplate, FormOptions, TemplateCircuitInput
from loadcalc.models.project import Circuit
from loadcalc.engine.presets import create_circuit_from_template, form_options, list_templates

router = APIRouter(prefix="/api/v1", tags=["presets"])


@router.get("/templates", response_model=list[CircuitTemplate])
async def get_templates() -> list[CircuitTemplate]:
    """List the available circuit templates."""
    return list_templates()


@router.post("/circuits/from-template", response_model=Circuit)
async def circuit_from_template(data: TemplateCircuitInput) -> Circuit:
    """
    Create a new circuit from a template.

    The circuit name is localized and numbered against the existing circuits.
    """
    return create_circuit_from_template(data.template, data.existing_circuits, data.language)


@router.get("/options", response_model=FormOptions)
async def get_options() -> FormOptions:
    """Selectable values and defaults for the project form."""
    return form_options()
