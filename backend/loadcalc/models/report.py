"""
Pydantic models for the localized results report.
"""

from typing import Optional

from pydantic import BaseModel, Field

from loadcalc.config import Language
from loadcalc.models.results import CalculationResults


class ReportInput(BaseModel):
    """Input for building a results report."""

    results: CalculationResults
    language: Language = Language.EN
    title: Optional[str] = Field(
        None, description="Overrides the default localized report title"
    )


class SummaryItem(BaseModel):
    label: str
    value: str
    unit: str


class CircuitRow(BaseModel):
    """One display row of the circuit table. All values pre-formatted."""

    id: str
    name: str
    type: str
    power: str
    current: str
    breaker: str
    wire: str
    voltage_drop: str
    drop_exceeds_limit: bool


class BillOfMaterialsLine(BaseModel):
    description: str
    quantity: str


class ResultsReport(BaseModel):
    """Localized, display-ready view of a CalculationResults."""

    language: Language
    direction: str  # "ltr" or "rtl"
    title: str
    project_line: str
    details_line: str
    summary: list[SummaryItem]
    warnings_title: str
    warnings: list[str] = Field(default_factory=list)
    circuits_title: str
    circuit_columns: list[str]
    circuits: list[CircuitRow] = Field(default_factory=list)
    bom_title: str
    breakers: list[BillOfMaterialsLine] = Field(default_factory=list)
    cables: list[BillOfMaterialsLine] = Field(default_factory=list)
    panels: BillOfMaterialsLine
    notes_title: str
    notes: list[str] = Field(default_factory=list)
    disclaimer: str
