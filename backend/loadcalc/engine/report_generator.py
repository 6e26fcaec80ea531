"""
Results report builder.

Produces a localized, display-ready report from CalculationResults:
  - Header with project info
  - Summary (total load, total current, main breaker, main feeder)
  - Warnings
  - Circuit details table
  - Bill of materials
  - Technical notes and disclaimer

All numbers are formatted here; the results themselves keep full precision.
"""

from loadcalc.config import Language, VOLTAGE_DROP_LIMIT
from loadcalc.engine.localization import (
    format_number,
    format_size,
    format_warning,
    translate,
)
from loadcalc.models.report import (
    BillOfMaterialsLine,
    CircuitRow,
    ReportInput,
    ResultsReport,
    SummaryItem,
)
from loadcalc.models.results import CalculationResults, CircuitResult

_CIRCUIT_COLUMN_KEYS = [
    "results_table_name",
    "results_table_type",
    "results_table_power",
    "results_table_current",
    "results_table_breaker",
    "results_table_wire",
    "results_table_voltage_drop",
]

_NOTE_KEYS = ["note_1", "note_2", "note_3", "note_4"]


def build_report(inp: ReportInput) -> ResultsReport:
    """Build the localized report for a calculation."""
    lang = inp.language
    results = inp.results
    info = results.project_info

    def t(key: str, **params) -> str:
        return translate(key, params, lang)

    breakers = [
        BillOfMaterialsLine(
            description=t("breaker_size_a", size=b.size),
            quantity=t("piece_count", count=b.count),
        )
        for b in results.quantities.breakers
    ]
    cables = [
        BillOfMaterialsLine(
            description=t("cable_size_mm2", size=format_size(c.size)),
            quantity=t("meter_length", length=format_number(c.length, 0)),
        )
        for c in results.quantities.cable_lengths_by_size
    ]

    return ResultsReport(
        language=lang,
        direction="rtl" if lang == Language.AR else "ltr",
        title=inp.title or t("results_header_title"),
        project_line=f"{t('project')}: {info.project_name}",
        details_line=(
            f"{t('buildingTypeLabel')}: {t('buildingType_' + info.building_type.value)}"
            f" | {t('voltageLabel')}: {format_size(info.voltage)}V"
        ),
        summary=_summary(results, lang),
        warnings_title=t("warnings_title"),
        warnings=[format_warning(w, lang) for w in results.warnings],
        circuits_title=t("results_table_title"),
        circuit_columns=[t(key) for key in _CIRCUIT_COLUMN_KEYS],
        circuits=[_circuit_row(c, lang) for c in results.circuit_results],
        bom_title=t("bom_title"),
        breakers=breakers,
        cables=cables,
        panels=BillOfMaterialsLine(
            description=t("panel_main"),
            quantity=t("piece_count", count=results.quantities.panels),
        ),
        notes_title=t("notes_title"),
        notes=[
            t(key, limit=format_size(VOLTAGE_DROP_LIMIT)) for key in _NOTE_KEYS
        ],
        disclaimer=t("results_disclaimer"),
    )


def _summary(results: CalculationResults, lang: Language) -> list[SummaryItem]:
    return [
        SummaryItem(
            label=translate("summary_total_load", language=lang),
            value=format_number(results.total_load_kw),
            unit="kW",
        ),
        SummaryItem(
            label=translate("summary_total_current", language=lang),
            value=format_number(results.total_current),
            unit="A",
        ),
        SummaryItem(
            label=translate("summary_main_breaker", language=lang),
            value=str(results.main_breaker_size),
            unit="A",
        ),
        SummaryItem(
            label=translate("summary_main_cable", language=lang),
            value=format_size(results.main_feeder_wire_size),
            unit="mm²",
        ),
    ]


def _circuit_row(c: CircuitResult, lang: Language) -> CircuitRow:
    return CircuitRow(
        id=c.id,
        name=c.name,
        type=translate(f"circuitType_{c.type.value}", language=lang),
        power=f"{c.power:,.0f}",
        current=format_number(c.current),
        breaker=str(c.breaker_size),
        wire=format_size(c.wire_size),
        voltage_drop=f"{format_number(c.voltage_drop)}%",
        drop_exceeds_limit=c.voltage_drop > VOLTAGE_DROP_LIMIT,
    )
