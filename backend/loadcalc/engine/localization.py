"""
Message catalogs and key/params rendering for English and Arabic.

Warnings and validation issues travel as a key plus params; this module turns
them into text. Float params are rounded to 2 decimals here, at presentation
time only.
"""

from typing import Mapping, Optional, Union

from loadcalc.config import Language
from loadcalc.models.results import AppWarning
from loadcalc.models.validation import ValidationIssue

ParamValue = Union[str, float, int]

_MESSAGES: dict[Language, dict[str, str]] = {
    Language.EN: {
        # Templates
        "templateLighting": "Lighting",
        "templateSockets": "General Sockets",
        "templateAC": "AC 1.5 Ton",
        "templateWaterHeater": "Water Heater",
        "templateCustom": "Custom Circuit",
        "circuit": "Circuit",
        # Warnings
        "voltage_drop_exceeded": (
            "Voltage drop in circuit '{{name}}' is {{value}}%, "
            "which exceeds the allowed limit of {{limit}}%. "
            "Consider a larger wire size or a shorter cable run."
        ),
        "breaker_undersized": (
            "The selected breaker ({{breaker}} A) for circuit '{{name}}' is smaller "
            "than the calculated current ({{current}} A). Review the circuit load."
        ),
        # Validation
        "project_name_required": "Project name is required.",
        "unsupported_voltage": "Supply voltage {{voltage}} V is not supported.",
        "circuits_required": "At least one circuit must be added.",
        "circuit_name_required": "Circuit #{{number}} must have a name.",
        "circuit_power_invalid": "Power for circuit '{{name}}' must be greater than zero.",
        "value_not_finite": "'{{field}}' must be a finite number.",
        # Building and circuit types
        "buildingType_residential": "Residential",
        "buildingType_commercial": "Commercial",
        "buildingType_industrial": "Industrial",
        "circuitType_lighting": "Lighting",
        "circuitType_sockets": "Sockets",
        "circuitType_ac": "Air Conditioning",
        "circuitType_heavy_duty": "Heavy Duty",
        "circuitType_": "Unspecified",
        # Report
        "results_header_title": "Electrical Load Calculation Report",
        "project": "Project",
        "buildingTypeLabel": "Building Type",
        "voltageLabel": "Voltage",
        "summary_total_load": "Total Load",
        "summary_total_current": "Total Current",
        "summary_main_breaker": "Main Breaker",
        "summary_main_cable": "Main Feeder Cable",
        "warnings_title": "Warnings and Recommendations",
        "results_table_title": "Circuit Details",
        "results_table_name": "Circuit Name",
        "results_table_type": "Type",
        "results_table_power": "Power (W)",
        "results_table_current": "Current (A)",
        "results_table_breaker": "Breaker (A)",
        "results_table_wire": "Wire Size (mm²)",
        "results_table_voltage_drop": "Voltage Drop (%)",
        "bom_title": "Bill of Materials",
        "breaker_size_a": "Breaker {{size}} A",
        "piece_count": "{{count}} pcs",
        "cable_size_mm2": "Cable {{size}} mm²",
        "meter_length": "{{length}} m",
        "panel_main": "Main distribution panel",
        "notes_title": "Technical Notes",
        "note_1": "Calculations use simplified single-phase formulas.",
        "note_2": "Breakers are sized at 125% of the calculated circuit current.",
        "note_3": "Wire sizes are based on a simplified current density for the selected conductor.",
        "note_4": "Voltage drop is checked against a {{limit}}% limit.",
        "results_disclaimer": (
            "Disclaimer: These results are estimates. "
            "A licensed electrical engineer must review the design before installation."
        ),
    },
    Language.AR: {
        "templateLighting": "إنارة",
        "templateSockets": "مقابس عامة",
        "templateAC": "مكيف 1.5 طن",
        "templateWaterHeater": "سخان مياه",
        "templateCustom": "دائرة مخصصة",
        "circuit": "دائرة",
        "voltage_drop_exceeded": (
            "هبوط الجهد في الدائرة '{{name}}' هو {{value}}%، "
            "وهو يتجاوز الحد المسموح به {{limit}}%. "
            "يُنصح باستخدام مقطع سلك أكبر أو تقصير طول الكابل."
        ),
        "breaker_undersized": (
            "القاطع المختار ({{breaker}} أمبير) للدائرة '{{name}}' أصغر "
            "من التيار المحسوب ({{current}} أمبير). يرجى مراجعة حمل الدائرة."
        ),
        "project_name_required": "اسم المشروع مطلوب.",
        "unsupported_voltage": "جهد التغذية {{voltage}} فولت غير مدعوم.",
        "circuits_required": "يجب إضافة دائرة واحدة على الأقل.",
        "circuit_name_required": "يجب إدخال اسم للدائرة رقم {{number}}.",
        "circuit_power_invalid": "يجب أن تكون قدرة الدائرة '{{name}}' أكبر من صفر.",
        "value_not_finite": "يجب أن تكون قيمة '{{field}}' رقمًا محددًا.",
        "buildingType_residential": "سكني",
        "buildingType_commercial": "تجاري",
        "buildingType_industrial": "صناعي",
        "circuitType_lighting": "إنارة",
        "circuitType_sockets": "مقابس",
        "circuitType_ac": "تكييف",
        "circuitType_heavy_duty": "أحمال ثقيلة",
        "circuitType_": "غير محدد",
        "results_header_title": "تقرير حساب الأحمال الكهربائية",
        "project": "المشروع",
        "buildingTypeLabel": "نوع المبنى",
        "voltageLabel": "الجهد",
        "summary_total_load": "الحمل الكلي",
        "summary_total_current": "التيار الكلي",
        "summary_main_breaker": "القاطع الرئيسي",
        "summary_main_cable": "الكابل الرئيسي",
        "warnings_title": "التحذيرات والتوصيات",
        "results_table_title": "تفاصيل الدوائر",
        "results_table_name": "اسم الدائرة",
        "results_table_type": "النوع",
        "results_table_power": "القدرة (واط)",
        "results_table_current": "التيار (أمبير)",
        "results_table_breaker": "القاطع (أمبير)",
        "results_table_wire": "مقطع السلك (مم²)",
        "results_table_voltage_drop": "هبوط الجهد (%)",
        "bom_title": "جدول الكميات",
        "breaker_size_a": "قاطع {{size}} أمبير",
        "piece_count": "{{count}} قطعة",
        "cable_size_mm2": "كابل {{size}} مم²",
        "meter_length": "{{length}} متر",
        "panel_main": "لوحة توزيع رئيسية",
        "notes_title": "ملاحظات فنية",
        "note_1": "تعتمد الحسابات على معادلات مبسطة لنظام أحادي الطور.",
        "note_2": "يتم اختيار القواطع بنسبة 125% من تيار الدائرة المحسوب.",
        "note_3": "تعتمد مقاطع الأسلاك على كثافة تيار مبسطة لنوع الموصل المختار.",
        "note_4": "يتم التحقق من هبوط الجهد مقابل حد {{limit}}%.",
        "results_disclaimer": (
            "تنبيه: هذه النتائج تقديرية. "
            "يجب مراجعة التصميم من قبل مهندس كهرباء مرخص قبل التنفيذ."
        ),
    },
}

# Params rendered with 2 decimals
_ROUNDED_PARAMS = {"value", "current"}


def translate(
    key: str,
    params: Optional[Mapping[str, ParamValue]] = None,
    language: Language = Language.EN,
) -> str:
    """
    Look up a message and substitute {{param}} placeholders.

    Unknown keys are returned unchanged.
    """
    text = _MESSAGES[language].get(key, key)
    if params:
        for name, value in params.items():
            text = text.replace(f"{{{{{name}}}}}", str(value))
    return text


def format_number(value: ParamValue, decimals: int = 2) -> str:
    """Format a float with fixed decimals; ints and strings pass through."""
    if isinstance(value, float):
        return f"{value:.{decimals}f}"
    return str(value)


def format_size(value: float) -> str:
    """Format a table size without trailing zeros (2.5 → '2.5', 4.0 → '4')."""
    return f"{value:g}"


def _display_params(params: Mapping[str, ParamValue]) -> dict[str, str]:
    display: dict[str, str] = {}
    for name, value in params.items():
        if name in _ROUNDED_PARAMS:
            display[name] = format_number(value)
        elif isinstance(value, float):
            display[name] = format_size(value)
        else:
            display[name] = str(value)
    return display


def format_warning(warning: AppWarning, language: Language = Language.EN) -> str:
    """Render an AppWarning as localized text."""
    return translate(warning.key.value, _display_params(warning.params), language)


def format_issue(issue: ValidationIssue, language: Language = Language.EN) -> str:
    """Render a ValidationIssue as localized text."""
    return translate(issue.key.value, _display_params(issue.params), language)
