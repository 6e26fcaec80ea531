"""
Tests for project submission checks.
"""

import pytest

from loadcalc.config import Language
from loadcalc.engine.localization import format_issue
from loadcalc.engine.validation import validate_project
from loadcalc.models.project import Circuit, ProjectInfo, ProjectInput
from loadcalc.models.validation import IssueKey


def _project(name="Villa", voltage=220, circuits=None) -> ProjectInput:
    if circuits is None:
        circuits = [Circuit(name="Lighting", power=800.0)]
    return ProjectInput(
        project_info=ProjectInfo(project_name=name, voltage=voltage),
        circuits=circuits,
    )


class TestValidateProject:

    def test_valid_project(self):
        assert validate_project(_project()) == []

    def test_blank_project_name(self):
        issues = validate_project(_project(name="   "))
        assert [i.key for i in issues] == [IssueKey.PROJECT_NAME_REQUIRED]

    def test_unsupported_voltage(self):
        issues = validate_project(_project(voltage=230))
        assert len(issues) == 1
        assert issues[0].key == IssueKey.UNSUPPORTED_VOLTAGE
        assert issues[0].params == {"voltage": 230}

    def test_380_volts_supported(self):
        assert validate_project(_project(voltage=380)) == []

    def test_no_circuits(self):
        issues = validate_project(_project(circuits=[]))
        assert [i.key for i in issues] == [IssueKey.CIRCUITS_REQUIRED]

    def test_circuit_without_name(self):
        circuits = [Circuit(name="Lighting", power=800.0), Circuit(name=" ", power=500.0)]
        issues = validate_project(_project(circuits=circuits))
        assert len(issues) == 1
        assert issues[0].key == IssueKey.CIRCUIT_NAME_REQUIRED
        assert issues[0].params == {"number": 2}

    def test_circuit_with_zero_power(self):
        issues = validate_project(_project(circuits=[Circuit(name="Pump", power=0.0)]))
        assert [i.key for i in issues] == [IssueKey.CIRCUIT_POWER_INVALID]
        assert issues[0].params == {"name": "Pump"}

    @pytest.mark.parametrize("power", [float("nan"), float("inf"), float("-inf")])
    def test_circuit_with_non_finite_power(self, power):
        issues = validate_project(_project(circuits=[Circuit(name="Pump", power=power)]))
        assert [i.key for i in issues] == [IssueKey.CIRCUIT_POWER_INVALID]
        assert issues[0].params == {"name": "Pump"}

    @pytest.mark.parametrize("voltage", [0.0, -220.0])
    def test_non_positive_voltage_unsupported(self, voltage):
        issues = validate_project(_project(voltage=voltage))
        assert [i.key for i in issues] == [IssueKey.UNSUPPORTED_VOLTAGE]

    @pytest.mark.parametrize("voltage", [float("nan"), float("inf")])
    def test_non_finite_voltage(self, voltage):
        issues = validate_project(_project(voltage=voltage))
        assert [i.key for i in issues] == [IssueKey.VALUE_NOT_FINITE]
        assert issues[0].params == {"field": "project_info.voltage"}

    def test_non_finite_circuit_factors(self):
        circuits = [
            Circuit(name="Lighting", power=800.0),
            Circuit(name="Pump", power=1000.0, power_factor=float("nan"), cable_length=float("inf")),
        ]
        issues = validate_project(_project(circuits=circuits))
        assert [i.params for i in issues] == [
            {"field": "circuits.2.power_factor"},
            {"field": "circuits.2.cable_length"},
        ]

    def test_missing_power_factor_is_not_an_issue(self):
        assert validate_project(_project(circuits=[Circuit(name="Pump", power=500.0, power_factor=None)])) == []

    @pytest.mark.parametrize("section, field", [
        ("wiring_info", "ambient_temp"),
        ("panel_info", "demand_factor"),
        ("specifications", "safety_factor"),
        ("specifications", "max_load_percentage"),
    ])
    def test_non_finite_shared_settings(self, section, field):
        project = _project()
        setattr(getattr(project, section), field, float("nan"))
        issues = validate_project(project)
        assert [i.key for i in issues] == [IssueKey.VALUE_NOT_FINITE]
        assert issues[0].params == {"field": f"{section}.{field}"}

    def test_unnamed_circuit_with_no_power_uses_fallback_name(self):
        issues = validate_project(_project(circuits=[Circuit(name="", power=-5.0)]))
        assert [i.key for i in issues] == [
            IssueKey.CIRCUIT_NAME_REQUIRED,
            IssueKey.CIRCUIT_POWER_INVALID,
        ]
        assert issues[1].params == {"name": "Circuit 1"}

    def test_fallback_name_is_localized(self):
        issues = validate_project(
            _project(circuits=[Circuit(name="", power=0.0)]), Language.AR
        )
        assert issues[1].params == {"name": "دائرة 1"}

    def test_all_issues_reported_in_order(self):
        project = _project(name="", voltage=110, circuits=[])
        assert [i.key for i in validate_project(project)] == [
            IssueKey.PROJECT_NAME_REQUIRED,
            IssueKey.UNSUPPORTED_VOLTAGE,
            IssueKey.CIRCUITS_REQUIRED,
        ]


class TestIssueMessages:

    def test_english_message(self):
        issue = validate_project(_project(circuits=[Circuit(name="", power=100.0)]))[0]
        assert format_issue(issue) == "Circuit #1 must have a name."

    def test_voltage_message_drops_trailing_zero(self):
        issue = validate_project(_project(voltage=230.0))[0]
        assert format_issue(issue) == "Supply voltage 230 V is not supported."

    def test_non_finite_message(self):
        issue = validate_project(_project(voltage=float("nan")))[0]
        assert format_issue(issue) == "'project_info.voltage' must be a finite number."

    def test_arabic_message(self):
        issue = validate_project(_project(name=""))[0]
        assert format_issue(issue, Language.AR) == "اسم المشروع مطلوب."
