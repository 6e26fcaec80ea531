"""
Tests for the results report builder and API route.
"""

from fastapi.testclient import TestClient

from loadcalc.main import app
from loadcalc.config import BuildingType, Language
from loadcalc.engine.calculator import calculate
from loadcalc.engine.report_generator import build_report
from loadcalc.models.project import Circuit, ProjectInfo, ProjectInput
from loadcalc.models.report import ReportInput


client = TestClient(app)


def _results(cable_length: float = 15.0):
    return calculate(ProjectInput(
        project_info=ProjectInfo(
            project_name="Villa 12",
            building_type=BuildingType.COMMERCIAL,
            voltage=220,
        ),
        circuits=[
            Circuit(id="c1", name="AC", type="ac", power=2200.0, power_factor=0.8,
                    cable_length=cable_length),
            Circuit(id="c2", name="Lighting", type="lighting", power=800.0,
                    power_factor=0.9, cable_length=20.0),
        ],
    ))


# ── Builder tests ──


class TestReportBuilder:

    def setup_method(self):
        self.report = build_report(ReportInput(results=_results()))

    def test_header(self):
        assert self.report.title == "Electrical Load Calculation Report"
        assert self.report.project_line == "Project: Villa 12"
        assert self.report.details_line == "Building Type: Commercial | Voltage: 220V"
        assert self.report.direction == "ltr"

    def test_summary(self):
        values = {item.label: (item.value, item.unit) for item in self.report.summary}
        # (2.2 + 0.8) kW × 0.8 × 1.25 = 3.0 kW
        assert values["Total Load"] == ("3.00", "kW")
        assert values["Main Breaker"][1] == "A"
        assert values["Main Feeder Cable"] == ("2.5", "mm²")

    def test_circuit_rows(self):
        ac, lighting = self.report.circuits
        assert ac.id == "c1"
        assert ac.type == "Air Conditioning"
        assert ac.power == "2,200"
        assert ac.current == "12.50"
        assert ac.breaker == "16"
        assert ac.wire == "2.5"
        assert ac.voltage_drop == "1.43%"
        assert not ac.drop_exceeds_limit
        assert lighting.wire == "1.5"
        assert len(self.report.circuit_columns) == 7

    def test_bill_of_materials(self):
        assert [(b.description, b.quantity) for b in self.report.breakers] == [
            ("Breaker 10 A", "1 pcs"),
            ("Breaker 16 A", "1 pcs"),
        ]
        assert [(c.description, c.quantity) for c in self.report.cables] == [
            ("Cable 1.5 mm²", "20 m"),
            ("Cable 2.5 mm²", "15 m"),
        ]
        assert self.report.panels.quantity == "1 pcs"

    def test_notes_and_disclaimer(self):
        assert len(self.report.notes) == 4
        assert "3%" in self.report.notes[3]
        assert self.report.disclaimer.startswith("Disclaimer")

    def test_no_warnings(self):
        assert self.report.warnings == []


class TestReportWithWarnings:

    def test_warning_text(self):
        report = build_report(ReportInput(results=_results(cable_length=60.0)))
        assert len(report.warnings) == 1
        assert "5.73%" in report.warnings[0]
        assert report.circuits[0].drop_exceeds_limit

    def test_english_by_default(self):
        report = build_report(ReportInput(results=_results()))
        assert report.direction == "ltr"
        assert report.title == "Electrical Load Calculation Report"

    def test_arabic(self):
        report = build_report(ReportInput(results=_results(cable_length=60.0), language=Language.AR))
        assert report.direction == "rtl"
        assert report.title == "تقرير حساب الأحمال الكهربائية"
        assert report.details_line.startswith("نوع المبنى: تجاري")
        assert "5.73" in report.warnings[0]

    def test_custom_title(self):
        report = build_report(ReportInput(results=_results(), title="Block A"))
        assert report.title == "Block A"


# ── API tests ──


class TestReportAPI:

    def test_post_report(self):
        payload = {"results": _results().model_dump(mode="json"), "language": "en"}
        resp = client.post("/api/v1/report", json=payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["project_line"] == "Project: Villa 12"
        assert len(data["circuits"]) == 2

    def test_post_report_arabic(self):
        payload = {"results": _results().model_dump(mode="json"), "language": "ar"}
        resp = client.post("/api/v1/report", json=payload)
        assert resp.status_code == 200
        assert resp.json()["direction"] == "rtl"

    def test_post_missing_results(self):
        resp = client.post("/api/v1/report", json={"language": "en"})
        assert resp.status_code == 422
