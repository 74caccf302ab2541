"""Unit tests for severity ordering and aggregation."""
import pytest

from atsmsg.models.finding import Finding, Severity, ValidationSummary
from atsmsg.severity import group_by_field, readiness_finding, summarize, worst_severity


@pytest.fixture
def findings():
    return [
        Finding("Field 7", Severity.SUCCESS, "Aircraft ID: OMA123"),
        Finding("Field 10", Severity.WARNING, "Unknown COM/NAV code: Q"),
        Finding("Field 7", Severity.ERROR, "Callsign must be alphanumeric only"),
        Finding("Field 18", Severity.INFO, "PBN capabilities: A1 (RNAV 10 (RNP 10))"),
    ]


class TestSeverityOrder:

    def test_total_order(self):
        assert Severity.SUCCESS < Severity.INFO < Severity.WARNING < Severity.ERROR
        assert max(Severity) == Severity.ERROR
        assert sorted([Severity.ERROR, Severity.SUCCESS, Severity.WARNING]) == [
            Severity.SUCCESS, Severity.WARNING, Severity.ERROR,
        ]

    def test_values(self):
        assert [s.value for s in Severity] == ["success", "info", "warning", "error"]


class TestFinding:

    def test_str(self):
        finding = Finding("Field 7", Severity.ERROR, "Aircraft identification is missing")
        assert str(finding) == "[ERROR] Field 7: Aircraft identification is missing"

    def test_str_with_detail(self):
        finding = Finding("Field 8", Severity.ERROR, 'Invalid flight rules "Q"', "Must be I, V, Y, or Z")
        assert str(finding) == '[ERROR] Field 8: Invalid flight rules "Q" (Must be I, V, Y, or Z)'

    def test_to_dict(self):
        assert Finding("Format", Severity.SUCCESS, "ok").to_dict() == {
            "field": "Format", "severity": "success", "message": "ok",
        }
        assert Finding("Format", Severity.ERROR, "bad", "why").to_dict()["detail"] == "why"


class TestAggregation:

    def test_summarize(self, findings):
        summary = summarize(findings)

        assert summary == ValidationSummary(errors=1, warnings=1, info=1, success=1)
        assert not summary.ready_for_filing
        assert summary.to_dict()["ready_for_filing"] is False

    def test_empty_summary_is_ready(self):
        assert summarize([]).ready_for_filing

    def test_group_by_field_keeps_order(self, findings):
        grouped = group_by_field(findings)

        assert list(grouped) == ["Field 7", "Field 10", "Field 18"]
        assert len(grouped["Field 7"]) == 2

    def test_worst_severity(self, findings):
        assert worst_severity(findings) == Severity.ERROR
        assert worst_severity(findings[:2]) == Severity.WARNING
        assert worst_severity([]) is None


class TestReadiness:

    def test_ready(self, findings):
        verdict = readiness_finding([f for f in findings if f.severity != Severity.ERROR])

        assert verdict.field == "CADAS-ATS"
        assert verdict.severity == Severity.SUCCESS
        assert verdict.message == "Flight plan appears ready for CADAS-ATS entry"

    def test_not_ready(self, findings):
        verdict = readiness_finding(findings + [Finding("Field 16", Severity.ERROR, "x")])

        assert verdict.severity == Severity.ERROR
        assert verdict.message == "2 error(s) must be resolved before filing in CADAS-ATS"
