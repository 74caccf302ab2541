"""Unit tests for text rendering."""
from atsmsg.models.finding import Finding, Severity, ValidationSummary
from atsmsg.notam_parser import decode_notam
from atsmsg.reports import (
    display_table,
    field_rows,
    format_findings,
    format_notam,
    format_summary,
    format_table,
    format_validation,
)
from atsmsg.validator import validate_flight_plan


class TestFormatting:
    """Test cases for the report helpers."""

    def test_format_findings(self):
        text = format_findings([
            Finding("Field 7", Severity.SUCCESS, "Aircraft ID: OMA123"),
            Finding("Field 16", Severity.ERROR, "Invalid EET minutes: 0175"),
        ])

        assert text.splitlines() == [
            "[SUCCESS] Field 7: Aircraft ID: OMA123",
            "[ERROR] Field 16: Invalid EET minutes: 0175",
        ]

    def test_format_summary(self):
        assert format_summary(ValidationSummary(0, 2, 1, 10)).endswith("READY for filing")
        assert format_summary(ValidationSummary(1, 0, 0, 0)).startswith("1 error(s)")
        assert format_summary(ValidationSummary(1, 0, 0, 0)).endswith("NOT ready for filing")

    def test_format_table(self):
        table = format_table([
            {'Field': 'Field 7', 'Worst': 'SUCCESS'},
            {'Field': 'Cross-check', 'Worst': 'ERROR'},
        ])
        lines = table.splitlines()

        assert lines[0] == "Field       | Worst  "
        assert lines[1] == "------------+--------"
        assert lines[3].startswith("Cross-check | ERROR")

    def test_empty_table(self, capsys):
        assert format_table([]) == "No results found."

        display_table([])
        assert capsys.readouterr().out == "No results found.\n"

    def test_display_table_counts_rows(self, capsys):
        display_table([{'a': 1}, {'a': 2}])

        assert "2 row(s)." in capsys.readouterr().out

    def test_field_rows(self):
        rows = field_rows([
            Finding("Field 9", Severity.SUCCESS, "Type: Boeing 737-800"),
            Finding("Field 9", Severity.WARNING, "Wake category \"H\" may not match B738 (expected M)"),
        ])

        assert rows == [{'Field': 'Field 9', 'Worst': 'WARNING', 'Findings': 2}]


class TestRenderResults:

    def test_format_validation(self, oma123_fpl):
        report = format_validation(validate_flight_plan(oma123_fpl))

        assert report.startswith("=== FPL OMA123 OMDB -> OOSA ===")
        assert "[SUCCESS] CADAS-ATS: Flight plan appears ready for CADAS-ATS entry" in report

    def test_format_validation_without_parse(self):
        report = format_validation(validate_flight_plan("garbage"))

        assert not report.startswith("===")
        assert "NOT ready for filing" in report

    def test_format_notam_shows_original(self, runway_closure_notam):
        text = format_notam(decode_notam(runway_closure_notam))

        assert text.endswith("Original: RWY 07/25 CLSD DUE WIP")
