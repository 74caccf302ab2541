"""Integration tests for the full FPL validation pipeline."""
import json

import pytest

from atsmsg.models.finding import Severity
from atsmsg.validator import validate_field18, validate_flight_plan


def _with_field13(eobt):
    return (
        "(FPL-OMA123-IS-B738/M-SDE2E3FGHIJ1J3J5M1RWY/LB1D1"
        f"-OMDB{eobt}-N0450F360 DCT-OOSA0145-PBN/A1 DOF/260215 REG/A4OEE)"
    )


class TestValidateFlightPlan:
    """Test cases for validate_flight_plan."""

    def test_sample_plans_are_ready(self, oma123_fpl, oms456_fpl, aby789_fpl):
        for raw in (oma123_fpl, oms456_fpl, aby789_fpl):
            result = validate_flight_plan(raw)

            assert result.parsed is not None
            assert result.summary.errors == 0, [str(f) for f in result.findings]
            assert result.ready_for_filing

    def test_format_success_first_and_verdict_last(self, oma123_fpl):
        result = validate_flight_plan(oma123_fpl)

        first, last = result.findings[0], result.findings[-1]
        assert (first.field, first.severity) == ("Format", Severity.SUCCESS)
        assert (last.field, last.severity) == ("CADAS-ATS", Severity.SUCCESS)

    def test_field18_map_exposed(self, oma123_fpl):
        result = validate_flight_plan(oma123_fpl)

        assert result.field18_map["PBN"] == "A1B1C1D1L1"
        assert result.field18_map["REG"] == "A4OEE"

    def test_oman_departure_note(self, oms456_fpl):
        result = validate_flight_plan(oms456_fpl)

        notes = [f for f in result.by_field()["Field 13"] if f.severity == Severity.INFO]
        assert len(notes) == 1

    def test_r_without_pbn_is_cross_check_error(self, aby789_fpl):
        raw = aby789_fpl.replace("PBN/A1B2 ", "")
        result = validate_flight_plan(raw)

        cross = [f for f in result.findings if f.field == "Cross-check" and f.severity == Severity.ERROR]
        assert len(cross) == 1
        assert not result.ready_for_filing
        assert result.findings[-1].message == "1 error(s) must be resolved before filing in CADAS-ATS"

    def test_missing_field16_single_error(self):
        result = validate_flight_plan("(FPL-ABC12-IS-B738/M-OMDB1200-N0450F360 DCT-OOSA)")

        field16_errors = [
            f for f in result.findings
            if f.severity == Severity.ERROR and ("Field 16" in f.field or "Field 16" in f.message)
        ]
        assert len(field16_errors) == 1
        assert result.parsed.strategy == "lenient"

    def test_eobt_boundary(self):
        late = validate_flight_plan(_with_field13("2400"))
        last_minute = validate_flight_plan(_with_field13("2359"))

        assert late.worst_by_field()["Field 13"] == Severity.ERROR
        assert last_minute.worst_by_field()["Field 13"] == Severity.SUCCESS

    def test_separate_field10_is_validated(self):
        result = validate_flight_plan(
            "(FPL-ABC12-IS-B738/M-SDQ/S-OMDB1200-N0450F360 DCT-OOSA0100)"
        )

        field10 = result.by_field()["Field 10"]
        assert [f.message for f in field10] == ["COM/NAV: S, D", "Unknown COM/NAV code: Q", "SSR: S"]

    def test_equipment_reported_when_type_unreadable(self):
        result = validate_flight_plan(
            "(FPL-OMA123-IS-B738-SDE2E3FGHIJ1RWYQQ/LB1-OMDB1200-N0450F360 DCT"
            "-OOSA0145-PBN/A1 DOF/260215 REG/A4OEE)"
        )

        assert result.parsed.equipment_attached
        field10 = result.by_field()["Field 10"]
        assert [f.message for f in field10 if f.severity == Severity.WARNING] == [
            "Unknown COM/NAV code: Q",
            "Unknown COM/NAV code: Q",
        ]
        assert result.worst_by_field()["Field 9"] == Severity.ERROR

    def test_lower_case_message_matches_upper_case(self, oma123_fpl):
        upper = validate_flight_plan(oma123_fpl)
        lower = validate_flight_plan(oma123_fpl.lower())

        assert [str(f) for f in lower.findings] == [str(f) for f in upper.findings]
        assert lower.field18_map == upper.field18_map
        assert lower.ready_for_filing

    def test_unparseable_message(self):
        result = validate_flight_plan("this is not a flight plan")

        assert result.parsed is None
        assert result.field18_map == {}
        assert len(result.findings) == 1
        assert result.findings[0].field == "Format"
        assert result.findings[0].severity == Severity.ERROR
        assert result.summary.errors == 1
        assert result.findings[0].detail.startswith("Expected format:")

    def test_every_finding_field_was_inspected(self, oma123_fpl):
        fields = {f.field for f in validate_flight_plan(oma123_fpl).findings}

        assert fields <= {
            "Format", "Field 7", "Field 8", "Field 9", "Field 10", "Field 13",
            "Field 15", "Field 16", "Field 18", "Cross-check", "CADAS-ATS",
        }

    def test_to_dict_is_json_serializable(self, oma123_fpl):
        data = validate_flight_plan(oma123_fpl).to_dict()

        encoded = json.loads(json.dumps(data))
        assert encoded["summary"]["ready_for_filing"] is True
        assert encoded["parsed"]["field7"] == "OMA123"


class TestValidateField18:
    """Test cases for the Field 18 only pipeline."""

    SAMPLE = "PBN/A1B2 DOF/260215 REG/A4OEE"

    def test_recognised_pbn_tokens(self):
        findings = validate_field18(self.SAMPLE)

        info = [f.message for f in findings if f.severity == Severity.INFO]
        assert info == ["PBN capabilities: A1 (RNAV 10 (RNP 10)), B2 (RNAV 5 (GNSS))"]

    def test_no_missing_dof_or_reg_warning(self):
        messages = [f.message for f in validate_field18(self.SAMPLE)]

        assert not any(m.startswith("DOF/") or m.startswith("REG/") for m in messages)

    def test_idempotent(self):
        assert validate_field18(self.SAMPLE) == validate_field18(self.SAMPLE)

    def test_cross_rules_with_absent_fields(self):
        findings = validate_field18("RMK/NIL")

        assert [f.message for f in findings if f.severity == Severity.WARNING] == [
            "REG/ (registration) is recommended for Oman FIR operations",
            "DOF/ (date of flight) is recommended",
        ]

    def test_lower_case_fragment(self):
        assert validate_field18(self.SAMPLE.lower()) == validate_field18(self.SAMPLE)

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty(self, text):
        messages = [f.message for f in validate_field18(text)]

        assert "Field 18 is empty" in messages
