"""Flight plan validation entry points."""
import logging
from typing import List

from atsmsg.cross_checks import cross_check
from atsmsg.fpl_parser import parse_fpl, parse_field18
from atsmsg.fpl_validators import (
    validate_field7,
    validate_field8,
    validate_field9,
    validate_field10,
    validate_field13,
    validate_field15,
    validate_field16,
    validate_field18 as validate_field18_subfields,
)
from atsmsg.models.finding import Finding, Severity
from atsmsg.models.flight_plan import FlightPlanValidation
from atsmsg.severity import readiness_finding, summarize

logger = logging.getLogger(__name__)

EXPECTED_FORMAT = (
    "Expected format: (FPL-CALLSIGN-RULESTYPE-EQUIPMENT-DEPARTURE-ROUTE-DESTINATION-OTHER INFO)"
)


def validate_flight_plan(raw: str) -> FlightPlanValidation:
    """
    Run the full FPL pipeline: extract, validate each field, cross-check,
    then append the CADAS-ATS readiness verdict.

    Args:
        raw: Raw FPL message text

    Returns:
        FlightPlanValidation; when the message cannot be extracted it holds
        a single Format error and no parsed fields
    """
    parsed = parse_fpl(raw)
    if parsed is None:
        findings = (Finding("Format", Severity.ERROR, "Could not parse FPL message", EXPECTED_FORMAT),)
        return FlightPlanValidation(parsed=None, field18_map={}, findings=findings,
                                    summary=summarize(findings))

    findings: List[Finding] = [Finding("Format", Severity.SUCCESS, "FPL message parsed successfully")]
    findings.extend(validate_field7(parsed.field7))
    findings.extend(validate_field8(parsed.field8))
    findings.extend(validate_field9(parsed.field9))
    if not parsed.equipment_attached:
        findings.extend(validate_field10(parsed.field10))
    findings.extend(validate_field13(parsed.field13))
    findings.extend(validate_field15(parsed.field15))
    findings.extend(validate_field16(parsed.field16))

    field18_map = parse_field18(parsed.field18)
    findings.extend(validate_field18_subfields(parsed.field18, field18_map))
    findings.extend(cross_check(parsed.field8, parsed.field10, field18_map,
                                field9=parsed.field9, field13=parsed.field13, field16=parsed.field16))

    findings.append(readiness_finding(findings))
    summary = summarize(findings)
    logger.info(f"Validated FPL {parsed.field7 or '?'}: {summary.errors} error(s), "
                f"{summary.warnings} warning(s)")

    return FlightPlanValidation(parsed=parsed, field18_map=field18_map,
                                findings=tuple(findings), summary=summary)


def validate_field18(raw: str) -> List[Finding]:
    """
    Validate a Field 18 fragment on its own.

    Cross-field rules run with Field 8 and Field 10 treated as absent.
    """
    text = (raw or '').strip().upper()
    field18_map = parse_field18(text)
    findings = validate_field18_subfields(text, field18_map)
    findings.extend(cross_check("", "", field18_map))
    return findings
