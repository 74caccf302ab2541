"""Severity aggregation and filing-readiness verdict."""
import logging
from typing import Dict, Iterable, List, Optional

from atsmsg.models.finding import Finding, Severity, ValidationSummary

logger = logging.getLogger(__name__)

READINESS_FIELD = "CADAS-ATS"


def summarize(findings: Iterable[Finding]) -> ValidationSummary:
    """Count findings by severity."""
    counts = {severity: 0 for severity in Severity}
    for finding in findings:
        counts[finding.severity] += 1

    return ValidationSummary(
        errors=counts[Severity.ERROR],
        warnings=counts[Severity.WARNING],
        info=counts[Severity.INFO],
        success=counts[Severity.SUCCESS],
    )


def group_by_field(findings: Iterable[Finding]) -> Dict[str, List[Finding]]:
    """Group findings by field name, keeping first-seen field order."""
    grouped: Dict[str, List[Finding]] = {}
    for finding in findings:
        grouped.setdefault(finding.field, []).append(finding)
    return grouped


def worst_severity(findings: Iterable[Finding]) -> Optional[Severity]:
    """Highest-ranked severity among findings, or None when there are none."""
    severities = [finding.severity for finding in findings]
    return max(severities) if severities else None


def readiness_finding(findings: Iterable[Finding]) -> Finding:
    """
    Derive the CADAS-ATS filing verdict from a completed run.

    Args:
        findings: All findings produced so far

    Returns:
        A success finding when there are no errors, otherwise one error
        finding stating how many must be resolved
    """
    errors = sum(1 for finding in findings if finding.severity == Severity.ERROR)
    if errors == 0:
        return Finding(READINESS_FIELD, Severity.SUCCESS,
                       "Flight plan appears ready for CADAS-ATS entry")

    logger.debug(f"Flight plan not ready for filing: {errors} error(s)")
    return Finding(READINESS_FIELD, Severity.ERROR,
                   f"{errors} error(s) must be resolved before filing in CADAS-ATS")
