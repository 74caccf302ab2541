"""Plain-text rendering of validation and decode results."""
from typing import Dict, Iterable, List, Sequence

from atsmsg.models.finding import Finding, ValidationSummary
from atsmsg.models.flight_plan import FlightPlanValidation
from atsmsg.models.notam import DecodedNotam
from atsmsg.severity import group_by_field, worst_severity

MAX_COLUMN_WIDTH = 100


def format_findings(findings: Iterable[Finding]) -> str:
    """One "[SEVERITY] field: message" line per finding."""
    return "\n".join(str(finding) for finding in findings)


def format_summary(summary: ValidationSummary) -> str:
    verdict = "READY for filing" if summary.ready_for_filing else "NOT ready for filing"
    return (
        f"{summary.errors} error(s), {summary.warnings} warning(s), "
        f"{summary.info} info, {summary.success} success - {verdict}"
    )


def format_table(rows: Sequence[Dict[str, object]]) -> str:
    """Render dict rows as a column-aligned table."""
    if not rows:
        return "No results found."

    columns = list(rows[0].keys())

    widths = {col: len(col) for col in columns}
    for row in rows:
        for col in columns:
            val_len = len(str(row.get(col, '')))
            if val_len > widths[col]:
                widths[col] = min(val_len, MAX_COLUMN_WIDTH)

    header = " | ".join(col.ljust(widths[col]) for col in columns)
    separator = "-+-".join("-" * widths[col] for col in columns)

    lines = [header, separator]
    for row in rows:
        lines.append(" | ".join(str(row.get(col, ''))[:widths[col]].ljust(widths[col]) for col in columns))
    return "\n".join(lines)


def display_table(rows: Sequence[Dict[str, object]]) -> None:
    """Print rows as a table followed by the row count."""
    print(format_table(rows))
    if rows:
        print(f"\n{len(rows)} row(s).\n")


def field_rows(findings: Iterable[Finding]) -> List[Dict[str, object]]:
    """Table rows of worst severity and finding count per field."""
    rows = []
    for field, items in group_by_field(findings).items():
        rows.append({
            'Field': field,
            'Worst': worst_severity(items).value.upper(),
            'Findings': len(items),
        })
    return rows


def format_validation(result: FlightPlanValidation) -> str:
    """Full text report for one flight plan validation."""
    sections = []
    if result.parsed:
        sections.append(f"=== FPL {result.parsed.field7 or '?'} "
                        f"{result.parsed.departure} -> {result.parsed.destination} ===")
    sections.append(format_findings(result.findings))
    sections.append(format_table(field_rows(result.findings)))
    sections.append(format_summary(result.summary))
    return "\n\n".join(sections)


def format_notam(notam: DecodedNotam) -> str:
    """Human-readable NOTAM block: summary plus raw E) text when it differs."""
    text = notam.summary()
    if notam.raw_text and notam.raw_text != notam.decoded_text:
        text += f"\n\nOriginal: {notam.raw_text}"
    return text
