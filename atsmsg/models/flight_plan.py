"""Flight plan domain models."""
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List, Tuple

from atsmsg.models.finding import Finding, Severity, ValidationSummary
from atsmsg.severity import group_by_field, worst_severity


@dataclass(frozen=True)
class ParsedFlightPlan:
    """ICAO FPL message split into its numbered fields.

    Each field is a substring of the normalized message, or empty.
    """

    raw: str
    field3: str = "FPL"   # message type
    field7: str = ""      # aircraft identification
    field8: str = ""      # flight rules + type of flight
    field9: str = ""      # number, type, wake (may carry Field 10 after "-")
    field10: str = ""     # equipment, separate or recovered from Field 9
    field13: str = ""     # departure aerodrome + EOBT
    field15: str = ""     # speed, level, route
    field16: str = ""     # destination + EET + alternates
    field18: str = ""     # other information
    field19: Optional[str] = None  # supplementary information
    strategy: str = "strict"

    @property
    def departure(self) -> str:
        return self.field13[:4].upper()

    @property
    def destination(self) -> str:
        return self.field16[:4].upper()

    @property
    def flight_rules(self) -> str:
        return self.field8[:1].upper()

    @property
    def equipment_attached(self) -> bool:
        """True when Field 10 was written inside the Field 9 block."""
        return '-' in self.field9

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FlightPlanValidation:
    """Result of a full flight-plan validation run."""

    parsed: Optional[ParsedFlightPlan]
    field18_map: Dict[str, str] = field(default_factory=dict)
    findings: Tuple[Finding, ...] = ()
    summary: ValidationSummary = field(default_factory=ValidationSummary)

    @property
    def ready_for_filing(self) -> bool:
        return self.summary.ready_for_filing

    def by_field(self) -> Dict[str, List[Finding]]:
        """Findings grouped by field, in first-seen order."""
        return group_by_field(self.findings)

    def worst_by_field(self) -> Dict[str, Severity]:
        """Worst severity reported for each field."""
        return {name: worst_severity(items) for name, items in self.by_field().items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'parsed': self.parsed.to_dict() if self.parsed else None,
            'field18': dict(self.field18_map),
            'findings': [f.to_dict() for f in self.findings],
            'summary': self.summary.to_dict(),
        }
