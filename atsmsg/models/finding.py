"""Validation finding domain model."""
from dataclasses import dataclass, asdict
from enum import Enum
from functools import total_ordering
from typing import Optional, Dict, Any


@total_ordering
class Severity(Enum):
    """Finding severity, ordered success < info < warning < error."""
    SUCCESS = "success"  # field validated clean
    INFO = "info"        # supplementary detail
    WARNING = "warning"  # recommended / tolerable
    ERROR = "error"      # cannot be filed

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    def __lt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank


_SEVERITY_RANK = {
    Severity.SUCCESS: 0,
    Severity.INFO: 1,
    Severity.WARNING: 2,
    Severity.ERROR: 3,
}


@dataclass(frozen=True)
class Finding:
    """A single classified result produced while validating one field."""

    field: str
    severity: Severity
    message: str
    detail: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['severity'] = self.severity.value
        if self.detail is None:
            del result['detail']
        return result

    def __str__(self) -> str:
        line = f"[{self.severity.value.upper()}] {self.field}: {self.message}"
        if self.detail:
            line += f" ({self.detail})"
        return line


@dataclass(frozen=True)
class ValidationSummary:
    """Counts of findings by severity for one validation run."""

    errors: int = 0
    warnings: int = 0
    info: int = 0
    success: int = 0

    @property
    def ready_for_filing(self) -> bool:
        """A message with no errors may be entered into CADAS-ATS."""
        return self.errors == 0

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['ready_for_filing'] = self.ready_for_filing
        return result
