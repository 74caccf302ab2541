"""NOTAM domain model."""
import re
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

# Q-line coordinates: 1703N05405E005 (lat deg+min, lon deg+min, radius NM)
COORDINATES_PATTERN = re.compile(r'^(\d{2})(\d{2})([NS])(\d{3})(\d{2})([EW])(\d{3})?$')


@dataclass(frozen=True)
class QLine:
    """The eight "/"-separated parts of a NOTAM Q) qualifier line."""

    fir: str
    q_code: str
    traffic: str = ""
    purpose: str = ""
    scope: str = ""
    lower_alt: str = "000"
    upper_alt: str = "999"
    coordinates: str = ""

    def _coordinates_match(self):
        return COORDINATES_PATTERN.match(self.coordinates.strip().upper())

    @property
    def latitude(self) -> Optional[float]:
        match = self._coordinates_match()
        if not match:
            return None
        latitude = int(match.group(1)) + int(match.group(2)) / 60.0
        return -latitude if match.group(3) == 'S' else latitude

    @property
    def longitude(self) -> Optional[float]:
        match = self._coordinates_match()
        if not match:
            return None
        longitude = int(match.group(4)) + int(match.group(5)) / 60.0
        return -longitude if match.group(6) == 'W' else longitude

    @property
    def radius_nm(self) -> Optional[int]:
        match = self._coordinates_match()
        if not match or not match.group(7):
            return None
        return int(match.group(7))

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['latitude'] = self.latitude
        result['longitude'] = self.longitude
        result['radius_nm'] = self.radius_nm
        return result


@dataclass(frozen=True)
class DecodedNotam:
    """
    Best-effort decode of a single ICAO NOTAM.

    Sections missing from the input are empty strings; q_line is None when
    the message has no usable Q) line.
    """

    # Identity & series
    id: str = ""
    series: str = ""
    number: str = ""
    year: str = ""

    # NOTAMN / NOTAMR / NOTAMC
    type: str = ""
    type_label: str = ""
    referenced_id: str = ""

    # Q-line
    q_line: Optional[QLine] = None
    category: str = ""
    category_label: str = ""
    condition_label: str = ""
    subject_icao: str = ""
    condition_icao: str = ""

    # Lettered sections
    location: str = ""
    valid_from: str = ""
    valid_from_formatted: str = ""
    valid_to: str = ""
    valid_to_formatted: str = ""
    schedule: str = ""
    raw_text: str = ""
    decoded_text: str = ""
    lower_alt: str = ""
    upper_alt: str = ""

    @property
    def is_permanent(self) -> bool:
        return self.valid_to.strip().upper() == 'PERM'

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dictionary."""
        result = asdict(self)
        result['q_line'] = self.q_line.to_dict() if self.q_line else None
        result['is_permanent'] = self.is_permanent
        return result

    def summary(self) -> str:
        """Generate a human-readable multi-line summary."""
        lines = []

        header = f"{self.id or 'Unidentified NOTAM'} | {self.location or 'Unknown'}"
        lines.append(header)
        lines.append("=" * len(header))

        if self.type_label:
            type_str = f"Type: {self.type_label}"
            if self.referenced_id:
                verb = "cancels" if self.type == "NOTAMC" else "replaces"
                type_str += f" ({verb} {self.referenced_id})"
            lines.append(type_str)

        if self.valid_from_formatted or self.valid_to_formatted:
            valid_str = f"Valid: {self.valid_from_formatted or '?'}"
            if self.valid_to_formatted:
                valid_str += f" -> {self.valid_to_formatted}"
            lines.append(valid_str)

        if self.schedule:
            lines.append(f"Schedule: {self.schedule}")

        if self.category:
            q_str = f"Q-Code: {self.category} {self.subject_icao or self.category_label}"
            if self.condition_icao or self.condition_label:
                q_str += f" - {self.condition_icao or self.condition_label}"
            lines.append(q_str)

        if self.lower_alt or self.upper_alt:
            lines.append(f"Limits: {self.lower_alt or '?'} to {self.upper_alt or '?'}")

        if self.decoded_text:
            lines.append(f"\n{self.decoded_text}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        """Compact single-line representation."""
        flag_str = " [PERM]" if self.is_permanent else ""
        return (
            f"<DecodedNotam {self.id or 'N/A'} "
            f"{self.location or 'N/A'} "
            f"{self.category or '-'}{flag_str}>"
        )
