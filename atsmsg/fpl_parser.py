"""Parser module for ICAO flight plan (FPL) messages."""
import re
import logging
from typing import Dict, List, Optional

from atsmsg.matching import normalize_whitespace, partition_by_markers
from atsmsg.models.flight_plan import ParsedFlightPlan
from atsmsg.reference import FIELD18_PREFIXES

logger = logging.getLogger(__name__)

# (FPL-7-8-9[-10]-13-15-16-18[-19])
STRICT_FPL_PATTERN = re.compile(
    r'^\(?(FPL)\s*-\s*'
    r'([A-Z0-9]{2,7})\s*-\s*'        # 7  aircraft identification
    r'([IVYZ][SNGMX])\s*-\s*'        # 8  flight rules + type
    r'(.+?)\s*-\s*'                  # 9  number/type/wake, Field 10 may follow
    r'([A-Z]{4}\d{4})\s*-\s*'        # 13 departure + EOBT
    r'(.+?)\s*-\s*'                  # 15 route
    r'(.+?)\s*-\s*'                  # 16 destination + EET + alternates
    r'(.*?)'                         # 18 other information
    r'(?:\s*-\s*(.*?))?\s*\)?$',     # 19 supplementary
    re.IGNORECASE
)

AERODROME_TIME_PATTERN = re.compile(r'^[A-Z]{4}\d{4}', re.IGNORECASE)

UNKNOWN_INDICATOR_PATTERN = re.compile(r'(?<![A-Za-z0-9/])([A-Z]{2,5})/')

MIN_LENIENT_PARTS = 6


def equipment_fragment(field9: str) -> str:
    """Return the Field 10 text carried after "-" in a Field 9 block."""
    if '-' not in field9:
        return ''
    return field9.split('-', 1)[1].strip()


def parse_fpl(raw: str) -> Optional[ParsedFlightPlan]:
    """
    Split a raw FPL message into its numbered ICAO fields.

    Tries the full ICAO structure first, then falls back to splitting on
    hyphens for messages that were reformatted in transit. Input is
    upper-cased first so every field check sees ICAO letter case.

    Args:
        raw: Operator input, possibly spread over several lines

    Returns:
        ParsedFlightPlan, or None when neither strategy recognises the message
    """
    cleaned = normalize_whitespace(raw).upper()
    if not cleaned:
        logger.debug("Empty FPL message")
        return None

    match = STRICT_FPL_PATTERN.match(cleaned)
    if match:
        field9 = match.group(4).strip()
        logger.debug("FPL parsed with strict pattern")
        return ParsedFlightPlan(
            raw=cleaned,
            field3=match.group(1),
            field7=match.group(2),
            field8=match.group(3),
            field9=field9,
            field10=equipment_fragment(field9),
            field13=match.group(5),
            field15=match.group(6).strip(),
            field16=match.group(7).strip(),
            field18=(match.group(8) or '').strip(),
            field19=match.group(9).strip() if match.group(9) else None,
            strategy="strict",
        )

    parts = _lenient_parts(cleaned)
    if len(parts) >= MIN_LENIENT_PARTS:
        logger.debug(f"FPL parsed with lenient hyphen split ({len(parts)} parts)")
        return _from_parts(cleaned, parts)

    logger.warning(f"Could not parse FPL message: {cleaned[:60]}")
    return None


def _lenient_parts(cleaned: str) -> List[str]:
    """Strip "(FPL-" and ")" and split the remainder on hyphens."""
    body = re.sub(r'^\(?\s*FPL\s*-?\s*', '', cleaned, flags=re.IGNORECASE)
    body = re.sub(r'\)?\s*$', '', body)
    return [part.strip() for part in re.split(r'\s*-\s*', body) if part.strip()]


def _from_parts(cleaned: str, parts: List[str]) -> ParsedFlightPlan:
    """Map hyphen-split parts onto fields, detecting a separate Field 10."""
    field10 = ''
    rest = parts[3:]
    # A fourth part that is not AAAA9999 is Field 10 written on its own.
    if len(parts) > MIN_LENIENT_PARTS and not AERODROME_TIME_PATTERN.match(parts[3]):
        field10 = parts[3]
        rest = parts[4:]

    def part(idx: int) -> str:
        return rest[idx] if idx < len(rest) else ''

    return ParsedFlightPlan(
        raw=cleaned,
        field3="FPL",
        field7=parts[0],
        field8=parts[1],
        field9=parts[2],
        field10=field10,
        field13=part(0),
        field15=part(1),
        field16=part(2),
        field18=part(3),
        field19=part(4) or None,
        strategy="lenient",
    )


def parse_field18(text: str) -> Dict[str, str]:
    """
    Build the Field 18 indicator map (e.g. {"PBN": "A1B2", "DOF": "260215"}).

    Args:
        text: Field 18 text

    Returns:
        Dict keyed by indicator without the trailing "/"
    """
    return partition_by_markers(text or '', FIELD18_PREFIXES.keys())


def unknown_field18_indicators(text: str) -> List[str]:
    """Indicators written as "XXX/" at a token start that are not ICAO Field 18 indicators."""
    if not text:
        return []
    unknown = []
    for match in UNKNOWN_INDICATOR_PATTERN.finditer(text):
        indicator = match.group(1)
        if indicator not in FIELD18_PREFIXES and indicator not in unknown:
            unknown.append(indicator)
    return unknown
