"""Parser and text decoder for ICAO NOTAM messages (Annex 15, Doc 8126)."""
import re
import logging
from typing import Dict, List, Optional

from atsmsg.abbreviations import ABBREVIATIONS
from atsmsg.matching import expand_phrases, longest_first_pattern, normalize_whitespace
from atsmsg.models.notam import DecodedNotam, QLine
from atsmsg.reference import (
    QCODE_CONDITION,
    QCODE_CONDITIONS_ICAO,
    QCODE_SUBJECT,
    QCODE_SUBJECTS_ICAO,
)

logger = logging.getLogger(__name__)

IDENTIFIER_PATTERN = re.compile(
    r'\(?([A-Z])(\d{4})/(\d{2})\s+(NOTAM[NRC])(?:\s+([A-Z]\d{4}/\d{2}))?'
)
SECTION_PATTERN = re.compile(r'^([QA-G])\)\s*(.*)$')

# A lettered section starting part-way through a line ("A) OOSA B) 2602151200")
EMBEDDED_SECTION = re.compile(r'\s+(?=[QA-G]\)\s*\S)')
# Inside E) free text only F) and G) may follow
EMBEDDED_LIMIT = re.compile(r'\s+(?=[FG]\)\s*\S)')

DATE_TIME_PATTERN = re.compile(r'^(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})(?:\s*(EST))?$', re.IGNORECASE)

RUNWAY_PAIR_PATTERN = re.compile(r'\bRWY\s+(\d{2}[LRC]?)\s*/\s*(\d{2}[LRC]?)\b', re.IGNORECASE)
RUNWAY_PATTERN = re.compile(r'\bRWY\s+(\d{2}[LRC]?)\b', re.IGNORECASE)

TYPE_LABELS = {
    "NOTAMN": "New NOTAM",
    "NOTAMR": "Replacement NOTAM",
    "NOTAMC": "Cancellation NOTAM",
}

DATE_LITERALS = {
    "PERM": "Permanent",
    "UFN": "Until Further Notice",
    "EST": "Estimated",
}

MONTH_NAMES = ("", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

CATEGORY_COLORS = (
    (("QW", "QR"), "#ef4444"),  # warnings / restrictions
    (("QI", "QF"), "#f59e0b"),  # instrument / facility
    (("QM", "QL"), "#8b5cf6"),  # movement area / lighting
    (("QA", "QO"), "#10b981"),  # aerodrome / obstacle
    (("QP", "QS"), "#06b6d4"),  # procedures / routes
)
DEFAULT_CATEGORY_COLOR = "#0c9ce4"

_ABBREVIATION_PATTERN = longest_first_pattern(ABBREVIATIONS.keys())


def format_notam_date(value: str) -> str:
    """
    Format a NOTAM date-time group for display.

    Args:
        value: "YYMMDDHHMM" (optionally followed by "EST"), "PERM", "UFN" or "EST"

    Returns:
        e.g. "15 Feb 2026 12:00 UTC"; unrecognised values are returned unchanged
    """
    if not value:
        return ""

    text = value.strip()
    literal = DATE_LITERALS.get(text.upper())
    if literal:
        return literal

    match = DATE_TIME_PATTERN.match(text)
    if not match:
        return text

    year, month, day, hour, minute, estimated = match.groups()
    month_index = int(month)
    month_name = MONTH_NAMES[month_index] if 1 <= month_index <= 12 else month
    formatted = f"{day} {month_name} 20{year} {hour}:{minute} UTC"
    if estimated:
        formatted += " (estimated)"
    return formatted


def decode_notam_text(text: str) -> str:
    """
    Expand ICAO abbreviations in NOTAM free text.

    Runway designators are rewritten first ("RWY 07/25" -> "Runway 07/25"),
    then every whole-token abbreviation is expanded in one pass, longest
    first, so "DUE TO" wins over "DUE".
    """
    if not text:
        return ""

    decoded = RUNWAY_PAIR_PATTERN.sub(r'Runway \1/\2', text)
    decoded = RUNWAY_PATTERN.sub(r'Runway \1', decoded)
    decoded = expand_phrases(decoded, ABBREVIATIONS, _ABBREVIATION_PATTERN)
    return normalize_whitespace(decoded)


def notam_category_color(q_code: str) -> str:
    """Display colour for a Q-code subject group."""
    if not q_code:
        return DEFAULT_CATEGORY_COLOR
    for prefixes, color in CATEGORY_COLORS:
        if any(prefix in q_code for prefix in prefixes):
            return color
    return DEFAULT_CATEGORY_COLOR


def _strip_closing(value: str) -> str:
    """Drop the message's closing ")" when it is unbalanced in value."""
    value = value.strip()
    if value.endswith(')') and value.count(')') > value.count('('):
        return value[:-1].rstrip()
    return value


def _split_line(line: str) -> List[str]:
    """Split a line carrying several lettered sections into one segment per section."""
    segments = []
    rest = line
    while rest:
        pattern = EMBEDDED_LIMIT if rest.startswith('E)') else EMBEDDED_SECTION
        match = pattern.search(rest)
        if not match:
            segments.append(rest)
            break
        segments.append(rest[:match.start()])
        rest = rest[match.end():]
    return segments


def parse_q_line(text: str) -> Optional[QLine]:
    """Split a Q) line into its eight parts; None when fewer than eight are present."""
    parts = [part.strip() for part in text.split('/')]
    if len(parts) < 8:
        logger.debug(f"Ignoring Q) line with {len(parts)} parts: {text}")
        return None

    return QLine(
        fir=parts[0],
        q_code=parts[1].upper(),
        traffic=parts[2],
        purpose=parts[3],
        scope=parts[4],
        lower_alt=parts[5] or "000",
        upper_alt=parts[6] or "999",
        coordinates=parts[7],
    )


def _q_code_labels(q_code: str) -> Dict[str, str]:
    """Single-letter group labels plus the two-letter ICAO subject/condition."""
    subject = q_code[2] if len(q_code) >= 4 else ""
    condition = q_code[4] if len(q_code) >= 5 else ""
    return {
        'category': q_code,
        'category_label': QCODE_SUBJECT.get(subject) or q_code,
        'condition_label': QCODE_CONDITION.get(condition, ""),
        'subject_icao': QCODE_SUBJECTS_ICAO.get(q_code[1:3], "") if len(q_code) >= 3 else "",
        'condition_icao': QCODE_CONDITIONS_ICAO.get(q_code[3:5], "") if len(q_code) >= 5 else "",
    }


def decode_notam(raw: str) -> DecodedNotam:
    """
    Decode a raw NOTAM into a DecodedNotam.

    Never raises on malformed input: sections that cannot be found are left
    empty.

    Args:
        raw: NOTAM text, one lettered section per line or several per line

    Returns:
        DecodedNotam
    """
    fields: Dict[str, object] = {}
    e_lines: List[str] = []
    current = ""

    for raw_line in (raw or '').strip().splitlines():
        line = raw_line.strip()
        if not line:
            continue

        for segment in _split_line(line):
            segment = segment.strip()
            section = SECTION_PATTERN.match(segment)

            if not section and 'id' not in fields:
                id_match = IDENTIFIER_PATTERN.search(segment)
                if id_match:
                    series, number, year, notam_type, referenced = id_match.groups()
                    fields.update(
                        id=f"{series}{number}/{year}", series=series, number=number, year=year,
                        type=notam_type, type_label=TYPE_LABELS[notam_type],
                        referenced_id=referenced or "",
                    )
                    current = ""
                    continue

            if not section:
                # Continuation of E) free text up to the closing parenthesis
                if current == "E":
                    e_lines.append(segment)
                    if _strip_closing(segment) != segment:
                        current = ""
                continue

            letter, value = section.group(1), section.group(2).strip()
            current = letter
            if letter == "E":
                e_lines = [value]
                if _strip_closing(value) != value:
                    current = ""
                continue

            value = _strip_closing(value)
            if letter == "Q":
                q_line = parse_q_line(value)
                if q_line:
                    fields['q_line'] = q_line
                    fields.update(_q_code_labels(q_line.q_code))
                    fields['lower_alt'] = q_line.lower_alt
                    fields['upper_alt'] = q_line.upper_alt
            elif letter == "A":
                fields['location'] = value
            elif letter == "B":
                fields['valid_from'] = value
                fields['valid_from_formatted'] = format_notam_date(value)
            elif letter == "C":
                fields['valid_to'] = value
                fields['valid_to_formatted'] = format_notam_date(value)
            elif letter == "D":
                fields['schedule'] = value
            elif letter == "F":
                fields['lower_alt'] = value
            elif letter == "G":
                fields['upper_alt'] = value

    raw_text = _strip_closing(' '.join(e_lines))
    notam = DecodedNotam(raw_text=raw_text, decoded_text=decode_notam_text(raw_text), **fields)
    logger.debug(f"Decoded {notam!r}")
    return notam
