"""Per-field validators for ICAO flight plan messages (Doc 4444 Appendix 2)."""
import re
import logging
from datetime import datetime
from typing import Dict, List, Optional

from atsmsg.config import Config
from atsmsg.fpl_parser import parse_field18, unknown_field18_indicators
from atsmsg.matching import tokenize_codes
from atsmsg.models.finding import Finding, Severity
from atsmsg.reference import (
    AIRCRAFT_TYPES,
    COMMON_AIRPORTS,
    EQUIPMENT_COM_NAV,
    EQUIPMENT_SSR,
    FIELD18_PREFIXES,
    FLIGHT_RULES,
    FLIGHT_TYPES,
    OMAN_AIRPORTS,
    PBN_CODES,
    PERFORMANCE_CATEGORIES,
    STS_VALUES,
    WAKE_CATEGORIES,
)

logger = logging.getLogger(__name__)

CALLSIGN_PATTERN = re.compile(r'^[A-Z0-9]+$')
ICAO_PATTERN = re.compile(r'^[A-Z]{4}$')
TIME_PATTERN = re.compile(r'^\d{4}$')

TYPE_WAKE_STRICT = re.compile(r'^(\d{0,2})([A-Z0-9]{2,4})/([LMHJ])$')
TYPE_WAKE_LENIENT = re.compile(r'([A-Z0-9]{2,4})/([LMHJ])')

SPEED_LEVEL_STRICT = re.compile(r'^([NMK]\d{3,4})(F\d{3}|S\d{4}|A\d{3}|VFR)(?:\s+(.*))?$')
SPEED_LEVEL_LENIENT = re.compile(r'^([NMK]\d{3,4})\s*(F\d{3}|S\d{4}|A\d{3}|VFR)(?:\s+(.*))?$')
AIRWAY_PATTERN = re.compile(r'^[A-Z]{1,2}\d{1,4}$')
ALTERNATE_PATTERN = re.compile(r'\b[A-Z]{4}\b')

DOF_PATTERN = re.compile(r'^\d{6}$')


def _finding(field: str, severity: Severity, message: str, detail: Optional[str] = None) -> Finding:
    return Finding(field=field, severity=severity, message=message, detail=detail)


def _aerodrome_label(icao: str) -> str:
    name = COMMON_AIRPORTS.get(icao)
    return f"{icao} ({name})" if name else icao


def validate_field7(callsign: str) -> List[Finding]:
    """Aircraft identification: 2-7 alphanumeric characters."""
    field = "Field 7"
    if not callsign:
        return [_finding(field, Severity.ERROR, "Aircraft identification is missing")]

    results = []
    if not 2 <= len(callsign) <= 7:
        results.append(_finding(field, Severity.ERROR, f'Callsign "{callsign}" must be 2-7 characters',
                                "ICAO Doc 4444 requires 2-7 alphanumeric characters"))
    if not CALLSIGN_PATTERN.match(callsign):
        results.append(_finding(field, Severity.ERROR, "Callsign must be alphanumeric only"))
    if not results:
        results.append(_finding(field, Severity.SUCCESS, f"Aircraft ID: {callsign}"))
    return results


def validate_field8(field8: str) -> List[Finding]:
    """Flight rules (I, V, Y, Z) followed by type of flight (S, N, G, M, X)."""
    field = "Field 8"
    if not field8 or len(field8) < 2:
        return [_finding(field, Severity.ERROR, "Flight rules and type are missing")]

    rules, flight_type = field8[0].upper(), field8[1].upper()
    results = []

    if rules in FLIGHT_RULES:
        results.append(_finding(field, Severity.SUCCESS, f"Rules: {FLIGHT_RULES[rules]}"))
    else:
        results.append(_finding(field, Severity.ERROR, f'Invalid flight rules "{rules}"',
                                "Must be I, V, Y, or Z"))

    if flight_type in FLIGHT_TYPES:
        results.append(_finding(field, Severity.SUCCESS, f"Type: {FLIGHT_TYPES[flight_type]}"))
    else:
        results.append(_finding(field, Severity.ERROR, f'Invalid flight type "{flight_type}"',
                                "Must be S, N, G, M, or X"))

    return results


def validate_field9(field9: str) -> List[Finding]:
    """
    Number, aircraft type and wake turbulence category.

    Accepts "B738/M" or "2B738/M"; when Field 10 was written inside the
    same block ("B738/M-SDE2E3FGHIJ1RWY/LB1D1") the equipment part is
    validated as Field 10.

    Args:
        field9: Field 9 text, possibly with attached equipment

    Returns:
        List of findings for Field 9 (and Field 10 when attached)
    """
    field = "Field 9"
    if not field9:
        return [_finding(field, Severity.ERROR, "Number, type, and wake category are missing")]

    block, dash, equipment = field9.partition('-')
    block = block.strip()
    results = []

    match = TYPE_WAKE_STRICT.match(block)
    if match:
        count, ac_type, wake = match.groups()
        if count and not 1 <= int(count) <= 99:
            results.append(_finding(field, Severity.ERROR, f"Invalid number of aircraft: {count}"))
        results.extend(_type_and_wake(ac_type, wake))
    else:
        match = TYPE_WAKE_LENIENT.search(block)
        if match:
            logger.debug(f"Field 9 matched leniently: {block}")
            results.extend(_type_and_wake(*match.groups()))
        else:
            results.append(_finding(field, Severity.ERROR, f'Cannot parse type/wake: "{block}"',
                                    "Expected format: TYPE/WAKE (e.g., B738/M)"))

    # Attached equipment is checked even when type/wake is unreadable
    if dash:
        results.extend(validate_field10(equipment.strip()))

    return results


def _type_and_wake(ac_type: str, wake: str) -> List[Finding]:
    field = "Field 9"
    results = []
    known = AIRCRAFT_TYPES.get(ac_type)

    if ac_type == "ZZZZ":
        results.append(_finding(field, Severity.INFO, "Type: ZZZZ (designator given in TYP/)"))
    elif known:
        results.append(_finding(field, Severity.SUCCESS, f"Type: {known['name']}"))
        if known['wake'] != wake:
            results.append(_finding(field, Severity.WARNING,
                                    f'Wake category "{wake}" may not match {ac_type} '
                                    f'(expected {known["wake"]})'))
    else:
        results.append(_finding(field, Severity.INFO, f"Type: {ac_type} (not in common database)"))

    category = WAKE_CATEGORIES[wake]
    results.append(_finding(field, Severity.SUCCESS, f"Wake: {category['label']} ({category['mtow']})"))
    return results


def validate_field10(equipment: str) -> List[Finding]:
    """Equipment: COM/NAV codes, "/", surveillance codes."""
    field = "Field 10"
    if not equipment:
        return [_finding(field, Severity.WARNING, "Equipment field is empty")]

    com_nav, _, ssr = equipment.upper().partition('/')
    com_nav, ssr = com_nav.strip(), ssr.strip()
    results = []

    if com_nav == "N":
        results.append(_finding(field, Severity.INFO, "No COM/NAV equipment"))
    elif com_nav:
        results.extend(_code_findings("COM/NAV", com_nav, EQUIPMENT_COM_NAV))

    if ssr == "N":
        results.append(_finding(field, Severity.WARNING, "No surveillance equipment declared"))
    elif ssr:
        results.extend(_code_findings("SSR", ssr, EQUIPMENT_SSR))

    return results


def _code_findings(label: str, codes: str, table: Dict[str, str]) -> List[Finding]:
    known, unknown = tokenize_codes(codes, table)
    results = []
    if known:
        results.append(_finding("Field 10", Severity.SUCCESS, f"{label}: {', '.join(known)}"))
    # One finding per unrecognised character
    for code in unknown:
        results.append(_finding("Field 10", Severity.WARNING, f"Unknown {label} code: {code}"))
    return results


def _time_parts(value: str):
    return int(value[:2]), int(value[2:4])


def validate_field13(field13: str) -> List[Finding]:
    """Departure aerodrome and EOBT (HHMM)."""
    field = "Field 13"
    if not field13 or len(field13) < 8:
        return [_finding(field, Severity.ERROR, "Departure aerodrome and EOBT are missing",
                         "Format: ICAO code (4 chars) + EOBT (4 digits HHMM)")]

    dep_icao = field13[:4].upper()
    eobt = field13[4:8]
    results = []

    if ICAO_PATTERN.match(dep_icao):
        results.append(_finding(field, Severity.SUCCESS, f"Departure: {_aerodrome_label(dep_icao)}"))
    else:
        results.append(_finding(field, Severity.ERROR, f'Invalid departure ICAO: "{dep_icao}"'))

    if not TIME_PATTERN.match(eobt):
        results.append(_finding(field, Severity.ERROR, f'Invalid EOBT: "{eobt}"', "Must be 4 digits HHMM"))
    else:
        hours, minutes = _time_parts(eobt)
        if hours > 23 or minutes > 59:
            results.append(_finding(field, Severity.ERROR, f"Invalid EOBT time: {eobt}"))
        else:
            results.append(_finding(field, Severity.SUCCESS, f"EOBT: {eobt}Z"))

    if dep_icao in OMAN_AIRPORTS:
        results.append(_finding(
            field, Severity.INFO,
            f"Oman CAR-172: FPL must be filed at least {Config.OMAN_PREFILING_MINUTES} minutes "
            f"before EOBT for IFR flights in Muscat FIR"))

    return results


def validate_field15(field15: str) -> List[Finding]:
    """
    Cruising speed, cruising level and route.

    A missing or unreadable speed/level group is a warning; the route
    tokens are still checked.
    """
    field = "Field 15"
    if not field15:
        return [_finding(field, Severity.ERROR, "Route information is missing")]

    results = []
    match = SPEED_LEVEL_STRICT.match(field15) or SPEED_LEVEL_LENIENT.match(field15)
    if not match:
        results.append(_finding(field, Severity.WARNING, "Could not parse speed/level prefix",
                                f"Raw: {field15[:30]}..."))
        results.extend(validate_route(field15))
        return results

    speed, level, route = match.groups()
    results.extend(_speed_findings(speed))
    results.extend(_level_findings(level))
    results.extend(validate_route(route or ''))
    return results


def _speed_findings(speed: str) -> List[Finding]:
    field = "Field 15"
    value = int(speed[1:])
    if speed.startswith('N'):
        if not Config.MIN_TAS_KNOTS <= value <= Config.MAX_TAS_KNOTS:
            return [_finding(field, Severity.WARNING, f"Unusual speed: {speed} ({value} knots)")]
        return [_finding(field, Severity.SUCCESS, f"Speed: {value} knots TAS")]
    if speed.startswith('M'):
        return [_finding(field, Severity.SUCCESS, f"Speed: Mach {value / 100:.2f}")]
    return [_finding(field, Severity.SUCCESS, f"Speed: {value} km/h")]


def _level_findings(level: str) -> List[Finding]:
    field = "Field 15"
    if level == 'VFR':
        return [_finding(field, Severity.SUCCESS, "Level: VFR")]

    value = int(level[1:])
    if level.startswith('F'):
        results = [_finding(field, Severity.SUCCESS, f"Level: FL{value:03d} ({value * 100:,} ft)")]
        if value > Config.MAX_FLIGHT_LEVEL:
            results.append(_finding(field, Severity.WARNING, f"FL{value} is unusually high"))
        return results
    if level.startswith('A'):
        return [_finding(field, Severity.SUCCESS, f"Altitude: {value * 100:,} ft")]
    # S: standard metric level in tens of metres
    return [_finding(field, Severity.SUCCESS, f"Standard metric level: {level} ({value * 10:,} m)")]


def validate_route(route: str) -> List[Finding]:
    """Classify route tokens into DCT segments and airways."""
    field = "Field 15"
    segments = route.split()
    if not segments:
        return []

    results = []
    if 'DCT' in segments:
        results.append(_finding(field, Severity.INFO, "Route includes direct (DCT) segments"))
    if any(AIRWAY_PATTERN.match(seg) for seg in segments if seg != 'DCT'):
        results.append(_finding(field, Severity.INFO, "Route includes airway segments"))
    results.append(_finding(field, Severity.SUCCESS, f"Route: {len(segments)} segments"))
    return results


def validate_field16(field16: str) -> List[Finding]:
    """Destination aerodrome, total EET and alternate aerodromes."""
    field = "Field 16"
    if not field16 or len(field16) < 8:
        return [_finding(field, Severity.ERROR, "Destination and EET are missing",
                         "Format: ICAO code + 4-digit EET + optional alternates")]

    dest_icao = field16[:4].upper()
    eet = field16[4:8]
    results = []

    if ICAO_PATTERN.match(dest_icao):
        results.append(_finding(field, Severity.SUCCESS, f"Destination: {_aerodrome_label(dest_icao)}"))
    else:
        results.append(_finding(field, Severity.ERROR, f'Invalid destination ICAO: "{dest_icao}"'))

    if not TIME_PATTERN.match(eet):
        results.append(_finding(field, Severity.ERROR, f'Invalid EET: "{eet}"'))
    else:
        hours, minutes = _time_parts(eet)
        if minutes > 59:
            results.append(_finding(field, Severity.ERROR, f"Invalid EET minutes: {eet}"))
        else:
            results.append(_finding(field, Severity.SUCCESS, f"Total EET: {hours}h {minutes}m"))

    for alternate in ALTERNATE_PATTERN.findall(field16[8:].upper()):
        results.append(_finding(field, Severity.SUCCESS, f"Alternate: {_aerodrome_label(alternate)}"))

    return results


def validate_field18(text: str, field18_map: Optional[Dict[str, str]] = None) -> List[Finding]:
    """
    Validate Field 18 sub-fields.

    Args:
        text: Raw Field 18 text, used to report unknown indicators
        field18_map: Indicator map already built from text, if any

    Returns:
        List of Field 18 findings (cross-field rules are not applied here)
    """
    field = "Field 18"
    if field18_map is None:
        field18_map = parse_field18(text)

    results = [
        _finding(field, Severity.WARNING, f"Unknown indicator: {indicator}/")
        for indicator in unknown_field18_indicators(text)
    ]

    if not field18_map:
        results.append(_finding(field, Severity.WARNING, "Field 18 is empty"))
        return results

    checks = {}
    if 'PBN' in field18_map:
        checks['PBN'] = _pbn_findings(field18_map['PBN'])
    if 'DOF' in field18_map:
        checks['DOF'] = _dof_findings(field18_map['DOF'])
    if 'PER' in field18_map:
        checks['PER'] = _per_findings(field18_map['PER'])
    if 'STS' in field18_map:
        checks['STS'] = _sts_findings(field18_map['STS'])

    # Sub-fields failing their own check are not echoed as success
    for indicator, value in field18_map.items():
        if any(f.severity == Severity.ERROR for f in checks.get(indicator, ())):
            continue
        results.append(_finding(field, Severity.SUCCESS, f"{FIELD18_PREFIXES[indicator]['name']}: {value}"))

    for findings in checks.values():
        results.extend(findings)

    return results


def _pbn_findings(pbn: str) -> List[Finding]:
    field = "Field 18"
    compact = ''.join(pbn.split())
    if not compact:
        return [_finding(field, Severity.WARNING, "PBN/ contains no designators")]

    valid, unknown = tokenize_codes(compact, PBN_CODES)
    results = [_finding(field, Severity.WARNING, f"Unknown PBN code: {code}") for code in unknown]
    if valid:
        described = ', '.join(f"{code} ({PBN_CODES[code]})" for code in valid)
        results.append(_finding(field, Severity.INFO, f"PBN capabilities: {described}"))
    return results


def _per_findings(per: str) -> List[Finding]:
    if per in PERFORMANCE_CATEGORIES:
        return []
    return [_finding("Field 18", Severity.ERROR, f'Invalid performance category: "{per}"',
                     "Must be A, B, C, D, or E")]


def _dof_findings(dof: str) -> List[Finding]:
    field = "Field 18"
    if not DOF_PATTERN.match(dof):
        return [_finding(field, Severity.ERROR, f'Invalid DOF format: "{dof}"',
                         "Must be YYMMDD (e.g., 260215)")]
    try:
        datetime.strptime(dof, '%y%m%d')
    except ValueError:
        return [_finding(field, Severity.ERROR, f"DOF/{dof} is not a valid calendar date")]
    return []


def _sts_findings(sts: str) -> List[Finding]:
    field = "Field 18"
    results = []
    for value in sts.split():
        if value in STS_VALUES:
            results.append(_finding(field, Severity.INFO, f"Status: {value} ({STS_VALUES[value]})"))
        else:
            results.append(_finding(field, Severity.WARNING, f"Unknown STS/ value: {value}"))
    return results
