"""Consistency rules between Field 8, Field 10 and Field 18."""
import logging
from typing import Dict, List

from atsmsg.matching import tokenize_codes
from atsmsg.models.finding import Finding, Severity
from atsmsg.reference import EQUIPMENT_COM_NAV

logger = logging.getLogger(__name__)

CROSS_CHECK = "Cross-check"
FIELD18 = "Field 18"


def com_nav_codes(field10: str) -> List[str]:
    """Known COM/NAV codes declared before the "/" in Field 10."""
    com_nav = (field10 or '').upper().partition('/')[0].strip()
    known, _ = tokenize_codes(com_nav, EQUIPMENT_COM_NAV)
    return known


def cross_check(field8: str, field10: str, field18_map: Dict[str, str],
                field9: str = "", field13: str = "", field16: str = "") -> List[Finding]:
    """
    Apply the cross-field rules.

    Global ICAO requirements are errors; Oman FIR recommendations are
    warnings.

    Args:
        field8: Flight rules + type ("" when unknown)
        field10: Equipment, separate or recovered from Field 9 ("" when unknown)
        field18_map: Field 18 indicator map
        field9: Field 9 text, checked for ZZZZ
        field13: Field 13 text, checked for ZZZZ
        field16: Field 16 text, checked for ZZZZ

    Returns:
        List of findings, one per broken rule
    """
    results = []
    rules = (field8 or '')[:1].upper()
    codes = com_nav_codes(field10)

    if rules == 'I' and codes == ['N']:
        results.append(Finding(CROSS_CHECK, Severity.ERROR,
                               "IFR flight rules but no COM/NAV equipment (Field 10 = N)"))

    if 'R' in codes and 'PBN' not in field18_map:
        results.append(Finding(CROSS_CHECK, Severity.ERROR,
                               "Field 10 includes R (PBN approved) but Field 18 has no PBN/ entry",
                               "ICAO Doc 4444: If R is filed in Field 10, PBN/ must appear in Field 18"))

    if 'Z' in codes and not any(key in field18_map for key in ('COM', 'NAV', 'DAT')):
        results.append(Finding(CROSS_CHECK, Severity.ERROR,
                               "Field 10 includes Z but Field 18 has no COM/, NAV/, or DAT/",
                               "ICAO Doc 4444: Z requires specification in Field 18"))

    results.extend(_designator_checks(field9, field13, field16, field18_map))

    if 'REG' not in field18_map:
        results.append(Finding(FIELD18, Severity.WARNING,
                               "REG/ (registration) is recommended for Oman FIR operations"))
    if 'DOF' not in field18_map:
        results.append(Finding(FIELD18, Severity.WARNING, "DOF/ (date of flight) is recommended"))

    if rules == 'I' and 'PBN' not in field18_map:
        results.append(Finding(FIELD18, Severity.WARNING,
                               "Oman CAR-175: PBN/ is recommended for IFR flights in Muscat FIR"))

    if results:
        logger.debug(f"Cross-field rules raised {len(results)} finding(s)")
    return results


def _designator_checks(field9: str, field13: str, field16: str,
                       field18_map: Dict[str, str]) -> List[Finding]:
    """ZZZZ in Fields 9, 13 and 16 must be explained in Field 18."""
    results = []
    aircraft_type = (field9 or '').partition('-')[0].strip().upper()

    if 'ZZZZ/' in aircraft_type and 'TYP' not in field18_map:
        results.append(Finding(CROSS_CHECK, Severity.ERROR,
                               "Field 9 type is ZZZZ but Field 18 has no TYP/ entry"))
    if (field13 or '').upper().startswith('ZZZZ') and 'DEP' not in field18_map:
        results.append(Finding(CROSS_CHECK, Severity.ERROR,
                               "Field 13 departure is ZZZZ but Field 18 has no DEP/ entry"))
    if (field16 or '').upper().startswith('ZZZZ') and 'DEST' not in field18_map:
        results.append(Finding(CROSS_CHECK, Severity.ERROR,
                               "Field 16 destination is ZZZZ but Field 18 has no DEST/ entry"))
    return results
