"""Small text-matching routines shared by the FPL and NOTAM decoders."""
import re
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

# A token edge: not preceded/followed by a letter, digit or slash, so "U/S"
# is one token and "RWY 07L/25R" never yields a bare "R".
_TOKEN_START = r'(?<![A-Za-z0-9/])'
_TOKEN_END = r'(?![A-Za-z0-9/])'


def normalize_whitespace(text: str) -> str:
    """Collapse line breaks and runs of whitespace into single spaces."""
    if not text:
        return ''
    return re.sub(r'\s+', ' ', text.replace('\r', ' ').replace('\n', ' ')).strip()


def tokenize_codes(text: str, table: Mapping[str, str]) -> Tuple[List[str], List[str]]:
    """
    Split a run-together code string into known codes, longest match first.

    Two-character codes are tried before single characters so that "E1"
    is never read as "E" followed by "1".

    Args:
        text: Code string such as "SDE2E3FGHIJ1RWY"
        table: Known codes

    Returns:
        Tuple of (known codes, unknown characters) in input order
    """
    max_len = max((len(code) for code in table), default=1)
    known = []
    unknown = []
    i = 0
    while i < len(text):
        for size in range(max_len, 0, -1):
            chunk = text[i:i + size]
            if len(chunk) == size and chunk in table:
                known.append(chunk)
                i += size
                break
        else:
            unknown.append(text[i])
            i += 1
    return known, unknown


def longest_first_pattern(keys: Iterable[str], boundary: bool = True) -> re.Pattern:
    """Compile an alternation of keys, longest first, optionally whole-token only."""
    ordered = sorted(set(keys), key=lambda k: (-len(k), k))
    body = '|'.join(re.escape(k) for k in ordered)
    if boundary:
        return re.compile(f'{_TOKEN_START}(?:{body}){_TOKEN_END}')
    return re.compile(f'(?:{body})')


def expand_phrases(text: str, table: Mapping[str, str], pattern: Optional[re.Pattern] = None) -> str:
    """
    Replace every whole-token key in text by its table value.

    Runs as a single left-to-right pass: at each position the longest key
    wins ("DUE TO" before "DUE"), and substituted text is not rescanned.
    """
    if not text or not table:
        return text
    if pattern is None:
        pattern = longest_first_pattern(table.keys())
    return pattern.sub(lambda m: table[m.group(0)], text)


def partition_by_markers(text: str, markers: Iterable[str], separator: str = '/') -> Dict[str, str]:
    """
    Split text into marker -> value spans.

    Every "MARKER/" occurrence at the start of a token is located, the
    occurrences are sorted by position, and each marker's value is the text
    up to the next occurrence. A marker seen twice keeps its last value.
    """
    result = {}
    if not text:
        return result

    ordered = sorted(set(markers), key=lambda k: (-len(k), k))
    if not ordered:
        return result
    pattern = re.compile(
        r'(?<![A-Za-z0-9/])(' + '|'.join(re.escape(m) for m in ordered) + r')' + re.escape(separator)
    )

    positions = [(m.start(), m.end(), m.group(1)) for m in pattern.finditer(text)]
    positions.sort()

    for idx, (_, value_start, marker) in enumerate(positions):
        value_end = positions[idx + 1][0] if idx + 1 < len(positions) else len(text)
        result[marker] = text[value_start:value_end].strip()

    return result
