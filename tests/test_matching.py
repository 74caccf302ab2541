"""Unit tests for the shared text-matching routines."""
from atsmsg.matching import (
    expand_phrases,
    longest_first_pattern,
    normalize_whitespace,
    partition_by_markers,
    tokenize_codes,
)
from atsmsg.reference import EQUIPMENT_COM_NAV, EQUIPMENT_SSR


class TestNormalizeWhitespace:

    def test_collapses_line_breaks_and_runs(self):
        assert normalize_whitespace("(FPL-ABC\r\n  -IS\t-B738/M )") == "(FPL-ABC -IS -B738/M )"

    def test_empty(self):
        assert normalize_whitespace("") == ""
        assert normalize_whitespace(None) == ""


class TestTokenizeCodes:

    def test_two_character_codes_win(self):
        known, unknown = tokenize_codes("SDE2E3FGHIJ1RWY", EQUIPMENT_COM_NAV)

        assert known == ["S", "D", "E2", "E3", "F", "G", "H", "I", "J1", "R", "W", "Y"]
        assert unknown == []

    def test_unknown_characters_reported_one_by_one(self):
        known, unknown = tokenize_codes("SQ9", EQUIPMENT_COM_NAV)

        assert known == ["S"]
        assert unknown == ["Q", "9"]

    def test_surveillance_codes(self):
        known, unknown = tokenize_codes("LB1B2D1", EQUIPMENT_SSR)

        assert known == ["L", "B1", "B2", "D1"]
        assert unknown == []

    def test_empty_text(self):
        assert tokenize_codes("", EQUIPMENT_COM_NAV) == ([], [])


class TestExpandPhrases:

    TABLE = {
        "DUE": "Due to",
        "DUE TO": "Due to",
        "WX": "Weather",
        "M": "Metres",
        "MAINT": "Maintenance",
        "U/S": "Unserviceable",
        "S": "South",
        "X": "CLSD",
        "CLSD": "Closed",
    }

    def test_longest_phrase_wins(self):
        assert expand_phrases("DUE TO WX", self.TABLE) == "Due to Weather"

    def test_whole_tokens_only(self):
        assert expand_phrases("MAINT 500 M", self.TABLE) == "Maintenance 500 Metres"
        assert expand_phrases("MAINTX", self.TABLE) == "MAINTX"

    def test_slash_token_is_atomic(self):
        assert expand_phrases("ILS U/S", self.TABLE) == "ILS Unserviceable"

    def test_substituted_text_not_rescanned(self):
        assert expand_phrases("X", self.TABLE) == "CLSD"

    def test_precompiled_pattern(self):
        pattern = longest_first_pattern(self.TABLE.keys())
        assert expand_phrases("WX DUE", self.TABLE, pattern) == "Weather Due to"

    def test_empty_text(self):
        assert expand_phrases("", self.TABLE) == ""


class TestPartitionByMarkers:

    MARKERS = ["PBN", "DOF", "REG", "DEP", "DEST", "RMK"]

    def test_spans_between_markers(self):
        result = partition_by_markers("PBN/A1B2 DOF/260215 REG/A4OEE", self.MARKERS)

        assert result == {"PBN": "A1B2", "DOF": "260215", "REG": "A4OEE"}

    def test_marker_must_start_a_token(self):
        assert partition_by_markers("XREG/ABC", self.MARKERS) == {}

    def test_longer_marker_not_shadowed(self):
        assert partition_by_markers("DEST/OOSA DEP/OMDB", self.MARKERS) == {
            "DEST": "OOSA",
            "DEP": "OMDB",
        }

    def test_later_duplicate_wins(self):
        assert partition_by_markers("RMK/FIRST RMK/SECOND", self.MARKERS) == {"RMK": "SECOND"}

    def test_text_before_first_marker_is_dropped(self):
        assert partition_by_markers("HELLO DOF/260215", self.MARKERS) == {"DOF": "260215"}

    def test_empty(self):
        assert partition_by_markers("", self.MARKERS) == {}
