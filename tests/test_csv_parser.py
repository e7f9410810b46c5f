"""
Tests for the split CSV parser.

Rows are split on their first two commas; anything unreadable is dropped
without raising.
"""

import pytest

from pantheon_scoreboard.aggregators import parse_csv, parse_row, parse_score
from pantheon_scoreboard.core.models import ScoreRecord


def pairs(records):
    return [(r.player, r.score) for r in records]


class TestParseCsv:
    def test_empty_text(self):
        assert parse_csv("") == []
        assert parse_csv("   \n  \r\n") == []

    def test_header_only(self):
        assert parse_csv("PlayerID,Score,GameName,Date,Notes") == []
        assert parse_csv("PlayerID,Score,GameName,Date,Notes\n") == []

    def test_basic_rows(self):
        text = "PlayerID,Score,GameName\nAlex E.,2.0,Clue\nNainoa,1,Catan\n"
        assert pairs(parse_csv(text)) == [("Alex E.", 2.0), ("Nainoa", 1.0)]

    def test_first_line_always_skipped(self):
        # Even a line that looks like data is treated as the header.
        text = "Alex E.,5,Clue\nNainoa,1,Catan"
        assert pairs(parse_csv(text)) == [("Nainoa", 1.0)]

    def test_crlf_line_endings(self):
        text = "PlayerID,Score,Game\r\nAlex E.,2,Clue\r\nIsabelle,3,Azul\r\n"
        assert pairs(parse_csv(text)) == [("Alex E.", 2.0), ("Isabelle", 3.0)]

    def test_blank_lines_ignored(self):
        text = "PlayerID,Score,Game\n\nAlex E.,2,Clue\n   \nIsabelle,3,Azul"
        assert pairs(parse_csv(text)) == [("Alex E.", 2.0), ("Isabelle", 3.0)]

    def test_notes_with_commas_ignored(self):
        text = "PlayerID,Score,Game,Date,Notes\nNainoa,3,Catan,01/20/2024,longest road, again, twice"
        assert pairs(parse_csv(text)) == [("Nainoa", 3.0)]

    def test_malformed_rows_dropped(self):
        text = "\n".join(
            [
                "PlayerID,Score,Game",
                "X",
                "Y,",
                "Z,abc2.5xyz,note",
                ",4,Clue",
                "W,7",
                "V,n/a,Clue",
            ]
        )
        assert pairs(parse_csv(text)) == [("Z", 2.5)]

    def test_player_and_score_trimmed(self):
        text = "PlayerID,Score,Game\n   Alex E.  ,  -1.5 ,Clue"
        assert pairs(parse_csv(text)) == [("Alex E.", -1.5)]

    def test_preserves_input_order_and_duplicates(self):
        text = "h,h,h\nB,1,x\nA,2,x\nB,3,x"
        assert pairs(parse_csv(text)) == [("B", 1.0), ("A", 2.0), ("B", 3.0)]

    def test_returns_score_records(self):
        records = parse_csv("h,h,h\nA,1,x")
        assert records == [ScoreRecord(player="A", score=1.0)]


class TestParseScore:
    @pytest.mark.parametrize(
        "field, expected",
        [
            ("2", 2.0),
            ("2.0", 2.0),
            ("-3", -3.0),
            ("-0.25", -0.25),
            ("abc2.5xyz", 2.5),
            ("1.5 and 7", 1.5),
            ("2.", 2.0),
            (".5", 5.0),
        ],
    )
    def test_extracts_first_number(self, field, expected):
        assert parse_score(field) == expected

    @pytest.mark.parametrize("field", ["", "abc", "-", ".", "١٢"])
    def test_no_number(self, field):
        assert parse_score(field) is None


class TestParseRow:
    def test_needs_two_commas(self):
        assert parse_row("A,1") is None
        assert parse_row("A,1,") == ScoreRecord(player="A", score=1.0)

    def test_blank_line(self):
        assert parse_row("   ") is None
