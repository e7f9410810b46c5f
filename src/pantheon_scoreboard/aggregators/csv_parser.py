"""
Split CSV parser.

Score sheets are hand-written and look like:

    PlayerID,Score,GameName,Date,Notes
    Alex E.,2.0,Clue,07/20/2024,
    Nainoa,1,Catan,07/20/2024,won on the last turn, again

Only the first two columns matter. Notes are free text and may contain
commas, so rather than a full CSV grammar each row is split on its first
two commas and everything after the second one is ignored. Quoted fields
are not supported.

Rows that cannot be read are dropped without raising.
"""

from __future__ import annotations

import logging
import math
import re

from ..core.models import ScoreRecord

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")
_SCORE_TOKEN = re.compile(r"-?\d+(\.\d+)?", re.ASCII)


def parse_score(field: str) -> float | None:
    """Pull the first number out of a score field.

    Accepts things like ``"2"``, ``"-1.5"`` or ``"abc2.5xyz"``.

    Returns:
        The score as a float, or None if the field holds no usable number
    """
    match = _SCORE_TOKEN.search(field)
    if not match:
        return None

    score = float(match.group(0))
    if math.isnan(score):
        return None
    return score


def parse_row(line: str) -> ScoreRecord | None:
    """Parse a single data row, or return None if it is malformed."""
    line = line.strip()
    if not line:
        return None

    first_comma = line.find(",")
    if first_comma == -1:
        return None

    second_comma = line.find(",", first_comma + 1)
    if second_comma == -1:
        return None

    player = line[:first_comma].strip()
    if not player:
        return None

    score = parse_score(line[first_comma + 1:second_comma].strip())
    if score is None:
        return None

    return ScoreRecord(player=player, score=score)


def parse_csv(text: str) -> list[ScoreRecord]:
    """
    Convert split CSV text into score records, in file order.

    The first line is always treated as the header and skipped. Empty
    input or a header with no data rows gives an empty list.

    Args:
        text: Raw CSV body

    Returns:
        One ScoreRecord per readable data row
    """
    lines = _LINE_BREAK.split(text.strip())
    if len(lines) <= 1:
        return []

    records = []
    dropped = 0
    for line in lines[1:]:
        record = parse_row(line)
        if record is None:
            if line.strip():
                dropped += 1
            continue
        records.append(record)

    if dropped:
        logger.debug("Skipped %d unreadable rows", dropped)
    return records
