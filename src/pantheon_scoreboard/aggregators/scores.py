"""
Score tallying and ranking.

Turns parsed records into per-player totals and totals into a ranked
table. Both steps are pure and work on plain Python containers.
"""

from __future__ import annotations

import unicodedata
from typing import Iterable, Mapping

from ..core.models import RankedEntry, ScoreRecord


def tally_scores(records: Iterable[ScoreRecord]) -> dict[str, float]:
    """Sum scores per player.

    Keys are the exact (trimmed, case-sensitive) PlayerID strings. Negative
    and fractional scores are added like any other; nothing is rounded.
    """
    totals: dict[str, float] = {}
    for record in records:
        totals[record.player] = totals.get(record.player, 0.0) + record.score
    return totals


def collation_key(name: str) -> tuple:
    """Sort key giving human alphabetical order rather than code point order.

    Compared level by level, the way a default locale collation does:
    base letters ignoring accents and case, then accents, then case with
    lowercase first, then the raw string so the order is always total.
    ``["bob", "Ádám", "Bea", "adam"]`` sorts to ``adam, Ádám, Bea, bob``
    where plain ``sorted`` would give ``Bea, adam, bob, Ádám``.
    """
    decomposed = unicodedata.normalize("NFD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (
        base.casefold(),
        decomposed.casefold(),
        tuple(c.isupper() for c in base),
        name,
    )


def rank_totals(totals: Mapping[str, float]) -> list[RankedEntry]:
    """
    Rank players by total score.

    Sort order:
        - Highest total first
        - Equal totals: alphabetical by player name (see collation_key)

    Ranks are 1-based positions; tied totals still get consecutive ranks.
    """
    ordered = sorted(
        totals.items(),
        key=lambda item: (-item[1], collation_key(item[0])),
    )
    return [
        RankedEntry(rank=position, player=player, total=total)
        for position, (player, total) in enumerate(ordered, start=1)
    ]
