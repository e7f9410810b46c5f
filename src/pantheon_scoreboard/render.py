"""
Plain-text rendering for the CLI.

Nicknames from ``player_aliases`` are applied here and only here; they
never affect totals or sort order.
"""

from __future__ import annotations

from typing import Mapping

from .core.models import (
    RankedEntry,
    ScoreboardTable,
    SplitStatus,
    SplitSummary,
    TableStatus,
)

NO_SPLITS_MESSAGE = "No splits recorded yet."

_STATUS_LABELS = {
    SplitStatus.in_progress: "In progress",
    SplitStatus.off_split: "Off split",
}


def display_name(player: str, aliases: Mapping[str, str]) -> str:
    """Return the player's nickname if one exists, otherwise the PlayerID."""
    return aliases.get(player) or player


def format_score(total: float) -> str:
    """``2.0`` -> ``"2"``, ``2.5`` -> ``"2.5"``."""
    if total.is_integer():
        return str(int(total))
    return repr(total)


def _rows(entries: list[RankedEntry], aliases: Mapping[str, str], rank_label: str) -> list[str]:
    if not entries:
        return []
    cells = [
        (rank_label.format(rank=e.rank), display_name(e.player, aliases), format_score(e.total))
        for e in entries
    ]
    rank_w = max(len(c[0]) for c in cells)
    name_w = max(len(c[1]) for c in cells)
    return [f"{r:<{rank_w}}  {n:<{name_w}}  {s}" for r, n, s in cells]


def render_table(table: ScoreboardTable, aliases: Mapping[str, str]) -> str:
    """Render the current split table with its status line."""
    lines = [f"{table.year} · Split {table.split}", table.message]
    if table.status == TableStatus.loaded:
        lines.append("")
        lines.extend(_rows(table.entries, aliases, "#{rank}"))
    return "\n".join(lines)


def render_hall_of_fame_entry(summary: SplitSummary, aliases: Mapping[str, str]) -> str:
    """Render one split: a mini table for completed splits, a label otherwise."""
    lines = [f"{summary.year} · Split {summary.split}"]
    if summary.status == SplitStatus.completed and summary.players:
        lines.extend("  " + row for row in _rows(summary.players, aliases, "Rank {rank}"))
    else:
        # Completed with no players cannot happen; treat it as off split.
        lines.append("  " + _STATUS_LABELS.get(summary.status, "Off split"))
    return "\n".join(lines)


def render_hall_of_fame(summaries: list[SplitSummary], aliases: Mapping[str, str]) -> str:
    """Render every split, or a fallback line when there are none."""
    if not summaries:
        return NO_SPLITS_MESSAGE
    return "\n\n".join(render_hall_of_fame_entry(s, aliases) for s in summaries)
