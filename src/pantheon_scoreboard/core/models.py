"""
Pydantic models for scoreboard entities.

These models are used for:
- Parsed CSV rows and ranked results
- Split identification and Hall of Fame summaries
- JSON serialization from the CLI
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Score Models
# =============================================================================


class ScoreRecord(BaseModel):
    """One valid data row from a split CSV."""

    model_config = ConfigDict(frozen=True)

    player: str
    score: float


class RankedEntry(BaseModel):
    """A player's position in a ranked split."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(ge=1)
    player: str
    total: float


# =============================================================================
# Split Models
# =============================================================================


@total_ordering
class SplitIdentifier(BaseModel):
    """A half-year competitive period. Split 1 = Jan-Jun, split 2 = Jul-Dec."""

    model_config = ConfigDict(frozen=True)

    year: int
    split: Literal[1, 2]

    def __lt__(self, other: "SplitIdentifier") -> bool:
        if not isinstance(other, SplitIdentifier):
            return NotImplemented
        return (self.year, self.split) < (other.year, other.split)

    def __str__(self) -> str:
        return f"{self.year} Split {self.split}"


class SplitStatus(str, Enum):
    """Hall of Fame classification for one split."""

    in_progress = "in-progress"
    off_split = "off-split"
    completed = "completed"


class SplitSummary(BaseModel):
    """Hall of Fame entry. ``players`` holds the top two only when completed."""

    year: int
    split: Literal[1, 2]
    status: SplitStatus
    players: list[RankedEntry] = Field(default_factory=list)


# =============================================================================
# Current Split Table
# =============================================================================


class TableStatus(str, Enum):
    """Load outcome for the current split table."""

    loaded = "loaded"
    empty = "empty"
    error = "error"


class ScoreboardTable(BaseModel):
    """The full ranked table for the current split, plus a status line."""

    year: int
    split: Literal[1, 2]
    csv_path: str
    status: TableStatus
    message: str
    entries: list[RankedEntry] = Field(default_factory=list)


class ScoreboardPage(BaseModel):
    """Everything the scoreboard page shows: current table and Hall of Fame."""

    current: SplitIdentifier
    table: ScoreboardTable
    hall_of_fame: list[SplitSummary]
