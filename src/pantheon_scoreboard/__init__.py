"""
Pantheon Scoreboard

Game-night scoreboard and multi-season Hall of Fame built from per-split
CSV score sheets served over HTTP.

Key Features:
- Tolerant CSV parsing (free-text trailing columns, malformed rows skipped)
- Per-player tallies ranked with alphabetical tie-breaks
- Half-year splits (Jan-Jun, Jul-Dec) resolved from the calendar
- Concurrent Hall of Fame build that keeps chronological order

Usage:
    from pantheon_scoreboard import CsvClient, HallOfFameBuilder, current_split

    async with CsvClient(base_url="http://127.0.0.1:8000") as client:
        builder = HallOfFameBuilder(client.fetch_text, first_year=2024, data_folder="data")
        summaries = await builder.build(current_split())
"""

from .aggregators import parse_csv, rank_totals, tally_scores
from .core import (
    CsvClient,
    CsvFetchError,
    RankedEntry,
    ScoreboardError,
    ScoreboardPage,
    ScoreboardTable,
    ScoreRecord,
    Settings,
    SplitIdentifier,
    SplitStatus,
    SplitSummary,
    TableStatus,
    get_settings,
)
from .services import (
    HallOfFameBuilder,
    build_hall_of_fame,
    load_current_split,
    load_scoreboard_page,
)
from .splits import csv_path, current_split, enumerate_splits

__all__ = [
    # Pipeline
    "parse_csv",
    "tally_scores",
    "rank_totals",
    # Splits
    "current_split",
    "csv_path",
    "enumerate_splits",
    # Services
    "HallOfFameBuilder",
    "build_hall_of_fame",
    "load_current_split",
    "load_scoreboard_page",
    # HTTP
    "CsvClient",
    "CsvFetchError",
    "ScoreboardError",
    # Config
    "Settings",
    "get_settings",
    # Models
    "RankedEntry",
    "ScoreboardPage",
    "ScoreboardTable",
    "ScoreRecord",
    "SplitIdentifier",
    "SplitStatus",
    "SplitSummary",
    "TableStatus",
]
