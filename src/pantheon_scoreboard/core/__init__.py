"""
Core module for the Pantheon scoreboard.

This module provides the foundational components:
- Configuration management (config.py)
- Data models (models.py)
- HTTP client for CSV files (http.py)

Usage:
    from pantheon_scoreboard.core import Settings, get_settings
    from pantheon_scoreboard.core import RankedEntry, SplitIdentifier
    from pantheon_scoreboard.core.http import CsvClient, CsvFetchError
"""

# Configuration
from .config import Settings, get_settings

# HTTP
from .http import CsvClient, CsvFetchError, FetchText, ScoreboardError

# Models
from .models import (
    RankedEntry,
    ScoreboardPage,
    ScoreboardTable,
    ScoreRecord,
    SplitIdentifier,
    SplitStatus,
    SplitSummary,
    TableStatus,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # HTTP
    "CsvClient",
    "CsvFetchError",
    "FetchText",
    "ScoreboardError",
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
