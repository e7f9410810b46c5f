"""
Scoreboard service: the current split table and the full page load.

``load_current_split`` fetches and ranks one split for the main table and
always returns a ScoreboardTable; fetch problems are reported through its
status and message rather than raised.

``load_scoreboard_page`` runs the main table load and the Hall of Fame
build side by side.
"""

import asyncio
import logging
from datetime import date
from typing import Optional

from ..aggregators import parse_csv, rank_totals, tally_scores
from ..core.config import Settings
from ..core.http import CsvFetchError, FetchText
from ..core.models import ScoreboardPage, ScoreboardTable, SplitIdentifier, TableStatus
from ..splits import csv_path, current_split
from .hall_of_fame import HallOfFameBuilder

logger = logging.getLogger(__name__)

MISSING_FILE_MESSAGE = (
    "Unable to load scores for this split. Please check that the CSV file exists."
)
LOAD_ERROR_MESSAGE = "Unable to load scores for this split."
NO_SCORES_MESSAGE = "No scores recorded for this split yet."


async def load_current_split(
    fetch: FetchText,
    current: SplitIdentifier,
    data_folder: str = "",
) -> ScoreboardTable:
    """
    Load one split's CSV into a fully ranked table.

    Args:
        fetch: Coroutine function returning a CSV body for a path
        current: Split to load
        data_folder: Folder prefix for CSV paths

    Returns:
        ScoreboardTable with status ``loaded``, ``empty`` or ``error``
    """
    path = csv_path(current, data_folder)
    logger.info("Loading scores from %s", path)

    def table(status: TableStatus, message: str, entries=None) -> ScoreboardTable:
        return ScoreboardTable(
            year=current.year,
            split=current.split,
            csv_path=path,
            status=status,
            message=message,
            entries=entries or [],
        )

    try:
        text = await fetch(path)
        records = parse_csv(text)
        if not records:
            return table(TableStatus.empty, NO_SCORES_MESSAGE)
        ranked = rank_totals(tally_scores(records))
    except CsvFetchError as e:
        logger.warning("Scoreboard: fetch failed for %s: %s", path, e.message)
        return table(TableStatus.error, MISSING_FILE_MESSAGE)
    except Exception as e:
        logger.error("Scoreboard: error loading current split: %s", e, exc_info=True)
        return table(TableStatus.error, LOAD_ERROR_MESSAGE)

    return table(TableStatus.loaded, f"Scores loaded from {path}.", ranked)


async def load_scoreboard_page(
    settings: Settings,
    fetch: FetchText,
    today: Optional[date] = None,
) -> ScoreboardPage:
    """Load the current table and the Hall of Fame concurrently."""
    current = current_split(today)
    builder = HallOfFameBuilder(
        fetch,
        first_year=settings.first_year,
        data_folder=settings.data_folder,
    )

    table, hall_of_fame = await asyncio.gather(
        load_current_split(fetch, current, settings.data_folder),
        builder.build(current),
    )
    return ScoreboardPage(current=current, table=table, hall_of_fame=hall_of_fame)
