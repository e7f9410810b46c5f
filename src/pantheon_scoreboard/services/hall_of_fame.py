"""
Hall of Fame service: one summary per split since tracking began.

For each split from ``first_year`` up to the current split:
- Completed past splits with CSV data -> top 1-2 players
- Past splits with no (or unusable) CSV -> "off-split"
- The current split -> "in-progress", never fetched

All past splits are fetched concurrently; results come back in
chronological order regardless of which fetch finishes first.
"""

import asyncio
import logging

from ..aggregators import parse_csv, rank_totals, tally_scores
from ..core.http import CsvFetchError, FetchText
from ..core.models import SplitIdentifier, SplitStatus, SplitSummary
from ..splits import csv_path, enumerate_splits

logger = logging.getLogger(__name__)

# Number of players shown per completed split.
HALL_OF_FAME_PODIUM = 2


class HallOfFameBuilder:
    """Builds Hall of Fame summaries from per-split CSV files.

    Args:
        fetch: Coroutine function returning a CSV body for a path, raising
            CsvFetchError when the file cannot be fetched
        first_year: First year splits were tracked
        data_folder: Folder prefix for CSV paths
    """

    def __init__(self, fetch: FetchText, *, first_year: int, data_folder: str = ""):
        self._fetch = fetch
        self.first_year = first_year
        self.data_folder = data_folder

    async def build(self, current: SplitIdentifier) -> list[SplitSummary]:
        """Summarise every split from ``first_year`` through ``current``.

        Returns an empty list if ``current`` precedes ``first_year``.
        """
        splits = enumerate_splits(self.first_year, current)
        if not splits:
            logger.warning(
                "No splits between first year %d and %s", self.first_year, current
            )
            return []

        # gather() keeps input order, so the output is chronological.
        return list(
            await asyncio.gather(
                *(self.summarise_split(split_id, current) for split_id in splits)
            )
        )

    async def summarise_split(
        self, split_id: SplitIdentifier, current: SplitIdentifier
    ) -> SplitSummary:
        """Classify one split. Never raises; failures become "off-split"."""
        if split_id == current:
            return _summary(split_id, SplitStatus.in_progress)

        path = csv_path(split_id, self.data_folder)
        try:
            text = await self._fetch(path)
            ranked = rank_totals(tally_scores(parse_csv(text)))
        except CsvFetchError as e:
            logger.warning(f"HoF: CSV not available for {split_id} ({path}): {e.message}")
            return _summary(split_id, SplitStatus.off_split)
        except Exception as e:
            logger.error("HoF: error loading %s: %s", split_id, e, exc_info=True)
            return _summary(split_id, SplitStatus.off_split)

        if not ranked:
            return _summary(split_id, SplitStatus.off_split)

        return _summary(
            split_id,
            SplitStatus.completed,
            players=ranked[:HALL_OF_FAME_PODIUM],
        )


def _summary(split_id: SplitIdentifier, status: SplitStatus, players=None) -> SplitSummary:
    return SplitSummary(
        year=split_id.year,
        split=split_id.split,
        status=status,
        players=players or [],
    )


async def build_hall_of_fame(
    first_year: int,
    current: SplitIdentifier,
    fetch: FetchText,
    data_folder: str = "",
) -> list[SplitSummary]:
    """Functional shortcut for ``HallOfFameBuilder(...).build(current)``."""
    builder = HallOfFameBuilder(fetch, first_year=first_year, data_folder=data_folder)
    return await builder.build(current)
