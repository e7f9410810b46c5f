"""
Split calendar arithmetic.

A split is half a year of game nights:
- Split 1: January 1 -> June 30
- Split 2: July 1 -> December 31

Each split has its own CSV file named ``{year}_Split{split}.csv``.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from .core.models import SplitIdentifier


def current_split(reference_date: Optional[date] = None) -> SplitIdentifier:
    """Return the split that ``reference_date`` (default: today) falls in."""
    today = reference_date or date.today()
    split = 2 if today.month >= 7 else 1
    return SplitIdentifier(year=today.year, split=split)


def csv_filename(split_id: SplitIdentifier) -> str:
    """E.g. ``2024_Split1.csv``."""
    return f"{split_id.year}_Split{split_id.split}.csv"


def csv_path(split_id: SplitIdentifier, data_folder: str) -> str:
    """
    Build the path to a split's CSV file.

    Trailing slashes on ``data_folder`` are dropped; an empty folder gives
    the bare filename.

    Example:
        csv_path(SplitIdentifier(year=2024, split=1), "data/") -> "data/2024_Split1.csv"
    """
    folder = data_folder.rstrip("/")
    filename = csv_filename(split_id)
    return f"{folder}/{filename}" if folder else filename


def enumerate_splits(first_year: int, current: SplitIdentifier) -> list[SplitIdentifier]:
    """All splits from ``first_year`` split 1 up to and including ``current``.

    Returns an empty list when ``current`` is before ``first_year``.
    """
    splits = []
    for year in range(first_year, current.year + 1):
        for split in (1, 2):
            candidate = SplitIdentifier(year=year, split=split)
            # Skip splits that are in the future.
            if candidate > current:
                continue
            splits.append(candidate)
    return splits
