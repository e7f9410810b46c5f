"""
Score aggregation pipeline: CSV text -> records -> totals -> ranked table.

Design: Pure functions with no I/O; the services layer does the fetching.
"""

from .csv_parser import parse_csv, parse_row, parse_score
from .scores import collation_key, rank_totals, tally_scores

__all__ = [
    "parse_csv",
    "parse_row",
    "parse_score",
    "collation_key",
    "rank_totals",
    "tally_scores",
]
