"""
Scoreboard services.

Orchestrate fetch -> parse -> tally -> rank for the current split table
and for the Hall of Fame.
"""

from .hall_of_fame import HallOfFameBuilder, build_hall_of_fame
from .scoreboard import load_current_split, load_scoreboard_page

__all__ = [
    "HallOfFameBuilder",
    "build_hall_of_fame",
    "load_current_split",
    "load_scoreboard_page",
]
