#!/usr/bin/env python3
"""
Command-line interface for the Pantheon scoreboard.

Usage:
    pantheon-scoreboard split                     # Show the current split and CSV path
    pantheon-scoreboard current                   # Current split table
    pantheon-scoreboard hall-of-fame              # Hall of Fame summaries
    pantheon-scoreboard page --json               # Both, as JSON
    pantheon-scoreboard current --date 2025-07-01 --base-url http://localhost:5500
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import date

from pydantic import ValidationError

from .core.config import Settings, get_settings
from .core.http import CsvClient
from .core.models import TableStatus
from .render import render_hall_of_fame, render_table
from .services import HallOfFameBuilder, load_current_split, load_scoreboard_page
from .splits import csv_path, current_split

logger = logging.getLogger("pantheon_scoreboard.cli")


def setup_logging(level: str) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line overrides applied."""
    overrides = {
        "base_url": args.base_url,
        "data_folder": args.data_folder,
        "first_year": args.first_year,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return get_settings()
    return Settings(**overrides)


def make_client(settings: Settings) -> CsvClient:
    """Create the CSV client for a run."""
    return CsvClient(base_url=settings.base_url, timeout=settings.http_timeout)


def cmd_split(args: argparse.Namespace, settings: Settings) -> int:
    """Show which split a date falls in and where its CSV lives."""
    split_id = current_split(args.date)
    print(f"Current split: {split_id}")
    print(f"CSV path: {csv_path(split_id, settings.data_folder)}")
    return 0


async def cmd_current_async(args: argparse.Namespace, settings: Settings) -> int:
    """Print the current split table."""
    split_id = current_split(args.date)
    async with make_client(settings) as client:
        table = await load_current_split(client.fetch_text, split_id, settings.data_folder)

    print(render_table(table, settings.player_aliases))
    return 1 if table.status == TableStatus.error else 0


async def cmd_hall_of_fame_async(args: argparse.Namespace, settings: Settings) -> int:
    """Print Hall of Fame summaries."""
    split_id = current_split(args.date)
    async with make_client(settings) as client:
        builder = HallOfFameBuilder(
            client.fetch_text,
            first_year=settings.first_year,
            data_folder=settings.data_folder,
        )
        summaries = await builder.build(split_id)

    print("Hall of Fame")
    print("=" * 50)
    print(render_hall_of_fame(summaries, settings.player_aliases))
    return 0


async def cmd_page_async(args: argparse.Namespace, settings: Settings) -> int:
    """Print the current table and the Hall of Fame, loaded together."""
    async with make_client(settings) as client:
        page = await load_scoreboard_page(settings, client.fetch_text, today=args.date)

    if args.json:
        print(json.dumps(page.model_dump(mode="json"), indent=2))
    else:
        print(render_table(page.table, settings.player_aliases))
        print()
        print("Hall of Fame")
        print("=" * 50)
        print(render_hall_of_fame(page.hall_of_fame, settings.player_aliases))

    return 1 if page.table.status == TableStatus.error else 0


def cmd_current(args: argparse.Namespace, settings: Settings) -> int:
    """Wrapper to run async current command."""
    return asyncio.run(cmd_current_async(args, settings))


def cmd_hall_of_fame(args: argparse.Namespace, settings: Settings) -> int:
    """Wrapper to run async hall-of-fame command."""
    return asyncio.run(cmd_hall_of_fame_async(args, settings))


def cmd_page(args: argparse.Namespace, settings: Settings) -> int:
    """Wrapper to run async page command."""
    return asyncio.run(cmd_page_async(args, settings))


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Game-night scoreboard and Hall of Fame from split CSV files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--base-url", help="Web server hosting the CSV files")
    parser.add_argument("--data-folder", help="Folder holding the split CSV files")
    parser.add_argument("--first-year", type=int, help="First year of the Hall of Fame")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    date_help = "Reference date (YYYY-MM-DD), default today"

    split_parser = subparsers.add_parser("split", help="Show the current split and its CSV path")
    split_parser.add_argument("--date", type=date.fromisoformat, help=date_help)

    current_parser = subparsers.add_parser("current", help="Show the current split scoreboard")
    current_parser.add_argument("--date", type=date.fromisoformat, help=date_help)

    hof_parser = subparsers.add_parser("hall-of-fame", help="Show the Hall of Fame")
    hof_parser.add_argument("--date", type=date.fromisoformat, help=date_help)

    page_parser = subparsers.add_parser("page", help="Show the scoreboard and Hall of Fame")
    page_parser.add_argument("--date", type=date.fromisoformat, help=date_help)
    page_parser.add_argument("--json", action="store_true", help="Output JSON")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        settings = load_settings(args)
    except ValidationError as e:
        setup_logging("INFO")
        logger.error("Invalid configuration: %s", e)
        return 1

    setup_logging(settings.log_level)

    commands = {
        "split": cmd_split,
        "current": cmd_current,
        "hall-of-fame": cmd_hall_of_fame,
        "page": cmd_page,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        return cmd_func(args, settings)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
