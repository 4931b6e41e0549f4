"""Command-line statistics report.

Usage:
    splitstats history.json [--months 6|all] [--exercise "Bench Press"]
                            [--week-start sunday]

Reads a workout history export and prints the statistics report as JSON.
Defaults come from SPLITSTATS_* environment variables.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from splitstats.aggregation.report import build_stats_report
from splitstats.config import StatsSettings, parse_time_range, parse_week_start
from splitstats.ingest import RecordFormatError, load_records

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splitstats",
        description="Summarize a workout history export.",
    )
    parser.add_argument("history", type=Path, help="JSON file of workout records")
    parser.add_argument(
        "--months",
        help="Time window in months, or 'all' (default: SPLITSTATS_TIME_RANGE or 6)",
    )
    parser.add_argument("--exercise", help="Include the progress series for this exercise")
    parser.add_argument("--week-start", help="First day of the week, name or 0-6 (Monday=0)")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = StatsSettings.from_env()
        if args.week_start is not None:
            settings = dataclasses.replace(settings, week_start=parse_week_start(args.week_start))
        months = settings.time_range if args.months is None else parse_time_range(args.months)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        records = load_records(args.history)
    except (FileNotFoundError, RecordFormatError) as e:
        logger.error(f"Could not load workout history: {e}")
        return 1

    report = build_stats_report(
        records,
        months=months,
        exercise_name=args.exercise,
        settings=settings,
    )
    print(report.model_dump_json(indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
