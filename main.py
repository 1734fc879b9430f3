#!/usr/bin/env python3
"""
Prison Remission Calculator

Computes the Latest Possible Discharge (LPD), the remission earned and the
Earliest Possible Discharge (EPD) for a sentence, following the
gold-standard guide.

Usage:
    python main.py --date 2024-01-01 --years 3                # 3 year sentence
    python main.py --date 2024-01-01 --months 2 --days 10     # 2 months 10 days
    python main.py --date 2024-01-01 --days 10 --epd-policy add_one_day
    python main.py --date 2024-01-01 --years 3 --json         # Machine-readable output
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict

from rich.console import Console
from rich.table import Table

from remission_calculator.config import get_settings
from remission_calculator.core.calculator import calculate_remission
from remission_calculator.core.dates import parse_calendar_date
from remission_calculator.core.formatting import format_date, format_duration, format_remission
from remission_calculator.core.types import (
    Duration,
    RemissionCalculationInput,
    RemissionCalculationResult,
    RemissionInputError,
)

console = Console()


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def result_to_dict(result: RemissionCalculationResult) -> dict:
    return {
        "sentence_date": result.sentence_date.isoformat(),
        "duration": asdict(result.duration),
        "lpd": result.lpd.isoformat(),
        "remission": asdict(result.remission),
        "epd": result.epd.isoformat(),
        "tier": result.tier,
        "trace": list(result.trace),
    }


def render_table(result: RemissionCalculationResult, date_format: str) -> Table:
    table = Table(title="Remission Calculation", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Sentence Date", format_date(result.sentence_date, date_format))
    table.add_row("Duration (as passed)", format_duration(result.duration))
    table.add_row("LPD (Latest Possible Discharge)", format_date(result.lpd, date_format))
    table.add_row("Remission (Y, M, D)", format_remission(result.remission))
    table.add_row("EPD (Earliest Possible Discharge)", format_date(result.epd, date_format))
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Calculate remission and discharge dates for a prison sentence",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--date",
        required=True,
        help="Sentence date as YYYY-MM-DD",
    )
    parser.add_argument("--years", type=int, default=0, help="Sentence years (default: 0)")
    parser.add_argument("--months", type=int, default=0, help="Sentence months, 0-11 (default: 0)")
    parser.add_argument("--days", type=int, default=0, help="Sentence days, 0-29 (default: 0)")
    parser.add_argument(
        "--epd-policy",
        choices=["equal_lpd", "add_one_day"],
        default=None,
        help="EPD rule for sentences of 30 days or less (default: from settings)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a table",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    settings = get_settings()

    try:
        data = RemissionCalculationInput(
            sentence_date=parse_calendar_date(args.date),
            duration=Duration(years=args.years, months=args.months, days=args.days),
            short_sentence_epd_policy=args.epd_policy or settings.short_sentence_epd_policy,
            enforce_duration_range=settings.enforce_duration_range,
        )
        result = calculate_remission(data)
    except RemissionInputError as e:
        logging.getLogger(__name__).warning(f"Rejected input: {e}")
        console.print(f"[red]Invalid input:[/] {e}")
        return 1

    if args.json:
        console.print_json(json.dumps(result_to_dict(result)))
        return 0

    console.print(render_table(result, settings.display_date_format))
    if args.verbose:
        for line in result.trace:
            console.print(f"  - {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
