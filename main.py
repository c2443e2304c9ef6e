import sys
import argparse
from contextlib import nullcontext
from datetime import date
from typing import List, Optional

# --- Settings/Logging ---
from team_schedule.logging.setup import setup_logging
from team_schedule.config.settings import settings

from loguru import logger

from team_schedule.models.enums import ThresholdField
from team_schedule.models.errors import InputError, ScheduleError
from team_schedule.clients.nhl_client import NHLStatsClient
from team_schedule.calculation.pipeline import build_run_config, run_pipeline
from team_schedule.presentation.table import render_summaries

from rich.console import Console
from rich.panel import Panel

EXIT_OK = 0
EXIT_UPSTREAM_ERROR = 1
EXIT_INPUT_ERROR = 2


def _game_count(value: str) -> int:
    count = int(value)
    if not 0 <= count <= settings.max_games_in_season:
        raise argparse.ArgumentTypeError(
            f"must be between 0 and {settings.max_games_in_season}"
        )
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count each team's games in a date range, by game status."
    )
    parser.add_argument(
        "--begin-date",
        type=date.fromisoformat,
        default=None,
        help="First date of the range, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--end-date",
        type=date.fromisoformat,
        default=None,
        help="Last date of the range, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--teams",
        nargs="+",
        default=[],
        metavar="NAME",
        help='Exact team names, e.g. "Seattle Kraken" (default: all teams)',
    )
    parser.add_argument("--min-games", type=_game_count, default=0)
    parser.add_argument("--max-games", type=_game_count, default=None)
    parser.add_argument(
        "--game-state",
        choices=[field.value for field in ThresholdField],
        default=ThresholdField.TOTAL.value,
        help="Counter that --min-games/--max-games apply to (default: Total)",
    )
    parser.add_argument(
        "--opponents",
        action="store_true",
        help="Add a 'Playing Against' column listing each opponent",
    )
    parser.add_argument("--log-level", default=None, help="Overrides LOG_LEVEL")
    return parser


def main(
    argv: Optional[List[str]] = None,
    client: Optional[NHLStatsClient] = None,
    console: Optional[Console] = None,
) -> int:
    """Runs one report and returns the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    console = console or Console()

    try:
        config = build_run_config(
            begin_date=args.begin_date,
            end_date=args.end_date,
            teams=args.teams,
            min_games=args.min_games,
            max_games=args.max_games,
            game_state=ThresholdField(args.game_state),
            track_opponents=args.opponents,
        )
    except InputError as e:
        logger.error(f"Invalid input: {e}")
        return EXIT_INPUT_ERROR

    console.print(
        Panel(
            f"Games {config.date_range} | {config.threshold.field.value} "
            f"{config.threshold.min}-{config.threshold.max}",
            title="Team Schedule",
        )
    )

    # An injected client belongs to the caller and stays open
    client_context = nullcontext(client) if client is not None else NHLStatsClient()
    try:
        with client_context as source:
            summaries = run_pipeline(source, config)
    except InputError as e:
        logger.error(f"Invalid input: {e}")
        return EXIT_INPUT_ERROR
    except ScheduleError as e:
        logger.error(f"Schedule lookup failed: {e}")
        return EXIT_UPSTREAM_ERROR

    render_summaries(
        summaries,
        track_opponents=config.track_opponents,
        date_range=config.date_range,
        console=console,
    )
    return EXIT_OK


def cli() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)


if __name__ == "__main__":
    cli()
