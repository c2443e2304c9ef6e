from datetime import date
from typing import Dict, Iterable, List, Optional, Protocol, Set

from loguru import logger

from team_schedule.calculation.aggregator import aggregate_games
from team_schedule.calculation.range_filter import filter_by_games
from team_schedule.calculation.team_directory import resolve_team_ids
from team_schedule.models.enums import ThresholdField
from team_schedule.models.game import RawGame
from team_schedule.models.run_config import RunConfig
from team_schedule.models.summary import DateRange, TeamSummary, ThresholdSpec
from team_schedule.models.team import Team


class ScheduleSource(Protocol):
    def fetch_teams(self) -> List[Team]: ...

    def fetch_schedule(
        self, date_range: DateRange, team_ids: Iterable[str]
    ) -> List[RawGame]: ...


def build_run_config(
    begin_date: Optional[date] = None,
    end_date: Optional[date] = None,
    teams: Iterable[str] = (),
    min_games: int = 0,
    max_games: Optional[int] = None,
    game_state: ThresholdField = ThresholdField.TOTAL,
    track_opponents: bool = False,
) -> RunConfig:
    """Applies defaults and validates inputs; nothing here touches the network.

    Raises:
        InvalidDateRange: end_date is earlier than begin_date.
        InvalidGameRange: min_games is greater than max_games.
    """
    today = date.today()
    date_range = DateRange(begin=begin_date or today, end=end_date or today)
    bounds = {"min": min_games}
    if max_games is not None:
        bounds["max"] = max_games
    threshold = ThresholdSpec(field=ThresholdField(game_state), **bounds)
    return RunConfig(
        date_range=date_range,
        teams=frozenset(teams),
        threshold=threshold,
        track_opponents=track_opponents,
    )


def run_pipeline(source: ScheduleSource, config: RunConfig) -> Dict[str, TeamSummary]:
    """Resolves teams, fetches the schedule, aggregates and filters it."""
    logger.info(f"Counting games for {config.date_range}")

    team_ids: Set[str] = resolve_team_ids(source, config.teams)
    games = source.fetch_schedule(config.date_range, team_ids)

    summaries = aggregate_games(
        games,
        team_filter=config.teams,
        track_opponents=config.track_opponents,
    )
    filtered = filter_by_games(summaries, config.threshold)

    logger.success(
        f"Report ready: {len(filtered)} of {len(summaries)} teams from {len(games)} games."
    )
    return filtered


def generate_report(source: ScheduleSource, **inputs) -> Dict[str, TeamSummary]:
    """Builds the run configuration from raw inputs, then runs the pipeline."""
    config = build_run_config(**inputs)
    return run_pipeline(source, config)
