from typing import AbstractSet, Dict, Iterable, Optional, Set

from loguru import logger

from team_schedule.models.enums import GameStatus
from team_schedule.models.game import RawGame
from team_schedule.models.summary import TeamSummary

# Status -> TeamSummary counter incremented for it
STATUS_COUNTERS = {
    GameStatus.SCHEDULED: "scheduled",
    GameStatus.POSTPONED: "postponed",
    GameStatus.FINAL: "final",
}


def aggregate_games(
    games: Iterable[RawGame],
    team_filter: Optional[AbstractSet[str]] = None,
    track_opponents: bool = False,
) -> Dict[str, TeamSummary]:
    """
    Folds a schedule into one TeamSummary per team name.

    Each game is credited to both of its participants: a game between A and
    B adds one to A's totals and one to B's. With a team filter, sides whose
    team is not in the filter are skipped entirely and get no record.

    Args:
        games: Games in schedule order.
        team_filter: Exact team names to keep; empty or None keeps every team.
        track_opponents: Also record the opposing team for every game.

    Returns:
        A dict keyed by team display name.
    """
    summaries: Dict[str, TeamSummary] = {}
    unknown_statuses: Set[str] = set()

    for game in games:
        status = game.known_status
        if status is None and game.status not in unknown_statuses:
            unknown_statuses.add(game.status)
            logger.warning(
                f"Unrecognised game status '{game.status}'; counting it under 'Other'."
            )

        for team in (game.home, game.away):
            if team_filter and team not in team_filter:
                continue

            summary = summaries.get(team)
            if summary is None:
                summary = summaries[team] = TeamSummary(team=team)

            summary.total += 1
            if status is None:
                summary.other += 1
                summary.other_statuses[game.status] = (
                    summary.other_statuses.get(game.status, 0) + 1
                )
            else:
                counter = STATUS_COUNTERS[status]
                setattr(summary, counter, getattr(summary, counter) + 1)

            if track_opponents:
                summary.opponents.append(game.opponent_of(team))

    logger.debug(f"Aggregated games into {len(summaries)} team summaries.")
    return summaries
