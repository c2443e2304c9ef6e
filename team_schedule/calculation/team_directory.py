from typing import AbstractSet, Protocol, Set, List

from loguru import logger

from team_schedule.models.errors import NoMatchingTeams
from team_schedule.models.team import Team


class TeamSource(Protocol):
    def fetch_teams(self) -> List[Team]: ...


def resolve_team_ids(source: TeamSource, team_filter: AbstractSet[str]) -> Set[str]:
    """
    Turns a set of team display names into the identifiers to query.

    An empty filter selects every team in the directory. Names must match a
    directory entry exactly; unmatched names are logged and ignored as long as
    at least one name matched.

    Args:
        source: Anything with a fetch_teams() method (one directory request).
        team_filter: Exact display names, or an empty set for all teams.

    Returns:
        The set of team identifiers.

    Raises:
        NoMatchingTeams: if the filter is non-empty and nothing matched.
    """
    teams = source.fetch_teams()

    if not team_filter:
        logger.info(f"No team filter given; querying all {len(teams)} teams.")
        return {team.team_id for team in teams}

    matched = [team for team in teams if team.name in team_filter]
    if not matched:
        logger.error(f"None of the requested teams exist: {sorted(team_filter)}")
        raise NoMatchingTeams(team_filter)

    unmatched = set(team_filter) - {team.name for team in matched}
    if unmatched:
        logger.warning(f"Ignoring unknown team names: {sorted(unmatched)}")

    logger.info(f"Resolved {len(matched)} of {len(team_filter)} requested teams.")
    return {team.team_id for team in matched}
