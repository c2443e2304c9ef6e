# team_schedule/clients/nhl_client.py

from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from team_schedule.models.game import RawGame
from team_schedule.models.summary import DateRange
from team_schedule.models.team import Team
from team_schedule.normalization.normalizer import Normalizer
from .base_client import BaseClient

TEAMS_PATH = "/teams"
SCHEDULE_PATH = "/schedule"


def schedule_params(date_range: DateRange, team_ids: Iterable[str]) -> Dict[str, Any]:
    """Query parameters for one schedule request.

    A one-day range is sent as `date`, anything longer as `startDate`/`endDate`;
    the API returns the same games for both forms.
    """
    params: Dict[str, Any] = {"teamId": ",".join(sorted(team_ids))}
    if date_range.is_single_day:
        params["date"] = date_range.begin.isoformat()
    else:
        params["startDate"] = date_range.begin.isoformat()
        params["endDate"] = date_range.end.isoformat()
    return params


class NHLStatsClient(BaseClient):
    """Client for the team directory and schedule endpoints of the stats API."""

    def __init__(self, *args, normalizer: Optional[Normalizer] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.normalizer = normalizer or Normalizer()
        logger.debug(f"NHLStatsClient initialized for {self.base_url}")

    def fetch_teams(self) -> List[Team]:
        """Fetch every team known to the league directory."""
        payload = self._get_json(TEAMS_PATH)
        teams = self.normalizer.normalize_teams(payload)
        logger.info(f"Fetched {len(teams)} teams from directory.")
        return teams

    def fetch_schedule(
        self, date_range: DateRange, team_ids: Iterable[str]
    ) -> List[RawGame]:
        """Fetch all games for the given teams within the date range."""
        params = schedule_params(date_range, team_ids)
        payload = self._get_json(SCHEDULE_PATH, params=params)
        games = self.normalizer.normalize_schedule(payload)
        logger.info(f"Fetched {len(games)} games for {date_range}.")
        return games
