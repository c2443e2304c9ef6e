from datetime import date
from typing import Any, Dict, List, Optional

from loguru import logger

from team_schedule.models.errors import NormalizationError
from team_schedule.models.game import RawGame
from team_schedule.models.team import Team


class Normalizer:
    """Converts decoded stats API payloads into Team and RawGame models."""

    def normalize_teams(self, payload: Dict[str, Any]) -> List[Team]:
        """Parses a /teams response.

        Args:
            payload: Decoded JSON with a top-level "teams" list.

        Returns:
            One Team per entry carrying both an id and a name.
        """
        raw_teams = self._require_list(payload, "teams")
        teams: List[Team] = []
        for raw in raw_teams:
            team = self._parse_team(raw) if isinstance(raw, dict) else None
            if team is None:
                logger.warning(f"Skipping team entry without id/name: {raw!r}")
                continue
            teams.append(team)
        logger.debug(f"Normalized {len(teams)} teams from directory payload.")
        return teams

    def normalize_schedule(self, payload: Dict[str, Any]) -> List[RawGame]:
        """Parses a /schedule response into games, preserving API order.

        The payload groups games by day: {"dates": [{"date": ..., "games": [...]}]}.
        A response with no games at all may omit "dates" entirely.
        """
        if not isinstance(payload, dict):
            raise NormalizationError(
                f"Expected a JSON object for schedule, got {type(payload).__name__}"
            )
        raw_dates = payload.get("dates") or []
        if not isinstance(raw_dates, list):
            raise NormalizationError("Schedule payload 'dates' is not a list.")

        games: List[RawGame] = []
        for day in raw_dates:
            raw_games = (day.get("games") or []) if isinstance(day, dict) else None
            if not isinstance(raw_games, list):
                logger.warning(f"Skipping malformed schedule day: {day!r}")
                continue
            day_date = self._parse_date(day.get("date"))
            for raw_game in raw_games:
                game = (
                    self._parse_game(raw_game, day_date)
                    if isinstance(raw_game, dict)
                    else None
                )
                if game is None:
                    logger.warning(
                        f"Skipping malformed game on {day.get('date')}: {raw_game!r}"
                    )
                    continue
                games.append(game)

        logger.debug(f"Normalized {len(games)} games across {len(raw_dates)} dates.")
        return games

    # --- Helpers ---

    @staticmethod
    def _require_list(payload: Dict[str, Any], key: str) -> List[Any]:
        if not isinstance(payload, dict) or not isinstance(payload.get(key), list):
            raise NormalizationError(f"Payload is missing the '{key}' list.")
        return payload[key]

    @staticmethod
    def _mapping(value: Any) -> Dict[str, Any]:
        return value if isinstance(value, dict) else {}

    @staticmethod
    def _text(value: Any) -> Optional[str]:
        return value if isinstance(value, str) and value else None

    def _parse_team(self, raw: Dict[str, Any]) -> Optional[Team]:
        team_id = raw.get("id")
        name = self._text(raw.get("name"))
        if team_id is None or name is None:
            return None
        return Team(team_id=str(team_id), name=name)

    @staticmethod
    def _parse_date(value: Any) -> Optional[date]:
        if not value:
            return None
        try:
            return date.fromisoformat(value)
        except (TypeError, ValueError):
            logger.warning(f"Unparseable schedule date '{value}'")
            return None

    def _side_name(self, teams: Dict[str, Any], side: str) -> Optional[str]:
        team = self._mapping(self._mapping(teams.get(side)).get("team"))
        return self._text(team.get("name"))

    def _parse_game(
        self, raw: Dict[str, Any], day_date: Optional[date]
    ) -> Optional[RawGame]:
        status = self._text(self._mapping(raw.get("status")).get("detailedState"))
        teams = self._mapping(raw.get("teams"))
        home = self._side_name(teams, "home")
        away = self._side_name(teams, "away")
        if not status or not home or not away:
            return None
        return RawGame(status=status, home=home, away=away, game_date=day_date)
