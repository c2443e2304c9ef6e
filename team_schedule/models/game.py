from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .enums import GameStatus


class RawGame(BaseModel):
    """A single scheduled contest as returned by the schedule endpoint."""

    model_config = ConfigDict(frozen=True)  # Never edited after retrieval

    status: str  # Free text from the API, e.g. "Final" or "In Progress"
    home: str
    away: str
    game_date: Optional[date] = None

    @property
    def known_status(self) -> Optional[GameStatus]:
        return GameStatus.parse(self.status)

    def opponent_of(self, team: str) -> str:
        """Name of the side facing `team` in this game."""
        return self.away if team == self.home else self.home
