# team_schedule/models/team.py
from pydantic import BaseModel, ConfigDict


class Team(BaseModel):
    """A team as listed by the league directory."""

    model_config = ConfigDict(frozen=True)

    team_id: str  # Opaque key accepted by the schedule endpoint
    name: str  # Display name, matched exactly against team filters
