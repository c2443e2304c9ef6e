from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field

from .summary import DateRange, ThresholdSpec


class RunConfig(BaseModel):
    """Everything one report run needs, built once at the entry point."""

    model_config = ConfigDict(frozen=True)

    date_range: DateRange
    # Exact display names; empty means every team
    teams: FrozenSet[str] = frozenset()
    threshold: ThresholdSpec = Field(default_factory=ThresholdSpec)
    track_opponents: bool = False
