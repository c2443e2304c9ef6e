from datetime import date
from typing import Dict, List

from pydantic import BaseModel, Field, NonNegativeInt, model_validator

from team_schedule.config.settings import settings

from .enums import ThresholdField
from .errors import InvalidDateRange, InvalidGameRange


class DateRange(BaseModel):
    """Inclusive calendar range; both ends are part of the query."""

    begin: date
    end: date

    @model_validator(mode="after")
    def _check_order(self) -> "DateRange":
        if self.end < self.begin:
            raise InvalidDateRange(self.begin, self.end)
        return self

    @property
    def is_single_day(self) -> bool:
        return self.begin == self.end

    def __str__(self) -> str:
        if self.is_single_day:
            return self.begin.isoformat()
        return f"{self.begin.isoformat()} to {self.end.isoformat()}"


class ThresholdSpec(BaseModel):
    """Inclusive [min, max] bounds applied to one TeamSummary counter."""

    field: ThresholdField = ThresholdField.TOTAL
    min: NonNegativeInt = 0
    max: NonNegativeInt = Field(default_factory=lambda: settings.max_games_in_season)

    @model_validator(mode="after")
    def _check_bounds(self) -> "ThresholdSpec":
        if self.min > self.max:
            raise InvalidGameRange(self.field.value, self.min, self.max)
        return self


class TeamSummary(BaseModel):
    """Per-team game counts for the queried range."""

    team: str
    total: NonNegativeInt = 0
    scheduled: NonNegativeInt = 0
    postponed: NonNegativeInt = 0
    final: NonNegativeInt = 0
    # Games whose status is none of the three above, keyed by raw status
    other: NonNegativeInt = 0
    other_statuses: Dict[str, int] = Field(default_factory=dict)
    # One opponent per game, in schedule order; only filled when tracking
    opponents: List[str] = Field(default_factory=list)

    def count_for(self, field: ThresholdField) -> int:
        return getattr(self, field.attribute)
