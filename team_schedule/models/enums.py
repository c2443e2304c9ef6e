from enum import Enum
from typing import Optional


class GameStatus(str, Enum):
    SCHEDULED = "Scheduled"
    POSTPONED = "Postponed"
    FINAL = "Final"
    # Anything else the API reports is counted in TeamSummary.other

    @classmethod
    def parse(cls, value: str) -> Optional["GameStatus"]:
        """Returns the matching status, or None for unrecognised strings."""
        try:
            return cls(value)
        except ValueError:
            return None


class ThresholdField(str, Enum):
    TOTAL = "Total"
    SCHEDULED = "Scheduled"
    POSTPONED = "Postponed"
    FINAL = "Final"

    @property
    def attribute(self) -> str:
        """Name of the TeamSummary counter this field selects."""
        return self.value.lower()
