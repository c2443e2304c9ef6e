from typing import Dict, Mapping

from loguru import logger

from team_schedule.models.summary import TeamSummary, ThresholdSpec

# Counters are never negative, so a minimum of 0 cannot exclude anything.
COUNTER_FLOOR = 0


def filter_by_games(
    summaries: Mapping[str, TeamSummary], threshold: ThresholdSpec
) -> Dict[str, TeamSummary]:
    """
    Keeps the teams whose selected counter lies within [min, max].

    Both bounds are inclusive. The returned dict is new but shares the
    TeamSummary objects of the input, which are not modified.
    """
    field = threshold.field
    check_min = threshold.min > COUNTER_FLOOR

    kept = {}
    for team, summary in summaries.items():
        value = summary.count_for(field)
        if check_min and value < threshold.min:
            continue
        if value > threshold.max:
            continue
        kept[team] = summary

    dropped = len(summaries) - len(kept)
    if dropped:
        logger.info(
            f"Filtered out {dropped} teams outside {threshold.min}-{threshold.max} "
            f"{field.value} games."
        )
    return kept
