from team_schedule.calculation.range_filter import filter_by_games
from team_schedule.models.enums import ThresholdField
from team_schedule.models.summary import TeamSummary, ThresholdSpec


def _summaries():
    return {
        "Seattle Kraken": TeamSummary(team="Seattle Kraken", total=1, final=1),
        "Vancouver Canucks": TeamSummary(
            team="Vancouver Canucks", total=2, final=1, scheduled=1
        ),
        "Calgary Flames": TeamSummary(team="Calgary Flames", total=4, scheduled=3, postponed=1),
    }


def test_exact_total_bounds():
    kept = filter_by_games(_summaries(), ThresholdSpec(field=ThresholdField.TOTAL, min=2, max=2))
    assert list(kept) == ["Vancouver Canucks"]


def test_bounds_are_inclusive():
    kept = filter_by_games(_summaries(), ThresholdSpec(min=1, max=2))
    assert set(kept) == {"Seattle Kraken", "Vancouver Canucks"}


def test_filters_on_selected_field():
    summaries = _summaries()

    scheduled = filter_by_games(
        summaries, ThresholdSpec(field=ThresholdField.SCHEDULED, min=1, max=82)
    )
    assert set(scheduled) == {"Vancouver Canucks", "Calgary Flames"}

    no_finals = filter_by_games(summaries, ThresholdSpec(field=ThresholdField.FINAL, min=0, max=0))
    assert set(no_finals) == {"Calgary Flames"}

    postponed = filter_by_games(
        summaries, ThresholdSpec(field=ThresholdField.POSTPONED, min=1, max=1)
    )
    assert set(postponed) == {"Calgary Flames"}


def test_full_range_returns_input_unchanged():
    summaries = _summaries()
    for field in ThresholdField:
        for min_games in (0, 1) if field is ThresholdField.TOTAL else (0,):
            kept = filter_by_games(summaries, ThresholdSpec(field=field, min=min_games, max=82))
            assert kept == summaries


def test_filter_is_idempotent():
    summaries = _summaries()
    threshold = ThresholdSpec(field=ThresholdField.SCHEDULED, min=1, max=2)

    once = filter_by_games(summaries, threshold)
    twice = filter_by_games(once, threshold)
    assert twice == once


def test_filter_shares_records_without_mutating():
    summaries = _summaries()
    before = {team: summary.model_dump() for team, summary in summaries.items()}

    kept = filter_by_games(summaries, ThresholdSpec(min=2, max=82))

    assert kept is not summaries
    assert kept["Calgary Flames"] is summaries["Calgary Flames"]
    assert len(summaries) == 3
    assert {team: summary.model_dump() for team, summary in summaries.items()} == before


def test_upper_bound_applies_above_season_length():
    summaries = {"Seattle Kraken": TeamSummary(team="Seattle Kraken", total=90, final=90)}
    assert filter_by_games(summaries, ThresholdSpec(min=0, max=82)) == {}


def test_min_of_one_drops_zero_count_record():
    summaries = {
        "Seattle Kraken": TeamSummary(team="Seattle Kraken", total=0),
        "Calgary Flames": TeamSummary(team="Calgary Flames", total=1, final=1),
    }
    kept = filter_by_games(summaries, ThresholdSpec(min=1, max=82))
    assert list(kept) == ["Calgary Flames"]
