import pytest

from team_schedule.calculation.team_directory import resolve_team_ids
from team_schedule.models.errors import NoMatchingTeams, TransportError


def test_empty_filter_selects_every_team(fake_source):
    source = fake_source()
    assert resolve_team_ids(source, set()) == {"55", "23", "22", "20"}
    assert source.team_calls == 1


def test_exact_name_match(fake_source):
    source = fake_source()
    ids = resolve_team_ids(source, {"Seattle Kraken", "Calgary Flames"})
    assert ids == {"55", "20"}
    assert source.team_calls == 1


def test_unknown_names_ignored_when_others_match(fake_source):
    ids = resolve_team_ids(fake_source(), {"Seattle Kraken", "Seattle Metropolitans"})
    assert ids == {"55"}


def test_no_match_raises(fake_source):
    with pytest.raises(NoMatchingTeams) as exc_info:
        resolve_team_ids(fake_source(), {"Kraken", "seattle kraken"})

    assert exc_info.value.requested == ["Kraken", "seattle kraken"]
    assert not isinstance(exc_info.value, TransportError)
