import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from team_schedule.models.game import RawGame  # noqa: E402
from team_schedule.models.team import Team  # noqa: E402

KRAKEN_GAME_DAY = date(2021, 10, 17)

DIRECTORY = [
    Team(team_id="55", name="Seattle Kraken"),
    Team(team_id="23", name="Vancouver Canucks"),
    Team(team_id="22", name="Edmonton Oilers"),
    Team(team_id="20", name="Calgary Flames"),
]


class FakeScheduleSource:
    """In-memory stand-in for NHLStatsClient that counts its calls."""

    def __init__(self, teams=None, games=None):
        self.teams = list(DIRECTORY if teams is None else teams)
        self.games = list(games or [])
        self.team_calls = 0
        self.schedule_calls = []

    @property
    def calls(self):
        return self.team_calls + len(self.schedule_calls)

    def fetch_teams(self):
        self.team_calls += 1
        return list(self.teams)

    def fetch_schedule(self, date_range, team_ids):
        self.schedule_calls.append((date_range, set(team_ids)))
        return list(self.games)

    def close(self):
        pass


@pytest.fixture()
def make_game():
    def _make(home, away, status="Final", game_date=KRAKEN_GAME_DAY):
        return RawGame(status=status, home=home, away=away, game_date=game_date)

    return _make


@pytest.fixture()
def kraken_game(make_game):
    return make_game("Seattle Kraken", "Vancouver Canucks")


@pytest.fixture()
def fake_source():
    def _make(games=None, teams=None):
        return FakeScheduleSource(teams=teams, games=games)

    return _make


def schedule_payload(*games):
    """Builds a stats API /schedule body from (date, home, away, status) tuples."""
    by_date = {}
    for game_date, home, away, status in games:
        by_date.setdefault(game_date, []).append(
            {
                "gamePk": 2021020000 + len(by_date),
                "status": {"abstractGameState": status, "detailedState": status},
                "teams": {
                    "home": {"team": {"id": 1, "name": home}},
                    "away": {"team": {"id": 2, "name": away}},
                },
            }
        )
    return {
        "totalGames": len(games),
        "dates": [
            {"date": day, "totalGames": len(day_games), "games": day_games}
            for day, day_games in by_date.items()
        ],
    }


@pytest.fixture()
def build_schedule_payload():
    return schedule_payload


@pytest.fixture()
def teams_payload():
    return {
        "copyright": "NHL and the NHL Shield are registered trademarks.",
        "teams": [
            {"id": int(team.team_id), "name": team.name, "abbreviation": "XXX"}
            for team in DIRECTORY
        ],
    }
