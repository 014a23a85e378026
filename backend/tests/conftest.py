import copy
import json

import pytest

from gamestats.repo import GameRepo
from gamestats.source import DirectorySource
from gamestats.store import RecordStore

SAMPLE_GAME = {
    "id": "game1",
    "fullName": "Team A vs Team B",
    "shortName": "A @ B",
    "matchupQuality": "high",
    "efficiency": {
        "homeTeamEfficiency": 0.5,
        "awayTeamEfficiency": 0.5,
    },
    "scenario": {
        "marginOfVictory": 7,
        "scenarioRating": 8.5,
    },
    "offense": {
        "offensiveBigPlays": 5,
        "offensiveExplosivePlays": 10,
        "totalPlays": 100,
        "totalPoints": 55,
        "totalYards": 850,
        "totalYardsPerAttempt": 5.5,
        "homeQBR": 110,
        "awayQBR": 105,
    },
    "defense": {
        "defensiveTds": 1,
        "fumbleRecs": 2,
        "interceptions": 3,
        "blockedKicks": 0,
        "safeties": 0,
        "specialTeamsTd": 0,
        "goalLineStands": 1,
    },
}


def make_game(game_id="game1", **offense):
    g = copy.deepcopy(SAMPLE_GAME)
    g["id"] = game_id
    g["offense"].update(offense)
    return g


def write_week(root, year, week, games):
    year_dir = root / str(year)
    year_dir.mkdir(parents=True, exist_ok=True)
    path = year_dir / f"{week}.json"
    if isinstance(games, (str, bytes)):
        path.write_bytes(games.encode() if isinstance(games, str) else games)
    else:
        path.write_text(json.dumps(games))
    return path


@pytest.fixture
def data_dir(tmp_path):
    root = tmp_path / "data"
    root.mkdir()
    return root


@pytest.fixture
def repo(data_dir):
    return GameRepo(RecordStore(), DirectorySource(data_dir))
