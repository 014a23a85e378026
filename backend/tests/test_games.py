import pytest

from gamestats.errors import PartitionNotFound, PartitionParseError
from gamestats.games import season_games, week_rankings

from conftest import make_game, write_week

# offensive ratings: low=1 (points only), high=3 (points + yards + ypa)
LOW = dict(totalPoints=55, totalYards=0, totalYardsPerAttempt=0, homeQBR=0, awayQBR=0)
HIGH = dict(totalPoints=55, totalYards=900, totalYardsPerAttempt=5, homeQBR=0, awayQBR=0)


class TestWeekRankings:
    def test_sorted_by_offensive_rating_stable(self, repo, data_dir):
        write_week(data_dir, 2024, 1, [
            make_game("a", **LOW),
            make_game("b", **HIGH),
            make_game("c", **LOW),
            make_game("d", **HIGH),
            make_game("e", totalPlays=0),
        ])
        ranked = week_rankings(repo, 2024, 1)
        assert [r.id for r in ranked] == ["b", "d", "a", "c", "e"]
        ratings = [r.offensive_rating for r in ranked]
        assert ratings == sorted(ratings, reverse=True)

    def test_does_not_reorder_cached_games(self, repo, data_dir):
        write_week(data_dir, 2024, 1, [make_game("a", **LOW), make_game("b", **HIGH)])
        week_rankings(repo, 2024, 1)
        assert [g.id for g in repo.load("2024/1.json")] == ["a", "b"]

    def test_missing_week(self, repo):
        with pytest.raises(PartitionNotFound):
            week_rankings(repo, 2024, 1)

    def test_malformed_week(self, repo, data_dir):
        write_week(data_dir, 2024, 1, "nope")
        with pytest.raises(PartitionParseError):
            week_rankings(repo, 2024, 1)


class TestSeasonGames:
    def test_concatenates_weeks_in_order(self, repo, data_dir):
        write_week(data_dir, 2024, 1, [make_game("w1a"), make_game("w1b")])
        write_week(data_dir, 2024, 2, [make_game("w2a")])
        assert [g.id for g in season_games(repo, 2024)] == ["w1a", "w1b", "w2a"]

    def test_stops_at_first_gap(self, repo, data_dir):
        write_week(data_dir, 2024, 1, [make_game("w1")])
        write_week(data_dir, 2024, 2, [make_game("w2")])
        write_week(data_dir, 2024, 4, [make_game("w4")])
        assert [g.id for g in season_games(repo, 2024)] == ["w1", "w2"]

    def test_skips_unreadable_week(self, repo, data_dir):
        write_week(data_dir, 2024, 1, [make_game("w1")])
        write_week(data_dir, 2024, 2, "[{")
        write_week(data_dir, 2024, 3, [make_game("w3")])
        assert [g.id for g in season_games(repo, 2024)] == ["w1", "w3"]

    def test_respects_max_weeks(self, repo, data_dir):
        for week in (1, 2, 3):
            write_week(data_dir, 2024, week, [make_game(f"w{week}")])
        assert [g.id for g in season_games(repo, 2024, max_weeks=2)] == ["w1", "w2"]

    def test_missing_year_is_empty(self, repo):
        assert season_games(repo, 1999) == []

    def test_returns_raw_records(self, repo, data_dir):
        write_week(data_dir, 2024, 1, [make_game("w1")])
        g = season_games(repo, 2024)[0]
        assert g.scenario.scenario_rating == 8.5
        assert not hasattr(g, "offensive_rating")
