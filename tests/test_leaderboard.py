# tests/test_leaderboard.py

import random

import pytest

from schemas.stats import LeaderboardCategory
from stats.career import aggregate_career
from stats.leaderboard import build_leaderboard, sort_leaderboard
from tests.helpers import make_line, make_player, sample_corpus


def _ids(entries):
    return [entry.player.id for entry in entries]


class TestBuildLeaderboard:
    """Test suite for the leaderboard builder."""

    @pytest.fixture
    def corpus(self):
        return sample_corpus()

    @pytest.fixture
    def roster(self):
        return [make_player(pid) for pid in ("p1", "p2", "p3", "p4", "p5")]

    def test_one_entry_per_roster_player(self, roster, corpus):
        entries = build_leaderboard(roster, corpus)
        assert sorted(_ids(entries)) == ["p1", "p2", "p3", "p4", "p5"]

    def test_joins_identity(self, roster, corpus):
        entries = {e.player.id: e for e in build_leaderboard(roster, corpus)}
        assert entries["p2"].player.name == "P2"
        assert entries["p2"].record.player_id == "p2"

    def test_records_match_career_aggregator(self, roster, corpus):
        for entry in build_leaderboard(roster, corpus):
            assert entry.record == aggregate_career(entry.player.id, None, corpus)

    def test_player_without_games(self, roster, corpus):
        entries = {e.player.id: e for e in build_leaderboard(roster, corpus)}
        p5 = entries["p5"].record

        assert p5.games_played == 0
        assert p5.averages.points == 0.0
        assert p5.averages.rebounds is None
        assert p5.average_pi == 0.0

    def test_empty_roster(self, corpus):
        assert build_leaderboard([], corpus) == []

    def test_empty_corpus(self, roster):
        entries = build_leaderboard(roster, [])
        assert all(e.record.games_played == 0 for e in entries)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_roster_order_does_not_matter(self, roster, corpus, seed):
        shuffled = list(roster)
        random.Random(seed).shuffle(shuffled)

        baseline = build_leaderboard(roster, corpus)
        result = build_leaderboard(shuffled, corpus)

        assert {e.player.id: e for e in result} == {e.player.id: e for e in baseline}
        assert _ids(sort_leaderboard(result, LeaderboardCategory.POINTS)) == _ids(
            sort_leaderboard(baseline, LeaderboardCategory.POINTS)
        )


class TestSortLeaderboard:

    @pytest.fixture
    def entries(self):
        roster = [make_player(pid) for pid in ("p1", "p2", "p3", "p4", "p5")]
        return build_leaderboard(roster, sample_corpus())

    def test_points_descending(self, entries):
        # p3 14.0, p1 13.0, p2 12.0, p4 9.0, p5 no games
        assert _ids(sort_leaderboard(entries, LeaderboardCategory.POINTS)) == ["p3", "p1", "p2", "p4", "p5"]

    def test_no_data_ranks_last(self, entries):
        # p4 7.0, p1 5.0, p3 2.0, then p2 and p5 with no rebounds in input order
        assert _ids(sort_leaderboard(entries, LeaderboardCategory.REBOUNDS)) == ["p4", "p1", "p3", "p2", "p5"]

    def test_accepts_category_name(self, entries):
        assert sort_leaderboard(entries, "points") == sort_leaderboard(entries, LeaderboardCategory.POINTS)

    def test_pi_uses_average_pi(self, entries):
        ranked = sort_leaderboard(entries, LeaderboardCategory.PI)
        values = [e.record.average_pi for e in ranked]
        assert values == sorted(values, reverse=True)

    def test_ties_keep_input_order(self):
        lines = [
            make_line("a", "m1", "team_a", 10),
            make_line("b", "m1", "team_b", 10),
        ]
        roster = [make_player("b"), make_player("a")]
        entries = build_leaderboard(roster, lines)

        assert _ids(sort_leaderboard(entries, LeaderboardCategory.POINTS)) == ["b", "a"]

    def test_resort_reuses_entries(self, entries):
        by_points = sort_leaderboard(entries, LeaderboardCategory.POINTS)
        by_blocks = sort_leaderboard(by_points, LeaderboardCategory.BLOCKS)

        assert {id(e) for e in by_blocks} == {id(e) for e in entries}

    def test_does_not_reorder_input(self, entries):
        before = _ids(entries)
        sort_leaderboard(entries, LeaderboardCategory.ASSISTS)
        assert _ids(entries) == before
