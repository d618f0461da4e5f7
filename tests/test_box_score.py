# tests/test_box_score.py

import pytest

from schemas.stats import StatCategory, Team
from stats.box_score import build_box_score, match_score
from tests.helpers import make_line, sample_corpus


class TestBuildBoxScore:
    """Test suite for the box score builder."""

    @pytest.fixture
    def box_score(self):
        return build_box_score("m1", sample_corpus())

    def test_scores_and_winner(self, box_score):
        assert box_score.team_a.score == 30
        assert box_score.team_b.score == 27
        assert box_score.winner == Team.TEAM_A

    def test_rows_ranked_by_pi(self, box_score):
        team_a = [row.stat_line.player_id for row in box_score.team_a.rows]
        team_b = [row.stat_line.player_id for row in box_score.team_b.rows]
        assert team_a == ["p1", "p3"]
        # p4's rebounds outweigh p2's extra points
        assert team_b == ["p4", "p2"]

    def test_row_pi_values(self, box_score):
        p4 = box_score.team_b.rows[0]
        # 12/30*50 + 7*1.5
        assert p4.pi == pytest.approx(30.5)

    def test_totals_skip_untracked(self, box_score):
        assert box_score.team_a.totals.rebounds == 7
        assert box_score.team_a.totals.assists == 4
        assert box_score.team_b.totals.assists == 0

    def test_leaders(self, box_score):
        assert box_score.team_a.leaders == {
            StatCategory.POINTS: 20,
            StatCategory.REBOUNDS: 5,
            StatCategory.ASSISTS: 3,
        }
        assert box_score.team_b.leaders[StatCategory.REBOUNDS] == 7

    def test_top_performers(self, box_score):
        assert box_score.team_a.top_performers == ["p1"]
        assert box_score.team_b.top_performers == ["p4"]

    def test_tied_match_has_no_winner(self):
        box_score = build_box_score("m3", sample_corpus())
        assert box_score.winner is None

    def test_scoreless_match_has_no_top_performer(self):
        lines = [
            make_line("p1", "m1", "team_a", 0),
            make_line("p2", "m1", "team_b", 0),
        ]
        box_score = build_box_score("m1", lines)

        assert box_score.team_a.top_performers == []
        assert box_score.team_b.top_performers == []
        assert [row.pi for row in box_score.team_a.rows] == [0.0]

    def test_shared_top_performance(self):
        lines = [
            make_line("p1", "m1", "team_a", 6),
            make_line("p2", "m1", "team_a", 6),
            make_line("p3", "m1", "team_b", 5),
        ]
        box_score = build_box_score("m1", lines)
        assert box_score.team_a.top_performers == ["p1", "p2"]

    def test_unknown_match(self):
        box_score = build_box_score("missing", sample_corpus())

        assert box_score.team_a.rows == []
        assert box_score.team_b.score == 0
        assert box_score.winner is None


class TestMatchScore:

    def test_match_score(self):
        assert match_score("m2", sample_corpus()) == {Team.TEAM_A: 18, Team.TEAM_B: 24}
