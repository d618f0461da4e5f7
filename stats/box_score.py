"""
Box Score Builder

Splits one match into its two sides, scores every stat-line with the
Performance Index and ranks each side by it.
"""

from typing import Iterable

from schemas.stats import (
    BoxScore,
    BoxScoreRow,
    CategoryTotals,
    StatCategory,
    StatLine,
    Team,
    TeamBoxScore,
)
from stats.config import DEFAULT_WEIGHTS, PIWeights
from stats.outcomes import team_totals, winning_team
from stats.performance_index import compute_match_pi

# Categories highlighted per team in the box score
LEADER_CATEGORIES = (StatCategory.POINTS, StatCategory.REBOUNDS, StatCategory.ASSISTS)


def _team_box_score(
    team: Team,
    match_rows: list[StatLine],
    weights: PIWeights,
) -> TeamBoxScore:
    team_rows = [s for s in match_rows if s.team is team]

    rows = [BoxScoreRow(stat_line=s, pi=compute_match_pi(s, match_rows, weights)) for s in team_rows]
    rows.sort(key=lambda row: row.pi, reverse=True)

    totals = CategoryTotals(**{
        category.value: sum(s.value(category) or 0 for s in team_rows)
        for category in StatCategory
    })
    leaders = {
        category: max((s.value(category) or 0 for s in team_rows), default=0)
        for category in LEADER_CATEGORIES
    }

    # Only highlight a top performer when someone actually contributed
    max_pi = max((row.pi for row in rows), default=0.0)
    top_performers = [row.stat_line.player_id for row in rows if max_pi > 0 and row.pi == max_pi]

    return TeamBoxScore(
        team=team,
        score=totals.points,
        rows=rows,
        totals=totals,
        leaders=leaders,
        top_performers=top_performers,
    )


def build_box_score(
    match_id: str,
    corpus: Iterable[StatLine],
    weights: PIWeights = DEFAULT_WEIGHTS,
) -> BoxScore:
    """
    Build the box score for one match.

    Args:
        match_id: Match to render
        corpus: Any collection of stat-lines; rows of other matches are ignored
        weights: PI weight table

    Returns:
        BoxScore with both sides ranked by PI and the winning side
        (None on a tie or when no rows exist for the match)
    """
    match_rows = [s for s in corpus if s.match_id == match_id]

    return BoxScore(
        match_id=match_id,
        team_a=_team_box_score(Team.TEAM_A, match_rows, weights),
        team_b=_team_box_score(Team.TEAM_B, match_rows, weights),
        winner=winning_team(match_rows),
    )


def match_score(match_id: str, corpus: Iterable[StatLine]) -> dict[Team, int]:
    """Return the final score of one match as a team -> points mapping."""
    return team_totals(s for s in corpus if s.match_id == match_id)
