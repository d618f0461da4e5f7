"""
Performance Index Calculator

Scores one stat-line against the context of its match.

The points share is normalized to the match's winning score. Rebounds,
assists, steals and blocks add value and turnovers subtract, with weights
rescaled to the categories that were actually tracked for the match.
"""

from typing import Iterable

from schemas.stats import StatCategory, StatLine
from stats.config import DEFAULT_WEIGHTS, PIWeights
from stats.outcomes import match_stat_lines, team_totals


def tracked_categories(stat_lines: Iterable[StatLine]) -> frozenset[StatCategory]:
    """
    Return the categories recorded by at least one stat-line.

    Points are always tracked.
    """
    rows = list(stat_lines)
    tracked = {StatCategory.POINTS}
    for category in StatCategory:
        if any(s.value(category) is not None for s in rows):
            tracked.add(category)
    return frozenset(tracked)


def compute_match_pi(
    stat_line: StatLine,
    stat_lines: Iterable[StatLine],
    weights: PIWeights = DEFAULT_WEIGHTS,
) -> float:
    """
    Calculate the Performance Index for one stat-line in its match.

    Weight pool (defaults):
        - Points: 50, always
        - Rebounds: +25 if tracked
        - Assists: +25 if tracked
        - Steals: +15 if tracked
        - Blocks: +15 if tracked

    Per-unit multipliers are each category's share of the pool times its
    scale (rebounds 6, assists 8, steals 7, blocks 7). Turnovers cost
    ``25 / total_weight * 6`` each when tracked but never join the pool.

    Args:
        stat_line: The stat-line to score
        stat_lines: The match's stat-lines, or any corpus containing them
        weights: Weight table, defaults to the canonical one

    Returns:
        Performance Index; 0.0 for every participant when neither side scored

    Examples:
        A points-only match reduces to the share of the winning score:
        20 points in a 20-15 game scores 100.0.
    """
    rows = match_stat_lines(stat_line, stat_lines)
    winning_score = max(team_totals(rows).values())

    # A scoreless match has nothing to normalize against
    if winning_score == 0:
        return 0.0

    tracked = tracked_categories(rows)

    pooled = {
        StatCategory.REBOUNDS: weights.rebounds_weight,
        StatCategory.ASSISTS: weights.assists_weight,
        StatCategory.STEALS: weights.steals_weight,
        StatCategory.BLOCKS: weights.blocks_weight,
    }
    total_weight = weights.points_weight + sum(
        weight for category, weight in pooled.items() if category in tracked
    )

    scales = {
        StatCategory.REBOUNDS: weights.rebounds_scale,
        StatCategory.ASSISTS: weights.assists_scale,
        StatCategory.STEALS: weights.steals_scale,
        StatCategory.BLOCKS: weights.blocks_scale,
    }

    points_weight = weights.points_weight / total_weight * weights.points_scale
    pi = stat_line.points / winning_score * points_weight

    for category, weight in pooled.items():
        if category in tracked:
            pi += (stat_line.value(category) or 0) * (weight / total_weight * scales[category])

    if StatCategory.TURNOVERS in tracked:
        turnovers_multiplier = weights.turnovers_weight / total_weight * weights.turnovers_scale
        pi -= (stat_line.turnovers or 0) * turnovers_multiplier

    return pi


def compute_match_pis(
    stat_lines: Iterable[StatLine],
    weights: PIWeights = DEFAULT_WEIGHTS,
) -> list[float]:
    """Score every stat-line of one match, in input order."""
    rows = list(stat_lines)
    return [compute_match_pi(s, rows, weights) for s in rows]
