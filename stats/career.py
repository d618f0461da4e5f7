"""
Career Aggregator

Folds a player's stat-lines into per-category averages, totals,
win/loss/tie tallies and an average Performance Index.

Averages only count games where the category was tracked, so a player
who never had rebounds recorded reports no data rather than 0.0.
"""

from collections import Counter
from typing import Iterable, Optional

from schemas.stats import (
    OPTIONAL_CATEGORIES,
    CategoryAverages,
    CategoryTotals,
    Outcome,
    PlayerCareerRecord,
    StatCategory,
    StatLine,
)
from stats.config import DEFAULT_WEIGHTS, PIWeights
from stats.outcomes import resolve_outcome
from stats.performance_index import compute_match_pi


def category_average(stat_lines: Iterable[StatLine], category: StatCategory) -> Optional[float]:
    """
    Average a category over the stat-lines that tracked it.

    Returns:
        The mean, or None when no stat-line tracked the category
    """
    values = [v for v in (s.value(category) for s in stat_lines) if v is not None]
    if not values:
        return None
    return sum(values) / len(values)


def aggregate_career(
    player_id: str,
    player_stat_lines: Optional[Iterable[StatLine]],
    corpus: Iterable[StatLine],
    weights: PIWeights = DEFAULT_WEIGHTS,
) -> PlayerCareerRecord:
    """
    Build a player's career record.

    Args:
        player_id: Player to aggregate
        player_stat_lines: The player's stat-lines. Rows for other players
            are ignored; None means "take them from the corpus".
        corpus: Every stat-line, used for match context (outcomes and PI)
        weights: PI weight table

    Returns:
        PlayerCareerRecord; zero games played yields zero counts, a 0.0
        points average and PI, and no data for the optional categories
    """
    corpus = list(corpus)
    source = corpus if player_stat_lines is None else player_stat_lines
    rows = [s for s in source if s.player_id == player_id]

    if not rows:
        return PlayerCareerRecord(player_id=player_id)

    by_match: dict[str, list[StatLine]] = {}
    for s in corpus:
        by_match.setdefault(s.match_id, []).append(s)

    outcomes = Counter(resolve_outcome(s, by_match.get(s.match_id, [])) for s in rows)
    pis = [compute_match_pi(s, by_match.get(s.match_id, []), weights) for s in rows]

    averages = {StatCategory.POINTS.value: sum(s.points for s in rows) / len(rows)}
    for category in OPTIONAL_CATEGORIES:
        averages[category.value] = category_average(rows, category)

    totals = {
        category.value: sum(s.value(category) or 0 for s in rows)
        for category in StatCategory
    }

    return PlayerCareerRecord(
        player_id=player_id,
        games_played=len(rows),
        wins=outcomes[Outcome.WIN],
        losses=outcomes[Outcome.LOSE],
        ties=outcomes[Outcome.TIE],
        averages=CategoryAverages(**averages),
        totals=CategoryTotals(**totals),
        average_pi=sum(pis) / len(pis),
    )
