"""
Leaderboard Builder

Joins every roster player with a career record computed against the
full corpus. Ranking is a separate step so a built leaderboard can be
re-sorted by any column without recomputation.
"""

from typing import Iterable

from core.logging import get_logger
from schemas.stats import LeaderboardCategory, LeaderboardEntry, Player, StatLine
from stats.career import aggregate_career
from stats.config import DEFAULT_WEIGHTS, PIWeights

log = get_logger("stats")


def build_leaderboard(
    roster: Iterable[Player],
    corpus: Iterable[StatLine],
    weights: PIWeights = DEFAULT_WEIGHTS,
) -> list[LeaderboardEntry]:
    """
    Build one leaderboard entry per roster player.

    Players without stat-lines are included with zero games played.
    The returned order carries no meaning; use sort_leaderboard() to rank.
    """
    corpus = list(corpus)

    by_player: dict[str, list[StatLine]] = {}
    for s in corpus:
        by_player.setdefault(s.player_id, []).append(s)

    entries = [
        LeaderboardEntry(
            player=player,
            record=aggregate_career(player.id, by_player.get(player.id, []), corpus, weights),
        )
        for player in roster
    ]

    log.debug("leaderboard_built", players=len(entries), stat_lines=len(corpus))
    return entries


def sort_leaderboard(
    entries: Iterable[LeaderboardEntry],
    category: LeaderboardCategory = LeaderboardCategory.PI,
) -> list[LeaderboardEntry]:
    """
    Rank entries by a category average, highest first.

    The sort is stable, so equal values keep their input order. Entries
    with no data for the category rank below every numeric value.
    """
    category = LeaderboardCategory(category)

    def sort_key(entry: LeaderboardEntry) -> tuple[bool, float]:
        value = entry.value(category)
        return (value is not None, value if value is not None else 0.0)

    return sorted(entries, key=sort_key, reverse=True)
