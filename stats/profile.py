"""
Player Profile

Career record plus a game log tagging each of the player's stat-lines
with its outcome and Performance Index.
"""

from typing import Iterable

from schemas.stats import GameLogEntry, PlayerProfile, StatLine
from stats.career import aggregate_career
from stats.config import DEFAULT_WEIGHTS, PIWeights
from stats.outcomes import resolve_outcome
from stats.performance_index import compute_match_pi


def build_game_log(
    player_id: str,
    corpus: Iterable[StatLine],
    weights: PIWeights = DEFAULT_WEIGHTS,
) -> list[GameLogEntry]:
    """Return one entry per stat-line of the player, in corpus order."""
    corpus = list(corpus)
    return [
        GameLogEntry(
            stat_line=s,
            outcome=resolve_outcome(s, corpus),
            pi=compute_match_pi(s, corpus, weights),
        )
        for s in corpus
        if s.player_id == player_id
    ]


def build_player_profile(
    player_id: str,
    corpus: Iterable[StatLine],
    weights: PIWeights = DEFAULT_WEIGHTS,
) -> PlayerProfile:
    corpus = list(corpus)
    return PlayerProfile(
        record=aggregate_career(player_id, None, corpus, weights),
        game_log=build_game_log(player_id, corpus, weights),
    )
