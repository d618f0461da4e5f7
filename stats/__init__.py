"""
Stats Aggregation Engine

Pure functions deriving Performance Index, outcomes, career records,
leaderboards and box scores from a flat corpus of stat-lines.
"""

from stats.box_score import build_box_score, match_score
from stats.career import aggregate_career, category_average
from stats.config import DEFAULT_WEIGHTS, PIWeights
from stats.corpus import StatLineContractError, load_stat_lines
from stats.formatting import format_average, format_career_averages
from stats.leaderboard import build_leaderboard, sort_leaderboard
from stats.outcomes import match_stat_lines, resolve_outcome, team_totals, winning_team
from stats.performance_index import compute_match_pi, compute_match_pis, tracked_categories
from stats.profile import build_game_log, build_player_profile

__all__ = [
    # Configuration
    "PIWeights",
    "DEFAULT_WEIGHTS",
    # Corpus
    "load_stat_lines",
    "StatLineContractError",
    # Performance Index
    "compute_match_pi",
    "compute_match_pis",
    "tracked_categories",
    # Outcomes
    "resolve_outcome",
    "match_stat_lines",
    "team_totals",
    "winning_team",
    # Career
    "aggregate_career",
    "category_average",
    # Leaderboard
    "build_leaderboard",
    "sort_leaderboard",
    # Presentation views
    "build_box_score",
    "match_score",
    "build_game_log",
    "build_player_profile",
    "format_average",
    "format_career_averages",
]
