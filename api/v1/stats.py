"""
Stats Endpoints

Stateless compute endpoints over a caller-supplied corpus snapshot.
Each request carries every stat-line it needs; nothing is persisted.
"""

from fastapi import APIRouter

from core.logging import get_logger
from core.settings import settings
from schemas.common import success_response
from schemas.requests import CorpusRequest, LeaderboardRequest, StatLineRequest
from schemas.stats import LeaderboardCategory
from stats import (
    aggregate_career,
    build_box_score,
    build_leaderboard,
    build_player_profile,
    compute_match_pi,
    format_career_averages,
    resolve_outcome,
    sort_leaderboard,
)

router = APIRouter(prefix="/stats", tags=["Stats"])
log = get_logger("stats_api")


@router.post("/match-pi")
async def match_pi(request: StatLineRequest) -> dict:
    """Score one stat-line against its match."""
    pi = compute_match_pi(request.stat_line, request.corpus())
    return success_response(
        message=f"PI computed for {request.stat_line.player_id} in {request.stat_line.match_id}",
        data={"pi": pi},
    )


@router.post("/outcome")
async def outcome(request: StatLineRequest) -> dict:
    """Resolve win/lose/tie for one stat-line."""
    result = resolve_outcome(request.stat_line, request.corpus())
    return success_response(
        message=f"Outcome resolved for {request.stat_line.player_id} in {request.stat_line.match_id}",
        data={"outcome": result.value},
    )


@router.post("/players/{player_id}/career")
async def player_career(player_id: str, request: CorpusRequest) -> dict:
    """Career averages, record and average PI for one player."""
    record = aggregate_career(player_id, None, request.corpus())
    return success_response(
        message=f"Career record for {player_id}",
        data={
            "record": record.model_dump(mode="json"),
            "display": format_career_averages(record),
        },
    )


@router.post("/players/{player_id}/profile")
async def player_profile(player_id: str, request: CorpusRequest) -> dict:
    """
    Career record plus a game log.

    Each game log row carries its win/lose/tie tag and match PI.
    """
    profile = build_player_profile(player_id, request.corpus())
    log.debug("profile_built", player_id=player_id, games=profile.record.games_played)
    return success_response(
        message=f"Profile for {player_id}",
        data={
            **profile.model_dump(mode="json"),
            "display": format_career_averages(profile.record),
        },
    )


@router.post("/matches/{match_id}/box-score")
async def match_box_score(match_id: str, request: CorpusRequest) -> dict:
    """Both sides of one match ranked by PI."""
    box_score = build_box_score(match_id, request.corpus())
    return success_response(
        message=f"Box score for {match_id}",
        data=box_score.model_dump(mode="json"),
    )


@router.post("/leaderboard")
async def leaderboard(request: LeaderboardRequest) -> dict:
    """
    Build and rank the leaderboard.

    Uses the configured default category when sort_by is omitted.
    """
    category = request.sort_by or LeaderboardCategory(settings.default_leaderboard_category)
    entries = sort_leaderboard(build_leaderboard(request.roster, request.corpus()), category)

    return success_response(
        message=f"Leaderboard for {len(entries)} players sorted by {category.value}",
        data={
            "sort_by": category.value,
            "entries": [entry.model_dump(mode="json") for entry in entries],
        },
    )
