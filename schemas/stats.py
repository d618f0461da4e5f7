"""
Stats Schemas

Pydantic models for pickup-game stat lines and the views derived from them.
Input models are frozen so the engine can never mutate a caller's corpus.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Team(str, Enum):
    """Side of a pickup match."""

    TEAM_A = "team_a"
    TEAM_B = "team_b"

    @property
    def opponent(self) -> "Team":
        return Team.TEAM_B if self is Team.TEAM_A else Team.TEAM_A


class Outcome(str, Enum):
    """Result of a match from one stat-line's point of view."""

    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


class StatCategory(str, Enum):
    """Box-score categories recorded per stat-line."""

    POINTS = "points"
    REBOUNDS = "rebounds"
    ASSISTS = "assists"
    STEALS = "steals"
    BLOCKS = "blocks"
    TURNOVERS = "turnovers"


# Categories that may be left untracked for a given match
OPTIONAL_CATEGORIES: tuple[StatCategory, ...] = (
    StatCategory.REBOUNDS,
    StatCategory.ASSISTS,
    StatCategory.STEALS,
    StatCategory.BLOCKS,
    StatCategory.TURNOVERS,
)


class LeaderboardCategory(str, Enum):
    """Columns the leaderboard can be ranked by."""

    POINTS = "points"
    REBOUNDS = "rebounds"
    ASSISTS = "assists"
    STEALS = "steals"
    BLOCKS = "blocks"
    PI = "pi"


# ------------------------------- Inputs ------------------------------- #


class StatLine(BaseModel):
    """
    One player's recorded performance in one match.

    ``points`` is mandatory. Every other category is ``None`` when it was
    not tracked for that match.
    """

    model_config = ConfigDict(frozen=True)

    # Strict: no bool, float or numeric-string coercion
    player_id: str = Field(min_length=1, strict=True)
    match_id: str = Field(min_length=1, strict=True)
    team: Team
    points: int = Field(ge=0, strict=True)
    rebounds: Optional[int] = Field(default=None, ge=0, strict=True)
    assists: Optional[int] = Field(default=None, ge=0, strict=True)
    steals: Optional[int] = Field(default=None, ge=0, strict=True)
    blocks: Optional[int] = Field(default=None, ge=0, strict=True)
    turnovers: Optional[int] = Field(default=None, ge=0, strict=True)

    @field_validator("player_id", "match_id")
    @classmethod
    def validate_id_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("id must not be blank")
        return v

    def value(self, category: StatCategory) -> Optional[int]:
        """Return the recorded value for a category, or None if untracked."""
        return getattr(self, category.value)


class Player(BaseModel):
    """Roster identity joined onto leaderboard rows."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    avatar_url: Optional[str] = None


# ------------------------------- Career ------------------------------- #


class CategoryAverages(BaseModel):
    """Per-game averages. ``None`` means the category was never tracked."""

    model_config = ConfigDict(frozen=True)

    points: float = 0.0
    rebounds: Optional[float] = None
    assists: Optional[float] = None
    steals: Optional[float] = None
    blocks: Optional[float] = None
    turnovers: Optional[float] = None

    def value(self, category: StatCategory) -> Optional[float]:
        return getattr(self, category.value)


class CategoryTotals(BaseModel):
    """Per-category sums. Untracked values add nothing."""

    model_config = ConfigDict(frozen=True)

    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    turnovers: int = 0

    def value(self, category: StatCategory) -> int:
        return getattr(self, category.value)


class PlayerCareerRecord(BaseModel):
    """Aggregate over every stat-line belonging to one player."""

    model_config = ConfigDict(frozen=True)

    player_id: str
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    averages: CategoryAverages = Field(default_factory=CategoryAverages)
    totals: CategoryTotals = Field(default_factory=CategoryTotals)
    average_pi: float = 0.0


class LeaderboardEntry(BaseModel):
    """A career record joined with the player's identity."""

    model_config = ConfigDict(frozen=True)

    player: Player
    record: PlayerCareerRecord

    def value(self, category: LeaderboardCategory) -> Optional[float]:
        """Return the sortable value for a leaderboard column."""
        if category is LeaderboardCategory.PI:
            return self.record.average_pi
        return self.record.averages.value(StatCategory(category.value))


# ------------------------------- Profile ------------------------------- #


class GameLogEntry(BaseModel):
    """One row of a player's game log."""

    model_config = ConfigDict(frozen=True)

    stat_line: StatLine
    outcome: Outcome
    pi: float


class PlayerProfile(BaseModel):
    """Career record plus the per-match game log behind it."""

    model_config = ConfigDict(frozen=True)

    record: PlayerCareerRecord
    game_log: list[GameLogEntry] = Field(default_factory=list)


# ------------------------------- Box Score ------------------------------- #


class BoxScoreRow(BaseModel):
    """A stat-line with its match PI."""

    model_config = ConfigDict(frozen=True)

    stat_line: StatLine
    pi: float


class TeamBoxScore(BaseModel):
    """One side of a match box score, rows ranked by PI."""

    model_config = ConfigDict(frozen=True)

    team: Team
    score: int = 0
    rows: list[BoxScoreRow] = Field(default_factory=list)
    totals: CategoryTotals = Field(default_factory=CategoryTotals)
    leaders: dict[StatCategory, int] = Field(default_factory=dict)
    top_performers: list[str] = Field(default_factory=list)


class BoxScore(BaseModel):
    """Both sides of one match."""

    model_config = ConfigDict(frozen=True)

    match_id: str
    team_a: TeamBoxScore
    team_b: TeamBoxScore
    winner: Optional[Team] = None
