"""
Stats API Request Schemas

Request bodies for the stateless stats endpoints. The caller supplies the
corpus snapshot with every request; the service stores nothing.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from schemas.stats import LeaderboardCategory, Player, StatLine
from stats.corpus import load_stat_lines


class CorpusRequest(BaseModel):
    """
    A snapshot of stat rows taken from one query.

    Rows are kept raw so a bad row is reported with its position in the
    snapshot; call corpus() to validate them.
    """

    stat_lines: list[dict[str, Any]] = Field(default_factory=list)

    def corpus(self) -> list[StatLine]:
        return load_stat_lines(self.stat_lines)


class StatLineRequest(CorpusRequest):
    """A single target stat-line evaluated against a corpus."""

    stat_line: StatLine


class LeaderboardRequest(CorpusRequest):
    """Roster and corpus for a leaderboard build."""

    roster: list[Player] = Field(default_factory=list)
    sort_by: Optional[LeaderboardCategory] = None
