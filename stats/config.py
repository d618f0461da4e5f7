"""
Performance Index Configuration

Immutable weight table for the match-level Performance Index.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PIWeights:
    """
    Immutable weights for the Performance Index.

    Points always hold ``points_weight``; each optional category joins the
    weight pool only when it was tracked for the match. A category's
    per-unit multiplier is ``(pool_weight / total_weight) * scale``.

    Attributes:
        points_weight: Base pool weight for points (always present)
        rebounds_weight: Pool weight added when rebounds are tracked
        assists_weight: Pool weight added when assists are tracked
        steals_weight: Pool weight added when steals are tracked
        blocks_weight: Pool weight added when blocks are tracked
        turnovers_weight: Weight the turnover penalty is drawn from (not pooled)
        points_scale: Scale applied to the normalized points share
        rebounds_scale: Per-rebound scale
        assists_scale: Per-assist scale
        steals_scale: Per-steal scale
        blocks_scale: Per-block scale
        turnovers_scale: Per-turnover penalty scale
    """

    points_weight: float = 50
    rebounds_weight: float = 25
    assists_weight: float = 25
    steals_weight: float = 15
    blocks_weight: float = 15
    turnovers_weight: float = 25

    points_scale: float = 100
    rebounds_scale: float = 6
    assists_scale: float = 8
    steals_scale: float = 7
    blocks_scale: float = 7
    turnovers_scale: float = 6

    def __post_init__(self):
        """Validate configuration."""
        if self.points_weight <= 0:
            raise ValueError("points_weight must be positive")
        for name in ("rebounds_weight", "assists_weight", "steals_weight", "blocks_weight", "turnovers_weight"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")


DEFAULT_WEIGHTS = PIWeights()
