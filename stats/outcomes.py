"""
Outcome Resolver

Decides win/lose/tie for a stat-line by comparing team point totals
within its match.
"""

from typing import Iterable, Optional

from schemas.stats import Outcome, StatLine, Team


def match_stat_lines(stat_line: StatLine, stat_lines: Iterable[StatLine]) -> list[StatLine]:
    """
    Return every stat-line sharing ``stat_line``'s match.

    ``stat_lines`` may be the match's rows or a whole corpus. The target is
    always part of the result, so an orphan row becomes a one-sided match.
    """
    rows = [s for s in stat_lines if s.match_id == stat_line.match_id]
    if stat_line not in rows:
        rows.append(stat_line)
    return rows


def team_totals(stat_lines: Iterable[StatLine]) -> dict[Team, int]:
    """
    Sum points per team. An empty team scores 0.

    Examples:
        >>> team_totals([])
        {<Team.TEAM_A: 'team_a'>: 0, <Team.TEAM_B: 'team_b'>: 0}
    """
    totals = {Team.TEAM_A: 0, Team.TEAM_B: 0}
    for s in stat_lines:
        totals[s.team] += s.points
    return totals


def winning_team(stat_lines: Iterable[StatLine]) -> Optional[Team]:
    """Return the side with more points, or None on a tie."""
    totals = team_totals(stat_lines)
    if totals[Team.TEAM_A] == totals[Team.TEAM_B]:
        return None
    return max(totals, key=totals.get)


def resolve_outcome(stat_line: StatLine, stat_lines: Iterable[StatLine]) -> Outcome:
    """
    Resolve the result of a match for one stat-line.

    Args:
        stat_line: The stat-line being judged
        stat_lines: The match's stat-lines, or any corpus containing them

    Returns:
        WIN if the stat-line's team outscored the other side, LOSE if it
        was outscored, TIE otherwise
    """
    totals = team_totals(match_stat_lines(stat_line, stat_lines))
    own = totals[stat_line.team]
    opponent = totals[stat_line.team.opponent]

    if own > opponent:
        return Outcome.WIN
    if own < opponent:
        return Outcome.LOSE
    return Outcome.TIE
