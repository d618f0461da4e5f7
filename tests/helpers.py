# tests/helpers.py

from schemas.stats import Player, StatLine, Team


def make_line(player_id: str, match_id: str, team: str, points: int, **stats) -> StatLine:
    """Build a StatLine; unspecified optional categories are untracked."""
    return StatLine(
        player_id=player_id,
        match_id=match_id,
        team=Team(team),
        points=points,
        **stats,
    )


def make_player(player_id: str, name: str = None) -> Player:
    return Player(id=player_id, name=name or player_id.upper())


def sample_corpus() -> list[StatLine]:
    """
    Three matches between four players.

    m1: team_a (p1 20, p3 10) beats team_b (p2 15, p4 12)   30-27
    m2: team_a (p1 8, p2 10) loses to team_b (p3 18, p4 6)   18-24
    m3: team_a (p1 11) ties team_b (p2 11)                   11-11
    """
    return [
        make_line("p1", "m1", "team_a", 20, rebounds=5, assists=3),
        make_line("p3", "m1", "team_a", 10, rebounds=2, assists=1),
        make_line("p2", "m1", "team_b", 15),
        make_line("p4", "m1", "team_b", 12, rebounds=7),
        make_line("p1", "m2", "team_a", 8, steals=2, blocks=1, turnovers=3),
        make_line("p2", "m2", "team_a", 10, steals=1, turnovers=1),
        make_line("p3", "m2", "team_b", 18, blocks=2),
        make_line("p4", "m2", "team_b", 6),
        make_line("p1", "m3", "team_a", 11),
        make_line("p2", "m3", "team_b", 11),
    ]
