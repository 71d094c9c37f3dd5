"""Per-player aggregate statistics and match history."""

from typing import Optional

from league import (
    DoublesResult,
    Mode,
    PlayerStats,
    Result,
    SingleResult,
    StandingsRow,
    result_matches_mode,
)
from league.standings import apply_outcome


def _single_goals(
    name: str,
    result: SingleResult,
    roster: Optional[set[str]],
) -> Optional[tuple[int, int]]:
    """Return (goals_for, goals_against) if the result counts for ``name``."""
    if name == result.home:
        opponent = result.away
        goals = (result.home_goals, result.away_goals)
    elif name == result.away:
        opponent = result.home
        goals = (result.away_goals, result.home_goals)
    else:
        return None

    if roster is not None and (name not in roster or opponent not in roster):
        return None
    return goals


def _doubles_goals(name: str, result: DoublesResult) -> Optional[tuple[int, int]]:
    if name in result.team_a:
        return (result.team_a_goals, result.team_b_goals)
    if name in result.team_b:
        return (result.team_b_goals, result.team_a_goals)
    return None


def appears_in(name: str, result: Result) -> bool:
    """Check whether a player took part in (or sat out) a result."""
    if isinstance(result, SingleResult):
        return name in (result.home, result.away)
    return (
        name in result.team_a
        or name in result.team_b
        or name in result.sitting
    )


def player_stats(
    name: str,
    results: list[Result],
    mode: Mode,
    roster: Optional[list[str]] = None,
) -> PlayerStats:
    """Collect the statistics and history of one player.

    The history lists every result of the current mode that mentions the
    player, sitting out a 2v2 match included. Sitting out does not count
    towards the aggregate.

    Args:
        name: Player name.
        results: The result log in recording order.
        mode: Current match format.
        roster: If given, 1v1 results against players outside the roster are
            left out of the aggregate, matching ``calculate_standings``.

    Returns:
        PlayerStats with the aggregate row and the history in log order.
    """
    roster_names = set(roster) if roster is not None else None
    row = StandingsRow(name=name)
    history: list[Result] = []

    for result in results:
        if not result_matches_mode(result, mode) or not appears_in(name, result):
            continue
        history.append(result)

        if isinstance(result, SingleResult):
            goals = _single_goals(name, result, roster_names)
        else:
            goals = _doubles_goals(name, result)
        if goals is not None:
            apply_outcome(row, *goals)

    return PlayerStats(row=row, history=history)
