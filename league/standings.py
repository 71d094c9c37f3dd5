"""Standings calculation from recorded match results."""

import logging

from league import (
    POINTS_DRAW,
    POINTS_LOSS,
    POINTS_WIN,
    DoublesResult,
    Mode,
    Result,
    SingleResult,
    StandingsRow,
    result_matches_mode,
)

log = logging.getLogger(__name__)


def apply_outcome(row: StandingsRow, goals_for: int, goals_against: int) -> None:
    """Add one played match to a standings row.

    Args:
        row: Row to update in place.
        goals_for: Goals scored by the player (or the player's team).
        goals_against: Goals conceded by the player (or the player's team).
    """
    row.played += 1
    row.goals_for += goals_for
    row.goals_against += goals_against

    if goals_for > goals_against:
        row.won += 1
        row.points += POINTS_WIN
    elif goals_for < goals_against:
        row.lost += 1
        row.points += POINTS_LOSS
    else:
        row.drawn += 1
        row.points += POINTS_DRAW


def sort_key(row: StandingsRow) -> tuple[int, int, int]:
    """Ranking key: points, goal difference, goals scored."""
    return (row.points, row.goal_difference, row.goals_for)


def _apply_single(table: dict[str, StandingsRow], result: SingleResult) -> None:
    home = table.get(result.home)
    away = table.get(result.away)
    # Orphaned results count for nobody
    if home is None or away is None:
        log.debug("Ergebnis %s - %s uebersprungen: Spieler nicht im Kader",
                  result.home, result.away)
        return

    apply_outcome(home, result.home_goals, result.away_goals)
    apply_outcome(away, result.away_goals, result.home_goals)


def _apply_doubles(table: dict[str, StandingsRow], result: DoublesResult) -> None:
    sides = (
        (result.team_a, result.team_a_goals, result.team_b_goals),
        (result.team_b, result.team_b_goals, result.team_a_goals),
    )
    for team, goals_for, goals_against in sides:
        for name in team:
            row = table.get(name)
            if row is None:
                log.debug("Spieler %s nicht im Kader, uebersprungen", name)
                continue
            apply_outcome(row, goals_for, goals_against)


def calculate_standings(
    roster: list[str],
    results: list[Result],
    mode: Mode,
) -> list[StandingsRow]:
    """Build the ranked standings table.

    Results whose shape does not match ``mode`` are ignored. A 1v1 result
    naming a player outside the roster is skipped as a whole; in a 2v2
    result only the unknown players are skipped.

    Args:
        roster: Ordered, unique player names.
        results: The result log in recording order.
        mode: Current match format.

    Returns:
        One StandingsRow per roster entry, best first. Ties on points, goal
        difference and goals scored keep roster order.
    """
    table = {name: StandingsRow(name=name) for name in roster}

    for result in results:
        if not result_matches_mode(result, mode):
            continue
        if isinstance(result, SingleResult):
            _apply_single(table, result)
        else:
            _apply_doubles(table, result)

    # dicts keep insertion order, so this is roster order before sorting
    return sorted(table.values(), key=sort_key, reverse=True)
