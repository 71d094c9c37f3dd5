"""Input checks applied before data reaches the standings engine."""

import re
from typing import Optional

from league import DoublesResult, Mode, Result, SingleResult, result_matches_mode

MAX_NAME_LENGTH = 20

# Matches any sequence of whitespace (including Unicode whitespace like U+2006)
_WHITESPACE_RE = re.compile(r'\s+')


def normalize_name(value: str) -> str:
    """Collapse inner whitespace and strip the ends of a player name."""
    return _WHITESPACE_RE.sub(' ', value).strip()


def validate_name(name: str, roster: list[str]) -> str:
    """Validate a new player name against the current roster.

    Args:
        name: Raw name as typed by the user.
        roster: Names already taken.

    Returns:
        The normalized name.

    Raises:
        ValueError: If the name is empty, too long or already taken.
    """
    cleaned = normalize_name(name)
    if not cleaned:
        raise ValueError("Spielername darf nicht leer sein.")
    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValueError(
            f"Spielername '{cleaned}' ist laenger als {MAX_NAME_LENGTH} Zeichen."
        )
    if cleaned in roster:
        raise ValueError(f"Spieler '{cleaned}' existiert bereits.")
    return cleaned


def _check_goals(*goals) -> None:
    for value in goals:
        # bool is an int subclass but never a valid score
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Ungueltiger Spielstand: {value!r}")
        if value < 0:
            raise ValueError(f"Spielstand darf nicht negativ sein: {value}")


def _check_known(names, roster: list[str]) -> None:
    unknown = [n for n in names if n not in roster]
    if unknown:
        raise ValueError(f"Unbekannte Spieler: {', '.join(unknown)}")


def validate_result(
    result: Result,
    roster: Optional[list[str]] = None,
    mode: Optional[Mode] = None,
) -> None:
    """Reject results the engine must never see.

    Args:
        result: Result to check.
        roster: If given, every named player must be on it.
        mode: If given, the result must have the shape of this mode.

    Raises:
        ValueError: On duplicate players, wrong team sizes, unknown players,
            invalid scores or a result that does not fit the mode.
    """
    if not isinstance(result, (SingleResult, DoublesResult)):
        raise ValueError(f"Unbekannter Ergebnistyp: {type(result).__name__}")
    if mode is not None and not result_matches_mode(result, mode):
        raise ValueError(f"Ergebnis passt nicht zum Spielmodus {Mode(mode).value}")

    if isinstance(result, SingleResult):
        if result.home == result.away:
            raise ValueError("Heim- und Auswaertsspieler duerfen nicht identisch sein.")
        players = [result.home, result.away]
        goals = (result.home_goals, result.away_goals)
    else:
        if len(result.team_a) != 2 or len(result.team_b) != 2:
            raise ValueError("Jedes Team muss aus genau 2 Spielern bestehen.")
        players = [*result.team_a, *result.team_b, *result.sitting]
        if len(set(players)) != len(players):
            raise ValueError("Jeder Spieler darf nur einmal ausgewaehlt werden.")
        goals = (result.team_a_goals, result.team_b_goals)

    if roster is not None:
        _check_known(players, roster)
    _check_goals(*goals)
