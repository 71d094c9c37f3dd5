"""JSON key-value persistence of a league session."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from league import DoublesResult, Mode, Result, SingleResult
from league.session import LeagueSession, default_session
from league.validation import validate_name, validate_result

log = logging.getLogger(__name__)

KEY_PLAYERS = 'players'
KEY_RESULTS = 'results'
KEY_MODE = 'gameMode'


def _split_team(value: Any) -> tuple[str, ...]:
    """Accept a list of names or a legacy comma-joined string."""
    if isinstance(value, str):
        return tuple(p.strip() for p in value.split(',') if p.strip())
    return tuple(str(p) for p in value)


def _goals(value: Any) -> int:
    """Accept whole numbers only; 2.0 is read as 2, 2.7 is rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Ungueltiger Spielstand: {value!r}")
    if int(value) != value:
        raise ValueError(f"Spielstand ist keine ganze Zahl: {value!r}")
    return int(value)


def result_to_dict(result: Result) -> dict:
    """Serialize a result for the JSON store."""
    if isinstance(result, SingleResult):
        data = {
            'home': result.home,
            'away': result.away,
            'homeGoals': result.home_goals,
            'awayGoals': result.away_goals,
        }
    else:
        data = {
            'teamA': list(result.team_a),
            'teamB': list(result.team_b),
            'teamAGoals': result.team_a_goals,
            'teamBGoals': result.team_b_goals,
            'sitting': list(result.sitting),
        }
    if result.note:
        data['note'] = result.note
    return data


def result_from_dict(data: dict) -> Result:
    """Deserialize one stored result.

    Raises:
        ValueError: If the entry has neither 1v1 nor 2v2 shape.
        KeyError: If a required field is missing.
    """
    note = data.get('note') or None
    if 'home' in data:
        return SingleResult(
            home=str(data['home']),
            away=str(data['away']),
            home_goals=_goals(data['homeGoals']),
            away_goals=_goals(data['awayGoals']),
            note=note,
        )
    if 'teamA' in data:
        sitting = data.get('sitting')
        if sitting is None:
            legacy = data.get('sittingPlayer')
            sitting = [legacy] if legacy else []
        team_a = _split_team(data['teamA'])
        team_b = _split_team(data['teamB'])
        if len(team_a) != 2 or len(team_b) != 2:
            raise ValueError(f"Teams muessen 2 Spieler haben: {team_a}, {team_b}")
        return DoublesResult(
            team_a=team_a,
            team_b=team_b,
            team_a_goals=_goals(data['teamAGoals']),
            team_b_goals=_goals(data['teamBGoals']),
            sitting=_split_team(sitting),
            note=note,
        )
    raise ValueError(f"Unbekanntes Ergebnisformat: {sorted(data)}")


def session_to_dict(session: LeagueSession) -> dict:
    return {
        KEY_PLAYERS: list(session.roster),
        KEY_RESULTS: [result_to_dict(r) for r in session.results],
        KEY_MODE: session.mode.value,
    }


def session_from_dict(data: dict) -> LeagueSession:
    """Build a session from the stored keys; missing keys fall back to defaults.

    Roster names get the same checks as names typed by the user. Results get
    the structural checks only: they may name players no longer on the roster
    or belong to the other mode, and are kept for the engine to ignore.

    Raises:
        ValueError: If a key holds a value of the wrong type, a roster name is
            invalid or duplicated, or the mode is unknown.
    """
    default = default_session()

    raw_players = data.get(KEY_PLAYERS, list(default.roster))
    if not isinstance(raw_players, list) or not all(isinstance(p, str) for p in raw_players):
        raise ValueError(f"'{KEY_PLAYERS}' muss eine Liste von Namen sein.")
    players: list[str] = []
    for name in raw_players:
        players.append(validate_name(name, players))

    raw_results = data.get(KEY_RESULTS, [])
    if not isinstance(raw_results, list):
        raise ValueError(f"'{KEY_RESULTS}' muss eine Liste sein.")

    try:
        mode = Mode(data.get(KEY_MODE, default.mode.value))
    except ValueError as exc:
        raise ValueError(f"Unbekannter Spielmodus: {data.get(KEY_MODE)!r}") from exc

    results: list[Result] = []
    for num, entry in enumerate(raw_results, start=1):
        try:
            result = result_from_dict(entry)
            validate_result(result)
            results.append(result)
        except (ValueError, KeyError, TypeError, AttributeError, OverflowError) as exc:
            log.warning("Ergebnis %d uebersprungen: %s", num, exc)

    return LeagueSession(roster=tuple(players), results=tuple(results), mode=mode)


def load_session(path: str | Path) -> LeagueSession:
    """Load a session from a JSON file.

    A missing file yields the default session.

    Raises:
        ValueError: If the file is not valid JSON or has the wrong structure.
    """
    path = Path(path)
    if not path.exists():
        log.info("Keine Datei %s gefunden, starte mit Standardwerten", path)
        return default_session()

    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Datei {path} ist kein gueltiges JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Datei {path} enthaelt kein JSON-Objekt.")

    session = session_from_dict(data)
    log.info("%d Spieler, %d Ergebnisse gelesen aus %s",
             len(session.roster), len(session.results), path)
    return session


def save_session(session: LeagueSession, path: str | Path, indent: Optional[int] = 2) -> None:
    """Write a session to a JSON file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(session_to_dict(session), indent=indent, ensure_ascii=False),
        encoding='utf-8',
    )
    log.info("Spielstand gespeichert: %s", path)
