"""Session state: roster, result log and mode, with validated mutations."""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from league import (
    DoublesResult,
    Fixture,
    Mode,
    PlayerStats,
    Reconciliation,
    Result,
    StandingsRow,
)
from league.fixtures import generate_fixtures, reconcile_fixtures
from league.player_stats import player_stats
from league.standings import calculate_standings
from league.validation import normalize_name, validate_name, validate_result

log = logging.getLogger(__name__)

DEFAULT_PLAYERS = ('Eli', 'Amit', 'Idan', 'Alon', 'Mor')


def make_doubles_result(
    roster: list[str],
    team_a: tuple[str, str],
    team_b: tuple[str, str],
    team_a_goals: int,
    team_b_goals: int,
    note: Optional[str] = None,
) -> DoublesResult:
    """Build a 2v2 result whose sitting players are the rest of the roster."""
    playing = {*team_a, *team_b}
    return DoublesResult(
        team_a=tuple(team_a),
        team_b=tuple(team_b),
        team_a_goals=team_a_goals,
        team_b_goals=team_b_goals,
        sitting=tuple(name for name in roster if name not in playing),
        note=note,
    )


@dataclass(frozen=True)
class LeagueSession:
    """Immutable snapshot of the league; every mutation returns a new one."""

    roster: tuple[str, ...] = DEFAULT_PLAYERS
    results: tuple[Result, ...] = field(default_factory=tuple)
    mode: Mode = Mode.ONE_VS_ONE

    # -- roster ---------------------------------------------------------

    def add_player(self, name: str) -> 'LeagueSession':
        cleaned = validate_name(name, list(self.roster))
        log.info("Spieler hinzugefuegt: %s", cleaned)
        return replace(self, roster=self.roster + (cleaned,))

    def remove_player(self, name: str) -> 'LeagueSession':
        if name not in self.roster:
            raise ValueError(f"Spieler '{name}' nicht im Kader.")
        return replace(self, roster=tuple(n for n in self.roster if n != name))

    def rename_player(self, old: str, new: str) -> 'LeagueSession':
        """Rename a roster entry.

        The result log is left as it is, so results naming ``old`` become
        orphans until repaired with ``league.orphans.remap_player``.
        """
        if old not in self.roster:
            raise ValueError(f"Spieler '{old}' nicht im Kader.")
        if normalize_name(new) == old:
            return self
        others = [n for n in self.roster if n != old]
        cleaned = validate_name(new, others)
        log.info("Spieler umbenannt: %s -> %s", old, cleaned)
        return replace(
            self,
            roster=tuple(cleaned if n == old else n for n in self.roster),
        )

    # -- result log -----------------------------------------------------

    def add_result(self, result: Result) -> 'LeagueSession':
        validate_result(result, list(self.roster), self.mode)
        return replace(self, results=self.results + (result,))

    def edit_result(self, index: int, result: Result) -> 'LeagueSession':
        self._check_index(index)
        validate_result(result, list(self.roster), self.mode)
        results = list(self.results)
        results[index] = result
        return replace(self, results=tuple(results))

    def delete_result(self, index: int) -> 'LeagueSession':
        self._check_index(index)
        return replace(
            self,
            results=self.results[:index] + self.results[index + 1:],
        )

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.results):
            raise IndexError(f"Kein Ergebnis mit Index {index}.")

    def set_mode(self, mode: Mode) -> 'LeagueSession':
        """Switch the match format; existing results are kept unconverted."""
        return replace(self, mode=Mode(mode))

    # -- engine views ---------------------------------------------------

    def standings(self) -> list[StandingsRow]:
        return calculate_standings(list(self.roster), list(self.results), self.mode)

    def stats_for(self, name: str) -> PlayerStats:
        return player_stats(name, list(self.results), self.mode, list(self.roster))

    def fixtures(self, rounds: int = 1) -> list[Fixture]:
        return generate_fixtures(list(self.roster), self.mode, rounds)

    def fixture_status(self, rounds: int = 1) -> list[Reconciliation]:
        return reconcile_fixtures(self.fixtures(rounds), list(self.results), self.mode)


def default_session() -> LeagueSession:
    """Fresh session with the default players, no results, 1v1."""
    return LeagueSession()
