"""Round-robin fixture generation and reconciliation with the result log."""

import logging
from itertools import combinations
from typing import Optional

from league import (
    DoublesFixture,
    DoublesResult,
    Fixture,
    Mode,
    Reconciliation,
    Result,
    SingleFixture,
    SingleResult,
)

log = logging.getLogger(__name__)

# Index pairs splitting four players into two teams of two
_SPLITS = (
    ((0, 1), (2, 3)),
    ((0, 2), (1, 3)),
    ((0, 3), (1, 2)),
)


def _splits(group: tuple[str, ...], sitting: tuple[str, ...]) -> list[DoublesFixture]:
    """All three distinct 2v2 line-ups for a group of four players."""
    return [
        DoublesFixture(
            team_a=(group[a1], group[a2]),
            team_b=(group[b1], group[b2]),
            sitting=sitting,
        )
        for (a1, a2), (b1, b2) in _SPLITS
    ]


def generate_fixtures(roster: list[str], mode: Mode, rounds: int = 1) -> list[Fixture]:
    """Generate the round-robin fixture list for a roster.

    1v1: every pair of players once, the earlier roster entry at home.
    2v2: every group of four players in every one of its three splits, the
    rest of the roster sitting out. With exactly four players the three
    splits are repeated ``rounds`` times.

    Args:
        roster: Ordered, unique player names.
        mode: Match format.
        rounds: Number of repetitions for a four-player 2v2 roster.

    Returns:
        Fixtures in deterministic order.
    """
    if mode == Mode.ONE_VS_ONE:
        fixtures: list[Fixture] = [
            SingleFixture(home=home, away=away)
            for home, away in combinations(roster, 2)
        ]
    elif len(roster) == 4:
        fixtures = _splits(tuple(roster), ()) * max(rounds, 0)
    else:
        fixtures = []
        for group in combinations(roster, 4):
            sitting = tuple(name for name in roster if name not in group)
            fixtures.extend(_splits(group, sitting))

    log.debug("%d Begegnungen erzeugt (%s, %d Spieler)",
              len(fixtures), Mode(mode).value, len(roster))
    return fixtures


def fixture_matches(fixture: Fixture, result: Result) -> bool:
    """Structural equality between a fixture and a recorded result."""
    if isinstance(fixture, SingleFixture):
        return (
            isinstance(result, SingleResult)
            and fixture.home == result.home
            and fixture.away == result.away
        )
    return (
        isinstance(result, DoublesResult)
        and set(fixture.team_a) == set(result.team_a)
        and set(fixture.team_b) == set(result.team_b)
        and set(fixture.sitting) == set(result.sitting)
    )


def reconcile_fixture(fixture: Fixture, results: list[Result], mode: Mode) -> Reconciliation:
    """Check whether a fixture has been played.

    Args:
        fixture: A fixture produced by ``generate_fixtures``.
        results: The result log in recording order.
        mode: Current match format; results of the other shape never match.

    Returns:
        Reconciliation with the first matching result and the number of
        matching results in the log.
    """
    expected = SingleResult if mode == Mode.ONE_VS_ONE else DoublesResult
    matched: Optional[Result] = None
    times_played = 0

    for result in results:
        if not isinstance(result, expected) or not fixture_matches(fixture, result):
            continue
        times_played += 1
        if matched is None:
            matched = result

    return Reconciliation(
        fixture=fixture,
        completed=matched is not None,
        matched_result=matched,
        times_played=times_played,
    )


def reconcile_fixtures(
    fixtures: list[Fixture],
    results: list[Result],
    mode: Mode,
) -> list[Reconciliation]:
    """Reconcile a whole fixture list, keeping its order."""
    return [reconcile_fixture(f, results, mode) for f in fixtures]
