"""Shared test fixtures."""

import pytest

from league import DoublesResult, SingleResult


@pytest.fixture
def four_players() -> list[str]:
    """A roster of exactly four players."""
    return ['Eli', 'Amit', 'Idan', 'Alon']


@pytest.fixture
def five_players() -> list[str]:
    """The default roster of five players."""
    return ['Eli', 'Amit', 'Idan', 'Alon', 'Mor']


@pytest.fixture
def single_log() -> list[SingleResult]:
    """A small 1v1 result log over the default roster."""
    return [
        SingleResult('Eli', 'Amit', 3, 1),
        SingleResult('Idan', 'Alon', 2, 2),
        SingleResult('Mor', 'Eli', 0, 1),
        SingleResult('Amit', 'Idan', 4, 0),
    ]


@pytest.fixture
def doubles_log() -> list[DoublesResult]:
    """A small 2v2 result log over the default roster."""
    return [
        DoublesResult(('Eli', 'Amit'), ('Idan', 'Alon'), 4, 2, sitting=('Mor',)),
        DoublesResult(('Eli', 'Mor'), ('Amit', 'Idan'), 1, 1, sitting=('Alon',)),
        DoublesResult(('Alon', 'Mor'), ('Eli', 'Idan'), 3, 0, sitting=('Amit',)),
    ]
