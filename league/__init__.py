"""Core module for league-table."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

POINTS_WIN = 3
POINTS_DRAW = 1
POINTS_LOSS = 0


class Mode(str, Enum):
    """Match format applied to the whole result log."""

    ONE_VS_ONE = '1v1'
    TWO_VS_TWO = '2v2'


@dataclass(frozen=True)
class SingleResult:
    """A recorded 1v1 match."""

    home: str
    away: str
    home_goals: int
    away_goals: int
    note: Optional[str] = None


@dataclass(frozen=True)
class DoublesResult:
    """A recorded 2v2 match."""

    team_a: tuple[str, str]
    team_b: tuple[str, str]
    team_a_goals: int
    team_b_goals: int
    sitting: tuple[str, ...] = ()
    note: Optional[str] = None


@dataclass(frozen=True)
class SingleFixture:
    """An unplayed 1v1 pairing."""

    home: str
    away: str


@dataclass(frozen=True)
class DoublesFixture:
    """An unplayed 2v2 grouping."""

    team_a: tuple[str, str]
    team_b: tuple[str, str]
    sitting: tuple[str, ...] = ()


Result = Union[SingleResult, DoublesResult]
Fixture = Union[SingleFixture, DoublesFixture]


@dataclass
class StandingsRow:
    """Aggregated statistics of one player."""

    name: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against


@dataclass
class PlayerStats:
    """Aggregate and match history of a single player."""

    row: StandingsRow
    history: list[Result] = field(default_factory=list)


@dataclass(frozen=True)
class Reconciliation:
    """Completion status of a fixture against the result log."""

    fixture: Fixture
    completed: bool
    matched_result: Optional[Result] = None
    times_played: int = 0


def result_matches_mode(result: Result, mode: Mode) -> bool:
    """Return True if the result has the shape expected by ``mode``."""
    if mode == Mode.ONE_VS_ONE:
        return isinstance(result, SingleResult)
    return isinstance(result, DoublesResult)
