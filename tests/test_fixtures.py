"""Tests for league.fixtures module."""

from itertools import combinations

import pytest

from league import DoublesFixture, DoublesResult, Mode, SingleFixture, SingleResult
from league.fixtures import (
    fixture_matches,
    generate_fixtures,
    reconcile_fixture,
    reconcile_fixtures,
)


def _split(fixture: DoublesFixture) -> frozenset:
    return frozenset((frozenset(fixture.team_a), frozenset(fixture.team_b)))


class TestSingleFixtures:
    """Tests for 1v1 round-robin generation."""

    def test_five_players_ten_fixtures(self, five_players):
        fixtures = generate_fixtures(five_players, Mode.ONE_VS_ONE)
        assert len(fixtures) == 10
        pairs = {frozenset((f.home, f.away)) for f in fixtures}
        assert pairs == {frozenset(p) for p in combinations(five_players, 2)}

    def test_earlier_player_at_home(self, five_players):
        fixtures = generate_fixtures(five_players, Mode.ONE_VS_ONE)
        for f in fixtures:
            assert five_players.index(f.home) < five_players.index(f.away)

    def test_order(self):
        fixtures = generate_fixtures(['A', 'B', 'C'], Mode.ONE_VS_ONE)
        assert fixtures == [
            SingleFixture('A', 'B'),
            SingleFixture('A', 'C'),
            SingleFixture('B', 'C'),
        ]

    def test_rounds_ignored(self, five_players):
        assert len(generate_fixtures(five_players, Mode.ONE_VS_ONE, rounds=3)) == 10

    @pytest.mark.parametrize('roster', [[], ['A']])
    def test_too_few_players(self, roster):
        assert generate_fixtures(roster, Mode.ONE_VS_ONE) == []


class TestDoublesFixtures:
    """Tests for 2v2 generation."""

    def test_four_players_one_round(self, four_players):
        fixtures = generate_fixtures(four_players, Mode.TWO_VS_TWO)
        assert len(fixtures) == 3
        assert all(f.sitting == () for f in fixtures)
        assert len({_split(f) for f in fixtures}) == 3

    def test_four_players_repeated_rounds(self, four_players):
        fixtures = generate_fixtures(four_players, Mode.TWO_VS_TWO, rounds=3)
        assert len(fixtures) == 9
        for start in range(0, 9, 3):
            round_fixtures = fixtures[start:start + 3]
            assert len({_split(f) for f in round_fixtures}) == 3
            assert round_fixtures == fixtures[:3]

    def test_zero_rounds(self, four_players):
        assert generate_fixtures(four_players, Mode.TWO_VS_TWO, rounds=0) == []

    def test_splits_order(self, four_players):
        fixtures = generate_fixtures(four_players, Mode.TWO_VS_TWO)
        assert [(f.team_a, f.team_b) for f in fixtures] == [
            (('Eli', 'Amit'), ('Idan', 'Alon')),
            (('Eli', 'Idan'), ('Amit', 'Alon')),
            (('Eli', 'Alon'), ('Amit', 'Idan')),
        ]

    def test_five_players(self, five_players):
        fixtures = generate_fixtures(five_players, Mode.TWO_VS_TWO, rounds=7)
        # five groups of four, three splits each
        assert len(fixtures) == 15
        for f in fixtures:
            playing = {*f.team_a, *f.team_b}
            assert len(playing) == 4
            assert set(f.sitting) == set(five_players) - playing
        assert len({(_split(f), f.sitting) for f in fixtures}) == 15

    def test_first_group_sits_out_last_player(self, five_players):
        fixtures = generate_fixtures(five_players, Mode.TWO_VS_TWO)
        assert fixtures[0].sitting == ('Mor',)

    def test_six_players(self):
        roster = ['A', 'B', 'C', 'D', 'E', 'F']
        fixtures = generate_fixtures(roster, Mode.TWO_VS_TWO)
        assert len(fixtures) == 15 * 3
        assert all(len(f.sitting) == 2 for f in fixtures)

    def test_three_players(self):
        assert generate_fixtures(['A', 'B', 'C'], Mode.TWO_VS_TWO) == []

    def test_deterministic(self, five_players):
        assert generate_fixtures(five_players, Mode.TWO_VS_TWO) == \
            generate_fixtures(five_players, Mode.TWO_VS_TWO)


class TestFixtureMatches:
    """Tests for structural equality."""

    def test_single_exact(self):
        assert fixture_matches(SingleFixture('A', 'B'), SingleResult('A', 'B', 0, 0))

    def test_single_reversed_does_not_match(self):
        assert not fixture_matches(SingleFixture('A', 'B'), SingleResult('B', 'A', 0, 0))

    def test_doubles_member_order_irrelevant(self):
        fixture = DoublesFixture(('A', 'B'), ('C', 'D'), ('E',))
        result = DoublesResult(('B', 'A'), ('D', 'C'), 2, 1, sitting=('E',))
        assert fixture_matches(fixture, result)

    def test_doubles_sitting_must_match(self):
        fixture = DoublesFixture(('A', 'B'), ('C', 'D'), ('E',))
        result = DoublesResult(('A', 'B'), ('C', 'D'), 2, 1, sitting=())
        assert not fixture_matches(fixture, result)

    def test_shape_mismatch(self):
        assert not fixture_matches(
            SingleFixture('A', 'B'),
            DoublesResult(('A', 'B'), ('C', 'D'), 1, 0),
        )


class TestReconcile:
    """Tests for fixture completion status."""

    def test_pending_then_completed_then_pending(self, five_players):
        fixture = generate_fixtures(five_players, Mode.ONE_VS_ONE)[0]
        results: list = [SingleResult('Idan', 'Mor', 1, 0)]
        assert not reconcile_fixture(fixture, results, Mode.ONE_VS_ONE).completed

        played = SingleResult(fixture.home, fixture.away, 2, 1)
        results.append(played)
        status = reconcile_fixture(fixture, results, Mode.ONE_VS_ONE)
        assert status.completed
        assert status.matched_result == played
        assert status.times_played == 1

        results.remove(played)
        status = reconcile_fixture(fixture, results, Mode.ONE_VS_ONE)
        assert not status.completed
        assert status.matched_result is None

    def test_first_match_reported(self):
        first = SingleResult('A', 'B', 1, 0)
        second = SingleResult('A', 'B', 0, 3)
        status = reconcile_fixture(SingleFixture('A', 'B'), [first, second], Mode.ONE_VS_ONE)
        assert status.matched_result is first
        assert status.times_played == 2

    def test_doubles_generated_fixture(self, five_players):
        fixture = generate_fixtures(five_players, Mode.TWO_VS_TWO)[1]
        result = DoublesResult(fixture.team_a, fixture.team_b, 3, 3, sitting=fixture.sitting)
        assert reconcile_fixture(fixture, [result], Mode.TWO_VS_TWO).completed

    def test_wrong_mode_never_completes(self):
        result = SingleResult('A', 'B', 1, 0)
        status = reconcile_fixture(SingleFixture('A', 'B'), [result], Mode.TWO_VS_TWO)
        assert not status.completed

    def test_reconcile_fixtures_keeps_order(self, four_players):
        fixtures = generate_fixtures(four_players, Mode.TWO_VS_TWO)
        played = DoublesResult(fixtures[2].team_a, fixtures[2].team_b, 1, 0)
        statuses = reconcile_fixtures(fixtures, [played], Mode.TWO_VS_TWO)
        assert [s.fixture for s in statuses] == fixtures
        assert [s.completed for s in statuses] == [False, False, True]
