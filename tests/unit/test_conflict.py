"""Tests for cell and match conflict resolution.

Tests cover:
- Single-cell winners, ties within tolerance and empty cells
- Order independence of aggregate power (property-based)
- Match-level winner, draw and no-winner outcomes
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wartycoon.domain.battlefield import Battlefield
from wartycoon.domain.conflict import (
    TIE_TOLERANCE,
    aggregate_powers,
    resolve_cell,
    resolve_match,
    tally_wins,
)
from wartycoon.domain.enums import MatchOutcome, UnitKind
from wartycoon.domain.models import ActorName, Cell, Deposit
from wartycoon.domain.rules_config import ConflictRules, RulesConfig

A = ActorName("alice")
B = ActorName("bob")
C = ActorName("carol")


def _deposit(owner: ActorName, unit: UnitKind, quantity: int) -> Deposit:
    return Deposit(owner=owner, unit=unit, quantity=quantity)


def _cell(*deposits: Deposit, x: int = 0, y: int = 0) -> Cell:
    cell = Cell(x=x, y=y)
    for deposit in deposits:
        cell.add_deposit(deposit)
    return cell


def test_stronger_owner_wins_cell():
    cell = _cell(
        _deposit(A, UnitKind.ARCHER, 5),
        _deposit(B, UnitKind.WARRIOR, 10),
    )

    resolution = resolve_cell(cell)

    assert resolution.winner == B
    assert resolution.powers[A] == pytest.approx(9.5)
    assert resolution.powers[B] == pytest.approx(12.0)
    assert resolution.max_power == pytest.approx(12.0)
    assert resolution.contenders == [B]
    assert resolution.winner_units == {UnitKind.ARCHER: 0, UnitKind.WARRIOR: 10}
    assert resolution.winning_power == pytest.approx(12.0)


def test_powers_within_tolerance_tie():
    cell = _cell(
        _deposit(A, UnitKind.ARCHER, 5),
        _deposit(B, UnitKind.WARRIOR, 8),
    )

    resolution = resolve_cell(cell)

    assert resolution.winner is None
    assert resolution.is_tie
    assert resolution.contenders == [A, B]
    assert resolution.winning_power is None


def test_identical_forces_tie():
    cell = _cell(
        _deposit(B, UnitKind.WARRIOR, 3),
        _deposit(A, UnitKind.WARRIOR, 3),
    )
    assert resolve_cell(cell).winner is None


def test_empty_cell_has_no_winner():
    resolution = resolve_cell(Cell(x=2, y=1))
    assert resolution.winner is None
    assert resolution.powers == {}
    assert resolution.contenders == []
    assert not resolution.is_tie
    assert (resolution.x, resolution.y) == (2, 1)


def test_single_owner_wins_uncontested_cell():
    resolution = resolve_cell(_cell(_deposit(C, UnitKind.ARCHER, 1)))
    assert resolution.winner == C


def test_repeated_deposits_aggregate():
    cell = _cell(
        _deposit(A, UnitKind.ARCHER, 2),
        _deposit(A, UnitKind.WARRIOR, 5),
        _deposit(A, UnitKind.ARCHER, 3),
    )
    assert aggregate_powers(cell)[A] == pytest.approx(5 * 1.9 + 5 * 1.2)
    assert resolve_cell(cell).winner_units == {UnitKind.ARCHER: 5, UnitKind.WARRIOR: 5}


def test_custom_tolerance_breaks_near_tie():
    rules = RulesConfig(conflict=ConflictRules(tie_tolerance=0.0))
    cell = _cell(
        _deposit(A, UnitKind.ARCHER, 5),
        _deposit(B, UnitKind.WARRIOR, 8),
    )
    assert resolve_cell(cell, rules=rules).winner == B


def test_default_tolerance():
    assert TIE_TOLERANCE == pytest.approx(0.1)


_deposits = st.lists(
    st.builds(
        Deposit,
        owner=st.sampled_from([A, B, C]),
        unit=st.sampled_from(list(UnitKind)),
        quantity=st.integers(min_value=1, max_value=200),
    ),
    min_size=1,
    max_size=12,
)


@given(deposits=_deposits, data=st.data())
def test_resolution_ignores_deposit_order(deposits, data):
    """Property-based test: shuffling deposits never changes the result."""
    shuffled = data.draw(st.permutations(deposits))

    baseline = resolve_cell(_cell(*deposits))
    permuted = resolve_cell(_cell(*shuffled))

    assert baseline.powers == permuted.powers
    assert baseline.winner == permuted.winner
    assert baseline.contenders == permuted.contenders


@given(deposits=_deposits)
def test_winner_is_strictly_ahead_of_everyone_else(deposits):
    resolution = resolve_cell(_cell(*deposits))
    if resolution.winner is not None:
        winning = resolution.powers[resolution.winner]
        for owner, power in resolution.powers.items():
            if owner != resolution.winner:
                assert winning - power > TIE_TOLERANCE


def _battlefield(width: int, height: int, placements: dict[tuple[int, int], list[Deposit]]):
    battlefield = Battlefield(width, height)
    for (x, y), deposits in placements.items():
        cell = battlefield.require_cell(x, y)
        for deposit in deposits:
            cell.add_deposit(deposit)
    return battlefield


def test_match_with_single_winner():
    battlefield = _battlefield(
        2,
        2,
        {
            (0, 0): [_deposit(A, UnitKind.ARCHER, 10)],
            (1, 0): [_deposit(A, UnitKind.WARRIOR, 1), _deposit(B, UnitKind.WARRIOR, 3)],
            (0, 1): [_deposit(A, UnitKind.WARRIOR, 2)],
        },
    )

    resolution = resolve_match(battlefield)

    assert resolution.outcome is MatchOutcome.WINNER
    assert resolution.winner == A
    assert resolution.wins == 2
    assert resolution.tallies == {A: 2, B: 1}
    assert len(resolution.cells) == 4


def test_match_draw_lists_every_leader():
    battlefield = _battlefield(
        3,
        1,
        {
            (0, 0): [_deposit(B, UnitKind.ARCHER, 1)],
            (1, 0): [_deposit(A, UnitKind.ARCHER, 1)],
        },
    )

    resolution = resolve_match(battlefield)

    assert resolution.outcome is MatchOutcome.DRAW
    assert resolution.winners == [A, B]
    assert resolution.wins == 1
    assert resolution.winner is None


def test_match_without_any_cell_winner():
    battlefield = _battlefield(
        1,
        1,
        {(0, 0): [_deposit(A, UnitKind.WARRIOR, 4), _deposit(B, UnitKind.WARRIOR, 4)]},
    )

    resolution = resolve_match(battlefield)

    assert resolution.outcome is MatchOutcome.NO_WINNER
    assert resolution.winners == []
    assert resolution.wins == 0
    assert resolution.tallies == {}


def test_tally_skips_unwon_cells():
    cells = [resolve_cell(Cell(x=0, y=0)), resolve_cell(_cell(_deposit(C, UnitKind.ARCHER, 1)))]
    assert tally_wins(cells) == {C: 1}
