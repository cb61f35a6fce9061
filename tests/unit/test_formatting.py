import pytest

from wartycoon.domain.actions import (
    Build,
    BuildOutcome,
    Harvest,
    HarvestOutcome,
    Occupy,
    OccupyOutcome,
    Quit,
    QuitOutcome,
    Train,
    TrainOutcome,
)
from wartycoon.domain.battlefield import Battlefield
from wartycoon.domain.conflict import resolve_cell, resolve_match
from wartycoon.domain.enums import BuildingKind, ResourceKind, UnitKind
from wartycoon.domain.errors import (
    CapacityExceeded,
    DuplicateActorName,
    FieldNotFound,
    InsufficientResource,
    InsufficientUnits,
    InvalidQuantity,
    Shortfall,
    UnknownActor,
    ZeroOrNegativeAmount,
)
from wartycoon.domain.models import ActorName, Cell, Deposit
from wartycoon.formatting import (
    describe_action,
    describe_cell,
    describe_dimensions,
    describe_error,
    describe_match,
    describe_outcome,
    unit_label,
)


@pytest.mark.parametrize(
    "action, expected",
    [
        (Build(), "Build BASE"),
        (Harvest(), "Harvest resources"),
        (Train(UnitKind.ARCHER, 5), "Train 5 ARCHERS"),
        (Train(UnitKind.WARRIOR, 1), "Train 1 WARRIOR"),
        (Occupy(0, 1, UnitKind.WARRIOR, 3), "Conquer field (0,1) with 3 WARRIORS"),
        (Quit(), "Quit game"),
    ],
)
def test_describe_action(action, expected):
    assert describe_action(action) == expected


def test_unit_label_and_dimensions():
    assert unit_label(UnitKind.ARCHER, 0) == "ARCHERS"
    assert describe_dimensions(1, 1) == "1 x 1 field"
    assert describe_dimensions(2, 3) == "2 x 3 fields"


def test_describe_outcomes():
    assert describe_outcome(BuildOutcome(BuildingKind.BASE, 2, 0, 0)) == (
        "Building of type BASE was successfully built! "
        "You currently have 2 buildings of type BASE."
    )
    assert describe_outcome(HarvestOutcome(200, 120, 400, 240)) == (
        "Harvest was a success! Gained 200 wood and 120 gold! "
        "Current warehouse supplies are: 400 WOOD, 240 GOLD."
    )
    assert describe_outcome(TrainOutcome(UnitKind.ARCHER, 1, 1, 0, 0)) == (
        "Training of 1 unit of ARCHER was successful"
    )
    assert describe_outcome(OccupyOutcome(1, 0, UnitKind.WARRIOR, 4, 0)) == (
        "4 units of type WARRIOR were successfully sent to occupy field (1,0)!"
    )
    assert describe_outcome(QuitOutcome()) == "Quit game"


def test_describe_insufficient_resources_lists_each():
    error = InsufficientResource.from_shortfalls(
        [Shortfall(ResourceKind.WOOD, 0, 10), Shortfall(ResourceKind.GOLD, 0, 5)]
    )
    assert describe_error(error) == (
        "You don't have enough WOOD to perform this operation. "
        "You don't have enough GOLD to perform this operation."
    )


@pytest.mark.parametrize(
    "error, fragment",
    [
        (InsufficientUnits(UnitKind.ARCHER, 2, 3), "Cannot send 3 units of type ARCHER"),
        (CapacityExceeded(requested=5, available=1), "5 picked, 1 places left"),
        (InvalidQuantity(0), "got 0"),
        (FieldNotFound(4, 2), "Field (4,2) does not exist"),
        (DuplicateActorName("bob"), "Player with the name bob already exists"),
        (UnknownActor("eve"), "no player named eve"),
        (ZeroOrNegativeAmount(ResourceKind.GOLD, 0), "Cannot add 0 units of GOLD"),
    ],
)
def test_describe_error(error, fragment):
    assert fragment in describe_error(error)


def _cell(*deposits: Deposit) -> Cell:
    cell = Cell(x=0, y=0)
    for deposit in deposits:
        cell.add_deposit(deposit)
    return cell


def test_describe_cell_variants():
    alice, bob = ActorName("alice"), ActorName("bob")
    won = resolve_cell(
        _cell(
            Deposit(alice, UnitKind.ARCHER, 1),
            Deposit(bob, UnitKind.WARRIOR, 10),
        )
    )
    tied = resolve_cell(
        _cell(Deposit(alice, UnitKind.WARRIOR, 2), Deposit(bob, UnitKind.WARRIOR, 2))
    )

    assert describe_cell(won) == (
        "Winner of field (0, 0) is bob with 0 ARCHERS, 10 WARRIORS and "
        "resulting fighting power of 12.00"
    )
    assert describe_cell(tied) == "Field (0, 0) is a draw between alice, bob."
    assert describe_cell(resolve_cell(Cell(x=1, y=2))) == (
        "Field (1, 2) was not conquered by anyone."
    )


def test_describe_match_variants():
    battlefield = Battlefield(2, 1)
    assert describe_match(resolve_match(battlefield)) == (
        "Draw! No player was able to win the most game fields!"
    )

    battlefield.require_cell(0, 0).add_deposit(Deposit(ActorName("alice"), UnitKind.ARCHER, 1))
    assert describe_match(resolve_match(battlefield)) == (
        "Winner of the game is alice with 1 conquered fields"
    )

    battlefield.require_cell(1, 0).add_deposit(Deposit(ActorName("bob"), UnitKind.ARCHER, 1))
    assert describe_match(resolve_match(battlefield)) == (
        "Draw! 2 players have scored the same number of fields 1"
    )
