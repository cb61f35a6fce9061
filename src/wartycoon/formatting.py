"""Plain-text rendering for actions, outcomes, errors and results.

The domain returns structured records only; these helpers turn them into the
short sentences an interactive front end shows.  None of them print.
"""

from __future__ import annotations

from wartycoon.domain.actions import (
    Action,
    Build,
    BuildOutcome,
    Harvest,
    HarvestOutcome,
    Occupy,
    OccupyOutcome,
    Outcome,
    Quit,
    QuitOutcome,
    Train,
    TrainOutcome,
)
from wartycoon.domain.conflict import CellResolution, MatchResolution
from wartycoon.domain.enums import BuildingKind, MatchOutcome, ResourceKind, UnitKind
from wartycoon.domain.errors import (
    CapacityExceeded,
    DuplicateActorName,
    FieldNotFound,
    GameRuleError,
    InsufficientResource,
    InsufficientUnits,
    InvalidQuantity,
    UnknownActor,
    ZeroOrNegativeAmount,
)


def label(kind: UnitKind | BuildingKind | ResourceKind) -> str:
    """Upper-case display label, e.g. ``ARCHER`` or ``GOLD``."""

    return str(kind).upper()


def unit_label(kind: UnitKind, quantity: int) -> str:
    """Unit label with the plural ``S`` for anything other than one unit."""

    return f"{label(kind)}{'' if quantity == 1 else 'S'}"


def describe_dimensions(width: int, height: int) -> str:
    plural = "" if width * height == 1 else "s"
    return f"{width} x {height} field{plural}"


def describe_action(action: Action) -> str:
    match action:
        case Build(building=building):
            return f"Build {label(building)}"
        case Harvest():
            return "Harvest resources"
        case Train(unit=unit, quantity=quantity):
            return f"Train {quantity} {unit_label(unit, quantity)}"
        case Occupy(x=x, y=y, unit=unit, quantity=quantity):
            return f"Conquer field ({x},{y}) with {quantity} {unit_label(unit, quantity)}"
        case Quit():
            return "Quit game"
    raise TypeError(f"unsupported action: {action!r}")


def describe_outcome(outcome: Outcome) -> str:
    match outcome:
        case BuildOutcome():
            name = label(outcome.building)
            return (
                f"Building of type {name} was successfully built! "
                f"You currently have {outcome.building_count} buildings of type {name}."
            )
        case HarvestOutcome():
            return (
                f"Harvest was a success! Gained {outcome.wood_gained} wood and "
                f"{outcome.gold_gained} gold! Current warehouse supplies are: "
                f"{outcome.wood} WOOD, {outcome.gold} GOLD."
            )
        case TrainOutcome():
            noun = "unit" if outcome.quantity == 1 else "units"
            return (
                f"Training of {outcome.quantity} {noun} of "
                f"{unit_label(outcome.unit, outcome.quantity)} was successful"
            )
        case OccupyOutcome():
            return (
                f"{outcome.quantity} units of type {label(outcome.unit)} were successfully "
                f"sent to occupy field ({outcome.x},{outcome.y})!"
            )
        case QuitOutcome():
            return "Quit game"
    raise TypeError(f"unsupported outcome: {outcome!r}")


def describe_error(error: GameRuleError) -> str:
    match error:
        case InsufficientResource():
            return " ".join(
                f"You don't have enough {label(item.resource)} to perform this operation."
                for item in error.shortfalls
            )
        case InsufficientUnits():
            return (
                f"Cannot send {error.requested} units of type {label(error.unit)}. "
                f"Not enough units available ({error.available})."
            )
        case CapacityExceeded():
            return (
                "Cannot train new fighters, you picked too many units over capacity. "
                f"{error.requested} picked, {error.available} places left. "
                "Consider building a new base instead!"
            )
        case InvalidQuantity():
            return f"Quantity must be a positive whole number, got {error.value}."
        case FieldNotFound():
            return f"Sorry. Field ({error.x},{error.y}) does not exist!"
        case DuplicateActorName():
            return f"Player with the name {error.name} already exists in the system!"
        case UnknownActor():
            return f"There is no player named {error.name} in this game."
        case ZeroOrNegativeAmount():
            return f"Cannot add {error.amount} units of {label(error.resource)}."
    return str(error)


def describe_cell(resolution: CellResolution) -> str:
    if resolution.winner is None:
        if resolution.is_tie:
            return (
                f"Field ({resolution.x}, {resolution.y}) is a draw between "
                f"{', '.join(resolution.contenders)}."
            )
        return f"Field ({resolution.x}, {resolution.y}) was not conquered by anyone."
    archers = resolution.winner_units.get(UnitKind.ARCHER, 0)
    warriors = resolution.winner_units.get(UnitKind.WARRIOR, 0)
    return (
        f"Winner of field ({resolution.x}, {resolution.y}) is {resolution.winner} with "
        f"{archers} {unit_label(UnitKind.ARCHER, archers)}, "
        f"{warriors} {unit_label(UnitKind.WARRIOR, warriors)} and resulting "
        f"fighting power of {resolution.winning_power:.2f}"
    )


def describe_match(resolution: MatchResolution) -> str:
    match resolution.outcome:
        case MatchOutcome.WINNER:
            return (
                f"Winner of the game is {resolution.winner} with "
                f"{resolution.wins} conquered fields"
            )
        case MatchOutcome.DRAW:
            return (
                f"Draw! {len(resolution.winners)} players have scored the same "
                f"number of fields {resolution.wins}"
            )
    return "Draw! No player was able to win the most game fields!"
