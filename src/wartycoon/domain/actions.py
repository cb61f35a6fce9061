"""Actions an actor can take in one turn, and their structured outcomes.

Actions are immutable instructions produced by the input layer.  Outcomes
describe what happened; rendering them as text is left to
:mod:`wartycoon.formatting`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .enums import ActionKind, BuildingKind, UnitKind


@dataclass(frozen=True, slots=True)
class Build:
    """Construct one building."""

    kind: ClassVar[ActionKind] = ActionKind.BUILD
    building: BuildingKind = BuildingKind.BASE


@dataclass(frozen=True, slots=True)
class Harvest:
    """Collect the flat wood/gold yield."""

    kind: ClassVar[ActionKind] = ActionKind.HARVEST


@dataclass(frozen=True, slots=True)
class Train:
    """Train ``quantity`` units of one kind."""

    kind: ClassVar[ActionKind] = ActionKind.TRAIN
    unit: UnitKind
    quantity: int


@dataclass(frozen=True, slots=True)
class Occupy:
    """Send ``quantity`` held units to the cell at (x, y)."""

    kind: ClassVar[ActionKind] = ActionKind.OCCUPY
    x: int
    y: int
    unit: UnitKind
    quantity: int


@dataclass(frozen=True, slots=True)
class Quit:
    """Stop playing for the rest of the match."""

    kind: ClassVar[ActionKind] = ActionKind.QUIT


Action = Build | Harvest | Train | Occupy | Quit


# ---------------------------------------------------------------------------
# Outcomes


@dataclass(frozen=True, slots=True)
class BuildOutcome:
    kind: ClassVar[ActionKind] = ActionKind.BUILD
    building: BuildingKind
    building_count: int
    wood: int
    gold: int


@dataclass(frozen=True, slots=True)
class HarvestOutcome:
    kind: ClassVar[ActionKind] = ActionKind.HARVEST
    wood_gained: int
    gold_gained: int
    wood: int
    gold: int


@dataclass(frozen=True, slots=True)
class TrainOutcome:
    kind: ClassVar[ActionKind] = ActionKind.TRAIN
    unit: UnitKind
    quantity: int
    held: int
    wood: int
    gold: int


@dataclass(frozen=True, slots=True)
class OccupyOutcome:
    kind: ClassVar[ActionKind] = ActionKind.OCCUPY
    x: int
    y: int
    unit: UnitKind
    quantity: int
    held: int


@dataclass(frozen=True, slots=True)
class QuitOutcome:
    """The caller should stop prompting this actor."""

    kind: ClassVar[ActionKind] = ActionKind.QUIT


Outcome = BuildOutcome | HarvestOutcome | TrainOutcome | OccupyOutcome | QuitOutcome
