"""Value types and battlefield records for the WarTycoon domain.

The rules layer works exclusively with the small dataclasses below.  Actors
and the battlefield own their instances; nothing here is shared-mutable
between actors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType

from .enums import ResourceKind, UnitKind

# --- Strongly typed values -------------------------------------------------------

ActorName = NewType("ActorName", str)
Quantity = NewType("Quantity", int)
Capacity = NewType("Capacity", int)
FighterPower = NewType("FighterPower", float)


# --- Core dataclasses -------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Cost:
    """Wood/gold price of a single item."""

    wood: int = 0
    gold: int = 0

    def scaled(self, quantity: int) -> Cost:
        """Price of ``quantity`` items."""

        return Cost(wood=self.wood * quantity, gold=self.gold * quantity)

    def items(self) -> tuple[tuple[ResourceKind, int], ...]:
        return ((ResourceKind.WOOD, self.wood), (ResourceKind.GOLD, self.gold))


@dataclass(frozen=True, slots=True)
class Deposit:
    """Units an owner committed to a cell.  Never mutated after creation."""

    owner: ActorName
    unit: UnitKind
    quantity: Quantity


@dataclass(slots=True)
class Cell:
    """One addressable battlefield location holding an append-only deposit log."""

    x: int
    y: int
    deposits: list[Deposit] = field(default_factory=list)

    def add_deposit(self, deposit: Deposit) -> None:
        self.deposits.append(deposit)

    def deposits_of(self, owner: ActorName) -> list[Deposit]:
        """Deposits made by ``owner``, in arrival order."""

        return [deposit for deposit in self.deposits if deposit.owner == owner]

    def units_of(self, owner: ActorName, unit: UnitKind) -> int:
        return sum(d.quantity for d in self.deposits if d.owner == owner and d.unit == unit)

    @property
    def is_empty(self) -> bool:
        return not self.deposits
