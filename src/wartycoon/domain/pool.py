"""Unit pool tracking trained, not yet committed, fighters."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .enums import UnitKind
from .errors import InsufficientUnits, InvalidQuantity
from .models import ActorName, Deposit, Quantity


class UnitPool:
    """Held quantity per unit kind for a single actor."""

    __slots__ = ("_held",)

    def __init__(self) -> None:
        self._held: dict[UnitKind, int] = {kind: 0 for kind in UnitKind}

    def __repr__(self) -> str:
        inner = ", ".join(f"{kind}={count}" for kind, count in self._held.items())
        return f"UnitPool({inner})"

    def held(self, kind: UnitKind) -> int:
        return self._held[kind]

    def total(self) -> int:
        """Units held across every kind; this is the capacity in use."""

        return sum(self._held.values())

    def snapshot(self) -> Mapping[UnitKind, int]:
        return MappingProxyType(dict(self._held))

    def train(self, kind: UnitKind, quantity: int) -> int:
        """Add freshly trained units.  Capacity is the caller's concern."""

        if quantity <= 0:
            raise InvalidQuantity(quantity)
        self._held[kind] += quantity
        return self._held[kind]

    def commit(self, kind: UnitKind, quantity: int, owner: ActorName) -> Deposit:
        """Take ``quantity`` units out of the pool and wrap them in a deposit."""

        if quantity <= 0:
            raise InvalidQuantity(quantity)
        available = self._held[kind]
        if available < quantity:
            raise InsufficientUnits(kind, available, quantity)
        self._held[kind] = available - quantity
        return Deposit(owner=owner, unit=kind, quantity=Quantity(quantity))
