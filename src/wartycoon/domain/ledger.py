"""Resource ledger enforcing non-negative balances."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .enums import ResourceKind
from .errors import InsufficientResource, LedgerCorrupted, Shortfall, ZeroOrNegativeAmount
from .models import Cost


class ResourceLedger:
    """Per-resource balances of a single actor.

    Balances only move through :meth:`credit` and :meth:`debit` (or the
    two-resource helpers built on them); a failed call leaves every balance
    untouched.
    """

    __slots__ = ("_balances",)

    def __init__(self, balances: Mapping[ResourceKind, int] | None = None) -> None:
        self._balances: dict[ResourceKind, int] = {kind: 0 for kind in ResourceKind}
        for kind, amount in (balances or {}).items():
            if amount < 0:
                raise ValueError(f"initial {kind} balance must be non-negative")
            self._balances[ResourceKind(kind)] = int(amount)

    def __repr__(self) -> str:
        return f"ResourceLedger(wood={self.wood}, gold={self.gold})"

    # ------------------------------------------------------------------
    # Queries

    def balance(self, kind: ResourceKind) -> int:
        amount = self._balances[kind]
        if amount < 0:
            raise LedgerCorrupted(f"{kind} balance is negative ({amount})")
        return amount

    @property
    def wood(self) -> int:
        return self.balance(ResourceKind.WOOD)

    @property
    def gold(self) -> int:
        return self.balance(ResourceKind.GOLD)

    def balances(self) -> Mapping[ResourceKind, int]:
        """Read-only view of every balance."""

        return MappingProxyType(dict(self._balances))

    def can_afford(self, kind: ResourceKind, amount: int) -> bool:
        return self.balance(kind) >= amount

    def shortfalls(self, cost: Cost) -> list[Shortfall]:
        """Every resource ``cost`` cannot be covered by; empty when affordable."""

        return [
            Shortfall(kind, self.balance(kind), required)
            for kind, required in cost.items()
            if not self.can_afford(kind, required)
        ]

    def can_pay(self, cost: Cost) -> bool:
        return not self.shortfalls(cost)

    # ------------------------------------------------------------------
    # Mutations

    def credit(self, kind: ResourceKind, amount: int) -> int:
        """Add ``amount`` to ``kind`` and return the new balance."""

        if amount <= 0:
            raise ZeroOrNegativeAmount(kind, amount)
        self._balances[kind] += amount
        return self._balances[kind]

    def debit(self, kind: ResourceKind, amount: int) -> int:
        """Remove ``amount`` from ``kind`` and return the new balance."""

        if amount <= 0:
            raise ZeroOrNegativeAmount(kind, amount)
        available = self.balance(kind)
        if available < amount:
            raise InsufficientResource(kind, available, amount)
        self._balances[kind] = available - amount
        return self._balances[kind]

    def pay(self, cost: Cost) -> None:
        """Debit both resources of ``cost`` or neither.

        Zero components are skipped (archers cost no wood).
        """

        missing = self.shortfalls(cost)
        if missing:
            raise InsufficientResource.from_shortfalls(missing)
        for kind, amount in cost.items():
            if amount:
                self.debit(kind, amount)

    def receive(self, gain: Cost) -> None:
        """Credit both resources of ``gain``; every component must be positive."""

        for kind, amount in gain.items():
            if amount <= 0:
                raise ZeroOrNegativeAmount(kind, amount)
        for kind, amount in gain.items():
            self.credit(kind, amount)
