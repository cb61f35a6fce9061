"""Domain errors raised by the WarTycoon rules layer.

Every expected domain condition (insufficient funds, bad coordinates, ...)
surfaces as one of the classes below with structured attributes, so callers
can re-prompt or render a message without parsing strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ResourceKind, UnitKind


class GameRuleError(RuntimeError):
    """Base class for recoverable rule violations."""


@dataclass(frozen=True, slots=True)
class Shortfall:
    """A single resource a payment could not cover."""

    resource: ResourceKind
    available: int
    required: int


class ZeroOrNegativeAmount(GameRuleError):
    """Raised when a ledger is asked to move a non-positive amount."""

    def __init__(self, resource: ResourceKind, amount: int) -> None:
        super().__init__(f"cannot move {amount} {resource}; amount must be positive")
        self.resource = resource
        self.amount = amount


class InsufficientResource(GameRuleError):
    """Raised when a debit exceeds the available balance.

    ``resource``/``available``/``required`` describe the first short
    resource; ``shortfalls`` lists every resource that was short when a
    combined wood/gold payment was attempted.
    """

    def __init__(
        self,
        resource: ResourceKind,
        available: int,
        required: int,
        *,
        shortfalls: tuple[Shortfall, ...] | None = None,
    ) -> None:
        super().__init__(f"not enough {resource}: {available} available, {required} required")
        self.resource = resource
        self.available = available
        self.required = required
        self.shortfalls = shortfalls or (Shortfall(resource, available, required),)

    @classmethod
    def from_shortfalls(cls, shortfalls: list[Shortfall]) -> InsufficientResource:
        first = shortfalls[0]
        return cls(first.resource, first.available, first.required, shortfalls=tuple(shortfalls))

    @property
    def resources(self) -> tuple[ResourceKind, ...]:
        return tuple(item.resource for item in self.shortfalls)


class InsufficientUnits(GameRuleError):
    """Raised when more units are committed than the pool holds."""

    def __init__(self, unit: UnitKind, available: int, requested: int) -> None:
        super().__init__(f"not enough {unit}s: {available} available, {requested} requested")
        self.unit = unit
        self.available = available
        self.requested = requested


class CapacityExceeded(GameRuleError):
    """Raised when training would overflow the housing capacity."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(f"cannot house {requested} new units; only {available} places left")
        self.requested = requested
        self.available = available


class InvalidQuantity(GameRuleError):
    """Raised for non-positive unit quantities."""

    def __init__(self, value: int) -> None:
        super().__init__(f"quantity must be a positive integer, got {value}")
        self.value = value


class FieldNotFound(GameRuleError):
    """Raised when coordinates fall outside the battlefield."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"field ({x},{y}) does not exist")
        self.x = x
        self.y = y


class DuplicateActorName(GameRuleError):
    """Raised when two actors of one match share a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"an actor named {name!r} already exists")
        self.name = name


class UnknownActor(GameRuleError):
    """Raised when an action is submitted for an actor not in the match."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no actor named {name!r} in this match")
        self.name = name


class LedgerCorrupted(AssertionError):
    """A balance went negative outside the credit/debit gate.  Always a defect."""


ActionError = (
    InsufficientResource,
    InsufficientUnits,
    CapacityExceeded,
    InvalidQuantity,
    FieldNotFound,
)
