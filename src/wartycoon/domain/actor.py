"""Actor state and the action executor.

An actor owns a resource ledger, a unit pool and its buildings.  Every
handler below validates all of its preconditions before touching any state,
so a rejected action leaves both the actor and the battlefield unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from . import catalog
from .actions import (
    Action,
    BuildOutcome,
    HarvestOutcome,
    OccupyOutcome,
    Outcome,
    QuitOutcome,
    TrainOutcome,
)
from .battlefield import Battlefield
from .enums import ActionKind, BuildingKind, UnitKind
from .errors import (
    CapacityExceeded,
    DuplicateActorName,
    InsufficientResource,
    InsufficientUnits,
    InvalidQuantity,
)
from .ledger import ResourceLedger
from .models import ActorName, Capacity, Quantity
from .pool import UnitPool
from .rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Actor:
    """A player's economic and military state for one match."""

    name: ActorName
    ledger: ResourceLedger = field(default_factory=ResourceLedger)
    pool: UnitPool = field(default_factory=UnitPool)
    buildings: dict[BuildingKind, int] = field(
        default_factory=lambda: {kind: 0 for kind in BuildingKind}
    )
    rules: RulesConfig = DEFAULT_RULES

    # ------------------------------------------------------------------
    # Action execution

    def execute(self, action: Action, battlefield: Battlefield) -> Outcome:
        """Apply ``action`` and return its outcome.

        Raises one of :data:`wartycoon.domain.errors.ActionError` when a
        precondition fails; nothing is mutated in that case.
        """

        handler = _ACTION_HANDLERS.get(action.kind)
        if handler is None:  # pragma: no cover - closed set of actions
            raise TypeError(f"unsupported action: {action!r}")
        outcome = handler(self, action, battlefield)
        logger.debug("actor %s performed %s: %s", self.name, action.kind, outcome)
        return outcome

    # ------------------------------------------------------------------
    # Queries

    @property
    def wood(self) -> int:
        return self.ledger.wood

    @property
    def gold(self) -> int:
        return self.ledger.gold

    def building_count(self, kind: BuildingKind = BuildingKind.BASE) -> int:
        return self.buildings.get(kind, 0)

    def total_capacity(self) -> Capacity:
        """Housing provided by every owned building."""

        return Capacity(
            sum(
                count * catalog.building_capacity(kind, rules=self.rules)
                for kind, count in self.buildings.items()
            )
        )

    def used_capacity(self) -> int:
        return self.pool.total()

    def available_capacity(self) -> Quantity:
        return Quantity(max(0, self.total_capacity() - self.used_capacity()))

    def max_trainable(self, kind: UnitKind) -> Quantity:
        """Largest quantity of ``kind`` that both capacity and resources allow."""

        limit = int(self.available_capacity())
        cost = catalog.unit_cost(kind, rules=self.rules)
        for resource, price in cost.items():
            if price > 0:
                limit = min(limit, self.ledger.balance(resource) // price)
        return Quantity(limit)

    def max_sendable(self, kind: UnitKind) -> Quantity:
        return Quantity(self.pool.held(kind))

    def has_units_available(self) -> bool:
        return self.pool.total() > 0


ActionHandler = Callable[[Actor, Action, Battlefield], Outcome]


def create_actor(
    name: str,
    existing: Iterable[Actor] = (),
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> Actor:
    """Create a fresh actor whose name is unique among ``existing``."""

    cleaned = name.strip()
    if not cleaned:
        raise ValueError("actor name must not be empty")
    if any(actor.name == cleaned for actor in existing):
        raise DuplicateActorName(cleaned)
    return Actor(name=ActorName(cleaned), rules=rules)


# ---------------------------------------------------------------------------
# Registered action handlers


def _handle_build(actor: Actor, action: Action, battlefield: Battlefield) -> BuildOutcome:
    cost = catalog.building_cost(action.building, rules=actor.rules)
    actor.ledger.pay(cost)
    actor.buildings[action.building] = actor.building_count(action.building) + 1
    return BuildOutcome(
        building=action.building,
        building_count=actor.building_count(action.building),
        wood=actor.wood,
        gold=actor.gold,
    )


def _handle_harvest(actor: Actor, action: Action, battlefield: Battlefield) -> HarvestOutcome:
    gain = catalog.harvest_yield(rules=actor.rules)
    actor.ledger.receive(gain)
    return HarvestOutcome(
        wood_gained=gain.wood,
        gold_gained=gain.gold,
        wood=actor.wood,
        gold=actor.gold,
    )


def _handle_train(actor: Actor, action: Action, battlefield: Battlefield) -> TrainOutcome:
    quantity = _require_positive(action.quantity)

    available = actor.available_capacity()
    if quantity > available:
        raise CapacityExceeded(requested=quantity, available=available)

    cost = catalog.unit_cost(action.unit, rules=actor.rules).scaled(quantity)
    missing = actor.ledger.shortfalls(cost)
    if missing:
        raise InsufficientResource.from_shortfalls(missing)

    actor.ledger.pay(cost)
    held = actor.pool.train(action.unit, quantity)
    return TrainOutcome(
        unit=action.unit,
        quantity=quantity,
        held=held,
        wood=actor.wood,
        gold=actor.gold,
    )


def _handle_occupy(actor: Actor, action: Action, battlefield: Battlefield) -> OccupyOutcome:
    quantity = _require_positive(action.quantity)
    cell = battlefield.require_cell(action.x, action.y)

    available = actor.pool.held(action.unit)
    if available < quantity:
        raise InsufficientUnits(action.unit, available, quantity)

    deposit = actor.pool.commit(action.unit, quantity, actor.name)
    cell.add_deposit(deposit)
    return OccupyOutcome(
        x=cell.x,
        y=cell.y,
        unit=action.unit,
        quantity=quantity,
        held=actor.pool.held(action.unit),
    )


def _handle_quit(actor: Actor, action: Action, battlefield: Battlefield) -> QuitOutcome:
    return QuitOutcome()


def _require_positive(value: int) -> int:
    # bool is an int subclass; True must not sneak through as 1
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidQuantity(value)
    return value


_ACTION_HANDLERS: dict[ActionKind, ActionHandler] = {
    ActionKind.BUILD: _handle_build,
    ActionKind.HARVEST: _handle_harvest,
    ActionKind.TRAIN: _handle_train,
    ActionKind.OCCUPY: _handle_occupy,
    ActionKind.QUIT: _handle_quit,
}
