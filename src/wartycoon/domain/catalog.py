"""Economic catalog: static cost, capacity and power lookups."""

from __future__ import annotations

from .enums import BuildingKind, UnitKind
from .models import Capacity, Cost, FighterPower
from .rules_config import DEFAULT_RULES, RulesConfig


def unit_cost(kind: UnitKind, *, rules: RulesConfig = DEFAULT_RULES) -> Cost:
    """Training cost of a single unit."""

    match kind:
        case UnitKind.ARCHER:
            return rules.units.archer_cost
        case UnitKind.WARRIOR:
            return rules.units.warrior_cost
    raise ValueError(f"unknown unit kind: {kind!r}")


def unit_power(kind: UnitKind, *, rules: RulesConfig = DEFAULT_RULES) -> FighterPower:
    """Fighting-power coefficient of a single unit."""

    match kind:
        case UnitKind.ARCHER:
            return FighterPower(rules.units.archer_power)
        case UnitKind.WARRIOR:
            return FighterPower(rules.units.warrior_power)
    raise ValueError(f"unknown unit kind: {kind!r}")


def building_cost(kind: BuildingKind, *, rules: RulesConfig = DEFAULT_RULES) -> Cost:
    """Construction cost of a single building."""

    match kind:
        case BuildingKind.BASE:
            return rules.buildings.base_cost
    raise ValueError(f"unknown building kind: {kind}")  # pragma: no cover


def building_capacity(kind: BuildingKind, *, rules: RulesConfig = DEFAULT_RULES) -> Capacity:
    """How many fighters a single building houses."""

    match kind:
        case BuildingKind.BASE:
            return Capacity(rules.buildings.base_capacity)
    raise ValueError(f"unknown building kind: {kind}")  # pragma: no cover


def harvest_yield(*, rules: RulesConfig = DEFAULT_RULES) -> Cost:
    """Resources gained by one harvest, expressed as a wood/gold pair."""

    return Cost(wood=rules.harvest.wood_gain, gold=rules.harvest.gold_gain)


def fighting_power(kind: UnitKind, quantity: int, *, rules: RulesConfig = DEFAULT_RULES) -> float:
    """Power contributed by ``quantity`` units of ``kind``."""

    return unit_power(kind, rules=rules) * quantity
