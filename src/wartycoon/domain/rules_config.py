"""Declarative rule configuration for the WarTycoon domain."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Cost


@dataclass(frozen=True, slots=True)
class UnitRules:
    """Fighting power and training cost per unit kind."""

    archer_power: float = 1.9
    warrior_power: float = 1.2
    archer_cost: Cost = Cost(wood=0, gold=10)
    warrior_cost: Cost = Cost(wood=10, gold=5)


@dataclass(frozen=True, slots=True)
class BuildingRules:
    """Capacity and construction cost per building kind."""

    base_capacity: int = 200
    base_cost: Cost = Cost(wood=220, gold=100)


@dataclass(frozen=True, slots=True)
class HarvestRules:
    """Flat harvest yield; independent of the number of buildings owned."""

    wood_gain: int = 200
    gold_gain: int = 120

    def __post_init__(self) -> None:
        # Credits of zero are rejected by the ledger, so a zero yield could
        # never be harvested.
        if self.wood_gain <= 0 or self.gold_gain <= 0:
            raise ValueError("harvest yields must be positive")


@dataclass(frozen=True, slots=True)
class ConflictRules:
    """Cell resolution tuning."""

    tie_tolerance: float = 0.1


@dataclass(frozen=True, slots=True)
class BoardRules:
    """Default battlefield dimensions."""

    width: int = 1
    height: int = 1


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    units: UnitRules = UnitRules()
    buildings: BuildingRules = BuildingRules()
    harvest: HarvestRules = HarvestRules()
    conflict: ConflictRules = ConflictRules()
    board: BoardRules = BoardRules()


DEFAULT_RULES = RulesConfig()
