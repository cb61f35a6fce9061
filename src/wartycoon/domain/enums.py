"""Enumerations used across the WarTycoon domain."""

from __future__ import annotations

from enum import StrEnum


class ResourceKind(StrEnum):
    """Resources stored in an actor's warehouse."""

    WOOD = "wood"
    GOLD = "gold"


class UnitKind(StrEnum):
    """Trainable fighter types."""

    ARCHER = "archer"
    WARRIOR = "warrior"


class BuildingKind(StrEnum):
    """Buildings an actor can construct."""

    BASE = "base"


class ActionKind(StrEnum):
    """Closed set of intents an actor may submit during a turn."""

    BUILD = "build"
    HARVEST = "harvest"
    TRAIN = "train"
    OCCUPY = "occupy"
    QUIT = "quit"


class MatchOutcome(StrEnum):
    """Possible results of a match evaluation."""

    WINNER = "winner"
    DRAW = "draw"
    NO_WINNER = "no_winner"
