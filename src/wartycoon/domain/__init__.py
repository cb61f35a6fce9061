"""Domain model for WarTycoon.

This package hosts every game rule.  It exposes:

* Dataclasses for the battlefield records and value types (see :mod:`models`).
* Enumerations shared across the rules layer (see :mod:`enums`).
* Rule configuration objects (see :mod:`rules_config`) and the economic
  catalog built on them.
* The actor action executor and the conflict resolver.

The layer is purely in-memory and never performs I/O.
"""

from . import (
    actions,
    actor,
    battlefield,
    catalog,
    conflict,
    enums,
    errors,
    ledger,
    match,
    models,
    pool,
    rules_config,
)

__all__ = [
    "actions",
    "actor",
    "battlefield",
    "catalog",
    "conflict",
    "enums",
    "errors",
    "ledger",
    "match",
    "models",
    "pool",
    "rules_config",
]
