"""Territory conflict resolution.

Cells are awarded to the owner with the strongest aggregate force; owners
whose power lies within ``TIE_TOLERANCE`` of the maximum are contenders and
more than one contender means nobody wins the cell.  The match goes to the
owner with the most cells won.

Nothing here mutates the battlefield or prints; callers render the returned
records.
"""

from __future__ import annotations

import logging
import math
from collections import Counter, defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

from . import catalog
from .battlefield import Battlefield
from .enums import MatchOutcome, UnitKind
from .models import ActorName, Cell
from .rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)

TIE_TOLERANCE = DEFAULT_RULES.conflict.tie_tolerance


@dataclass(slots=True)
class CellResolution:
    """Winner and diagnostic aggregates for a single cell."""

    x: int
    y: int
    winner: ActorName | None
    powers: dict[ActorName, float] = field(default_factory=dict)
    max_power: float = 0.0
    contenders: list[ActorName] = field(default_factory=list)
    winner_units: dict[UnitKind, int] = field(default_factory=dict)

    @property
    def is_tie(self) -> bool:
        return len(self.contenders) > 1

    @property
    def winning_power(self) -> float | None:
        if self.winner is None:
            return None
        return self.powers[self.winner]


@dataclass(slots=True)
class MatchResolution:
    """Match-level result derived from every cell."""

    outcome: MatchOutcome
    winners: list[ActorName]
    wins: int
    tallies: dict[ActorName, int] = field(default_factory=dict)
    cells: list[CellResolution] = field(default_factory=list)

    @property
    def winner(self) -> ActorName | None:
        if self.outcome is MatchOutcome.WINNER:
            return self.winners[0]
        return None


def aggregate_powers(cell: Cell, *, rules: RulesConfig = DEFAULT_RULES) -> dict[ActorName, float]:
    """Sum the fighting power of every owner present on ``cell``."""

    contributions: dict[ActorName, list[float]] = defaultdict(list)
    for deposit in cell.deposits:
        contributions[deposit.owner].append(
            catalog.fighting_power(deposit.unit, deposit.quantity, rules=rules)
        )
    # fsum keeps the totals independent of deposit order
    return {owner: math.fsum(parts) for owner, parts in sorted(contributions.items())}


def resolve_cell(cell: Cell, *, rules: RulesConfig = DEFAULT_RULES) -> CellResolution:
    """Decide which owner, if any, holds ``cell``."""

    powers = aggregate_powers(cell, rules=rules)
    if not powers:
        return CellResolution(x=cell.x, y=cell.y, winner=None)

    tolerance = rules.conflict.tie_tolerance
    max_power = max(powers.values())
    contenders = sorted(
        owner for owner, power in powers.items() if abs(power - max_power) <= tolerance
    )

    winner = contenders[0] if len(contenders) == 1 else None
    winner_units: dict[UnitKind, int] = {}
    if winner is not None:
        winner_units = {kind: cell.units_of(winner, kind) for kind in UnitKind}

    logger.debug(
        "cell (%d,%d): powers=%s contenders=%s winner=%s",
        cell.x,
        cell.y,
        powers,
        contenders,
        winner,
    )
    return CellResolution(
        x=cell.x,
        y=cell.y,
        winner=winner,
        powers=powers,
        max_power=max_power,
        contenders=contenders,
        winner_units=winner_units,
    )


def tally_wins(resolutions: Iterable[CellResolution]) -> dict[ActorName, int]:
    """Count cells won per owner."""

    counts = Counter(res.winner for res in resolutions if res.winner is not None)
    return dict(sorted(counts.items()))


def resolve_match(
    battlefield: Battlefield, *, rules: RulesConfig = DEFAULT_RULES
) -> MatchResolution:
    """Resolve every cell and award the match."""

    cells = [resolve_cell(cell, rules=rules) for cell in battlefield]
    tallies = tally_wins(cells)

    if not tallies:
        result = MatchResolution(MatchOutcome.NO_WINNER, [], 0, tallies, cells)
    else:
        max_wins = max(tallies.values())
        winners = sorted(owner for owner, wins in tallies.items() if wins == max_wins)
        outcome = MatchOutcome.WINNER if len(winners) == 1 else MatchOutcome.DRAW
        result = MatchResolution(outcome, winners, max_wins, tallies, cells)

    logger.debug("match resolved: %s %s (%d)", result.outcome, result.winners, result.wins)
    return result
