from __future__ import annotations

from pydantic import BaseModel, Field

from wartycoon.domain.actor import Actor
from wartycoon.domain.battlefield import Battlefield
from wartycoon.domain.enums import UnitKind
from wartycoon.domain.models import Deposit


class DepositRead(BaseModel):
    owner: str = Field(..., description="Name of the actor who sent the units")
    unit: UnitKind = Field(..., description="Unit kind of the deposit")
    quantity: int = Field(..., gt=0, description="Number of units committed")

    @classmethod
    def from_deposit(cls, deposit: Deposit) -> DepositRead:
        return cls(owner=deposit.owner, unit=deposit.unit, quantity=deposit.quantity)


class OccupiedField(BaseModel):
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    deposits: list[DepositRead] = Field(
        default_factory=list, description="The actor's own deposits, in arrival order"
    )

    @property
    def units(self) -> dict[UnitKind, int]:
        totals = {kind: 0 for kind in UnitKind}
        for deposit in self.deposits:
            totals[deposit.unit] += deposit.quantity
        return totals


class ActorStatus(BaseModel):
    name: str = Field(..., min_length=1, description="Unique actor name")
    buildings: dict[str, int] = Field(default_factory=dict, description="Buildings per kind")
    capacity_used: int = Field(default=0, ge=0, description="Units currently housed")
    capacity_total: int = Field(default=0, ge=0, description="Housing over all buildings")
    units: dict[str, int] = Field(default_factory=dict, description="Held units per kind")
    resources: dict[str, int] = Field(default_factory=dict, description="Balance per resource")
    occupied_fields: list[OccupiedField] = Field(default_factory=list)

    @classmethod
    def from_actor(cls, actor: Actor, battlefield: Battlefield) -> ActorStatus:
        fields = [
            OccupiedField(
                x=cell.x,
                y=cell.y,
                deposits=[DepositRead.from_deposit(d) for d in cell.deposits_of(actor.name)],
            )
            for cell in battlefield.cells_occupied_by(actor.name)
        ]
        return cls(
            name=actor.name,
            buildings={str(kind): count for kind, count in actor.buildings.items()},
            capacity_used=actor.used_capacity(),
            capacity_total=actor.total_capacity(),
            units={str(kind): count for kind, count in actor.pool.snapshot().items()},
            resources={str(kind): amount for kind, amount in actor.ledger.balances().items()},
            occupied_fields=fields,
        )
