from __future__ import annotations

from pydantic import BaseModel, Field

from wartycoon.domain.conflict import CellResolution, MatchResolution
from wartycoon.domain.enums import MatchOutcome


class CellReport(BaseModel):
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    winner: str | None = Field(None, description="Owner holding the cell, if any")
    powers: dict[str, float] = Field(default_factory=dict, description="Aggregate power per owner")
    max_power: float = Field(default=0.0, ge=0.0)
    contenders: list[str] = Field(
        default_factory=list, description="Owners within tolerance of the maximum power"
    )

    @classmethod
    def from_resolution(cls, resolution: CellResolution) -> CellReport:
        return cls(
            x=resolution.x,
            y=resolution.y,
            winner=resolution.winner,
            powers=dict(resolution.powers),
            max_power=resolution.max_power,
            contenders=list(resolution.contenders),
        )


class MatchReport(BaseModel):
    outcome: MatchOutcome
    winners: list[str] = Field(default_factory=list, description="Winner, or every tied owner")
    wins: int = Field(default=0, ge=0, description="Cells won by each listed owner")
    tallies: dict[str, int] = Field(default_factory=dict, description="Cells won per owner")
    cells: list[CellReport] = Field(default_factory=list)

    @classmethod
    def from_resolution(cls, resolution: MatchResolution) -> MatchReport:
        return cls(
            outcome=resolution.outcome,
            winners=list(resolution.winners),
            wins=resolution.wins,
            tallies=dict(resolution.tallies),
            cells=[CellReport.from_resolution(cell) for cell in resolution.cells],
        )
