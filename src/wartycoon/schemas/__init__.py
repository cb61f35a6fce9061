from .actor import ActorStatus, DepositRead, OccupiedField
from .match import CellReport, MatchReport

__all__ = [
    "ActorStatus",
    "CellReport",
    "DepositRead",
    "MatchReport",
    "OccupiedField",
]
