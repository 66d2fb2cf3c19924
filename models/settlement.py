from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from .betting_options import GameFormat, Segment


class BetType(str, Enum):
    SKINS = "skins"
    OYESES = "oyeses"
    STROKE_PLAY = "stroke_play"
    MATCH_PLAY = "match_play"


class SettlementStatus(str, Enum):
    """Outcome of a segment settlement."""
    SETTLED = "settled"                            # money moved
    PUSH = "push"                                  # everyone tied, nobody pays
    INSUFFICIENT_PLAYERS = "insufficient_players"  # fewer than two scored players
    NO_HOLES = "no_holes"                          # course has no holes in the segment


class SettlementResult(BaseModel):
    """Resolution of one side bet on one hole."""
    model_config = ConfigDict(frozen=True)

    type: BetType
    hole_number: Optional[int] = None
    winner: Optional[str] = None     # player name
    winner_id: Optional[str] = None
    amount: Decimal = Decimal("0")
    tied: bool = False


class SegmentStanding(BaseModel):
    """A player's result over a segment under one format."""
    model_config = ConfigDict(frozen=True)

    player_id: str
    name: str
    rank: int
    net_total: Optional[int] = None  # stroke play
    standing: Optional[int] = None   # match play
    holes_played: int = 0


class SegmentSettlementResult(BaseModel):
    """Money transfers for one segment under one format."""
    model_config = ConfigDict(frozen=True)

    segment: Segment
    format: GameFormat
    status: SettlementStatus
    reason: Optional[str] = None
    stake: Decimal = Decimal("0")
    winners: List[str] = Field(default_factory=list)  # player ids
    player_balances: Dict[str, Decimal] = Field(default_factory=dict)
    total_pot: Decimal = Decimal("0")
    standings: List[SegmentStanding] = Field(default_factory=list)
    provisional: bool = False  # progress view, not applied to balances

    @property
    def moves_money(self) -> bool:
        return self.status is SettlementStatus.SETTLED


class RoundSettlement(BaseModel):
    """Everything owed between players for a round, derived from scratch."""
    model_config = ConfigDict(frozen=True)

    round_id: Optional[str] = None
    final: bool = True
    hole_results: List[SettlementResult] = Field(default_factory=list)
    segment_results: List[SegmentSettlementResult] = Field(default_factory=list)
    balances: Dict[str, Decimal] = Field(default_factory=dict)           # by player id
    balances_by_name: Dict[str, Decimal] = Field(default_factory=dict)
    total_pot: Decimal = Decimal("0")
    skipped_holes: List[int] = Field(default_factory=list)
