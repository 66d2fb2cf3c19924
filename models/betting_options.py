from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Tuple

MAX_AMOUNT = Decimal("1000000000")


class Segment(str, Enum):
    """Scored portion of a round with its own settlement."""
    FRONT_NINE = "front_nine"
    BACK_NINE = "back_nine"
    TOTAL = "total"

    @property
    def hole_numbers(self) -> Tuple[int, ...]:
        if self is Segment.FRONT_NINE:
            return tuple(range(1, 10))
        if self is Segment.BACK_NINE:
            return tuple(range(10, 19))
        return tuple(range(1, 19))


class GameFormat(str, Enum):
    STROKE_PLAY = "stroke_play"
    MATCH_PLAY = "match_play"


class SegmentSelection(BaseModel):
    """Which segments carry a wager."""
    model_config = ConfigDict(validate_assignment=True)

    front_nine: bool = False
    back_nine: bool = False
    total: bool = False

    def active(self) -> List[Segment]:
        """Active segments in settlement order (front, back, total)."""
        flags = [
            (Segment.FRONT_NINE, self.front_nine),
            (Segment.BACK_NINE, self.back_nine),
            (Segment.TOTAL, self.total),
        ]
        return [segment for segment, on in flags if on]


class GameFormats(BaseModel):
    """Game formats played in a round."""
    model_config = ConfigDict(validate_assignment=True)

    stroke_play: bool = True
    match_play: bool = False

    def active(self) -> List[GameFormat]:
        formats = []
        if self.stroke_play:
            formats.append(GameFormat.STROKE_PLAY)
        if self.match_play:
            formats.append(GameFormat.MATCH_PLAY)
        return formats


class BettingOptions(BaseModel):
    """Wager configuration, fixed once a round starts.

    press_bets, carryovers and foursomes are stored so a round can be
    round-tripped, but no settlement rule exists for them.
    """
    model_config = ConfigDict(validate_assignment=True)

    skins: bool = False
    oyeses: bool = False
    foursomes: bool = False
    press_bets: bool = False
    carryovers: bool = False
    unit_per_hole: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    oyeses_par_three_only: bool = True
    segments: SegmentSelection = Field(default_factory=SegmentSelection)
    stroke_play_stakes: Dict[Segment, Decimal] = Field(default_factory=dict)
    match_play_stakes: Dict[Segment, Decimal] = Field(default_factory=dict)

    @field_validator('stroke_play_stakes', 'match_play_stakes')
    @classmethod
    def validate_stakes(cls, v):
        for segment, stake in v.items():
            if stake < 0:
                raise ValueError(f"Stake for {segment.value} cannot be negative")
            if stake > MAX_AMOUNT:
                raise ValueError(f"Stake for {segment.value} cannot exceed {MAX_AMOUNT}")
        return v

    def stake_for(self, segment: Segment, game_format: GameFormat) -> Decimal:
        stakes = (
            self.stroke_play_stakes
            if game_format is GameFormat.STROKE_PLAY
            else self.match_play_stakes
        )
        return stakes.get(segment, Decimal("0"))

    def side_bets_active(self) -> bool:
        return self.skins or self.oyeses
