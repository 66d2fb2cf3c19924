from .base import BaseGolfModel
from .betting_options import BettingOptions, GameFormat, GameFormats, Segment, SegmentSelection
from .course import Course
from .hole import Hole
from .hole_score import HoleScore
from .player import Player
from .round import Round
from .settlement import (
    BetType,
    RoundSettlement,
    SegmentSettlementResult,
    SegmentStanding,
    SettlementResult,
    SettlementStatus,
)
from .tee import Tee, TeeGender

__all__ = [
    "BaseGolfModel",
    "BettingOptions",
    "BetType",
    "Course",
    "GameFormat",
    "GameFormats",
    "Hole",
    "HoleScore",
    "Player",
    "Round",
    "RoundSettlement",
    "Segment",
    "SegmentSelection",
    "SegmentSettlementResult",
    "SegmentStanding",
    "SettlementResult",
    "SettlementStatus",
    "Tee",
    "TeeGender",
]
