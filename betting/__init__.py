from .aggregator import aggregate, settle_round
from .exceptions import (
    CourseDataError,
    IncompleteScoresError,
    InsufficientPlayersError,
    InvalidHandicapError,
    InvalidStrokeIndexError,
    ScoringError,
)
from .handicap import net_score, strokes_by_hole, strokes_received
from .ledger import ScoreLedger, build_ledgers
from .match_play import hole_outcome, match_status
from .segments import settle
from .side_bets import evaluate_hole, settle_hole_side_bets
from .stroke_play import leaderboard, status_through_hole

__all__ = [
    "aggregate",
    "settle_round",
    "settle",
    "evaluate_hole",
    "settle_hole_side_bets",
    "status_through_hole",
    "leaderboard",
    "match_status",
    "hole_outcome",
    "strokes_received",
    "strokes_by_hole",
    "net_score",
    "ScoreLedger",
    "build_ledgers",
    "ScoringError",
    "CourseDataError",
    "IncompleteScoresError",
    "InsufficientPlayersError",
    "InvalidHandicapError",
    "InvalidStrokeIndexError",
]
