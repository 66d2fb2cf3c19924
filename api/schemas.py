"""API-specific response models for standings views."""

from pydantic import BaseModel
from typing import List

from betting.match_play import MatchStatus
from betting.stroke_play import LeaderboardEntry


class StrokePlayStandingsResponse(BaseModel):
    """Leaderboard through a hole."""
    upto_hole: int
    leaderboard: List[LeaderboardEntry]


class MatchPlayStandingsResponse(BaseModel):
    """Every player's standing against the field."""
    current_hole: int
    total_holes: int
    standings: List[MatchStatus]
