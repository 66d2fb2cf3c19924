"""Leaderboard endpoints for the scorecard views."""

from fastapi import APIRouter, Query
from typing import Optional

from api.routers.errors import to_http
from api.schemas import MatchPlayStandingsResponse, StrokePlayStandingsResponse
from betting.exceptions import ScoringError
from betting.ledger import build_ledgers
from betting.match_play import standings
from betting.stroke_play import leaderboard
from models import Round

router = APIRouter()


@router.post("/stroke-play", response_model=StrokePlayStandingsResponse)
async def stroke_play_standings(round_obj: Round, upto_hole: int = Query(18, ge=1, le=18)):
    ledgers = build_ledgers(round_obj.players, round_obj.course)
    return StrokePlayStandingsResponse(upto_hole=upto_hole, leaderboard=leaderboard(ledgers, upto_hole))


@router.post("/match-play", response_model=MatchPlayStandingsResponse)
async def match_play_standings(round_obj: Round, current_hole: Optional[int] = Query(None, ge=1, le=18)):
    hole = current_hole or round_obj.current_hole
    ledgers = build_ledgers(round_obj.players, round_obj.course)
    try:
        rows = standings(ledgers, hole, round_obj.total_holes)
    except ScoringError as e:
        raise to_http(e)
    return MatchPlayStandingsResponse(
        current_hole=hole, total_holes=round_obj.total_holes, standings=rows
    )
