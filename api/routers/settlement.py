"""Settlement API endpoints. Stateless: every call recomputes from the posted round."""

from fastapi import APIRouter, HTTPException, Query
from typing import List

from api.routers.errors import to_http
from betting.aggregator import settle_round
from betting.exceptions import ScoringError
from betting.ledger import build_ledgers
from betting.segments import settle
from betting.side_bets import settle_hole_side_bets
from models import GameFormat, Round, RoundSettlement, Segment, SegmentSettlementResult, SettlementResult

router = APIRouter()


@router.post("/round", response_model=RoundSettlement)
async def settle_full_round(round_obj: Round, final: bool = Query(True)):
    try:
        return settle_round(round_obj, final=final)
    except ScoringError as e:
        raise to_http(e)


@router.post("/holes/{hole_number}", response_model=List[SettlementResult])
async def settle_hole(hole_number: int, round_obj: Round):
    hole = round_obj.course.get_hole(hole_number)
    if hole is None:
        raise HTTPException(404, f"Hole {hole_number} not on course")
    ledgers = build_ledgers(round_obj.players, round_obj.course)
    return settle_hole_side_bets(ledgers, hole, round_obj.betting_options)


@router.post("/segments/{segment}/{game_format}", response_model=SegmentSettlementResult)
async def settle_segment(
    segment: Segment,
    game_format: GameFormat,
    round_obj: Round,
    final: bool = Query(True),
):
    if game_format not in round_obj.game_formats.active():
        raise HTTPException(422, f"Round does not play {game_format.value}")
    if segment not in round_obj.betting_options.segments.active():
        raise HTTPException(422, f"Round has no wager on {segment.value}")
    ledgers = build_ledgers(round_obj.players, round_obj.course)
    stake = round_obj.betting_options.stake_for(segment, game_format)
    try:
        return settle(
            ledgers,
            round_obj.course.hole_numbers,
            segment,
            game_format,
            stake,
            require_complete=final,
        )
    except ScoringError as e:
        raise to_http(e)
