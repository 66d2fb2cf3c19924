from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from betting.exceptions import CourseDataError, IncompleteScoresError
from betting.ledger import ScoreLedger
from betting.match_play import segment_standings
from betting.money import ZERO, split_evenly, to_money
from betting.stroke_play import rank_ascending, segment_totals
from models.betting_options import GameFormat, Segment
from models.settlement import SegmentSettlementResult, SegmentStanding, SettlementStatus

logger = logging.getLogger(__name__)


def segment_holes(segment: Segment, course_holes: Iterable[int]) -> List[int]:
    """The segment's hole numbers that exist on the course, in order."""
    available = set(course_holes)
    return [n for n in segment.hole_numbers if n in available]


def check_complete(ledgers: Iterable[ScoreLedger], holes: List[int]) -> None:
    """
    Raise unless every player has a usable score on every hole.

    Unresolvable course data is a hard error; missing scores are reported
    per player so the caller can prompt for them.
    """
    ledgers = list(ledgers)
    corrupt = sorted({n for ledger in ledgers for n in ledger.skipped_holes if n in holes})
    if corrupt:
        raise CourseDataError(f"Stroke index missing or invalid on holes {corrupt}")

    missing = {}
    for ledger in ledgers:
        holes_missing = ledger.missing_holes(holes)
        if holes_missing:
            missing[ledger.name] = holes_missing
    if missing:
        raise IncompleteScoresError(missing)


def _no_settlement(
    segment: Segment,
    game_format: GameFormat,
    status: SettlementStatus,
    reason: str,
    ledgers: List[ScoreLedger],
    stake: Decimal,
    standings: Optional[List[SegmentStanding]] = None,
) -> SegmentSettlementResult:
    logger.info("No %s settlement for %s: %s", game_format.value, segment.value, reason)
    return SegmentSettlementResult(
        segment=segment,
        format=game_format,
        status=status,
        reason=reason,
        stake=stake,
        player_balances={ledger.player_id: to_money(ZERO) for ledger in ledgers},
        standings=standings or [],
    )


def settle(
    ledgers: Iterable[ScoreLedger],
    course_holes: Iterable[int],
    segment: Segment,
    game_format: GameFormat,
    stake: Decimal,
    require_complete: bool = True,
) -> SegmentSettlementResult:
    """
    Winner-take-pot settlement of one segment under one format.

    Stroke play ranks by lowest net total, match play by highest standing
    at the end of the segment. Every player outside first place pays the
    stake; the player(s) in first place split what was paid. With a single
    winner the pot is stake * (players - 1).

    require_complete=False settles over played holes only, for progress
    displays; players with nothing played in the segment sit out.
    """
    ledgers = list(ledgers)
    stake = to_money(stake)
    holes = segment_holes(segment, course_holes)

    if not holes:
        return _no_settlement(
            segment, game_format, SettlementStatus.NO_HOLES,
            f"Course has no holes in the {segment.value} segment", ledgers, stake,
        )

    if require_complete:
        check_complete(ledgers, holes)

    participants = [ledger for ledger in ledgers if ledger.holes_played(holes)]
    if len(participants) < 2:
        return _no_settlement(
            segment, game_format, SettlementStatus.INSUFFICIENT_PLAYERS,
            f"{len(participants)} player(s) with scores, at least 2 required", ledgers, stake,
        )

    # lower key ranks first
    if game_format is GameFormat.STROKE_PLAY:
        totals = segment_totals(participants, holes)
        keys: Dict[str, int] = dict(totals)
    else:
        match = segment_standings(participants, holes)
        keys = {player_id: -standing for player_id, standing in match.items()}

    ranks = rank_ascending([keys[ledger.player_id] for ledger in participants])
    standings = [
        SegmentStanding(
            player_id=ledger.player_id,
            name=ledger.name,
            rank=rank,
            net_total=keys[ledger.player_id] if game_format is GameFormat.STROKE_PLAY else None,
            standing=-keys[ledger.player_id] if game_format is GameFormat.MATCH_PLAY else None,
            holes_played=ledger.holes_played(holes),
        )
        for ledger, rank in zip(participants, ranks)
    ]

    winners = [ledger for ledger, rank in zip(participants, ranks) if rank == 1]
    payers = [ledger for ledger, rank in zip(participants, ranks) if rank != 1]
    if not payers:
        return _no_settlement(
            segment, game_format, SettlementStatus.PUSH,
            "All players tied for first", ledgers, stake, standings,
        )

    balances = {ledger.player_id: to_money(ZERO) for ledger in ledgers}
    for payer in payers:
        balances[payer.player_id] = -stake
    pot = to_money(stake * len(payers))
    for winner, share in zip(winners, split_evenly(pot, len(winners))):
        balances[winner.player_id] = share

    logger.debug(
        "%s %s settled: winners=%s pot=%s",
        segment.value, game_format.value, [w.name for w in winners], pot,
    )
    return SegmentSettlementResult(
        segment=segment,
        format=game_format,
        status=SettlementStatus.SETTLED,
        stake=stake,
        winners=[w.player_id for w in winners],
        player_balances=balances,
        total_pot=pot,
        standings=standings,
    )
