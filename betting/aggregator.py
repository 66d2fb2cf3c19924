from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from betting.exceptions import ScoringError
from betting.ledger import ScoreLedger, build_ledgers
from betting.money import ZERO, apply_deltas, to_money, total, transfer_to_winner
from betting.segments import check_complete, segment_holes, settle
from betting.side_bets import settle_hole_side_bets
from models.betting_options import BettingOptions
from models.hole import Hole
from models.round import Round
from models.settlement import RoundSettlement, SegmentSettlementResult, SettlementResult

logger = logging.getLogger(__name__)

UNSUPPORTED_TOGGLES = ("press_bets", "carryovers", "foursomes")


def _log_unsupported(options: BettingOptions) -> None:
    for toggle in UNSUPPORTED_TOGGLES:
        if getattr(options, toggle):
            logger.info("Betting option '%s' is enabled but has no settlement rule; ignored", toggle)


def _holes_to_settle(round_obj: Round, course_holes: List[int]) -> List[int]:
    """Holes whose scores feed money: all of them for side bets, else active segments."""
    options = round_obj.betting_options
    if options.side_bets_active():
        return list(course_holes)
    if not round_obj.game_formats.active():
        return []
    wanted = set()
    for segment in options.segments.active():
        wanted.update(segment_holes(segment, course_holes))
    return sorted(wanted)


def settle_round(
    round_obj: Round, holes: Optional[Iterable[Hole]] = None, final: bool = True
) -> RoundSettlement:
    """
    Recompute every wager of a round from scratch.

    Side bets are applied hole by hole: the winner collects the amount and
    every other player pays an equal share of it. Each active segment and
    format is applied once, when its segment is finished.

    final=True rejects missing scores on any hole that moves money.
    final=False is the in-progress view: side bets on holes every player
    has played, and segments only once every player has finished them;
    unfinished segments are returned as provisional standings.
    """
    options = round_obj.betting_options
    course = round_obj.course
    if holes is not None:
        course = course.model_copy(update={"holes": sorted(holes, key=lambda h: h.number)})
    course_holes = course.hole_numbers

    ledgers: List[ScoreLedger] = build_ledgers(round_obj.players, course)
    player_ids = [ledger.player_id for ledger in ledgers]
    balances: Dict[str, Decimal] = {player_id: to_money(ZERO) for player_id in player_ids}
    skipped = sorted({n for ledger in ledgers for n in ledger.skipped_holes})

    _log_unsupported(options)

    if final:
        check_complete(ledgers, _holes_to_settle(round_obj, course_holes))

    if len(ledgers) < 2:
        logger.info("Round %s has %d player(s); nothing to settle", round_obj.id, len(ledgers))
        return RoundSettlement(
            round_id=round_obj.id,
            final=final,
            balances=balances,
            balances_by_name={ledger.name: balances[ledger.player_id] for ledger in ledgers},
            skipped_holes=skipped,
        )

    pot = to_money(ZERO)
    hole_results: List[SettlementResult] = []
    for hole in course.holes:
        if not final and not all(ledger.net(hole.number) is not None for ledger in ledgers):
            # money waits until every player has holed out
            continue
        for result in settle_hole_side_bets(ledgers, hole, options):
            hole_results.append(result)
            if result.winner_id is None or result.amount == 0:
                continue
            payers = [player_id for player_id in player_ids if player_id != result.winner_id]
            apply_deltas(balances, transfer_to_winner(result.winner_id, payers, result.amount))
            pot += result.amount

    segment_results: List[SegmentSettlementResult] = []
    for segment in options.segments.active():
        holes_in_segment = segment_holes(segment, course_holes)
        finished = all(ledger.is_complete(holes_in_segment) for ledger in ledgers)
        for game_format in round_obj.game_formats.active():
            stake = options.stake_for(segment, game_format)
            if final or finished:
                result = settle(ledgers, course_holes, segment, game_format, stake)
                if result.moves_money:
                    apply_deltas(balances, result.player_balances)
                    pot += result.total_pot
            else:
                result = settle(
                    ledgers, course_holes, segment, game_format, stake, require_complete=False
                ).model_copy(update={"provisional": True})
            segment_results.append(result)

    if total(balances.values()) != ZERO:
        raise ScoringError(f"Balances for round {round_obj.id} do not sum to zero: {balances}")

    return RoundSettlement(
        round_id=round_obj.id,
        final=final,
        hole_results=hole_results,
        segment_results=segment_results,
        balances=balances,
        balances_by_name={ledger.name: balances[ledger.player_id] for ledger in ledgers},
        total_pot=to_money(pot),
        skipped_holes=skipped,
    )


def aggregate(round_obj: Round, holes: Optional[Iterable[Hole]] = None) -> Dict[str, Decimal]:
    """Final balance per player name for a finished round."""
    return dict(settle_round(round_obj, holes, final=True).balances_by_name)
