from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, List

from betting.config import OYESES_MULTIPLIER, SKINS_MULTIPLIER
from betting.ledger import ScoreLedger
from betting.money import to_money
from models.betting_options import BettingOptions
from models.hole import Hole
from models.settlement import BetType, SettlementResult

logger = logging.getLogger(__name__)


def best_net_result(
    bet_type: BetType, ledgers: Iterable[ScoreLedger], hole_number: int, amount: Decimal
) -> SettlementResult:
    """Unique lowest net score wins the amount; a shared low voids the hole."""
    scored = [(ledger, ledger.net(hole_number)) for ledger in ledgers]
    scored = [(ledger, net) for ledger, net in scored if net is not None]
    if not scored:
        raise ValueError(f"No scores on hole {hole_number}")

    best = min(net for _, net in scored)
    leaders = [ledger for ledger, net in scored if net == best]

    if len(leaders) > 1:
        return SettlementResult(
            type=bet_type, hole_number=hole_number, winner=None, amount=to_money(0), tied=True
        )

    winner = leaders[0]
    return SettlementResult(
        type=bet_type,
        hole_number=hole_number,
        winner=winner.name,
        winner_id=winner.player_id,
        amount=to_money(amount),
        tied=False,
    )


def evaluate_hole(
    ledgers: Iterable[ScoreLedger], hole_number: int, options: BettingOptions
) -> List[SettlementResult]:
    """
    Resolve the active side bets on one hole.

    Returns one result per active bet (oyeses, then skins), or an empty list
    when nobody has a score on the hole. Par is not considered here.
    """
    ledgers = list(ledgers)
    if not any(ledger.net(hole_number) is not None for ledger in ledgers):
        return []

    results: List[SettlementResult] = []
    if options.oyeses:
        results.append(
            best_net_result(
                BetType.OYESES, ledgers, hole_number, options.unit_per_hole * OYESES_MULTIPLIER
            )
        )
    if options.skins:
        # flat double stake; ties do not carry over
        results.append(
            best_net_result(
                BetType.SKINS, ledgers, hole_number, options.unit_per_hole * SKINS_MULTIPLIER
            )
        )

    for result in results:
        logger.debug(
            "Hole %s %s: winner=%s amount=%s tied=%s",
            hole_number, result.type.value, result.winner, result.amount, result.tied,
        )
    return results


def counts_on_hole(result: SettlementResult, hole: Hole, options: BettingOptions) -> bool:
    """Whether a hole result moves money in the round (oyeses may be par-3 only)."""
    if result.type is BetType.OYESES and options.oyeses_par_three_only:
        return hole.par == 3
    return True


def settle_hole_side_bets(
    ledgers: Iterable[ScoreLedger], hole: Hole, options: BettingOptions
) -> List[SettlementResult]:
    """Side-bet results for a hole as the round settles them."""
    return [
        result
        for result in evaluate_hole(ledgers, hole.number, options)
        if counts_on_hole(result, hole, options)
    ]
