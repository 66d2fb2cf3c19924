from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Sequence, Union

from betting.config import CURRENCY_QUANTUM, ROUNDING_MODE

Amount = Union[Decimal, int, float, str]

ZERO = Decimal("0")


def to_money(value: Amount) -> Decimal:
    """Quantize a value to the smallest currency unit (round-half-even)."""
    if isinstance(value, float):
        # str() keeps 0.1 as 0.1 instead of its binary expansion
        value = str(value)
    return Decimal(value).quantize(CURRENCY_QUANTUM, rounding=ROUNDING_MODE)


def split_evenly(total: Amount, parts: int) -> List[Decimal]:
    """
    Split a total into `parts` currency amounts that sum exactly to the total.

    Leftover units go one at a time to the first shares, so callers should
    pass recipients in a stable order.
    """
    if parts <= 0:
        raise ValueError("Cannot split an amount into zero parts")
    total = to_money(total)
    units = int(total / CURRENCY_QUANTUM)
    base, leftover = divmod(abs(units), parts)
    sign = -1 if units < 0 else 1
    shares = []
    for i in range(parts):
        share_units = base + (1 if i < leftover else 0)
        shares.append(to_money(sign * share_units * CURRENCY_QUANTUM))
    return shares


def transfer_to_winner(winner_id: str, payer_ids: Sequence[str], amount: Amount) -> Dict[str, Decimal]:
    """Winner collects `amount`, the payers cover it in equal shares."""
    if not payer_ids:
        raise ValueError("A transfer needs at least one payer")
    amount = to_money(amount)
    deltas = {winner_id: amount}
    for payer_id, share in zip(payer_ids, split_evenly(amount, len(payer_ids))):
        deltas[payer_id] = -share
    return deltas


def apply_deltas(balances: Dict[str, Decimal], deltas: Mapping[str, Decimal]) -> None:
    for player_id, delta in deltas.items():
        balances[player_id] = to_money(balances.get(player_id, ZERO) + delta)


def total(amounts: Iterable[Decimal]) -> Decimal:
    return to_money(sum(amounts, ZERO))
