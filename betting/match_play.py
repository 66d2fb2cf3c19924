from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from betting.exceptions import InsufficientPlayersError
from betting.ledger import ScoreLedger


class HoleOutcome(str, Enum):
    WON = "won"
    LOST = "lost"
    HALVED = "halved"
    NOT_CONTESTED = "not_contested"  # player unplayed, or nobody else scored


class MatchStatus(BaseModel):
    """Running standing of one player against the best net of the field."""
    model_config = ConfigDict(frozen=True)

    player_id: str
    standing: int
    label: str
    holes_won: int
    holes_lost: int
    holes_halved: int
    holes_remaining: int
    decided: bool


def standing_label(standing: int) -> str:
    """'2 UP', '1 DN' or 'AS' (all square)."""
    if standing > 0:
        return f"{standing} UP"
    if standing < 0:
        return f"{-standing} DN"
    return "AS"


def _require_field(ledgers: Sequence[ScoreLedger]) -> None:
    if len(ledgers) < 2:
        raise InsufficientPlayersError(
            f"Match play needs at least 2 players, round has {len(ledgers)}"
        )


def _find(ledgers: Sequence[ScoreLedger], player_id: str) -> ScoreLedger:
    for ledger in ledgers:
        if ledger.player_id == player_id:
            return ledger
    raise KeyError(f"Player {player_id} not in round")


def hole_outcome(ledgers: Sequence[ScoreLedger], player_id: str, hole_number: int) -> HoleOutcome:
    """Compare the player's net to the lowest net among everyone else on the hole."""
    player = _find(ledgers, player_id)
    own = player.net(hole_number)
    if own is None:
        return HoleOutcome.NOT_CONTESTED

    others = [
        ledger.net(hole_number)
        for ledger in ledgers
        if ledger.player_id != player_id and ledger.net(hole_number) is not None
    ]
    if not others:
        return HoleOutcome.NOT_CONTESTED

    best_other = min(others)
    if own < best_other:
        return HoleOutcome.WON
    if own > best_other:
        return HoleOutcome.LOST
    return HoleOutcome.HALVED


def _tally(ledgers: Sequence[ScoreLedger], player_id: str, holes: Iterable[int]) -> Dict[HoleOutcome, int]:
    counts = {outcome: 0 for outcome in HoleOutcome}
    for hole_number in holes:
        counts[hole_outcome(ledgers, player_id, hole_number)] += 1
    return counts


def match_status(
    ledgers: Iterable[ScoreLedger],
    player_id: str,
    current_hole: int,
    total_holes: int = 18,
    first_hole: int = 1,
) -> MatchStatus:
    """
    Standing for a player over holes first_hole..current_hole.

    The match is reported as decided once the lead exceeds the holes left,
    which never changes the standing itself.
    """
    ledgers = list(ledgers)
    _require_field(ledgers)

    counts = _tally(ledgers, player_id, range(first_hole, current_hole + 1))
    standing = counts[HoleOutcome.WON] - counts[HoleOutcome.LOST]
    holes_remaining = max(total_holes - current_hole, 0)

    return MatchStatus(
        player_id=player_id,
        standing=standing,
        label=standing_label(standing),
        holes_won=counts[HoleOutcome.WON],
        holes_lost=counts[HoleOutcome.LOST],
        holes_halved=counts[HoleOutcome.HALVED],
        holes_remaining=holes_remaining,
        decided=abs(standing) > holes_remaining,
    )


def standings(
    ledgers: Iterable[ScoreLedger], current_hole: int, total_holes: int = 18
) -> List[MatchStatus]:
    """Match status for every player, in round order."""
    ledgers = list(ledgers)
    return [
        match_status(ledgers, ledger.player_id, current_hole, total_holes)
        for ledger in ledgers
    ]


def segment_standings(ledgers: Iterable[ScoreLedger], holes: Iterable[int]) -> Dict[str, Optional[int]]:
    """
    Standing per player over a segment's holes (won - lost).

    None marks a player who did not play any hole of the segment.
    """
    ledgers = list(ledgers)
    _require_field(ledgers)
    holes = list(holes)

    result: Dict[str, Optional[int]] = {}
    for ledger in ledgers:
        if not ledger.holes_played(holes):
            result[ledger.player_id] = None
            continue
        counts = _tally(ledgers, ledger.player_id, holes)
        result[ledger.player_id] = counts[HoleOutcome.WON] - counts[HoleOutcome.LOST]
    return result
