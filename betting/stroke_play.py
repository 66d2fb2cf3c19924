from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from betting.ledger import ScoreLedger


class StrokePlayStatus(BaseModel):
    """Cumulative net score relative to par through a hole."""
    model_config = ConfigDict(frozen=True)

    player_id: str
    to_par: int
    label: str
    net_total: int
    holes_played: int


class LeaderboardEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    rank: int
    player_id: str
    name: str
    net_total: int
    to_par: int
    label: str
    holes_played: int


def to_par_label(to_par: int) -> str:
    """'E' for even, otherwise a signed number ('+3', '-1')."""
    if to_par == 0:
        return "E"
    return f"{to_par:+d}"


def _holes_through(upto_hole: int) -> range:
    return range(1, upto_hole + 1)


def status_through_hole(ledger: ScoreLedger, upto_hole: int) -> StrokePlayStatus:
    """Net score to par over the played holes 1..upto_hole."""
    holes = _holes_through(upto_hole)
    to_par = ledger.net_total(holes) - ledger.par_total(holes)
    return StrokePlayStatus(
        player_id=ledger.player_id,
        to_par=to_par,
        label=to_par_label(to_par),
        net_total=ledger.net_total(holes),
        holes_played=ledger.holes_played(holes),
    )


def rank_ascending(values: Sequence[int]) -> List[int]:
    """Competition ranking (1, 1, 3) where lower values rank first."""
    return [1 + sum(1 for other in values if other < value) for value in values]


def leaderboard(ledgers: Iterable[ScoreLedger], upto_hole: int) -> List[LeaderboardEntry]:
    """
    Players sorted by total net strokes through upto_hole.

    Ties share a rank. Players with no played holes are still listed with a
    zero total so the board shows the whole group.
    """
    ledgers = list(ledgers)
    statuses = [status_through_hole(ledger, upto_hole) for ledger in ledgers]
    ranks = rank_ascending([s.net_total for s in statuses])

    entries = [
        LeaderboardEntry(
            rank=rank,
            player_id=ledger.player_id,
            name=ledger.name,
            net_total=status.net_total,
            to_par=status.to_par,
            label=status.label,
            holes_played=status.holes_played,
        )
        for ledger, status, rank in zip(ledgers, statuses, ranks)
    ]
    # sort is stable, so tied players keep their round order
    return sorted(entries, key=lambda e: e.rank)


def segment_totals(ledgers: Iterable[ScoreLedger], holes: Iterable[int]) -> Dict[str, Optional[int]]:
    """Net total per player over the given holes, None if nothing was played."""
    holes = list(holes)
    totals: Dict[str, Optional[int]] = {}
    for ledger in ledgers:
        totals[ledger.player_id] = ledger.net_total(holes) if ledger.holes_played(holes) else None
    return totals
