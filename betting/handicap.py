from typing import Dict, Iterable

from betting.config import (
    HOLES_PER_ALLOCATION_CYCLE,
    MAX_HANDICAP,
    MAX_STROKE_INDEX,
    MIN_HANDICAP,
    MIN_STROKE_INDEX,
)
from betting.exceptions import InvalidHandicapError, InvalidStrokeIndexError
from models.hole import Hole
from models.tee import Tee


def validate_handicap(handicap: int) -> int:
    if isinstance(handicap, bool) or not isinstance(handicap, int):
        raise InvalidHandicapError(handicap)
    if not MIN_HANDICAP <= handicap <= MAX_HANDICAP:
        raise InvalidHandicapError(handicap)
    return handicap


def strokes_received(handicap: int, stroke_index: int) -> int:
    """
    Handicap strokes a player receives on a hole.

    Every hole gets handicap // 18 strokes; the remaining handicap % 18
    strokes go to the hardest holes (stroke index 1 first).
    """
    validate_handicap(handicap)
    if not MIN_STROKE_INDEX <= stroke_index <= MAX_STROKE_INDEX:
        raise InvalidStrokeIndexError(stroke_index)

    base, extra = divmod(handicap, HOLES_PER_ALLOCATION_CYCLE)
    return base + (1 if stroke_index <= extra else 0)


def net_score(gross_score: int, handicap: int, stroke_index: int) -> int:
    """Gross score minus the strokes received on the hole."""
    return gross_score - strokes_received(handicap, stroke_index)


def strokes_by_hole(handicap: int, holes: Iterable[Hole], tee: Tee) -> Dict[int, int]:
    """Allocation table {hole_number: strokes} using the tee's stroke indexes."""
    table: Dict[int, int] = {}
    for hole in holes:
        stroke_index = hole.stroke_index_for(tee)
        if stroke_index is None:
            raise InvalidStrokeIndexError(None, hole_number=hole.number, tee=tee.color)
        table[hole.number] = strokes_received(handicap, stroke_index)
    return table
