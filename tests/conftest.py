from decimal import Decimal
from typing import Dict, Iterable, Optional, Union

import pytest

from models import (
    BettingOptions,
    Course,
    GameFormats,
    Hole,
    HoleScore,
    Player,
    Round,
    Segment,
    SegmentSelection,
    Tee,
)

PARS = [4, 3, 5, 4, 3, 4, 4, 5, 4, 4, 3, 5, 4, 4, 3, 4, 5, 4]
PAR_THREES = [2, 5, 11, 15]

WHITE = Tee(color="blancas", name="Tees Blancas")
RED = Tee(color="rojas", name="Tees Rojas", gender="female")


def build_course(hole_count: int = 18) -> Course:
    """Synthetic course: white stroke index == hole number, red reversed."""
    holes = [
        Hole(
            number=n,
            par=PARS[n - 1],
            stroke_indexes={"blancas": n, "rojas": 19 - n},
            distances={"blancas": 150 if PARS[n - 1] == 3 else 380, "rojas": 120},
        )
        for n in range(1, hole_count + 1)
    ]
    return Course(id="course-1", name="Club de Golf Demo", holes=holes, tees=[WHITE, RED])


def build_player(
    player_id: str,
    handicap: int,
    gross: Union[Dict[int, Optional[int]], Iterable[Optional[int]]] = (),
    tee: Tee = WHITE,
    name: Optional[str] = None,
) -> Player:
    """Player with gross scores given as {hole: gross} or a list starting at hole 1."""
    if not isinstance(gross, dict):
        gross = {i: g for i, g in enumerate(gross, start=1)}
    scores = [
        HoleScore(player_id=player_id, hole_number=hole, gross_score=g)
        for hole, g in gross.items()
    ]
    return Player(id=player_id, name=name or f"Player {player_id}", handicap=handicap, tee=tee, scores=scores)


def build_round(players, options: Optional[BettingOptions] = None, formats: Optional[GameFormats] = None,
                course: Optional[Course] = None) -> Round:
    return Round(
        id="round-1",
        course=course or build_course(),
        players=players,
        betting_options=options or BettingOptions(),
        game_formats=formats or GameFormats(stroke_play=False, match_play=False),
    )


def segment_options(**stakes) -> BettingOptions:
    """Betting options with every segment active at the same stake per format."""
    stroke = Decimal(str(stakes.get("stroke", "0")))
    match = Decimal(str(stakes.get("match", "0")))
    return BettingOptions(
        segments=SegmentSelection(front_nine=True, back_nine=True, total=True),
        stroke_play_stakes={segment: stroke for segment in Segment},
        match_play_stakes={segment: match for segment in Segment},
    )


@pytest.fixture
def course():
    return build_course()
