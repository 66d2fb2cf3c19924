import pytest

from betting.exceptions import InsufficientPlayersError
from betting.ledger import build_ledgers
from betting.match_play import (
    HoleOutcome,
    hole_outcome,
    match_status,
    segment_standings,
    standing_label,
    standings,
)

from conftest import build_player


def _ledgers(course):
    # all scratch, so gross == net
    players = [
        build_player("A", 0, {1: 3, 2: 3, 3: 5, 4: 4}),
        build_player("B", 0, {1: 4, 2: 3, 3: 4}),
        build_player("C", 0, {1: 4, 2: 4}),
    ]
    return build_ledgers(players, course)


# ================================================================
# Hole outcomes
# ================================================================

def test_hole_outcome_against_best_of_field(course):
    ledgers = _ledgers(course)

    assert hole_outcome(ledgers, "A", 1) is HoleOutcome.WON
    assert hole_outcome(ledgers, "B", 1) is HoleOutcome.LOST
    assert hole_outcome(ledgers, "A", 2) is HoleOutcome.HALVED
    assert hole_outcome(ledgers, "C", 2) is HoleOutcome.LOST
    assert hole_outcome(ledgers, "B", 3) is HoleOutcome.WON


def test_hole_without_opponents_is_not_contested(course):
    ledgers = _ledgers(course)
    assert hole_outcome(ledgers, "A", 4) is HoleOutcome.NOT_CONTESTED   # only A scored
    assert hole_outcome(ledgers, "C", 3) is HoleOutcome.NOT_CONTESTED   # C did not play


def test_unknown_player(course):
    with pytest.raises(KeyError):
        hole_outcome(_ledgers(course), "Z", 1)


# ================================================================
# Running standing
# ================================================================

def test_standing_label():
    assert standing_label(2) == "2 UP"
    assert standing_label(-1) == "1 DN"
    assert standing_label(0) == "AS"


def test_match_status(course):
    ledgers = _ledgers(course)

    a = match_status(ledgers, "A", current_hole=4)
    assert (a.holes_won, a.holes_lost, a.holes_halved) == (1, 1, 1)
    assert a.label == "AS"
    assert a.holes_remaining == 14
    assert not a.decided

    c = match_status(ledgers, "C", current_hole=4)
    assert c.standing == -2
    assert c.label == "2 DN"


def test_standings_in_round_order(course):
    rows = standings(_ledgers(course), current_hole=3)
    assert [(r.player_id, r.label) for r in rows] == [("A", "AS"), ("B", "AS"), ("C", "2 DN")]


def test_decided_match_keeps_standing(course):
    players = [
        build_player("A", 0, [3] * 10),
        build_player("B", 0, [4] * 10),
    ]
    ledgers = build_ledgers(players, course)

    status = match_status(ledgers, "A", current_hole=10)
    assert status.standing == 10
    assert status.holes_remaining == 8
    assert status.decided

    nine = match_status(ledgers, "A", current_hole=9, total_holes=18)
    assert nine.label == "9 UP"
    assert not nine.decided  # dormie: 9 up with 9 to play


def test_single_player_has_no_match(course):
    ledgers = build_ledgers([build_player("A", 0, [4] * 18)], course)
    with pytest.raises(InsufficientPlayersError):
        match_status(ledgers, "A", current_hole=18)
    with pytest.raises(InsufficientPlayersError):
        segment_standings(ledgers, range(1, 10))


def test_segment_standings(course):
    ledgers = _ledgers(course)
    assert segment_standings(ledgers, [1, 2, 3]) == {"A": 0, "B": 0, "C": -2}
    assert segment_standings(ledgers, range(10, 19)) == {"A": None, "B": None, "C": None}
