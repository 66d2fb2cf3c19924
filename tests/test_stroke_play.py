from betting.ledger import build_ledgers
from betting.stroke_play import (
    leaderboard,
    rank_ascending,
    segment_totals,
    status_through_hole,
    to_par_label,
)

from conftest import build_player


def _ledgers(course):
    players = [
        build_player("A", 0, [4, 3, 5]),
        build_player("B", 18, [5, 4, 6]),   # one stroke per hole -> net 4, 3, 5
        build_player("C", 0, [5, 3, 5]),
    ]
    return build_ledgers(players, course)


def test_to_par_label():
    assert to_par_label(0) == "E"
    assert to_par_label(3) == "+3"
    assert to_par_label(-2) == "-2"


def test_status_through_hole(course):
    a, b, c = _ledgers(course)

    assert status_through_hole(a, 3).label == "E"
    assert status_through_hole(b, 3).to_par == 0
    status = status_through_hole(c, 3)
    assert status.to_par == 1
    assert status.label == "+1"
    assert status.net_total == 13
    assert status.holes_played == 3


def test_status_ignores_unplayed_holes(course):
    ledger = build_ledgers([build_player("A", 0, {1: 3, 3: 6})], course)[0]
    # hole 2 unplayed: neither its score nor its par count
    status = status_through_hole(ledger, 3)
    assert status.to_par == 0
    assert status.holes_played == 2

    assert status_through_hole(ledger, 1).label == "-1"


def test_leaderboard_ties_share_rank(course):
    board = leaderboard(_ledgers(course), 3)

    assert [(e.player_id, e.rank) for e in board] == [("A", 1), ("B", 1), ("C", 3)]
    assert board[2].label == "+1"


def test_leaderboard_through_earlier_hole(course):
    board = leaderboard(_ledgers(course), 1)
    assert [(e.player_id, e.rank, e.net_total) for e in board] == [("A", 1, 4), ("B", 1, 4), ("C", 3, 5)]


def test_rank_ascending():
    assert rank_ascending([70, 68, 70, 75]) == [2, 1, 2, 4]
    assert rank_ascending([]) == []


def test_segment_totals(course):
    ledgers = _ledgers(course) + build_ledgers([build_player("D", 0)], course)
    totals = segment_totals(ledgers, range(1, 10))
    assert totals == {"A": 12, "B": 12, "C": 13, "D": None}
