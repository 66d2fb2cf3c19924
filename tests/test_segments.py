from decimal import Decimal

import pytest

from betting.exceptions import CourseDataError, IncompleteScoresError
from betting.ledger import build_ledgers
from betting.money import total
from betting.segments import segment_holes, settle
from models import Course, GameFormat, Hole, Segment, SettlementStatus

from conftest import build_course, build_player

STAKE = Decimal("5")


def _ledgers(course, b_scores=None):
    # scratch players, gross == net
    players = [
        build_player("A", 0, [4] * 18),
        build_player("B", 0, b_scores if b_scores is not None else [5] * 18),
        build_player("C", 0, [4] * 9 + [3] * 9),
    ]
    return build_ledgers(players, course)


def _settle(course, segment, game_format, **kwargs):
    return settle(_ledgers(course), course.hole_numbers, segment, game_format, STAKE, **kwargs)


# ================================================================
# Stroke play
# ================================================================

def test_unique_stroke_play_winner_takes_pot(course):
    result = _settle(course, Segment.BACK_NINE, GameFormat.STROKE_PLAY)

    assert result.status is SettlementStatus.SETTLED
    assert result.winners == ["C"]
    assert result.player_balances == {"A": Decimal("-5.00"), "B": Decimal("-5.00"), "C": Decimal("10.00")}
    assert result.total_pot == Decimal("10.00")
    assert [(s.player_id, s.rank, s.net_total) for s in result.standings] == [
        ("A", 2, 36), ("B", 3, 45), ("C", 1, 27)
    ]


def test_tied_winners_split_what_the_others_pay(course):
    result = _settle(course, Segment.FRONT_NINE, GameFormat.STROKE_PLAY)

    assert result.winners == ["A", "C"]
    assert result.player_balances == {"A": Decimal("2.50"), "B": Decimal("-5.00"), "C": Decimal("2.50")}
    assert result.total_pot == Decimal("5.00")


def test_total_segment(course):
    result = _settle(course, Segment.TOTAL, GameFormat.STROKE_PLAY)
    assert result.winners == ["C"]
    assert total(result.player_balances.values()) == 0


def test_uneven_split_stays_zero_sum(course):
    players = [build_player(pid, 0, [4] * 18) for pid in ("A", "B", "C")]
    players.append(build_player("D", 0, [5] * 18))
    ledgers = build_ledgers(players, course)

    result = settle(ledgers, course.hole_numbers, Segment.TOTAL, GameFormat.STROKE_PLAY, Decimal("1"))
    assert sorted(result.player_balances.values()) == [
        Decimal("-1.00"), Decimal("0.33"), Decimal("0.33"), Decimal("0.34")
    ]
    assert total(result.player_balances.values()) == 0


# ================================================================
# Match play
# ================================================================

def test_match_play_ranks_by_standing(course):
    back = _settle(course, Segment.BACK_NINE, GameFormat.MATCH_PLAY)
    assert back.winners == ["C"]
    assert {s.player_id: s.standing for s in back.standings} == {"A": -9, "B": -9, "C": 9}
    assert back.player_balances["C"] == Decimal("10.00")

    front = _settle(course, Segment.FRONT_NINE, GameFormat.MATCH_PLAY)
    assert front.winners == ["A", "C"]
    assert front.player_balances["B"] == Decimal("-5.00")


def test_match_play_standing_is_per_segment(course):
    # standing over all 18 holes
    result = _settle(course, Segment.TOTAL, GameFormat.MATCH_PLAY)
    assert {s.player_id: s.standing for s in result.standings} == {"A": -9, "B": -18, "C": 9}


# ================================================================
# No settlement
# ================================================================

def test_everyone_tied_is_a_push(course):
    ledgers = build_ledgers([build_player(pid, 0, [4] * 18) for pid in ("A", "B")], course)
    result = settle(ledgers, course.hole_numbers, Segment.TOTAL, GameFormat.STROKE_PLAY, STAKE)

    assert result.status is SettlementStatus.PUSH
    assert not result.moves_money
    assert result.player_balances == {"A": Decimal("0.00"), "B": Decimal("0.00")}
    assert result.total_pot == 0


def test_single_player_is_insufficient(course):
    ledgers = build_ledgers([build_player("A", 0, [4] * 18)], course)
    for game_format in GameFormat:
        result = settle(ledgers, course.hole_numbers, Segment.TOTAL, game_format, STAKE)
        assert result.status is SettlementStatus.INSUFFICIENT_PLAYERS
        assert result.reason


def test_segment_missing_from_course():
    course = build_course(hole_count=9)
    assert segment_holes(Segment.BACK_NINE, course.hole_numbers) == []
    result = _settle(course, Segment.BACK_NINE, GameFormat.STROKE_PLAY)
    assert result.status is SettlementStatus.NO_HOLES


# ================================================================
# Incomplete data
# ================================================================

def test_final_settlement_rejects_missing_scores(course):
    b_scores = {n: 5 for n in range(1, 19)}
    b_scores[9] = None
    ledgers = _ledgers(course, b_scores)

    with pytest.raises(IncompleteScoresError) as exc:
        settle(ledgers, course.hole_numbers, Segment.FRONT_NINE, GameFormat.STROKE_PLAY, STAKE)
    assert exc.value.missing == {"Player B": [9]}

    # the back nine is complete and settles normally
    back = settle(ledgers, course.hole_numbers, Segment.BACK_NINE, GameFormat.STROKE_PLAY, STAKE)
    assert back.status is SettlementStatus.SETTLED


def test_progress_settlement_uses_played_holes(course):
    ledgers = _ledgers(course, {1: 5, 2: 5})
    result = settle(
        ledgers, course.hole_numbers, Segment.FRONT_NINE, GameFormat.STROKE_PLAY, STAKE,
        require_complete=False,
    )
    assert result.status is SettlementStatus.SETTLED
    assert {s.player_id: s.holes_played for s in result.standings} == {"A": 9, "B": 2, "C": 9}


def test_progress_settlement_skips_players_without_scores(course):
    ledgers = _ledgers(course, {})
    result = settle(
        ledgers, course.hole_numbers, Segment.TOTAL, GameFormat.STROKE_PLAY, STAKE,
        require_complete=False,
    )
    assert result.player_balances["B"] == 0
    assert result.winners == ["C"]


def test_corrupt_course_data_is_a_hard_error():
    course = Course(holes=[
        Hole(number=1, par=4, stroke_indexes={"blancas": 1}),
        Hole(number=2, par=4, stroke_indexes={"rojas": 2}),
    ])
    ledgers = build_ledgers([build_player(pid, 0, [4, 4]) for pid in ("A", "B")], course)
    with pytest.raises(CourseDataError):
        settle(ledgers, course.hole_numbers, Segment.FRONT_NINE, GameFormat.STROKE_PLAY, STAKE)


def test_settle_is_idempotent(course):
    first = _settle(course, Segment.TOTAL, GameFormat.MATCH_PLAY)
    second = _settle(course, Segment.TOTAL, GameFormat.MATCH_PLAY)
    assert first == second
