import pytest

from bullet_dodge.config.prefs import MemoryPrefs
from bullet_dodge.core.scoreboard import LEADERBOARD_KEY, Scoreboard


def test_record_keeps_top_five_descending():
    board = Scoreboard(capacity=5)
    for score in [10, 30, 20, 5, 15, 25]:
        board.record(score)

    assert board.scores == [30, 25, 20, 15, 10]
    assert len(board) == 5


def test_nth_best_never_decreases():
    board = Scoreboard(capacity=3)
    floor = None
    for score in [4, 1, 9, 2, 7, 3, 8, 0.5, 6]:
        board.record(score)
        if len(board) == board.capacity:
            if floor is not None:
                assert board.scores[-1] >= floor
            floor = board.scores[-1]


def test_top_n_pads_with_placeholders():
    board = Scoreboard(capacity=5)
    board.record(3.25)
    board.record(7.5)

    assert board.top_n() == [7.5, 3.25, None, None, None]
    assert board.format_rows() == ["1. 7.5s", "2. 3.2s", "3. ---", "4. ---", "5. ---"]


def test_non_finite_scores_are_ignored():
    board = Scoreboard()
    assert board.record(float("nan")) is False
    assert board.record(float("inf")) is False
    assert len(board) == 0


def test_serialize_uses_three_decimals():
    board = Scoreboard()
    board.record(1.5)
    board.record(12.3456)

    assert board.serialize() == "12.346|1.500"


def test_round_trip():
    board = Scoreboard()
    board.record(12.345)

    restored = Scoreboard()
    restored.deserialize(board.serialize())

    assert restored.top_n()[0] == pytest.approx(12.345, abs=1e-3)


def test_deserialize_skips_malformed_entries():
    board = Scoreboard(capacity=5)
    board.deserialize("3.000|abc||nan|9.500|1e400|2.250")

    assert board.scores == [9.5, 3.0, 2.25]


@pytest.mark.parametrize("blob", ["", None])
def test_deserialize_empty(blob):
    board = Scoreboard()
    board.record(5)
    board.deserialize(blob)

    assert len(board) == 0


def test_deserialize_sorts_and_truncates():
    board = Scoreboard(capacity=2)
    board.deserialize("1|3|2")

    assert board.scores == [3, 2]


def test_load_and_save_through_prefs():
    prefs = MemoryPrefs()
    board = Scoreboard()
    board.record(8.125)
    board.save(prefs)

    assert prefs.get_string(LEADERBOARD_KEY) == "8.125"
    assert prefs.save_count == 1

    restored = Scoreboard()
    restored.load(prefs)
    assert restored.scores == [8.125]


def test_load_missing_key_is_empty():
    board = Scoreboard()
    board.load(MemoryPrefs())

    assert board.top_n() == [None] * 5
