# tests/test_util.py
from sudokutech.util import (average_runtime, list_runtimes, string_to_board,
                             string_to_values, values_to_string)

from conftest import SINGLES, WIKI


def test_string_round_trip():
    values = string_to_values(WIKI)
    assert len(values) == 81
    assert values[:5] == [5, 3, 0, 0, 7]
    assert values_to_string(values) == WIKI


def test_other_blank_characters():
    assert string_to_values('1.0x\n') == [1, 0, 0, 0]


def test_string_to_board():
    board = string_to_board(WIKI)
    assert board.size == 9
    assert board.num_remaining == WIKI.count('.')


def test_runtimes():
    times = list_runtimes([WIKI, SINGLES], lambda board: None)
    assert sorted(p for p, _ in times) == sorted([WIKI, SINGLES])
    assert all(t >= 0 for _, t in times)
    assert average_runtime([], lambda board: None) == 0.0
