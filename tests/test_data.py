# tests/test_data.py
import pytest

from sudokutech.data import Board
from sudokutech.errors import Conflict, InvalidPuzzle, NoOpError
from sudokutech.util import string_to_values

from conftest import NO_SOLUTION, SMALL, WIKI, board_from


def test_initial_candidates(small):
    assert sorted(small.get_candidates((0, 1))) == [2, 3]
    assert sorted(small.get_candidates((0, 2))) == [2, 4]
    assert small.get_candidates((0, 0)) == frozenset()
    assert small.value((0, 0)) == 1
    assert small.value((0, 1)) == 0
    assert small.num_remaining == 12
    assert not small.done


def test_candidates_never_hold_a_fixed_peer_digit(wiki):
    index = wiki.index
    for key in wiki.order_simple():
        fixed = {wiki.value(peer) for peer in index.peers[key]}
        assert not (wiki.get_candidates(key) & fixed)


def test_assign_propagates(small):
    changed = small.assign((0, 1), 2)
    assert small.is_fixed((0, 1))
    assert small.value((0, 1)) == 2
    assert (0, 2) in changed
    assert sorted(small.get_candidates((0, 2))) == [4]
    assert small.num_remaining == 11


def test_assign_conflicts(small):
    with pytest.raises(Conflict):
        small.assign((0, 1), 1)
    with pytest.raises(Conflict):
        small.assign((0, 0), 2)


def test_eliminate(small):
    small.eliminate((0, 2), 2)
    assert sorted(small.get_candidates((0, 2))) == [4]
    with pytest.raises(NoOpError):
        small.eliminate((0, 2), 2)
    assert not small.contradiction
    small.eliminate((0, 2), 4)
    assert small.contradiction == {(0, 2)}


def test_contradiction_from_givens():
    board = board_from(NO_SOLUTION)
    assert (0, 8) in board.contradiction
    assert board.count((0, 8)) == 0


def test_copy_is_independent(small):
    other = small.copy()
    assert other == small
    other.assign((0, 1), 2)
    assert small.value((0, 1)) == 0
    assert 2 in small.get_candidates((0, 2))
    assert other != small


def test_values_round_trip(wiki):
    assert wiki.values() == string_to_values(WIKI)
    assert Board(4, SMALL).values() == SMALL


def test_orderings(wiki):
    simple = list(wiki.order_simple())
    assert simple == sorted(simple)
    assert len(simple) == wiki.num_remaining
    counts = [wiki.count(key) for key in wiki.order_by_num_candidates()]
    assert counts == sorted(counts)
    assert all(wiki.count(key) == 2 for key in wiki.order_exactly_n(2))


def test_house_queries(small):
    row = small.houses[0]
    assert small.unsolved_in(row) == ((0, 1), (0, 2), (0, 3))
    assert small.candidates_in(row) == {2, 3, 4}
    assert small.keys_with(4, row) == ((0, 2), (0, 3))


def test_blank_boards():
    board = Board(16, [0] * 256)
    assert board.num_remaining == 256
    assert board.get_candidates((7, 7)) == frozenset(range(1, 17))


def test_duplicate_given_in_row():
    values = [0] * 81
    values[0] = values[5] = 7
    with pytest.raises(InvalidPuzzle):
        Board(9, values)


def test_duplicate_given_in_box():
    values = [0] * 81
    values[0] = values[10] = 3
    with pytest.raises(InvalidPuzzle):
        Board(9, values)


@pytest.mark.parametrize('size, values', [
    (10, [0] * 100),
    (9, [0] * 80),
    (9, [10] + [0] * 80),
    (9, [-1] + [0] * 80),
    (9, ['5'] + [0] * 80),
    ('9', [0] * 81),
    (9, [True] + [0] * 80),
])
def test_invalid_puzzles(size, values):
    with pytest.raises(InvalidPuzzle):
        Board(size, values)


def test_none_means_blank():
    values = [None] * 81
    values[40] = 5
    board = Board(9, values)
    assert board.value((4, 4)) == 5
    assert board.num_remaining == 80


def test_shape_may_be_a_list():
    board = Board(4, SMALL, shape=[2, 2])
    assert board.index is Board(4, SMALL, shape=(2, 2)).index
    assert sorted(board.get_candidates((0, 1))) == [2, 3]
