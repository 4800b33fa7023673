# tests/test_brute.py
import pytest

from sudokutech import brute
from sudokutech.brute import SolutionKind
from sudokutech.config import HouseIndex, get_index
from sudokutech.data import Board

from conftest import HARD_SOLUTION, NO_SOLUTION, WIKI_SOLUTION, board_from, digits


def is_complete_grid(grid, index=None):
    index = index or get_index(9)
    size = index.size
    values = dict(zip(index.keys, grid))
    return all(
        sorted(values[key] for key in house) == list(range(1, size + 1))
            for house in index.houses
    )


def test_unique_solution(hard):
    sol = brute.solve(hard)
    assert sol.kind is SolutionKind.ONE
    assert sol.unique
    assert sol.grid == digits(HARD_SOLUTION)


def test_input_board_is_not_changed(hard):
    before = hard.copy()
    brute.solve(hard)
    assert hard == before


def test_blank_board_has_many_solutions(blank):
    sol = brute.solve(blank)
    assert sol.kind is SolutionKind.MULTIPLE
    assert sol.grid is None
    assert len(sol.grids) == 2
    assert sol.grids[0] != sol.grids[1]
    assert all(is_complete_grid(grid) for grid in sol.grids)


def test_first_solution_is_lowest_digits_first(blank):
    first = brute.solve(blank).grids[0]
    assert first[:9] == tuple(range(1, 10))


def test_no_solution():
    sol = brute.solve(board_from(NO_SOLUTION))
    assert sol.kind is SolutionKind.NONE
    assert sol.grids == ()
    assert sol.grid is None


@pytest.mark.parametrize('step', [2, 3, 4, 5])
def test_subsets_of_a_solution(step):
    values = list(digits(WIKI_SOLUTION))
    for n in range(0, 81, step):
        values[n] = 0
    sol = brute.solve(Board(9, values))
    assert sol.kind in (SolutionKind.ONE, SolutionKind.MULTIPLE)
    if sol.kind is SolutionKind.ONE:
        assert sol.grid == digits(WIKI_SOLUTION)
    else:
        assert len(sol.grids) == 2
        for grid in sol.grids:
            assert is_complete_grid(grid)
            assert all(v == g for v, g in zip(values, grid) if v)


def test_limit():
    sol = brute.solve(Board(4, [0] * 16), limit=5)
    assert sol.kind is SolutionKind.MULTIPLE
    assert len(sol.grids) == 5
    assert len(set(sol.grids)) == 5
    with pytest.raises(ValueError):
        brute.solve(Board(4, [0] * 16), limit=1)


def test_rectangular_board():
    sol = brute.solve(Board(6, [0] * 36, shape=(2, 3)))
    assert sol.kind is SolutionKind.MULTIPLE
    index = HouseIndex(6, shape=(2, 3))
    assert all(is_complete_grid(grid, index) for grid in sol.grids)


def test_propagate_fills_forced_cells(wiki):
    assert brute.propagate(wiki)
    assert not wiki.contradiction


def test_propagate_reports_contradiction():
    assert not brute.propagate(board_from(NO_SOLUTION))


def test_check_unique(wiki, blank):
    assert brute.check_unique(wiki)
    assert not brute.check_unique(blank)
