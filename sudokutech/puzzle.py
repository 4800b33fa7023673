"""
Sudoku is the class most callers want. It keeps the board built from the
givens, a working board that can be played on by hand or with hints, and
the history of the moves made on the working board so that they can be
undone.
"""

import logging

import gmpy2

from . import brute, concrete
from .brute import SolutionKind
from .data import Board
from .errors import (ContradictionError, InvalidPuzzle, NoSolutionError,
                     MultipleSolutionsError, NotSolvedError)
from .moves import ManualPlacement, ManualElimination

log = logging.getLogger(__name__)

class Sudoku:
    """A puzzle and a working copy of it.

    givens is a flat, row-major sequence of digits with 0 or None for
    blank cells. If size is left out it is taken from the number of givens.

    >>> puzzle = Sudoku([1, 0, 0, 0,  0, 0, 3, 0,  0, 4, 0, 0,  0, 0, 0, 2])
    >>> puzzle.size
    4
    >>> puzzle.remaining
    12
    """
    def __init__(self, givens, size=None, shape=None):
        givens = list(givens)
        if size is None:
            count = len(givens)
            if not count or not gmpy2.is_square(count):
                raise InvalidPuzzle(
                    'cannot make a square grid from {} values'.format(count)
                )
            size = int(gmpy2.isqrt(count))
        self.size = size
        self.givens = Board(size, givens, shape)
        self.board = self.givens.copy()
        self._solution = None
        self._history = []
        self._moves = []

    def __repr__(self):
        return '<Sudoku {0}x{0}, {1} remaining>'.format(self.size, self.remaining)

    ##
    ## Solutions
    ##

    def solution(self):
        """Brute force the givens. The result is worked out once and kept."""
        if self._solution is None:
            self._solution = brute.solve(self.givens)
        return self._solution

    def unique_solution(self):
        """The solved grid as a flat tuple. Raises NoSolutionError or
        MultipleSolutionsError when there isn't exactly one.
        """
        sol = self.solution()
        if sol.kind is SolutionKind.NONE:
            raise NoSolutionError('The puzzle has no solution')
        if sol.kind is SolutionKind.MULTIPLE:
            raise MultipleSolutionsError('The puzzle has more than one solution')
        return sol.grid

    def human_solve(self):
        """Solve a copy of the working board with the human techniques.
        The working board is left alone.
        """
        return concrete.human_solve(self.board.copy())

    def hint(self):
        """The next move the human techniques would make on the working
        board. Raises ContradictionError if some cell has no candidates left.
        """
        if self.board.contradiction:
            raise ContradictionError(
                'No candidates left at {}'.format(sorted(self.board.contradiction))
            )
        return concrete.hint(self.board)

    def step(self):
        """Apply the next hint to the working board. Returns the move, or None
        if no technique found one.
        """
        move = self.hint()
        if move is not None:
            self._apply(move)
        return move

    ##
    ## Playing by hand
    ##

    def _apply(self, move):
        snapshot = self.board.copy()
        move.apply(self.board)
        self._history.append(snapshot)
        self._moves.append(move)
        log.debug('Applied %s', move)

    def set(self, key, digit):
        """Fill in a cell. Raises Conflict if digit isn't a candidate there."""
        move = ManualPlacement(key=key, digit=digit)
        self._apply(move)
        return move

    def remove_candidate(self, key, digit):
        """Strike out a candidate. Raises NoOpError if it was already gone."""
        move = ManualElimination(change={key: {digit}}, cells=[key], digits={digit})
        self._apply(move)
        return move

    def undo(self):
        """Take back the last move, returning it. None if there is nothing to
        undo.
        """
        if not self._history:
            return None
        self.board = self._history.pop()
        return self._moves.pop()

    @property
    def moves(self):
        """Moves made on the working board, oldest first."""
        return tuple(self._moves)

    ##
    ## Queries
    ##

    @property
    def remaining(self):
        return self.board.num_remaining

    def get(self, key):
        return self.board.value(key)

    def possibilities(self, key):
        return sorted(self.board.get_candidates(key))

    def values(self):
        return self.board.values()

    def is_solved(self):
        return self.board.done

    def is_valid_entry(self, key, digit):
        """True if digit is still a candidate at key."""
        return digit in self.board.get_candidates(key)

    def compare_with_solution(self):
        """True if every filled cell agrees with the unique solution."""
        grid = self.unique_solution()
        return all(
            value == want for value, want in zip(self.board.values(), grid) if value
        )

    def validate_against_solution(self):
        """Raise NotSolvedError unless the working board is complete and
        matches the unique solution.
        """
        grid = self.unique_solution()
        conflicts = sum(
            1 for value, want in zip(self.board.values(), grid)
                if value and value != want
        )
        missing = self.remaining
        if missing or conflicts:
            raise NotSolvedError(missing, conflicts)
