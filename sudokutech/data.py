"""
The Board: a grid of cells, each either fixed to a digit or holding a set of
candidate digits. Digits run from 1 to size.

Assigning a digit removes it from the candidates of every peer straight
away, so candidate sets never contain a digit that is fixed in one of the
cell's houses. Boards are only copied when asked to; the brute force solver
does that once per branch.
"""

import logging

from . import config
from .errors import Conflict, InvalidPuzzle, NoOpError

log = logging.getLogger(__name__)

class Board:
    """A sudoku grid.

    >>> board = Board(4, [1, 0, 0, 0,  0, 0, 3, 0,  0, 4, 0, 0,  0, 0, 0, 2])
    >>> sorted(board.get_candidates((0, 1)))
    [2, 3]
    >>> changed = board.assign((0, 1), 2)
    >>> board.value((0, 1))
    2
    """
    def __init__(self, size, givens, shape=None):
        try:
            if shape is not None:
                shape = tuple(shape)
            self.index = config.get_index(size, shape)
        except TypeError as e:
            raise InvalidPuzzle(
                'bad board size {!r} or shape {!r}'.format(size, shape)
            ) from e
        self.size = size
        givens = list(givens)
        if len(givens) != size * size:
            raise InvalidPuzzle(
                'expected {} given values, got {}'.format(size * size, len(givens))
            )

        self.grid = {}
        self.contradiction = set()
        self.terminals = frozenset(range(1, size + 1))
        for key, digit in zip(self.index.keys, givens):
            if digit is None or digit == 0:
                continue
            if (not isinstance(digit, int) or isinstance(digit, bool)
                    or digit not in self.terminals):
                raise InvalidPuzzle(
                    'given {!r} at {} is outside 1..{}'.format(digit, key, size)
                )
            for peer in self.index.peers[key]:
                if self.grid.get(peer) == digit:
                    raise InvalidPuzzle(
                        'digit {} appears at both {} and {}'.format(digit, peer, key)
                    )
            self.grid[key] = digit

        # calculate initial candidates
        self._candidates = {}
        for key in self.index.keys:
            if key not in self.grid:
                cands = self._getcandidates(key)
                self._candidates[key] = cands
                if not cands:
                    self.contradiction.add(key)

    def _getcandidates(self, key):
        taken = {self.grid[peer] for peer in self.index.peers[key] if peer in self.grid}
        return set(self.terminals - taken)

    def copy(self):
        """Make an independent board in the same state."""
        other = Board.__new__(Board)
        other.index = self.index
        other.size = self.size
        other.terminals = self.terminals
        other.grid = dict(self.grid)
        other.contradiction = set(self.contradiction)
        other._candidates = {k: set(v) for k, v in self._candidates.items()}
        return other

    ##
    ## Mutation
    ##

    def assign(self, key, digit):
        """Fix a cell to a digit and remove the digit from the candidates
        of every unsolved peer. Returns the peers that lost the digit.
        """
        cands = self._candidates.get(key)
        if cands is None or digit not in cands:
            raise Conflict('{} is not a candidate at {}'.format(digit, key))
        del self._candidates[key]
        self.contradiction.discard(key)
        self.grid[key] = digit
        changed = []
        for peer in self.index.peers[key]:
            peer_cands = self._candidates.get(peer)
            if peer_cands is not None and digit in peer_cands:
                peer_cands.remove(digit)
                changed.append(peer)
                if not peer_cands:
                    self.contradiction.add(peer)
        return changed

    def eliminate(self, key, digit):
        """Remove a single candidate from an unsolved cell."""
        cands = self._candidates.get(key)
        if cands is None or digit not in cands:
            raise NoOpError('{} is not a candidate at {}'.format(digit, key))
        cands.remove(digit)
        if not cands:
            log.debug('Eliminating %d left no candidates at %s', digit, key)
            self.contradiction.add(key)

    ##
    ## Queries
    ##

    @property
    def done(self):
        """True once every cell is fixed."""
        return len(self.grid) == self.size * self.size

    @property
    def num_remaining(self):
        return len(self._candidates)

    @property
    def houses(self):
        return self.index.houses

    def key_solved(self, key):
        """Return True if this key has been solved."""
        return key in self.grid

    is_fixed = key_solved

    def value(self, key):
        """The digit at key, or 0 if the cell is unsolved."""
        return self.grid.get(key, 0)

    def get_candidates(self, key):
        """Get a read only view of the candidates of a cell. Solved cells have
        no candidates.
        """
        return frozenset(self._candidates.get(key, ()))

    def count(self, key):
        """Number of candidates left at key; 0 for solved cells."""
        return len(self._candidates.get(key, ()))

    def candidates_in(self, keys):
        """Union of the candidates of the unsolved cells in keys."""
        digits = set()
        for key in keys:
            cands = self._candidates.get(key)
            if cands:
                digits |= cands
        return digits

    def keys_with(self, digit, keys):
        """The keys, in order, of the unsolved cells with digit as a
        candidate.
        """
        return tuple(
            key for key in keys
                if digit in self._candidates.get(key, ())
        )

    def unsolved_in(self, keys):
        return tuple(key for key in keys if key in self._candidates)

    def order_simple(self):
        """Unsolved keys in row-major order."""
        for key in self.index.keys:
            if key in self._candidates:
                yield key

    def order_exactly_n(self, n):
        """Unsolved keys with exactly n candidates, in row-major order."""
        for key in self.order_simple():
            if len(self._candidates[key]) == n:
                yield key

    def order_by_num_candidates(self):
        """Unsolved keys sorted by number of candidates. Ties keep row-major
        order.
        """
        yield from sorted(self.order_simple(), key=lambda k: len(self._candidates[k]))

    def values(self):
        """Flat row-major list of digits, with 0 for unsolved cells."""
        return [self.grid.get(key, 0) for key in self.index.keys]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self.size == other.size and self.grid == other.grid
                and self._candidates == other._candidates)

    def __repr__(self):
        return '<Board {0}x{0}, {1} remaining>'.format(self.size, self.num_remaining)
