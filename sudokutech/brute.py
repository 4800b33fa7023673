"""
Brute force solving. This is a depth first search over copies of a board:
fill in every cell that has only one candidate, then pick the unsolved cell
with the fewest candidates and try each of its candidates, lowest first, on
its own copy of the board.

The search stops as soon as a second solution turns up, so asking about a
puzzle with many solutions is cheap.
"""

import logging
from collections import namedtuple
from enum import Enum

log = logging.getLogger(__name__)

SolutionKind = Enum('SolutionKind', ['NONE', 'ONE', 'MULTIPLE'])

class Solution(namedtuple('Solution', ['kind', 'grids'])):
    """Result of a brute force search. 'grids' holds the completed grids
    that were found, as flat row-major tuples: none, one, or the first two.
    """
    __slots__ = ()

    @property
    def grid(self):
        """The solution, if it is unique. None otherwise."""
        if self.kind is SolutionKind.ONE:
            return self.grids[0]
        return None

    @property
    def unique(self):
        return self.kind is SolutionKind.ONE

def propagate(board):
    """Fix every cell that has only one candidate, over and over, until no
    such cell is left. Returns False if some cell ends up with no candidates.
    """
    while not board.contradiction:
        singles = list(board.order_exactly_n(1))
        if not singles:
            return True
        for key in singles:
            cands = board.get_candidates(key)
            if not cands:
                return False
            digit, = cands
            board.assign(key, digit)
    return False

def _pick(board):
    """Unsolved key with the fewest candidates; the first in row-major order
    wins a tie.
    """
    return min(board.order_simple(), key=board.count)

def solve(board, limit=2):
    """Search for solutions of board, stopping once limit of them have been
    found. The board itself is not changed.

    The search is quick up to 16x16. On sparse 25x25 boards, a blank one
    included, it can run for many minutes before it finds two solutions.
    """
    if limit < 2:
        raise ValueError('limit must be at least 2 to tell one solution from many')
    found = []
    nodes = 0
    # Each entry is a board to continue from, and the guess to make on a
    # copy of it (or None for the starting board).
    stack = [(board, None)]
    while stack:
        parent, guess = stack.pop()
        current = parent.copy()
        nodes += 1
        if guess is not None:
            current.assign(*guess)
        if not propagate(current):
            continue
        if current.done:
            found.append(tuple(current.values()))
            log.debug('Found solution %d after %d nodes', len(found), nodes)
            if len(found) >= limit:
                break
            continue
        key = _pick(current)
        # Push in reverse so that the lowest digit is tried first
        for digit in sorted(current.get_candidates(key), reverse=True):
            stack.append((current, (key, digit)))

    if not found:
        kind = SolutionKind.NONE
    elif len(found) == 1:
        kind = SolutionKind.ONE
    else:
        kind = SolutionKind.MULTIPLE
    log.info('Brute force: %s after %d nodes', kind.name, nodes)
    return Solution(kind, tuple(found))

def check_unique(board):
    """Shortcut; True if board has exactly one solution."""
    return solve(board).unique
