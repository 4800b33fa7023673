"""
Concrete sudoku solver classes which use various algorithms to solve sudoku
puzzles, and the functions that drive them: full solves, hints, partial
solves and reports.
"""

import logging
from collections import namedtuple
from functools import lru_cache

from .fish import (XWings, Swordfish, Jellyfish,
                   FinnedXWings, FinnedSwordfish, FinnedJellyfish)
from .solver import (SolverMeta, Solver, Status,
                     SinglePossibilities, SingleCandidates,
                     PointingCandidates, ClaimingCandidates,
                     NakedPairs, NakedTriples, NakedQuads,
                     HiddenPairs, HiddenTriples, HiddenQuads)

log = logging.getLogger(__name__)

class HumanSolver(
    Solver,
    SinglePossibilities,
    SingleCandidates,
    PointingCandidates,
    ClaimingCandidates,
    NakedPairs,
    NakedTriples,
    NakedQuads,
    HiddenPairs,
    HiddenTriples,
    HiddenQuads,
    XWings,
    Swordfish,
    Jellyfish,
    FinnedXWings,
    FinnedSwordfish,
    FinnedJellyfish
):
    """Uses every technique, easiest first. This is the solver behind
    human_solve and hint.
    """

@lru_cache(maxsize=None)
def solver_class(*algorithms):
    """Build a solver class on the fly that tries the given algorithm
    classes in order.
    """
    name = 'SolverOf' + ''.join(alg.__name__ for alg in algorithms)
    return SolverMeta(name, (Solver,) + algorithms, {})

def detect(algorithm, board):
    """Run a single algorithm against board. Returns a move or None."""
    return solver_class(algorithm)(board).hint()

def solver_for(technique):
    """A solver class that only knows the techniques up to and including
    technique.
    """
    algs = tuple(
        alg for alg in HumanSolver.algorithms() if alg.technique <= technique
    )
    return solver_class(*algs)

class SolveResult(namedtuple('SolveResult', ['board', 'moves', 'status'])):
    """What human_solve hands back: the board in its final state, the moves
    that were applied, and the status that the solver ended in.
    """
    __slots__ = ()

    @property
    def solved(self):
        return self.status is Status.COMPLETE

    @property
    def hardest(self):
        """The hardest technique that was used, or None if no moves were
        needed.
        """
        techniques = [move.technique for move in self.moves if move.technique]
        return max(techniques) if techniques else None

    @property
    def rating(self):
        """Difficulty of the puzzle: the hardest technique used when the
        solve completed, Status.STUCK otherwise.
        """
        if self.solved:
            return self.hardest
        return Status.STUCK

    @property
    def score(self):
        return total_difficulty(self.moves)

def total_difficulty(moves):
    return sum(move.technique.weight for move in moves if move.technique)

def human_solve(board, cls=HumanSolver):
    """Solve board in place with the human techniques. Never raises for a
    puzzle that can't be finished; check the status of the result instead.
    """
    solver = cls(board)
    solver.solve()
    log.info('Human solve ended %s after %d moves',
             solver.status.name, len(solver.moves))
    return SolveResult(board, tuple(solver.moves), solver.status)

def hint(board, cls=HumanSolver):
    """The easiest move available on board, or None."""
    return cls(board).hint()

def solve_up_to(board, technique):
    """Apply moves to board, never using a technique harder than the one
    given. Returns the list of applied moves.
    """
    solver = solver_for(technique)(board)
    solver.solve()
    return solver.moves

def solve_to(board, technique):
    """Apply moves to board until the next hint would use technique, or
    until there is nothing left to do. Harder techniques may be used along
    the way. Returns the list of applied moves.
    """
    solver = HumanSolver(board)
    while not board.done:
        move = solver.hint()
        if move is None or move.technique is technique:
            break
        solver.apply(move)
    return solver.moves

def report(moves):
    """A few lines of text describing a sequence of moves, ending with the
    total difficulty.
    """
    lines = ['Report of {} moves:'.format(len(moves))]
    lines.extend('  ' + move.explain() for move in moves)
    lines.append('Total difficulty rating: {:.1f}'.format(total_difficulty(moves)))
    return '\n'.join(lines)
