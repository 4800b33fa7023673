"""
The solver framework. A solver class is put together by multiple
inheritance: BasicSolver (or Solver) comes first, then the Algorithm mixins
in the order they should be tried, easiest first.

An Algorithm looks at the Board in nextmove and returns a Move (see
moves.py) without touching the board; only moves change it.

The basic techniques (singles, pointing and claiming) and the naked and
hidden tuples live here; fish live in fish.py.
"""

import logging
from abc import ABCMeta, abstractmethod
from enum import Enum
from itertools import combinations

from .data import Board
from .errors import NoNextMoveError
from .moves import (Technique, SinglePossibilityMove, SingleCandidateMove,
                    PointingMove, ClaimingMove, NakedTupleMove, HiddenTupleMove)

log = logging.getLogger(__name__)

class Status(Enum):
    """Where a solver is in its loop. STUCK and COMPLETE are terminal."""
    SCANNING = 'scanning'
    APPLYING = 'applying'
    STUCK = 'stuck'
    COMPLETE = 'complete'

##
## Base Classes
##

class SolverMeta(ABCMeta):
    """Metaclass for solvers. It checks three things when a solver class is
    made:

    1) The class derives from BasicSolver.
    2) No Algorithm comes ahead of BasicSolver among the bases, so that the
        solver's methods run before any algorithm's.
    3) Only classes that have both BasicSolver and at least one Algorithm in
        their mro get to make instances. Algorithms can then count on having
        a board to look at.

    Solver classes can also be made on the fly with SolverMeta(name, bases, {}).
    """
    initialized = False

    def __new__(mcls, name, bases, ns):
        # If we're building BasicSolver, don't do anything.
        if not mcls.initialized:
            mcls.initialized = True
            return super().__new__(mcls, name, bases, ns)

        seen_sol = False
        seen_alg = False
        bad_mro = False
        for base in bases:
            if hasattr(base, '__can_inst__'):    # Subclass of a concrete solver
                assert issubclass(base, BasicSolver) and issubclass(base, Algorithm)
                return super().__new__(mcls, name, bases, ns)
            if issubclass(base, Algorithm):
                if not seen_sol:    # violates rule 2
                    bad_mro = True
                else:
                    seen_alg = True
                    break
            if issubclass(base, BasicSolver):
                seen_sol = True

        if not seen_sol:    # violates rule 1
            raise TypeError(
                "SolverMeta can only be the metaclass for subclasses of BasicSolver"
            )
        if bad_mro:
            raise TypeError(
                "Bad MRO for BasicSolver subclass; "
                "found an Algorithm before BasicSolver"
            )
        cls = super().__new__(mcls, name, bases, ns)
        if seen_alg:  # class can instatiate objects
            cls.__can_inst__ = True
        return cls

class Algorithm(metaclass=ABCMeta):
    """Base class for an algorithm. An algorithm is a mixin whose nextmove
    looks at the board and hands back a move, or passes the search on to the
    next algorithm with super().nextmove(). nextmove must not change the
    board.

    Every concrete algorithm names the technique it finds in 'technique'.
    """
    technique = None

    def __new__(cls, **kwargs):
        if not hasattr(cls, '__can_inst__'):    # See SolverMeta
            raise TypeError('Algorithms can\'t instatiate objects on their own')
        return super().__new__(cls)

    @abstractmethod
    def nextmove(self):
        raise NoNextMoveError

    def apply(self, move):
        """End of the apply chain. Solvers call super().apply(move) so that
        algorithms can watch moves go by; this is where that stops.
        """

class BasicSolver(metaclass=SolverMeta):
    """Base class for a solver. To create a solver class, derive from this
    class first, followed by algorithm classes in the order that you want
    them to be tried. ex:

    >>> class MySolver(BasicSolver, SinglePossibilities, SingleCandidates):
    ...     pass
    ...
    >>> solver = MySolver(board)
    >>> solver.solve()

    Every search for a move starts over at the first algorithm, so an easy
    technique is always used when one applies.
    """
    def __new__(cls, board, **kwargs):
        if not hasattr(cls, '__can_inst__'):
            raise TypeError('BasicSolver can\'t instatiate objects with no algorithms')
        return super().__new__(cls, **kwargs)

    def __init__(self, board, **kwargs):
        if not isinstance(board, Board):
            raise TypeError('Expected a Board, got {}'.format(type(board).__name__))
        self.board = board
        self.status = Status.COMPLETE if board.done else Status.SCANNING
        super().__init__(**kwargs)

    @classmethod
    def algorithms(cls):
        """The algorithm classes of this solver in the order they are tried."""
        return tuple(
            base for base in cls.__mro__
                if issubclass(base, Algorithm) and base.technique is not None
                    and 'nextmove' in vars(base)
        )

    def findnextmove(self):
        """Let algorithm classes search for moves. Raises NoNextMoveError and
        sets the status to STUCK if none of them finds one.
        """
        if self.board.done:
            self.status = Status.COMPLETE
            raise NoNextMoveError('The puzzle is already solved')
        self.status = Status.SCANNING
        try:
            return self.nextmove()
        except NoNextMoveError:
            self.status = Status.STUCK
            raise

    def apply(self, move):
        """Let a move mutate the board."""
        self.status = Status.APPLYING
        super().apply(move)
        move.apply(self.board)
        log.debug('Applied %s', move)
        self.status = Status.COMPLETE if self.board.done else Status.SCANNING

    def hint(self):
        """The move that would be applied next, or None. The board is not
        changed.
        """
        try:
            return self.findnextmove()
        except NoNextMoveError:
            return None

    def step(self):
        """Apply exactly one move and return it, or return None if there is
        nothing left to do.
        """
        move = self.hint()
        if move is not None:
            self.apply(move)
        return move

    def solve(self):
        """Do moves until the puzzle is complete or until no algorithm can
        find a move. Returns True if the puzzle was completed. Either way,
        the status tells how the loop ended.
        """
        while not self.board.done:
            if self.board.contradiction:
                log.warning('Cells %s have no candidates left; giving up',
                            sorted(self.board.contradiction))
                self.status = Status.STUCK
                return False
            try:
                move = self.findnextmove()
            except NoNextMoveError:
                log.info('Stuck with %d cells remaining', self.board.num_remaining)
                return False
            self.apply(move)
        self.status = Status.COMPLETE
        return True

class Solver(BasicSolver):
    """Keep track of the moves that are applied to the board."""
    def __init__(self, board, **kwargs):
        self.moves = []
        super().__init__(board, **kwargs)

    def apply(self, move):
        """Apply the move, and add it to the moves list, not necessarily in that
        order.
        """
        self.moves.append(move)
        super().apply(move)

##
## Algorithms
##

class SinglePossibilities(Algorithm):
    """Look for cells with only one candidate. Also known as 'naked singles'.
    This algorithm will succeed more often than any other.
    """
    technique = Technique.SINGLE_POSSIBILITY

    def nextmove(self):
        for key in self.board.order_exactly_n(1):
            digit, = self.board.get_candidates(key)
            return SinglePossibilityMove(key=key, digit=digit)
        return super().nextmove()

class SingleCandidates(Algorithm):
    """Search the grid for hidden singles. A hidden single is the only appearence
    of a candidate in a row, column, or box.
    """
    technique = Technique.SINGLE_CANDIDATE

    def nextmove(self):
        board = self.board
        for house, house_keys in enumerate(board.houses):
            for digit in sorted(board.candidates_in(house_keys)):
                where = board.keys_with(digit, house_keys)
                if len(where) == 1:
                    return SingleCandidateMove(
                        key=where[0], digit=digit, house=house,
                        house_name=board.index.house_name(house)
                    )
        return super().nextmove()

class PointingCandidates(Algorithm):
    """If all the cells in a box that can hold a digit are in one row (or
    column), the digit can be eliminated from the rest of that row (or
    column).
    """
    technique = Technique.POINTING

    def nextmove(self):
        board = self.board
        index = board.index
        size = board.size
        for n, box in enumerate(index.boxes):
            box_keys = set(box)
            for digit in sorted(board.candidates_in(box)):
                where = board.keys_with(digit, box)
                # 0: row, 1: column
                for offset in range(2):
                    lines = {key[offset] for key in where}
                    if len(lines) != 1:
                        continue
                    line_house = lines.pop() + offset * size
                    change = {
                        key: {digit}
                            for key in board.keys_with(digit, board.houses[line_house])
                                if key not in box_keys
                    }
                    if change:
                        house = 2 * size + n
                        return PointingMove(
                            change=change, cells=where, digits={digit},
                            house=house, house_name=index.house_name(house),
                            line_name=index.house_name(line_house)
                        )
        return super().nextmove()

class ClaimingCandidates(Algorithm):
    """If all the cells in a row (or column) that can hold a digit are in one
    box, the digit can be eliminated from the rest of that box. Also known as
    box/line reduction.
    """
    technique = Technique.CLAIMING

    def nextmove(self):
        board = self.board
        index = board.index
        size = board.size
        for house in range(2 * size):
            line = board.houses[house]
            line_keys = set(line)
            for digit in sorted(board.candidates_in(line)):
                where = board.keys_with(digit, line)
                boxes = {index.box_of(key) for key in where}
                if len(boxes) != 1:
                    continue
                box = boxes.pop()
                change = {
                    key: {digit}
                        for key in board.keys_with(digit, index.boxes[box])
                            if key not in line_keys
                }
                if change:
                    return ClaimingMove(
                        change=change, cells=where, digits={digit},
                        house=house, house_name=index.house_name(house),
                        box_name=index.house_name(2 * size + box)
                    )
        return super().nextmove()

class NakedSets(Algorithm):
    """Base algorithm for naked tuples. If n cells of a house have only n
    digits between them, say (0,2) and (0,7) both hold just {4,9}, those n
    cells use up those digits, and the digits can be struck from the rest
    of the house.
    """
    def naked_find(self, count):
        """Find a naked tuple of count cells, or return None."""
        assert count > 1
        board = self.board
        for house, house_keys in enumerate(board.houses):
            unsolved = board.unsolved_in(house_keys)
            if len(unsolved) <= count:
                continue
            small = [key for key in unsolved if 0 < board.count(key) <= count]
            for keyset in combinations(small, count):
                digits = board.candidates_in(keyset)
                if len(digits) != count:
                    continue

                # Calculate change dictionary to pass into move constructor
                change = {}
                for key in unsolved:
                    if key not in keyset:
                        elim = digits & board.get_candidates(key)
                        if elim:
                            change[key] = elim
                if change:
                    return NakedTupleMove(
                        change=change, cells=keyset, digits=digits,
                        house=house, house_name=board.index.house_name(house),
                        technique=Technique.naked(count)
                    )
        return None

class NakedPairs(NakedSets):
    """Search for naked pairs."""
    technique = Technique.NAKED_PAIR

    def nextmove(self):
        move = self.naked_find(2)
        if move is not None:
            return move
        return super().nextmove()

class NakedTriples(NakedSets):
    """Search for naked triples."""
    technique = Technique.NAKED_TRIPLE

    def nextmove(self):
        move = self.naked_find(3)
        if move is not None:
            return move
        return super().nextmove()

class NakedQuads(NakedSets):
    """Search for naked quads."""
    technique = Technique.NAKED_QUAD

    def nextmove(self):
        move = self.naked_find(4)
        if move is not None:
            return move
        return super().nextmove()

class HiddenSets(Algorithm):
    """Base algorithm for hidden tuples. If n digits of a house can only go
    in the same n cells, those cells can't hold anything else.
    """
    def hidden_find(self, count):
        """Find a hidden tuple of count digits, or return None."""
        assert count > 1
        board = self.board
        for house, house_keys in enumerate(board.houses):
            unsolved = board.unsolved_in(house_keys)
            if len(unsolved) <= count:
                continue

            # search for candidates that appear a certain amount of times in a house
            positions = {
                digit: board.keys_with(digit, unsolved)
                    for digit in sorted(board.candidates_in(unsolved))
            }
            possibles = tuple(
                digit for digit, where in positions.items()
                    if 0 < len(where) <= count
            )
            for poset in combinations(possibles, count):
                keyset = set()
                for digit in poset:
                    keyset.update(positions[digit])
                if len(keyset) != count:
                    continue

                # We've found a set; make sure it isn't naked
                digits = set(poset)
                change = {}
                for key in keyset:
                    elim = board.get_candidates(key) - digits
                    if elim:
                        change[key] = elim
                if change:
                    return HiddenTupleMove(
                        change=change, cells=keyset, digits=digits,
                        house=house, house_name=board.index.house_name(house),
                        technique=Technique.hidden(count)
                    )
        return None

class HiddenPairs(HiddenSets):
    """Search for hidden pairs."""
    technique = Technique.HIDDEN_PAIR

    def nextmove(self):
        move = self.hidden_find(2)
        if move is not None:
            return move
        return super().nextmove()

class HiddenTriples(HiddenSets):
    """Search for hidden triples."""
    technique = Technique.HIDDEN_TRIPLE

    def nextmove(self):
        move = self.hidden_find(3)
        if move is not None:
            return move
        return super().nextmove()

class HiddenQuads(HiddenSets):
    """Search for hidden quads."""
    technique = Technique.HIDDEN_QUAD

    def nextmove(self):
        move = self.hidden_find(4)
        if move is not None:
            return move
        return super().nextmove()
