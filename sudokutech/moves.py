"""
Moves are the records that algorithms hand back to a solver. A move either
fixes one cell to a digit or removes candidates from one or more cells, and
it remembers which technique found it and which cells and digits were used
to find it, so that it can be shown to a person as a hint.

Moves don't hold on to a board. They are built from keyword arguments (see
Move.required) and are not changed after they are built; apply them to a
board with Move.apply.
"""

from enum import Enum
from functools import total_ordering

from .errors import MoveArgError

@total_ordering
class Technique(Enum):
    """Solving techniques, in the order a solver tries them. The first
    value is the rank that orders techniques, the second is the name shown
    to people and the third is a difficulty weight used when scoring a
    whole solve.
    """
    SINGLE_POSSIBILITY = (0, 'Single Possibility', 0.2)
    SINGLE_CANDIDATE = (1, 'Single Candidate', 1.3)
    POINTING = (2, 'Pointing Candidates', 1.8)
    CLAIMING = (3, 'Claiming Candidates', 2.1)
    NAKED_PAIR = (4, 'Naked Pair', 1.0)
    NAKED_TRIPLE = (5, 'Naked Triple', 1.7)
    NAKED_QUAD = (6, 'Naked Quad', 2.2)
    HIDDEN_PAIR = (7, 'Hidden Pair', 2.1)
    HIDDEN_TRIPLE = (8, 'Hidden Triple', 2.9)
    HIDDEN_QUAD = (9, 'Hidden Quad', 3.7)
    XWING = (10, 'X-Wing', 3.4)
    SWORDFISH = (11, 'Swordfish', 4.0)
    JELLYFISH = (12, 'Jellyfish', 5.0)
    FINNED_XWING = (13, 'Finned X-Wing', 4.1)
    FINNED_SWORDFISH = (14, 'Finned Swordfish', 4.9)
    FINNED_JELLYFISH = (15, 'Finned Jellyfish', 5.9)

    def __init__(self, rank, label, weight):
        self.rank = rank
        self.label = label
        self.weight = weight

    def __lt__(self, other):
        if not isinstance(other, Technique):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self):
        return self.label

    @classmethod
    def naked(cls, count):
        return _SIZED['naked'][count]

    @classmethod
    def hidden(cls, count):
        return _SIZED['hidden'][count]

    @classmethod
    def fish(cls, count):
        return _SIZED['fish'][count]

    @classmethod
    def finned(cls, count):
        return _SIZED['finned'][count]

_SIZED = {
    'naked': {2: Technique.NAKED_PAIR, 3: Technique.NAKED_TRIPLE,
              4: Technique.NAKED_QUAD},
    'hidden': {2: Technique.HIDDEN_PAIR, 3: Technique.HIDDEN_TRIPLE,
               4: Technique.HIDDEN_QUAD},
    'fish': {2: Technique.XWING, 3: Technique.SWORDFISH,
             4: Technique.JELLYFISH},
    'finned': {2: Technique.FINNED_XWING, 3: Technique.FINNED_SWORDFISH,
               4: Technique.FINNED_JELLYFISH},
}

def fmt_key(key):
    """r1c1 style name for a key."""
    return 'r{}c{}'.format(key[0] + 1, key[1] + 1)

def fmt_digits(digits):
    return '{' + ','.join(str(d) for d in sorted(digits)) + '}'

##
## Base Classes
##

class Move:
    """Base class for moves. Subclasses list the keyword arguments that they
    need in 'required'; leaving one out raises MoveArgError.
    """
    technique = None
    required = ()

    def __init__(self, **kwargs):
        missing = [name for name in self.required if name not in kwargs]
        if missing:
            raise MoveArgError(
                '{} missing required keyword argument(s): {}'.format(
                    type(self).__name__, ', '.join(missing))
            )
        technique = kwargs.pop('technique', None)
        if technique is not None:
            self.technique = technique
        self.house = kwargs.pop('house', None)
        self.house_name = kwargs.pop('house_name', None)
        self._init(**kwargs)

    def _init(self, **kwargs):
        raise NotImplementedError

    @property
    def assignment(self):
        """(key, digit) for a move that fixes a cell, None otherwise."""
        return None

    @property
    def eliminations(self):
        """Tuple of (key, frozenset of digits) pairs, in row-major order."""
        return ()

    @property
    def cells(self):
        """Keys of the cells that were used to find the move."""
        return ()

    @property
    def digits(self):
        """The digits the move is about."""
        return frozenset()

    def apply(self, board):
        raise NotImplementedError

    def explain(self):
        raise NotImplementedError

    def _signature(self):
        return (type(self).__name__, self.technique, self.house,
                self.assignment, self.eliminations, self.cells,
                tuple(sorted(self.digits)))

    def __eq__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return self._signature() == other._signature()

    def __hash__(self):
        return hash(self._signature())

    def __str__(self):
        return self.explain()

    def __repr__(self):
        return '<{}: {}>'.format(type(self).__name__, self.explain())

class Placement(Move):
    """Fix a cell to a digit."""
    required = ('key', 'digit')

    def _init(self, *, key, digit, cells=None):
        self._key = key
        self._digit = digit
        self._cells = tuple(cells) if cells is not None else (key,)

    @property
    def key(self):
        return self._key

    @property
    def digit(self):
        return self._digit

    @property
    def assignment(self):
        return self._key, self._digit

    @property
    def cells(self):
        return self._cells

    @property
    def digits(self):
        return frozenset((self._digit,))

    def apply(self, board):
        board.assign(self._key, self._digit)

    def explain(self):
        return '{}: {} is {}'.format(self.technique, fmt_key(self._key), self._digit)

class Elimination(Move):
    """Remove candidates from cells. 'change' maps keys to the digits to
    remove there.
    """
    required = ('change', 'cells', 'digits')

    def _init(self, *, change, cells, digits):
        self._change = tuple(
            (key, frozenset(change[key])) for key in sorted(change) if change[key]
        )
        self._cells = tuple(sorted(cells))
        self._digits = frozenset(digits)

    @property
    def eliminations(self):
        return self._change

    @property
    def cells(self):
        return self._cells

    @property
    def digits(self):
        return self._digits

    def apply(self, board):
        for key, digits in self._change:
            for digit in sorted(digits):
                board.eliminate(key, digit)

    def explain_change(self):
        return ', '.join(
            '{} from {}'.format(fmt_digits(digits), fmt_key(key))
                for key, digits in self._change
        )

    def explain(self):
        return '{}: remove {}'.format(self.technique, self.explain_change())

##
## Moves made by people
##

class ManualPlacement(Placement):
    """A digit that was filled in by hand rather than by a technique."""
    def explain(self):
        return 'Manual: {} is {}'.format(fmt_key(self._key), self._digit)

class ManualElimination(Elimination):
    """A candidate that was struck out by hand."""
    def explain(self):
        return 'Manual: remove {}'.format(self.explain_change())

##
## Moves made by algorithms
##

class SinglePossibilityMove(Placement):
    technique = Technique.SINGLE_POSSIBILITY

    def explain(self):
        return '{}: {} can only be {}'.format(
            self.technique, fmt_key(self._key), self._digit)

class SingleCandidateMove(Placement):
    technique = Technique.SINGLE_CANDIDATE
    required = ('key', 'digit', 'house_name')

    def explain(self):
        return '{}: {} is the only place for {} in {}'.format(
            self.technique, fmt_key(self._key), self._digit, self.house_name)

class PointingMove(Elimination):
    technique = Technique.POINTING
    required = ('change', 'cells', 'digits', 'house_name', 'line_name')

    def _init(self, *, line_name, **kwargs):
        self.line_name = line_name
        super()._init(**kwargs)

    def explain(self):
        digit, = self._digits
        return '{}: in {}, {} is confined to {}; remove {}'.format(
            self.technique, self.house_name, digit, self.line_name,
            self.explain_change())

class ClaimingMove(Elimination):
    technique = Technique.CLAIMING
    required = ('change', 'cells', 'digits', 'house_name', 'box_name')

    def _init(self, *, box_name, **kwargs):
        self.box_name = box_name
        super()._init(**kwargs)

    def explain(self):
        digit, = self._digits
        return '{}: in {}, {} is confined to {}; remove {}'.format(
            self.technique, self.house_name, digit, self.box_name,
            self.explain_change())

class TupleMove(Elimination):
    """Shared by naked and hidden tuples."""
    required = ('change', 'cells', 'digits', 'house_name', 'technique')

    def explain(self):
        return '{}: {} in {} hold {}; remove {}'.format(
            self.technique, ', '.join(fmt_key(k) for k in self._cells),
            self.house_name, fmt_digits(self._digits), self.explain_change())

class NakedTupleMove(TupleMove):
    pass

class HiddenTupleMove(TupleMove):
    pass

class FishMove(Elimination):
    """Moves for basic fish. 'base' and 'cover' are the names of the lines
    that make up the fish.
    """
    required = ('change', 'cells', 'digits', 'base', 'cover', 'technique')

    def _init(self, *, base, cover, fins=(), **kwargs):
        self.base = tuple(base)
        self.cover = tuple(cover)
        self.fins = tuple(sorted(fins))
        super()._init(**kwargs)

    def _signature(self):
        return super()._signature() + (self.base, self.cover, self.fins)

    def explain(self):
        digit, = self._digits
        return '{}: {} in {} is covered by {}; remove {}'.format(
            self.technique, digit, ', '.join(self.base), ', '.join(self.cover),
            self.explain_change())

class FinnedFishMove(FishMove):
    required = FishMove.required + ('fins',)

    def explain(self):
        digit, = self._digits
        return '{}: {} in {} is covered by {} with fins at {}; remove {}'.format(
            self.technique, digit, ', '.join(self.base), ', '.join(self.cover),
            ', '.join(fmt_key(k) for k in self.fins), self.explain_change())
