# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudokutech" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudokutech.data import Board
from sudokutech.util import string_to_values

WIKI = '53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79'
WIKI_SOLUTION = '534678912672195348198342567859761423426853791713924856961537284287419635345286179'

# Same solution as WIKI, and solvable with nothing but single possibilities
SINGLES = '534.7....6.2195....98....6.8...6...34..8.3..1.1..2...6.6....28....419..5....8..79'

HARD = '...15..3.9..4....7.58.9....31....72.4.......8.......5....24...55.......6.71..9...'
HARD_SOLUTION = '742156839963428517158397642316985724495712368827634951689243175534871296271569483'

POINTING = [
    '984........25...4...19.4..2..6.9723...36.2...2.9.3561.195768423427351896638..9751',
    '34...6.7..8....93...2.3..6.....1.....9736485......2...............6.8.9....923785',
]
TUPLE = '.49132....81479...327685914.96.518...75.28....38.46..5853267...712894563964513...'
HIDDEN_QUAD = '.3.....1...8.9....4..6.8......57694....98352....124...276..519....7.9....95...47.'
JELLY = '2.41.358.....2.3411.34856..732954168..5.1.9..6198324....15.82..3..24.....263....4'
FINNED_JELLY = '...16.87..1.875..38.73..651.5.62173...17..5.473.5..1...7........8.256917.62..7...'
INKALA = '..53.....8......2..7..1.5..4....53...1..7...6..32...8..6.5....9..4....3......97..'

# r5c6 can be 1, 5 or 8
HIDDEN_SINGLE = '.28..7....16.83.7.....2.85113729.......73........463.729..7.......86.14....3..7..'

# r1c9 has no candidates left
NO_SOLUTION = '12345678.' + '........9' + '.' * 63

SMALL = [1, 0, 0, 0,
         0, 0, 3, 0,
         0, 4, 0, 0,
         0, 0, 0, 2]


def board_from(string):
    return Board(9, string_to_values(string))


def digits(string):
    return tuple(int(c) for c in string)


@pytest.fixture
def blank():
    return Board(9, [0] * 81)


@pytest.fixture
def wiki():
    return board_from(WIKI)


@pytest.fixture
def hard():
    return board_from(HARD)


@pytest.fixture
def small():
    return Board(4, SMALL)
