"""
Geometry of a sudoku grid. The functions here build the lookup tables
that a Board uses to find the houses (rows, columns and boxes) that a cell
belongs to, and the cells that belong to each house. A HouseIndex bundles
them up; there is one per board size and box shape.

Keys are (row, col) tuples, both starting at zero. Houses are numbered
rows first, then columns, then boxes, so on a 9x9 grid houses 0-8 are the
rows, 9-17 the columns and 18-26 the boxes.
"""

import gmpy2
from enum import Enum
from functools import lru_cache
from itertools import chain

from .errors import InvalidPuzzle

HouseType = Enum('HouseType', ['ROW', 'COL', 'BOX'])

def box_shape(size):
    """Default box shape for a board with sides of length size. Boards in
    practice have a square side length, so the boxes are square too.
    """
    if size < 1 or not gmpy2.is_square(size):
        raise InvalidPuzzle('size must be a square number, got {}'.format(size))
    width = int(gmpy2.isqrt(size))
    return width, width

def default_keylists(size, shape):
    """Default arg for build_config. Make one list of keys per box; boxes
    are numbered left to right and top to bottom, and the keys of a box are
    in row-major order.
    """
    height, width = shape
    return [
        [(top + i, left + j) for i in range(height) for j in range(width)]
            for top in range(0, size, height)
                for left in range(0, size, width)
    ]

def build_config(size, shape, keylistfunc=default_keylists):
    """Create a box configuration for a sudoku puzzle.
    A config is a dict where each key maps to a tuple of keys-- the ones that
    belong to the same box. Each key maps to a tuple that contains itself.

    The last argument is a function that creates a list of lists,
    each list containing size keys.
    """
    grid = {}
    for keylist in keylistfunc(size, shape):
        if len(keylist) != size:
            raise InvalidPuzzle('every box must have {} cells'.format(size))
        keylist = tuple(keylist)
        for key in keylist:
            grid[key] = keylist
    if len(grid) != size * size:
        raise InvalidPuzzle('boxes must cover the grid exactly once')
    return grid

def calculate_peers(grconfig, size):
    """Calculate the peers of each cell based on a grconfig. A peer of a cell
    is a cell in the same row, column, or box. The peers attribute is a
    3-tuple of sets containing the peers in the box, the peers in the column,
    and the peers in the row in that order.
    """
    peers = {}
    for key in grconfig:
        keysets = ({n for n in grconfig[key]},
                   {(n,key[1]) for n in range(size)},
                   {(key[0],n) for n in range(size)})
        for keyset in keysets:
            keyset.remove(key)
        peers[key] = (frozenset(keysets[0]),
                      frozenset(keysets[1]),
                      frozenset(keysets[2]))
    return peers

def calculate_housekeys(grconfig, size):
    """Calculate the rows, cols, boxes, and houses attributes."""
    rows = tuple(tuple((i,j) for j in range(size)) for i in range(size))
    cols = tuple(tuple((i,j) for i in range(size)) for j in range(size))
    box_list = []
    for key in chain.from_iterable(rows):
        keys = grconfig[key]
        if keys not in box_list:
            box_list.append(keys)
    boxes = tuple(box_list)
    houses = tuple(chain(rows, cols, boxes))
    return rows, cols, boxes, houses

def calculate_oneset(peers):
    """Items from the peers dict are tuples containing three sets. This dictionary
    is a shortcut to get a peers item as a single set.
    """
    return {k: v[0]|v[1]|v[2] for k,v in peers.items()}

class HouseIndex:
    """Precomputed house membership for one board size. Build these with
    get_index so that boards of the same size share one.
    """
    def __init__(self, size, shape=None, keylistfunc=default_keylists):
        if shape is None:
            shape = box_shape(size)
        height, width = shape
        if height < 1 or width < 1 or height * width != size:
            raise InvalidPuzzle(
                'box shape {}x{} does not fit a board of size {}'.format(
                    height, width, size)
            )
        self.size = size
        self.box_height = height
        self.box_width = width
        self.grconfig = build_config(size, shape, keylistfunc)
        self.rows, self.cols, self.boxes, self.houses = \
            calculate_housekeys(self.grconfig, size)
        self.keys = tuple(chain.from_iterable(self.rows))
        self.peers = calculate_oneset(calculate_peers(self.grconfig, size))
        self._box_of = {
            key: n for n, keys in enumerate(self.boxes) for key in keys
        }
        self.houses_of = {
            key: (key[0], size + key[1], 2 * size + self._box_of[key])
                for key in self.keys
        }

    def box_of(self, key):
        """Number of the box (not the house) that key is in."""
        return self._box_of[key]

    def house_type(self, house):
        return HouseType(house // self.size + 1)

    def house_name(self, house):
        """Something like 'row 3' or 'box 7', counting from one."""
        kind = self.house_type(house)
        return '{} {}'.format(kind.name.lower(), house % self.size + 1)

    def position(self, key):
        """Row-major index of a key."""
        return key[0] * self.size + key[1]

    def lines(self, kind):
        """The rows or the columns of the grid."""
        if kind is HouseType.ROW:
            return self.rows
        if kind is HouseType.COL:
            return self.cols
        raise ValueError('boxes are not lines')

@lru_cache(maxsize=None)
def get_index(size, shape=None):
    """Get the shared HouseIndex for a board size."""
    return HouseIndex(size, shape)
