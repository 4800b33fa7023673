# tests/test_config.py
import pytest

from sudokutech.config import HouseIndex, HouseType, box_shape, get_index
from sudokutech.errors import InvalidPuzzle


def test_box_shape_of_square_sizes():
    assert box_shape(4) == (2, 2)
    assert box_shape(9) == (3, 3)
    assert box_shape(16) == (4, 4)


@pytest.mark.parametrize('size', [0, 2, 10, 12])
def test_box_shape_rejects_non_squares(size):
    with pytest.raises(InvalidPuzzle):
        box_shape(size)


def test_house_numbering():
    index = get_index(9)
    assert len(index.houses) == 27
    assert index.houses[0] == tuple((0, c) for c in range(9))
    assert index.houses[9] == tuple((r, 0) for r in range(9))
    assert index.houses[18] == ((0, 0), (0, 1), (0, 2),
                                (1, 0), (1, 1), (1, 2),
                                (2, 0), (2, 1), (2, 2))
    assert index.house_type(8) is HouseType.ROW
    assert index.house_type(9) is HouseType.COL
    assert index.house_type(26) is HouseType.BOX
    assert index.house_name(0) == 'row 1'
    assert index.house_name(13) == 'col 5'
    assert index.house_name(26) == 'box 9'


def test_every_cell_in_three_houses():
    index = get_index(9)
    assert index.houses_of[(4, 5)] == (4, 14, 22)
    assert index.box_of((8, 8)) == 8
    for key in index.keys:
        houses = index.houses_of[key]
        assert all(key in index.houses[h] for h in houses)
        assert sum(key in keys for keys in index.houses) == 3


def test_peers():
    index = get_index(9)
    assert all(len(index.peers[key]) == 20 for key in index.keys)
    assert (0, 0) not in index.peers[(0, 0)]
    assert (2, 2) in index.peers[(0, 0)]
    assert (3, 3) not in index.peers[(0, 0)]


def test_index_is_shared():
    assert get_index(9) is get_index(9)
    assert get_index(4) is not get_index(9)


def test_rectangular_boxes():
    index = HouseIndex(6, shape=(2, 3))
    assert len(index.boxes) == 6
    assert index.boxes[0] == ((0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2))
    assert index.box_of((5, 5)) == 5
    assert all(len(index.peers[key]) == 12 for key in index.keys)


def test_shape_must_fit():
    with pytest.raises(InvalidPuzzle):
        HouseIndex(9, shape=(2, 4))


def test_lines():
    index = get_index(4)
    assert index.lines(HouseType.ROW) == index.rows
    assert index.lines(HouseType.COL) == index.cols
    with pytest.raises(ValueError):
        index.lines(HouseType.BOX)
    assert index.position((3, 1)) == 13
