"""
Fish algorithms. A fish is about one digit: if the cells that can hold the
digit in n base lines (rows, say) all lie in n cover lines (columns), then
the digit must go in those n columns somewhere in the base rows, and it can
be eliminated from the rest of the cover columns. X-wings, swordfish and
jellyfish are fish with n equal to 2, 3 and 4.

A finned fish is a fish that doesn't quite fit: some of the cells in the
base lines, the fins, fall outside the cover lines. Either a fin holds the
digit, or the fish is a real fish. So the digit can only be eliminated from
cover line cells that would also lose it if any fin were true, which means
cells that see every fin.

Rows are tried as base lines before columns.
"""

from itertools import combinations

from .config import HouseType
from .moves import Technique, FishMove, FinnedFishMove
from .solver import Algorithm

# For each kind of base line: the kind of cover line, and which half of a key
# gives the cover line number.
_DIRECTIONS = (
    (HouseType.ROW, HouseType.COL, 1),
    (HouseType.COL, HouseType.ROW, 0),
)

class Fish(Algorithm):
    """Base algorithm for basic fish."""

    def line_spots(self, kind, digit):
        """Map the number of each base line to the cells in it that can hold
        digit.
        """
        board = self.board
        spots = {}
        for n, line in enumerate(board.index.lines(kind)):
            where = board.keys_with(digit, line)
            if where:
                spots[n] = where
        return spots

    def fish_find(self, count):
        board = self.board
        index = board.index
        if count > board.size // 2:
            return None
        for kind, cover_kind, offset in _DIRECTIONS:
            cover_lines = index.lines(cover_kind)
            for digit in range(1, board.size + 1):
                spots = {
                    n: where for n, where in self.line_spots(kind, digit).items()
                        if 2 <= len(where) <= count
                }
                for base in combinations(sorted(spots), count):
                    cover = set()
                    for n in base:
                        cover.update(key[offset] for key in spots[n])
                    if len(cover) != count:
                        continue
                    change = {}
                    for c in sorted(cover):
                        for key in board.keys_with(digit, cover_lines[c]):
                            if key[1 - offset] not in base:
                                change[key] = {digit}
                    if change:
                        return self.fish_move(
                            FishMove, kind, cover_kind, digit, base, cover,
                            change, [key for n in base for key in spots[n]],
                            Technique.fish(count)
                        )
        return None

    def fish_move(self, move_class, kind, cover_kind, digit, base, cover,
                  change, cells, technique, **kwargs):
        index = self.board.index
        size = self.board.size
        base_houses = [n + (kind.value - 1) * size for n in base]
        cover_houses = [c + (cover_kind.value - 1) * size for c in sorted(cover)]
        return move_class(
            change=change, cells=cells, digits={digit},
            base=[index.house_name(h) for h in base_houses],
            cover=[index.house_name(h) for h in cover_houses],
            house=base_houses[0], technique=technique, **kwargs
        )

class XWings(Fish):
    """Search for x-wing patterns. Not finned, sashimi, or mutant; just
    regular old x-wings.
    """
    technique = Technique.XWING

    def nextmove(self):
        move = self.fish_find(2)
        if move is not None:
            return move
        return super().nextmove()

class Swordfish(Fish):
    technique = Technique.SWORDFISH

    def nextmove(self):
        move = self.fish_find(3)
        if move is not None:
            return move
        return super().nextmove()

class Jellyfish(Fish):
    technique = Technique.JELLYFISH

    def nextmove(self):
        move = self.fish_find(4)
        if move is not None:
            return move
        return super().nextmove()

class FinnedFish(Fish):
    """Base algorithm for finned fish. The fins all have to be in one box;
    otherwise no cell outside the base lines could see all of them.
    """
    def finned_find(self, count):
        board = self.board
        index = board.index
        if count > board.size // 2:
            return None
        for kind, cover_kind, offset in _DIRECTIONS:
            cover_lines = index.lines(cover_kind)
            # Fins in one box span at most this many cover lines
            spread = index.box_width if kind is HouseType.ROW else index.box_height
            for digit in range(1, board.size + 1):
                spots = self.line_spots(kind, digit)
                for base in combinations(sorted(spots), count):
                    union = set()
                    for n in base:
                        union.update(key[offset] for key in spots[n])
                    if len(union) <= count or len(union) > count + spread:
                        continue
                    for cover in combinations(sorted(union), count):
                        move = self.try_fins(
                            kind, cover_kind, offset, digit, base, set(cover),
                            spots, cover_lines, count
                        )
                        if move is not None:
                            return move
        return None

    def try_fins(self, kind, cover_kind, offset, digit, base, cover, spots,
                 cover_lines, count):
        board = self.board
        index = board.index
        fins = []
        for n in base:
            inside = [key for key in spots[n] if key[offset] in cover]
            if not inside:
                return None
            fins.extend(key for key in spots[n] if key[offset] not in cover)
        if len({index.box_of(key) for key in fins}) != 1:
            return None

        change = {}
        for c in sorted(cover):
            for key in board.keys_with(digit, cover_lines[c]):
                if key[1 - offset] in base:
                    continue
                if all(key in index.peers[fin] for fin in fins):
                    change[key] = {digit}
        if not change:
            return None
        return self.fish_move(
            FinnedFishMove, kind, cover_kind, digit, base, cover, change,
            [key for n in base for key in spots[n]], Technique.finned(count),
            fins=fins
        )

class FinnedXWings(FinnedFish):
    technique = Technique.FINNED_XWING

    def nextmove(self):
        move = self.finned_find(2)
        if move is not None:
            return move
        return super().nextmove()

class FinnedSwordfish(FinnedFish):
    technique = Technique.FINNED_SWORDFISH

    def nextmove(self):
        move = self.finned_find(3)
        if move is not None:
            return move
        return super().nextmove()

class FinnedJellyfish(FinnedFish):
    technique = Technique.FINNED_JELLYFISH

    def nextmove(self):
        move = self.finned_find(4)
        if move is not None:
            return move
        return super().nextmove()
