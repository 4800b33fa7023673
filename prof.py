#! /usr/bin/env python3

"""Basic profiling for sudokutech"""

import profile

from sudokutech.brute import solve
from sudokutech.concrete import human_solve
from sudokutech.util import string_to_board, average_runtime

puzzles = [
    '53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79',
    '...15..3.9..4....7.58.9....31....72.4.......8.......5....24...55.......6.71..9...',
    '984........25...4...19.4..2..6.9723...36.2...2.9.3561.195768423427351896638..9751',
    '34...6.7..8....93...2.3..6.....1.....9736485......2...............6.8.9....923785',
]

def main():
    for board in map(string_to_board, puzzles):
        human_solve(board)

# def main():
#     for board in map(string_to_board, puzzles):
#         solve(board)

if __name__ == '__main__':
    print('brute force: {:.4f}s'.format(average_runtime(puzzles, solve)))
    print('human: {:.4f}s'.format(average_runtime(puzzles, human_solve)))
    profile.run(main.__code__, sort='tottime')
