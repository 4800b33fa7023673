"""Odds and ends for working with puzzles written as strings, and for
timing solvers over a list of puzzles.
"""

from time import time

import gmpy2

from .data import Board

def string_to_values(string):
    """Turn a puzzle written as a string of 81 characters into a flat list
    of values. Digits 1-9 are givens, anything else is a blank.
    """
    return [int(c) if c in '123456789' else 0 for c in string.strip()]

def values_to_string(values):
    return ''.join(str(v) if v else '.' for v in values)

def string_to_board(string):
    values = string_to_values(string)
    return Board(int(gmpy2.isqrt(len(values))), values)

def list_runtimes(puzzles, solve):
    """Time solve(board) for each puzzle string. Returns (puzzle, seconds)
    pairs, slowest first.
    """
    times = []
    for puzzle in puzzles:
        board = string_to_board(puzzle)
        start = time()
        solve(board)
        times.append((puzzle, time() - start))
    times.sort(key=lambda x: x[1], reverse=True)
    return times

def average_runtime(puzzles, solve):
    times = list_runtimes(puzzles, solve)
    if not times:
        return 0.0
    return sum(t for _, t in times) / len(times)
