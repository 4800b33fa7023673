"""Sudoku solving by brute force and by human techniques."""

from .brute import Solution, SolutionKind
from .concrete import HumanSolver, SolveResult, human_solve, hint, report
from .data import Board
from .errors import *
from .moves import Technique
from .puzzle import Sudoku
from .solver import Status
