"""This is where exceptions defined for the sudokutech package are located."""

class SudokuError(Exception):
    """Base exception for any errors defined in this package."""

class InvalidPuzzle(SudokuError, ValueError):
    """Raised when a board can't be built from the given values: the
    size isn't a perfect square, the number of givens isn't size squared,
    a given digit is out of range, or two givens in the same house share
    a digit.
    """

class Conflict(SudokuError):
    """Raised when a digit is assigned to a cell that doesn't have that
    digit as a candidate. Techniques only ever propose candidate-consistent
    moves, so seeing this during solving means the board was corrupted.
    """

class NoOpError(SudokuError):
    """Raised when eliminating a candidate that was already gone. Callers
    that don't care can catch and ignore it.
    """

class ContradictionError(SudokuError):
    """Raised when a contradiction is found in the sudoku grid, such as
    an empty candidate set.
    """

class NoNextMoveError(SudokuError):
    """Raised when a solver fails to find another move. This could happen
    when the algorithms that a solver uses are not adequate to solve the
    puzzle, or if the puzzle has no possible solution. The solve loop turns
    this into the STUCK status.
    """

class MoveArgError(SudokuError, TypeError):
    """Move class initializers rely heavily on required keyword arguments.
    This error is raised for missing arguments in move constructors.
    """

class NoSolutionError(SudokuError):
    """Raised when a unique solution is requested for a puzzle that has
    none.
    """

class MultipleSolutionsError(SudokuError):
    """Raised when a unique solution is requested for a puzzle that has
    more than one.
    """

class NotSolvedError(SudokuError):
    """Raised by validate_against_solution when the board is incomplete or
    disagrees with the solution.
    """
    def __init__(self, missing, conflicts):
        self.missing = missing
        self.conflicts = conflicts
        super().__init__(
            'Not yet solved. {} missing values and {} conflicting values'.format(
                missing, conflicts)
        )
