import logging

logger = logging.getLogger(__name__)

SIZE = 9
BOX = 3


class SudokuError(Exception):
    pass


class InvalidInput(SudokuError, ValueError):
    """Malformed grid data: wrong cell count, row length or value."""


class InvalidPuzzle(SudokuError):
    """The clues themselves break the row/column/box rule."""


class Unsolvable(SudokuError):
    """The clues are consistent but no completion exists."""


def box_index(row, col):
    return (row // BOX) * BOX + col // BOX


def _check_value(value, row, col):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"cell ({row + 1}, {col + 1}) is not an integer: {value!r}")
    if not 0 <= value <= SIZE:
        raise InvalidInput(f"cell ({row + 1}, {col + 1}) out of range 0..9: {value}")
    return value


class Grid:
    """A 9x9 board: the clue snapshot plus the working copy the solver mutates."""

    def __init__(self, rows):
        self.given = tuple(tuple(row) for row in rows)
        self.current = [list(row) for row in rows]

    @classmethod
    def from_cells(cls, values):
        values = list(values)
        if len(values) != SIZE * SIZE:
            raise InvalidInput(f"expected 81 cells, got {len(values)}")
        return cls.from_rows(values[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE))

    @classmethod
    def from_rows(cls, rows):
        board = []
        for r, row in enumerate(rows):
            if r >= SIZE:
                raise InvalidInput("grid has more than 9 rows")
            row = list(row)
            if len(row) > SIZE:
                raise InvalidInput(f"row {r + 1}: each row has maximum 9 cells")
            if len(row) < SIZE:
                raise InvalidInput(f"row {r + 1}: expected 9 cells, got {len(row)}")
            board.append([_check_value(v, r, c) for c, v in enumerate(row)])
        if len(board) != SIZE:
            raise InvalidInput(f"expected 9 rows, got {len(board)}")
        return cls(board)

    def cell(self, row, col):
        return self.current[row][col]

    def set_cell(self, row, col, value):
        self.current[row][col] = value

    def given_value(self, row, col):
        return self.given[row][col]

    def is_given(self, row, col):
        return self.given[row][col] != 0

    def is_complete(self):
        return all(all(row) for row in self.current)

    def rows(self):
        return [row[:] for row in self.current]

    def copy(self):
        clone = Grid(self.given)
        clone.current = self.rows()
        return clone

    def __repr__(self):
        filled = sum(1 for row in self.current for v in row if v)
        return f"<Grid {filled}/81 filled>"


def is_valid(grid, row, col, value):
    given = grid.given[row][col]
    if given != 0 and given != value:
        return False

    board = grid.current
    for i in range(SIZE):
        if i != col and board[row][i] == value:
            return False
    for i in range(SIZE):
        if i != row and board[i][col] == value:
            return False

    br, bc = (row // BOX) * BOX, (col // BOX) * BOX
    for i in range(br, br + BOX):
        for j in range(bc, bc + BOX):
            if (i != row or j != col) and board[i][j] == value:
                return False
    return True


def validate(grid):
    for r in range(SIZE):
        for c in range(SIZE):
            value = grid.current[r][c]
            if value and not is_valid(grid, r, c, value):
                logger.debug("conflict at (%d, %d) for value %d", r + 1, c + 1, value)
                return False
    return True


def candidates(grid, row, col):
    if grid.current[row][col] != 0:
        return []
    return [n for n in range(1, SIZE + 1) if is_valid(grid, row, col, n)]


def _solve_cell(grid, row, col, on_step):
    if col == SIZE:
        col = 0
        row += 1
    if row == SIZE:
        return True

    # clues stay put; only their own value could pass is_valid anyway
    if grid.given[row][col] != 0:
        return _solve_cell(grid, row, col + 1, on_step)

    for num in range(1, SIZE + 1):
        if is_valid(grid, row, col, num):
            grid.current[row][col] = num
            if on_step:
                on_step({"type": "guess", "row": row, "col": col, "num": num})
            if _solve_cell(grid, row, col + 1, on_step):
                return True
            grid.current[row][col] = 0
            if on_step:
                on_step({"type": "backtrack", "row": row, "col": col})
    return False


def solve(grid, on_step=None):
    """Fill every empty cell by depth-first search in row-major order.

    Candidates are tried in ascending order and the first complete
    assignment is kept, so the result is deterministic. Returns False when
    no completion exists; the grid is then partially backtracked and should
    be discarded.
    """
    solved = _solve_cell(grid, 0, 0, on_step)
    logger.debug("search finished: %s", "solved" if solved else "no solution")
    return solved


def solve_puzzle(grid, on_step=None):
    if not validate(grid):
        raise InvalidPuzzle("puzzle breaks the row/column/box rule")
    if not solve(grid, on_step):
        raise Unsolvable("puzzle has no solution")
    logger.info("puzzle solved")
    return grid
