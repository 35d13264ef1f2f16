import pytest

PUZZLE = """
53..7....
6..195...
.98....6.
8...6...3
4..8.3..1
7...2...6
.6....28.
...419..5
....8..79
"""

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture
def puzzle_text():
    return PUZZLE


@pytest.fixture
def solution():
    return [row[:] for row in SOLUTION]


@pytest.fixture
def unsolvable_rows():
    # row 1 needs a 9 in its last cell, but column 9 already has one
    rows = [[0] * 9 for _ in range(9)]
    rows[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    rows[4][8] = 9
    return rows


@pytest.fixture
def late_contradiction_rows():
    # row 1 still needs a 9, but boxes 2 and 3 already hold one; the search
    # only runs out after permuting 5-8 through the five open cells
    rows = [[0] * 9 for _ in range(9)]
    rows[0][:4] = [1, 2, 3, 4]
    rows[1][3] = 9
    rows[2][6] = 9
    return rows
