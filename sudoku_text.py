from sudoku_core import Grid, InvalidInput, SIZE

EMPTY_CHARS = "0._"
SEPARATOR_CHARS = set("-+|= ")
BORDER = "+-------+-------+-------+"


def _parse_row(line, idx):
    row = []
    for ch in line:
        if ch in " |":
            continue
        if ch in "123456789":
            value = int(ch)
        elif ch in EMPTY_CHARS:
            value = 0
        else:
            raise InvalidInput(f"invalid character '{ch}' in row {idx}")
        if len(row) == SIZE:
            raise InvalidInput(f"row {idx}: each row has maximum 9 cells")
        row.append(value)
    if len(row) < SIZE:
        raise InvalidInput(f"row {idx} is too short ---> {line.strip()}")
    return row


def parse_grid(text):
    """Read a puzzle written as nine lines of nine cells.

    Digits 1-9 are clues; 0, '.' and '_' mark empty cells. Spaces and '|'
    inside a row are ignored and border lines are skipped, so the output of
    format_grid reads back unchanged.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    lines = [line for line in lines if not set(line) <= SEPARATOR_CHARS]

    # a single 81-character line is accepted too
    if len(lines) == 1 and len(lines[0].replace(" ", "")) == SIZE * SIZE:
        flat = lines[0].replace(" ", "")
        lines = [flat[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE)]

    if len(lines) != SIZE:
        raise InvalidInput(f"wrong number of rows: {len(lines)} (must be 9)")

    board = [_parse_row(line, idx) for idx, line in enumerate(lines, start=1)]
    return Grid.from_rows(board)


def read_rows(lines, prompt=print):
    """Collect nine non-empty rows from an iterable of lines, prompting for each."""
    rows = []
    prompt("row 1: ")
    for line in lines:
        if not line.strip():
            continue
        rows.append(line.rstrip("\n"))
        if len(rows) == SIZE:
            break
        prompt(f"row {len(rows) + 1}: ")
    if len(rows) < SIZE:
        raise InvalidInput(f"input ended after {len(rows)} rows")
    return parse_grid("\n".join(rows))


def format_grid(grid):
    text = ""
    for i in range(SIZE):
        if i % 3 == 0:
            text += BORDER + "\n"
        for j in range(SIZE):
            if j % 3 == 0:
                text += "| "
            value = grid.cell(i, j)
            text += f"{value if value != 0 else '.'} "
        text += "|\n"
    return text + BORDER
