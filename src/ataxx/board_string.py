"""
Run-length encoding of a board. The part of the game that can be written down as a single string.

<count><cell code><count><cell code>...

* The cells are read row-major: row 1 from column a to g, then row 2, etc.
* A cell code is one of "E" (empty), "B" (black), "W" (white).
* The count is a decimal repeat factor for the code right after it. A count of 1 is left out.

ex) The starting position:
B5EW35EW5EB
i.e. black on 1a, five empty cells, white on 1g, ..., white on 7a, five empty cells and black on 7g.
"""

from itertools import groupby
from string import digits

from src.ataxx.cells import Cell
from src.ataxx.position import BOARD_SIZE
from src.core.exceptions import InvalidBoardError

NUM_CELLS = BOARD_SIZE * BOARD_SIZE

Run = tuple[int, Cell]


def parse_runs(board_str: str) -> list[Run]:
    """Split the string into (count, cell) runs. Only looks at the grammar, not at the total length."""
    runs: list[Run] = []
    count_chars = ""
    for character in board_str:
        if character in digits:
            count_chars += character
            continue

        cell = Cell.from_code(character)
        # no run can be longer than the board, so a longer count is refused before int() sees it
        if len(count_chars.lstrip("0")) > len(str(NUM_CELLS)):
            raise InvalidBoardError(f"Run longer than the board in board string: {board_str!r}")
        count = int(count_chars.lstrip("0") or "0") if count_chars else 1
        if count == 0:
            raise InvalidBoardError(f"Run of zero cells in board string: {board_str!r}")
        runs.append((count, cell))
        count_chars = ""

    # a count must always be followed by a code
    if count_chars:
        raise InvalidBoardError(
            f"Board string ends with a count but no cell code: {board_str!r}"
        )
    return runs


def decode(board_str: str) -> list[Cell]:
    """Board string to the list of all cells, row-major"""
    cells: list[Cell] = []
    for count, cell in parse_runs(board_str):
        if len(cells) + count > NUM_CELLS:
            raise InvalidBoardError(
                f"Board string describes more than {NUM_CELLS} cells: {board_str!r}"
            )
        cells.extend([cell] * count)

    if len(cells) != NUM_CELLS:
        raise InvalidBoardError(
            f"Board string describes {len(cells)} cells instead of {NUM_CELLS}: {board_str!r}"
        )
    return cells


def encode(cells: list[Cell]) -> str:
    """reverse operation: collapse identical neighbours (row-major) into runs"""
    board_characters: list[str] = []
    for cell, group in groupby(cells):
        count = len(list(group))
        if count > 1:
            board_characters.append(str(count))
        board_characters.append(cell.code)
    return "".join(board_characters)


def is_valid_board_string(board_str: str) -> bool:
    """Check if given string can be decoded into a full board."""
    try:
        decode(board_str)
    except InvalidBoardError:
        return False
    return True


def canonical(board_str: str) -> str:
    """Same board, written with the shortest runs (ex. 'BB47E' -> '2B47E')"""
    return encode(decode(board_str))
