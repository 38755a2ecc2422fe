import re
from typing import Tuple

# Letter is the column (A-J), digit is the row (0-9): "B7" -> row 7, col 1
COORD_RE = re.compile(r"^[A-J][0-9]$")


def coord_to_rowcol(coord: str) -> Tuple[int, int]:
    """
    Convert a coordinate like 'A0' through 'J9' to zero-based (row, col) tuple.
    """
    col = ord(coord[0]) - ord('A')
    row = int(coord[1])
    return row, col


def format_coord(row: int, col: int) -> str:
    """
    Convert zero-based (row, col) to coordinate string like 'B7'.
    """
    return f"{chr(ord('A') + col)}{row}"
