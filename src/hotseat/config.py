"""Central configuration for the hot-seat game.

Unlike a server deployment there is nothing to tune at runtime: the board
size and fleet are fixed by the rules, and the only switches (``--seed`` and
``--debug``) come from the command line.
"""

from __future__ import annotations


# ===========================================================================
# Game Constants
# ===========================================================================
# BOARD_SIZE: width and height of each player's board.
BOARD_SIZE: int = 10

# Ship lengths, placed in this order. One ship per entry.
SHIP_SIZES: tuple[int, ...] = (2, 3, 4, 5)

# Number of ship cells a player must hit to win (2 + 3 + 4 + 5).
TOTAL_SHIP_CELLS: int = sum(SHIP_SIZES)

# Column letters shown in the grid header, left to right.
COLUMN_LABELS: str = "ABCDEFGHIJ"


# ===========================================================================
# Glyphs
# ===========================================================================
# Single characters used when rendering a board or a tracking view.
# SHIP only ever appears on a player's own board.
WATER_GLYPH = "~"
SHIP_GLYPH = "S"
HIT_GLYPH = "X"
MISS_GLYPH = "0"


# ===========================================================================
# Console Text
# ===========================================================================
PROMPT: str = "Enter a position (e.g., B7): "
PLAYER_NAMES: dict[str, str] = {"A": "Player 1", "B": "Player 2"}


# ===========================================================================
# Debugging and Logging
# ===========================================================================
# Format shared by every logger in the package. Logs go to stderr so the
# game transcript on stdout stays readable.
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
