"""Random fleet placement.

    ships = place_ships_randomly(board, rng=random.Random(seed))

Every ship is drawn as a uniformly random anchor and orientation and redrawn
until it fits on WATER inside the grid. Ships may touch each other; they may
not overlap.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from .battleship import Board, CellState, IllegalTransition, Orientation, Ship
from .config import SHIP_SIZES

logger = logging.getLogger(__name__)


def can_place_ship(board: Board, row: int, col: int, size: int, orientation: Orientation) -> bool:
    """Return `True` if a ship of *size* fits at (*row*, *col*)."""
    if not (0 <= row < board.size and 0 <= col < board.size):
        return False
    if orientation is Orientation.HORIZONTAL:
        if col + size > board.size:
            return False
        return bool((board.grid[row, col:col + size] == CellState.WATER).all())
    if row + size > board.size:
        return False
    return bool((board.grid[row:row + size, col] == CellState.WATER).all())


def place_ship(board: Board, row: int, col: int, size: int, orientation: Orientation) -> Ship:
    """Write a ship into *board* and record it; raises IllegalTransition if it does not fit."""
    if not can_place_ship(board, row, col, size, orientation):
        raise IllegalTransition(
            f"ship of size {size} does not fit at ({row}, {col}) {orientation.name.lower()}"
        )
    ship = Ship(size, row, col, orientation)
    for r, c in ship.cells():
        board.mark_ship(r, c)
    board.ships.append(ship)
    return ship


def place_ships_randomly(
    board: Board,
    sizes: Sequence[int] = SHIP_SIZES,
    rng: random.Random | None = None,
) -> list[Ship]:
    """Randomly position one ship per entry of *sizes* and seal the board."""
    if board.sealed or board.ships or (board.grid != CellState.WATER).any():
        raise IllegalTransition("random placement needs an empty board")
    rng = rng if rng is not None else random.Random()
    placed: list[Ship] = []
    for size in sizes:
        attempts = 0
        while True:
            attempts += 1
            row = rng.randrange(board.size)
            col = rng.randrange(board.size)
            orientation = rng.choice((Orientation.HORIZONTAL, Orientation.VERTICAL))
            if can_place_ship(board, row, col, size, orientation):
                placed.append(place_ship(board, row, col, size, orientation))
                break
        logger.debug("placed size-%d ship at (%d, %d) %s after %d draws", size, row, col, orientation.name, attempts)
    board.seal()
    return placed
