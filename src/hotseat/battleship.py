"""
battleship.py

Contains the core data structures for one player's side of the game:
 - CellState, the closed set of states a board cell can be in
 - Ship and Orientation, describing a placed ship
 - Board, the ground-truth grid of ships, hits and misses
 - the error types raised when a caller breaks the board's rules

Each player owns one Board. The opponent never looks at it directly; what the
opponent has learned lives in a separate TrackingView (see ``tracking.py``).
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np

from .config import BOARD_SIZE

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class BoardError(Exception):
    """Base for violations of the board rules. These are programmer errors."""


class OutOfBounds(BoardError, IndexError):
    """Raised when a coordinate falls outside the grid."""


class IllegalTransition(BoardError, RuntimeError):
    """Raised when a cell is asked to move to a state it cannot reach."""


class CellState(enum.IntEnum):
    """Ground-truth state of a single board cell."""

    WATER = 0
    SHIP = 1
    HIT = 2
    MISS = 3


class ShotOutcome(enum.Enum):
    """Result of firing at a cell."""

    HIT = "hit"
    MISS = "miss"
    ALREADY_SHOT = "already_shot"


class Orientation(enum.Enum):
    HORIZONTAL = "H"
    VERTICAL = "V"


@dataclass(frozen=True, slots=True)
class Ship:
    """A straight run of *size* cells starting at the anchor (*row*, *col*)."""

    size: int
    row: int
    col: int
    orientation: Orientation

    def cells(self) -> Iterator[Coord]:
        for i in range(self.size):
            if self.orientation is Orientation.HORIZONTAL:
                yield (self.row, self.col + i)
            else:
                yield (self.row + i, self.col)


def check_bounds(row: int, col: int, size: int = BOARD_SIZE) -> None:
    """Raise OutOfBounds unless (*row*, *col*) lies on a *size*×*size* grid."""
    if not (0 <= row < size and 0 <= col < size):
        raise OutOfBounds(f"({row}, {col}) is outside the {size}x{size} board")


class Board:
    """
    Represents a single player's board with hidden ships.
    We store:
      - self.grid: numpy int8 array of CellState values (WATER, SHIP, HIT, MISS)
      - self.ships: the Ship records placed on the board, in placement order

    Placement writes SHIP cells through mark_ship() and then seals the board;
    from then on only apply_shot() changes it, and only SHIP->HIT or WATER->MISS.
    """

    def __init__(self) -> None:
        """Initialise an empty board: every cell WATER, no ships placed."""
        self.size = BOARD_SIZE
        self.grid = np.full((self.size, self.size), CellState.WATER, dtype=np.int8)
        self.ships: list[Ship] = []
        self._sealed = False

    def cell_at(self, row: int, col: int) -> CellState:
        check_bounds(row, col, self.size)
        return CellState(int(self.grid[row, col]))

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Close placement; no further SHIP cells may be added."""
        self._sealed = True
        logger.debug("board sealed with %d ships (%d cells)", len(self.ships), self.remaining_ship_cells())

    def mark_ship(self, row: int, col: int) -> None:
        """Turn a WATER cell into a SHIP cell."""
        current = self.cell_at(row, col)
        if self._sealed:
            raise IllegalTransition(f"cannot add ship cell ({row}, {col}) after placement is complete")
        if current is not CellState.WATER:
            raise IllegalTransition(f"cannot mark ship at ({row}, {col}): cell is {current.name}")
        self.grid[row, col] = CellState.SHIP

    def apply_shot(self, row: int, col: int) -> ShotOutcome:
        """Process a shot at (*row*, *col*) and return the outcome."""
        current = self.cell_at(row, col)
        if current is CellState.SHIP:
            self.grid[row, col] = CellState.HIT
            return ShotOutcome.HIT
        if current is CellState.WATER:
            self.grid[row, col] = CellState.MISS
            return ShotOutcome.MISS
        return ShotOutcome.ALREADY_SHOT

    def remaining_ship_cells(self) -> int:
        return int(np.count_nonzero(self.grid == CellState.SHIP))

    def hit_count(self) -> int:
        return int(np.count_nonzero(self.grid == CellState.HIT))

    def all_ships_sunk(self) -> bool:
        """Return True if every ship cell on this board has been hit."""
        return self.remaining_ship_cells() == 0

    def ship_at(self, row: int, col: int) -> Ship | None:
        for ship in self.ships:
            if (row, col) in ship.cells():
                return ship
        return None

    def is_sunk(self, ship: Ship) -> bool:
        return all(self.grid[r, c] == CellState.HIT for r, c in ship.cells())
