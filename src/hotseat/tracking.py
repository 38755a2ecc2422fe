"""What a shooter has learned about the opponent's board.

A TrackingView only ever holds outcomes of shots already fired, so it can be
shown to the shooter without revealing any ship that has not been hit.
"""

from __future__ import annotations

import enum

import numpy as np

from .battleship import IllegalTransition, ShotOutcome, check_bounds
from .config import BOARD_SIZE


class ViewState(enum.IntEnum):
    UNKNOWN = 0
    HIT = 1
    MISS = 2


_RECORDED = {
    ShotOutcome.HIT: ViewState.HIT,
    ShotOutcome.MISS: ViewState.MISS,
}


class TrackingView:
    """10×10 grid of UNKNOWN / HIT / MISS, paired with the opponent's Board."""

    def __init__(self) -> None:
        self.size = BOARD_SIZE
        self.grid = np.full((self.size, self.size), ViewState.UNKNOWN, dtype=np.int8)

    def state_at(self, row: int, col: int) -> ViewState:
        check_bounds(row, col, self.size)
        return ViewState(int(self.grid[row, col]))

    def is_unknown(self, row: int, col: int) -> bool:
        return self.state_at(row, col) is ViewState.UNKNOWN

    def record(self, row: int, col: int, outcome: ShotOutcome) -> None:
        """Write the outcome of a shot into an UNKNOWN cell."""
        current = self.state_at(row, col)
        if current is not ViewState.UNKNOWN:
            raise IllegalTransition(f"tracking cell ({row}, {col}) already recorded as {current.name}")
        if outcome not in _RECORDED:
            raise IllegalTransition(f"cannot record {outcome.name} at ({row}, {col})")
        self.grid[row, col] = _RECORDED[outcome]

    def shots_recorded(self) -> int:
        return int(np.count_nonzero(self.grid != ViewState.UNKNOWN))
