import sys
from pathlib import Path

import pytest
import logging

# Ensure local `src` directory is importable before project is installed.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from hotseat.battleship import Board, Orientation
from hotseat.game import QuitGame
from hotseat.placement import place_ship

# Suppress INFO & DEBUG logs from the controller during tests
logging.basicConfig(level=logging.WARNING)

# Fleet confined to rows 0..3, flush against the left edge.
LEFT_FLEET = [
    (2, 0, 0, Orientation.HORIZONTAL),
    (3, 1, 0, Orientation.HORIZONTAL),
    (4, 2, 0, Orientation.HORIZONTAL),
    (5, 3, 0, Orientation.HORIZONTAL),
]


def build_board(fleet=LEFT_FLEET) -> Board:
    """Board with ships at fixed (size, row, col, orientation) positions, sealed."""
    board = Board()
    for size, row, col, orientation in fleet:
        place_ship(board, row, col, size, orientation)
    board.seal()
    return board


def ship_cells(board: Board) -> list[tuple[int, int]]:
    return [cell for ship in board.ships for cell in ship.cells()]


class ScriptedInput:
    """Input collaborator that replays a fixed list of (row, col) shots."""

    def __init__(self, coords) -> None:
        self.coords = list(coords)
        self.calls = 0

    def next_coordinate(self, view):
        self.calls += 1
        if not self.coords:
            raise QuitGame("script exhausted")
        return self.coords.pop(0)


class RecordingOutput:
    """Output collaborator that records every call as a (name, arg) tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def present_tracking_view(self, view) -> None:
        self.calls.append(("view", view))

    def announce_turn(self, player) -> None:
        self.calls.append(("turn", player))

    def announce_outcome(self, outcome) -> None:
        self.calls.append(("outcome", outcome))

    def announce_sunk(self, size) -> None:
        self.calls.append(("sunk", size))

    def announce_winner(self, player) -> None:
        self.calls.append(("winner", player))

    def announce_game_over(self) -> None:
        self.calls.append(("game_over",))

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def board() -> Board:
    return build_board()


@pytest.fixture
def recorder() -> RecordingOutput:
    return RecordingOutput()
