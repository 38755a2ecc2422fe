# io_utils.py
"""
Console collaborators for GameController
––––––––––––––––––––––––––––––––––––––––
• grid_rows()    – Board / TrackingView → ["~ ~ X …", …] (ships optionally revealed)
• render_grid()  – rows → printable lines with A..J header and 0..9 row labels
• ConsoleIO      – prompts for coordinates and prints boards and announcements
"""

from __future__ import annotations

import logging
import sys
from typing import List, TextIO

from . import config as _cfg
from .battleship import Board, CellState, Coord, ShotOutcome
from .commands import CommandParseError, QuitCommand, parse_command
from .game import Player, QuitGame
from .tracking import TrackingView, ViewState

logger = logging.getLogger(__name__)

_BOARD_GLYPHS = {
    CellState.WATER: _cfg.WATER_GLYPH,
    CellState.SHIP: _cfg.SHIP_GLYPH,
    CellState.HIT: _cfg.HIT_GLYPH,
    CellState.MISS: _cfg.MISS_GLYPH,
}

_VIEW_GLYPHS = {
    ViewState.UNKNOWN: _cfg.WATER_GLYPH,
    ViewState.HIT: _cfg.HIT_GLYPH,
    ViewState.MISS: _cfg.MISS_GLYPH,
}


def grid_rows(grid: Board | TrackingView, *, reveal: bool = False) -> List[str]:
    """One space-separated string of glyphs per row.

    Unhit ships on a Board are drawn as water unless *reveal* is set.
    """
    rows: list[str] = []
    for r in range(grid.size):
        if isinstance(grid, TrackingView):
            cells = [_VIEW_GLYPHS[grid.state_at(r, c)] for c in range(grid.size)]
        else:
            cells = []
            for c in range(grid.size):
                state = grid.cell_at(r, c)
                if state is CellState.SHIP and not reveal:
                    state = CellState.WATER
                cells.append(_BOARD_GLYPHS[state])
        rows.append(" ".join(cells))
    return rows


def render_grid(rows: List[str]) -> List[str]:
    lines = ["   " + " ".join(_cfg.COLUMN_LABELS[: len(rows)])]
    for idx, row in enumerate(rows):
        lines.append(f"{idx}  {row}")
    return lines


class ConsoleIO:
    """Input and output collaborator backed by two text streams."""

    def __init__(self, reader: TextIO | None = None, writer: TextIO | None = None) -> None:
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        self.writer.write(text + "\n")
        self.writer.flush()

    # ------------------------- input -------------------------

    def next_coordinate(self, view: TrackingView) -> Coord:
        """Prompt until the player names a cell they have not fired at yet.

        ``QUIT`` or end of input raises QuitGame.
        """
        while True:
            self.writer.write(_cfg.PROMPT)
            self.writer.flush()
            line = self.reader.readline()
            if not line:
                logger.debug("next_coordinate() – end of input")
                raise QuitGame("end of input")
            try:
                cmd = parse_command(line)
            except CommandParseError as e:
                logger.debug("next_coordinate() rejected %r – %s", line, e)
                self._print(f"[!] {e}. Please enter a valid position (A-J, 0-9).")
                continue
            if isinstance(cmd, QuitCommand):
                raise QuitGame("player quit")
            if not view.is_unknown(cmd.row, cmd.col):
                self._print("[!] You already attacked this spot. Choose another.")
                continue
            return cmd.row, cmd.col

    # ------------------------- output -------------------------

    def present_tracking_view(self, view: TrackingView) -> None:
        for line in render_grid(grid_rows(view)):
            self._print(line)

    def present_fleets(self, board_a: Board, board_b: Board) -> None:
        """Print both boards side-by-side with every ship revealed."""
        left = render_grid(grid_rows(board_a, reveal=True))
        right = render_grid(grid_rows(board_b, reveal=True))
        width = len(left[0])
        header_left = f"[{Player.A}]".center(width)
        header_right = f"[{Player.B}]".center(width)
        self._print()
        self._print(f"{header_left}   {header_right}")
        for l_line, r_line in zip(left, right):
            self._print(f"{l_line.ljust(width)}   {r_line}")

    def announce_turn(self, player: Player) -> None:
        self._print()
        self._print(f"{player}'s turn:")

    def announce_outcome(self, outcome: ShotOutcome) -> None:
        if outcome is ShotOutcome.HIT:
            self._print("Hit!!")
        elif outcome is ShotOutcome.MISS:
            self._print("You missed.")
        else:
            self._print("You already attacked this spot. Choose another.")

    def announce_sunk(self, size: int) -> None:
        self._print(f"You sank a ship of size {size}!")

    def announce_winner(self, player: Player) -> None:
        self._print(f"{player} wins!")

    def announce_game_over(self) -> None:
        self._print("Game Over!")
