"""Turn-by-turn control of a single hot-seat match.

The controller owns both boards and both tracking views and drives the match
through a small state machine:

    AWAIT_TURN(player) -> AWAIT_SHOT(player) -> RESOLVE -> AWAIT_TURN(other)
                                                        \\-> END(winner)

It never reads or prints anything itself. Coordinates come from an input
collaborator and everything the players should see goes to an output
collaborator, so the same controller runs on a console or under test with
scripted collaborators.
"""

from __future__ import annotations

import enum
import logging
import random
from typing import Callable, List, Protocol

from .battleship import Board, Coord, IllegalTransition, ShotOutcome
from .config import PLAYER_NAMES, TOTAL_SHIP_CELLS
from .coord_utils import format_coord
from .events import Category, Event
from .placement import place_ships_randomly
from .shots import resolve
from .tracking import TrackingView

logger = logging.getLogger(__name__)


class Player(enum.Enum):
    A = "A"
    B = "B"

    @property
    def opponent(self) -> "Player":
        return Player.B if self is Player.A else Player.A

    def __str__(self) -> str:
        return PLAYER_NAMES[self.value]


class Phase(enum.Enum):
    AWAIT_TURN = enum.auto()
    AWAIT_SHOT = enum.auto()
    RESOLVE = enum.auto()
    END = enum.auto()


class QuitGame(Exception):
    """Raised by an input collaborator when the players abandon the match."""


class InputCollaborator(Protocol):
    def next_coordinate(self, view: TrackingView) -> Coord:
        """Return a (row, col) whose cell in *view* is still UNKNOWN."""
        ...


class OutputCollaborator(Protocol):
    def present_tracking_view(self, view: TrackingView) -> None: ...

    def announce_turn(self, player: Player) -> None: ...

    def announce_outcome(self, outcome: ShotOutcome) -> None: ...

    def announce_sunk(self, size: int) -> None: ...

    def announce_winner(self, player: Player) -> None: ...

    def announce_game_over(self) -> None: ...


class GameController:
    """Runs one match between Player A and Player B."""

    def __init__(
        self,
        board_a: Board,
        board_b: Board,
        io_in: InputCollaborator,
        io_out: OutputCollaborator,
    ) -> None:
        """Create a controller for two already-placed boards.

        ``view_a`` records what A has learned about B's board and ``view_b``
        what B has learned about A's. Player A moves first.
        Both boards must be sealed with a full fleet.
        """
        for name, board in (("A", board_a), ("B", board_b)):
            if not board.sealed or board.remaining_ship_cells() + board.hit_count() != TOTAL_SHIP_CELLS:
                raise IllegalTransition(f"board {name} is not a sealed board with {TOTAL_SHIP_CELLS} ship cells")
        self.boards: dict[Player, Board] = {Player.A: board_a, Player.B: board_b}
        self.views: dict[Player, TrackingView] = {Player.A: TrackingView(), Player.B: TrackingView()}
        self.io_in = io_in
        self.io_out = io_out
        self.current = Player.A
        self.phase = Phase.AWAIT_TURN
        self.winner: Player | None = None
        self._subs: List[Callable[[Event], None]] = []

    @classmethod
    def new(
        cls,
        io_in: InputCollaborator,
        io_out: OutputCollaborator,
        *,
        rng: random.Random | None = None,
    ) -> "GameController":
        """Build a match with both fleets placed at random from *rng*."""
        rng = rng if rng is not None else random.Random()
        board_a = Board()
        board_b = Board()
        place_ships_randomly(board_a, rng=rng)
        place_ships_randomly(board_b, rng=rng)
        return cls(board_a, board_b, io_in, io_out)

    # -------------------- accessors --------------------
    @property
    def board_a(self) -> Board:
        return self.boards[Player.A]

    @property
    def board_b(self) -> Board:
        return self.boards[Player.B]

    @property
    def view_a(self) -> TrackingView:
        return self.views[Player.A]

    @property
    def view_b(self) -> TrackingView:
        return self.views[Player.B]

    # -------------------- events --------------------
    def subscribe(self, callback: Callable[[Event], None]) -> None:
        self._subs.append(callback)

    def _emit(self, event: Event) -> None:
        logger.debug("event %s/%s %r", event.category.name, event.type, event.payload)
        for sub in self._subs:
            sub(event)

    # -------------------- game flow --------------------
    def is_game_over(self) -> bool:
        return any(board.all_ships_sunk() for board in self.boards.values())

    def play_turn(self) -> ShotOutcome | None:
        """Play one turn for the current player.

        Returns the HIT or MISS that consumed the turn, or ``None`` if the
        input collaborator raised QuitGame. Repeat shots are announced and
        the player is asked again without losing the turn.
        """
        if self.phase is Phase.END:
            raise IllegalTransition("the game is already over")

        player = self.current
        view = self.views[player]
        target = self.boards[player.opponent]

        self._emit(Event(Category.TURN, "turn", {"player": player.value}))
        self.io_out.announce_turn(player)
        self.io_out.present_tracking_view(view)

        while True:
            self.phase = Phase.AWAIT_SHOT
            try:
                row, col = self.io_in.next_coordinate(view)
            except QuitGame:
                self._finish(None)
                return None

            self.phase = Phase.RESOLVE
            outcome = resolve(view, target, row, col)
            self._emit(
                Event(
                    Category.TURN,
                    "shot",
                    {"player": player.value, "coord": format_coord(row, col), "result": outcome.value},
                )
            )
            self.io_out.announce_outcome(outcome)
            if outcome is not ShotOutcome.ALREADY_SHOT:
                break

        if outcome is ShotOutcome.HIT:
            ship = target.ship_at(row, col)
            if ship is not None and target.is_sunk(ship):
                self._emit(Event(Category.TURN, "sunk", {"player": player.value, "size": ship.size}))
                self.io_out.announce_sunk(ship.size)

        if self.is_game_over():
            self._finish(player)
        else:
            self.current = player.opponent
            self.phase = Phase.AWAIT_TURN
        return outcome

    def run(self) -> Player | None:
        """Play turns until the match ends; return the winner (``None`` on quit)."""
        logger.info("match started – %s moves first", self.current)
        while self.phase is not Phase.END:
            self.play_turn()
        return self.winner

    def _finish(self, winner: Player | None) -> None:
        self.phase = Phase.END
        self.winner = winner
        if winner is None:
            logger.info("match abandoned")
            self._emit(Event(Category.SYSTEM, "quit", {"player": self.current.value}))
        else:
            shots = self.views[winner].shots_recorded()
            logger.info("%s wins with %d shots", winner, shots)
            self._emit(Event(Category.SYSTEM, "win", {"winner": winner.value, "shots": shots}))
            self.io_out.announce_winner(winner)
        self.io_out.announce_game_over()
