"""Shot resolution: one shot against the defender's board and the attacker's view."""

from __future__ import annotations

import logging

from .battleship import Board, ShotOutcome
from .tracking import TrackingView

logger = logging.getLogger(__name__)

__all__ = ["ShotOutcome", "resolve"]


def resolve(attacker_view: TrackingView, defender_board: Board, row: int, col: int) -> ShotOutcome:
    """Fire at (*row*, *col*). Board first, then view; ALREADY_SHOT touches neither."""
    if not attacker_view.is_unknown(row, col):
        # View and board agree on every recorded cell, so the board cell is HIT or MISS too.
        logger.debug("resolve(%d, %d) – repeat shot", row, col)
        return ShotOutcome.ALREADY_SHOT
    outcome = defender_board.apply_shot(row, col)
    if outcome is not ShotOutcome.ALREADY_SHOT:
        attacker_view.record(row, col, outcome)
    logger.debug("resolve(%d, %d) – %s", row, col, outcome.value)
    return outcome
