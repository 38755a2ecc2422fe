"""Lightweight event model used by GameController to report what happened.

Subscribers (the test-suite, logging) receive strongly-typed events instead of
parsing the console transcript.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict


class Category(Enum):
    """High-level event categories."""

    TURN = auto()  # per-turn lifecycle (turn, shot, sunk)
    SYSTEM = auto()  # game start, win, quit


@dataclass(slots=True)
class Event:
    """Event emitted by GameController."""

    category: Category
    type: str  # finer-grained identifier, e.g. "turn", "shot", "win"
    payload: Dict[str, Any]
