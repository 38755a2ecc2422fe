from dataclasses import dataclass
from typing import Union

from .coord_utils import COORD_RE, coord_to_rowcol


class CommandParseError(Exception):
    """Raised when a line cannot be parsed as a valid command."""


@dataclass(frozen=True)
class FireCommand:
    row: int
    col: int


@dataclass(frozen=True)
class QuitCommand:
    pass


Command = Union[FireCommand, QuitCommand]


def parse_command(line: str) -> Command:
    if line is None:
        raise CommandParseError("No command to parse")
    raw = line.strip()
    if not raw:
        raise CommandParseError("Empty input")
    coord = raw.upper()
    if coord == "QUIT":
        return QuitCommand()
    if len(coord) != 2:
        raise CommandParseError(f"Invalid coordinate: {raw} (expected a letter A-J then a digit 0-9)")
    if not COORD_RE.match(coord):
        if not "A" <= coord[0] <= "J":
            raise CommandParseError(f"Invalid column in {raw}: use a letter A-J")
        raise CommandParseError(f"Invalid row in {raw}: use a digit 0-9")
    row, col = coord_to_rowcol(coord)
    return FireCommand(row=row, col=col)
