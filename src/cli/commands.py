"""
Command dispatcher: turns a line of user input into a command the shell can execute.

Slash commands are case-insensitive. Moves follow the position notation exactly, ex. "1a-2b".
"""

import re
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel

from src.ataxx.position import COLUMN_CHARACTERS, ROW_CHARACTERS
from src.core.exceptions import InvalidCommandError


class CommandKind(StrEnum):
    HELP = "/help"
    PLAY = "/play"
    BOARD = "/board"
    MOVES = "/moves"
    HISTORY = "/history"
    TIME = "/time"
    RESIGN = "/resign"
    EXIT = "/exit"
    MOVE = "move"


# the usual command line spellings of help work as well
ALIASES: dict[str, CommandKind] = {
    "--help": CommandKind.HELP,
    "-h": CommandKind.HELP,
}

_POSITION = f"[{ROW_CHARACTERS}][{COLUMN_CHARACTERS}]"
MOVE_PATTERN = re.compile(rf"^({_POSITION})\s*-\s*({_POSITION})$")


class Command(BaseModel):
    kind: CommandKind
    from_position: Optional[str] = None
    to_position: Optional[str] = None


def parse_command(line: str) -> Command:
    text = line.strip()
    if not text:
        raise InvalidCommandError("Empty command.")

    match = MOVE_PATTERN.match(text)
    if match:
        return Command(
            kind=CommandKind.MOVE, from_position=match.group(1), to_position=match.group(2)
        )

    keyword = text.lower()
    if keyword in ALIASES:
        return Command(kind=ALIASES[keyword])

    slash_commands = {kind.value: kind for kind in CommandKind if kind != CommandKind.MOVE}
    if keyword in slash_commands:
        return Command(kind=slash_commands[keyword])

    raise InvalidCommandError(f"Unknown command: {text!r}. Type /help for the list of commands.")
