"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"


class Outcome(StrEnum):
    BLACK_WINS = "black wins"
    WHITE_WINS = "white wins"
    DRAW = "draw"


class FinishReason(StrEnum):
    NO_MOVES = "no moves"
    BOARD_FULL = "board full"
    RESIGNATION = "resignation"


class MoveKind(StrEnum):
    CLONE = "clone"
    JUMP = "jump"
