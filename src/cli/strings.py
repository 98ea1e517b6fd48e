"""User facing text. The engine never prints, everything the user reads is defined here."""

from src.ataxx.cells import Cell
from src.core.shared_types import Color, FinishReason, Outcome

WELCOME = "Ataxx - type /help for the list of commands."
GOODBYE = "Goodbye!"

HELP = """Commands:
  /help      show this list
  /play      start a new game (black moves first)
  /board     show the board
  /moves     show the board with the cells the side to move can reach
               +  clone (the piece copies itself onto an adjacent cell)
               *  jump  (the piece moves two cells away and leaves its cell empty)
               #  both
  /history   show the moves played so far
  /time      show how long the current game has been going on
  /resign    give up the current game
  /exit      leave the program

Moves are typed as <from>-<to>, for example 1a-2b (row 1-7, column a-g)."""

CELL_LABELS: dict[Cell, str] = {
    Cell.EMPTY: "Empty",
    Cell.BLACK: "Black",
    Cell.WHITE: "White",
}

CELL_SYMBOLS: dict[Cell, str] = {
    Cell.EMPTY: ".",
    Cell.BLACK: "B",
    Cell.WHITE: "W",
}

CLONE_MARK = "+"
JUMP_MARK = "*"
BOTH_MARK = "#"

COLOR_LABELS: dict[Color, str] = {
    Color.BLACK: CELL_LABELS[Cell.BLACK],
    Color.WHITE: CELL_LABELS[Cell.WHITE],
}

OUTCOME_LABELS: dict[Outcome, str] = {
    Outcome.BLACK_WINS: "Black wins",
    Outcome.WHITE_WINS: "White wins",
    Outcome.DRAW: "It's a draw",
}

FINISH_REASON_LABELS: dict[FinishReason, str] = {
    FinishReason.NO_MOVES: "neither side can move",
    FinishReason.BOARD_FULL: "the board is full",
    FinishReason.RESIGNATION: "resignation",
}

NO_GAME = "No game in progress. Start a new game with /play."
GAME_ALREADY_RUNNING = "A game is in progress. Start a new one anyway? (y/n)"
NEW_GAME_STARTED = "New game started."
TO_MOVE = "{color} to move."
SCORE = "Black {black} - {white} White"
GAME_OVER = "Game over ({reason}): {outcome}."
FORCED_PASS = "{color} cannot move and passes."
CAPTURED = "{count} piece(s) captured."
NO_MOVES_YET = "No moves played yet."
ELAPSED = "Time elapsed: {elapsed}"
RESIGN_CONFIRMATION = "Do you really want to resign? (y/n)"
RESIGNED = "{color} resigned."
EXIT_CONFIRMATION = "Do you really want to exit? (y/n)"
NOT_CONFIRMED = "Ok, carrying on."
ERROR = "Error: {message}"

CONFIRM_ANSWERS = ("y", "yes")
