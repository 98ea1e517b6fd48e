"""
Session shell: reads commands, hands them to the service and prints the answers.

One game at a time. Starting a new game (or leaving) throws the previous one away.
"""

import argparse
import logging
from typing import Callable, Optional
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    MoveRequest,
    NewGameRequest,
    ResignRequest,
)
from src.cli import printer, strings
from src.cli.commands import Command, CommandKind, parse_command
from src.core.config import Settings
from src.core.exceptions import GameError
from src.core.logger import init_logger
from src.core.shared_types import Status
from src.db.memory_repository import InMemoryGameRepository
from src.services.ataxx_service import AtaxxService

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class AtaxxShell:
    """Read-eval-print loop around the AtaxxService."""

    def __init__(
        self,
        service: AtaxxService,
        settings: Optional[Settings] = None,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.service = service
        self.settings = settings or Settings()
        self.read = input_fn
        self.write = output_fn
        self.game_id: Optional[UUID] = None

    def run(self) -> None:
        """Loop until the user confirms /exit or the input runs out."""
        self.write(strings.WELCOME)
        while True:
            try:
                line = self.read(self.settings.prompt)
            except (EOFError, KeyboardInterrupt):
                break
            if not line.strip():
                continue
            if not self.handle(line):
                break
        self._discard_game()
        self.write(strings.GOODBYE)

    def handle(self, line: str) -> bool:
        """Execute one line of input. Returns False once the shell should stop."""
        try:
            command = parse_command(line)
            return self._dispatch(command)
        except GameError as error:
            logger.debug("Command %r refused: %s", line, error)
            self.write(strings.ERROR.format(message=error))
            return True

    # -- Command handlers --
    def _dispatch(self, command: Command) -> bool:
        match command.kind:
            case CommandKind.HELP:
                self.write(strings.HELP)
            case CommandKind.PLAY:
                self._new_game()
            case CommandKind.BOARD:
                self._show_board(with_moves=False)
            case CommandKind.MOVES:
                self._show_board(with_moves=True)
            case CommandKind.HISTORY:
                self._show_history()
            case CommandKind.TIME:
                self._show_time()
            case CommandKind.RESIGN:
                self._resign()
            case CommandKind.MOVE:
                self._make_move(command)
            case CommandKind.EXIT:
                return not self._confirm(strings.EXIT_CONFIRMATION, self.settings.confirm_exit)
        return True

    def _new_game(self) -> None:
        current = self._current_game()
        if current is not None and current.status == Status.IN_PROGRESS:
            if not self._confirm(strings.GAME_ALREADY_RUNNING):
                return
        self._discard_game()
        response = self.service.create_new_game(NewGameRequest())
        self.game_id = response.game_id
        self.write(strings.NEW_GAME_STARTED)
        self.write(printer.render_game(response))

    def _show_board(self, with_moves: bool) -> None:
        game = self._require_game()
        if game is None:
            return
        moves = None
        if with_moves:
            moves = self.service.legal_moves(LegalMovesRequest(game_id=game.game_id))
        self.write(printer.render_game(game, moves))

    def _show_history(self) -> None:
        game = self._require_game()
        if game is not None:
            self.write(printer.render_history(game.move_history))

    def _show_time(self) -> None:
        game = self._require_game()
        if game is not None:
            self.write(printer.render_elapsed(game.started_at))

    def _resign(self) -> None:
        game = self._require_game()
        if game is None or not self._confirm(strings.RESIGN_CONFIRMATION):
            return
        response = self.service.resign(ResignRequest(game_id=game.game_id))
        if game.side_to_move is not None:
            self.write(strings.RESIGNED.format(color=strings.COLOR_LABELS[game.side_to_move]))
        self.write(printer.render_status(response))

    def _make_move(self, command: Command) -> None:
        game = self._require_game()
        if game is None:
            return
        assert command.from_position is not None and command.to_position is not None
        response = self.service.make_move(
            MoveRequest(
                game_id=game.game_id,
                from_position=command.from_position,
                to_position=command.to_position,
            )
        )
        if response.captured:
            self.write(strings.CAPTURED.format(count=len(response.captured)))
        if response.forced_pass is not None and response.game.status == Status.IN_PROGRESS:
            self.write(strings.FORCED_PASS.format(color=strings.COLOR_LABELS[response.forced_pass]))
        self.write(printer.render_game(response.game))

    # -- Internal helpers --
    def _current_game(self) -> Optional[GameResponse]:
        if self.game_id is None:
            return None
        return self.service.get_game_state(GetGameRequest(game_id=self.game_id))

    def _require_game(self) -> Optional[GameResponse]:
        game = self._current_game()
        if game is None:
            self.write(strings.NO_GAME)
        return game

    def _discard_game(self) -> None:
        if self.game_id is not None:
            self.service.delete_game(DeleteGameRequest(game_id=self.game_id))
            self.game_id = None

    def _confirm(self, question: str, ask: bool = True) -> bool:
        if not ask:
            return True
        self.write(question)
        try:
            answer = self.read("")
        except (EOFError, KeyboardInterrupt):
            return False
        confirmed = answer.strip().lower() in strings.CONFIRM_ANSWERS
        if not confirmed:
            self.write(strings.NOT_CONFIRMED)
        return confirmed


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ataxx", description="Play Ataxx in the terminal.")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--log-file", default=None, help="also write log lines to this file")
    parser.add_argument(
        "--no-confirm-exit",
        dest="confirm_exit",
        action="store_false",
        default=None,
        help="leave on /exit without asking",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    settings = Settings.from_env().with_overrides(
        log_level=args.log_level, log_file=args.log_file, confirm_exit=args.confirm_exit
    )
    init_logger(settings.numeric_log_level, settings.log_file)
    logger.debug("Starting shell with %s", settings)

    shell = AtaxxShell(AtaxxService(InMemoryGameRepository()), settings)
    shell.run()


if __name__ == "__main__":
    main()
