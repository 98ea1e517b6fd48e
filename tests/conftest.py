"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest

from src.ataxx.board import Board
from src.ataxx.cells import Cell
from src.ataxx.position import Position
from src.db.memory_repository import InMemoryGameRepository
from src.services.ataxx_service import AtaxxService

STARTING_BOARD = "B5EW35EW5EB"
EMPTY_BOARD = "49E"

BoardBuilder = Callable[[dict[str, str]], str]


@pytest.fixture
def make_board_string() -> BoardBuilder:
    """Call the inner function with {position name: cell code}. Every cell not mentioned is empty."""

    def _create_board(pieces: dict[str, str]) -> str:
        board = Board.from_string(EMPTY_BOARD)
        for name, code in pieces.items():
            board.set_cell(Position.from_text(name), Cell.from_code(code))
        return board.to_string()

    return _create_board


@pytest.fixture
def repository() -> Generator[InMemoryGameRepository, None, None]:
    """Fresh in-memory repository for every test."""
    yield InMemoryGameRepository()


@pytest.fixture
def service(repository: InMemoryGameRepository) -> AtaxxService:
    return AtaxxService(repository)
