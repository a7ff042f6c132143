"""Pytest configuration and fixtures."""

import random

import pytest

from gridquest.models.board import Board
from gridquest.models.character import Dwarf, Elf, Hobbit, Human, Orc
from gridquest.models.state import GameState


class ScriptedRng:
    """Random source that replays fixed values, for deterministic combat."""

    def __init__(self, floats=(), ints=()):
        self._floats = list(floats)
        self._ints = list(ints)

    def random(self) -> float:
        return self._floats.pop(0)

    def randint(self, low: int, high: int) -> int:
        value = self._ints.pop(0)
        assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
        return value

    @property
    def exhausted(self) -> bool:
        return not self._floats and not self._ints


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRng


@pytest.fixture
def seeded_rng():
    """Reproducible random source."""
    return random.Random(1234)


@pytest.fixture
def human():
    return Human(name="Bob")


@pytest.fixture
def elf():
    return Elf(name="Legolas")


@pytest.fixture
def dwarf():
    return Dwarf(name="Gimli")


@pytest.fixture
def hobbit():
    return Hobbit(name="Frodo")


@pytest.fixture
def orc():
    return Orc(name="Azog")


@pytest.fixture
def small_state(human):
    """3x3 board with the player (a Human) alone in the top-left cell."""
    board = Board(width=3, height=3)
    board.at(0, 0).player = human
    return GameState(board=board, player=human)
