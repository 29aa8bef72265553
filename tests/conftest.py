import random

import pytest

from sixfour.debug import DebugLevel, debug
from sixfour.game.board import Board
from sixfour.game.rules import create_game
from sixfour.utils import Player
from tests.helpers import draw_grid


@pytest.fixture
def draw_board():
    return Board(draw_grid())


@pytest.fixture
def new_game():
    return create_game(Player.X)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture(autouse=True)
def reset_debug():
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")
