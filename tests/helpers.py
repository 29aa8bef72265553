import numpy as np

from sixfour.game.rules import apply_move
from sixfour.utils import ROWS, COLS, Player


def draw_grid() -> np.ndarray:
    """Full board without any four-in-a-row: column pairs alternate, rows flip."""
    grid = np.zeros((ROWS, COLS), dtype=np.int8)
    for row in range(ROWS):
        for col in range(COLS):
            grid[row, col] = Player.X.value if ((col // 2) + row) % 2 == 0 else Player.O.value
    return grid


def play(state, moves):
    """Apply moves in order, failing the test if any is rejected."""
    for row, col in moves:
        new_state = apply_move(state, row, col)
        assert new_state is not state, f"move ({row}, {col}) was rejected"
        state = new_state
    return state
