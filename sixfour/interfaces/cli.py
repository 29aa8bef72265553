"""
cli.py - Command-line interface for exercising the sixfour engine

This module provides a CLI for analyzing board positions, watching the
opponent tiers play each other and benchmarking the engine.
"""

import argparse
import random
import sys
from typing import List, Optional

import numpy as np

from sixfour.ai.base import AIConfig
from sixfour.ai.minimax import minimax_move
from sixfour.ai.opponent import choose_move
from sixfour.debug import debug
from sixfour.game.board import Board
from sixfour.game.rules import SixFourGame
from sixfour.game.winner import detect
from sixfour.utils import ROWS, COLS, Difficulty, GameStatus, Player

DIFFICULTY_CHOICES = [d.value for d in Difficulty]


def parse_position(position: str) -> Board:
    """
    Parse a comma-separated list of ROWS*COLS cell values (0, 1, 2) in row-major order.

    Raises:
        ValueError: on a malformed string
    """
    values = [int(c) for c in position.replace(" ", "").split(",") if c]
    if len(values) != ROWS * COLS:
        raise ValueError(f"Position string must have {ROWS * COLS} values, got {len(values)}")
    return Board(np.array(values).reshape(ROWS, COLS))


def positive_int(value: str) -> int:
    """argparse type for depths and iteration counts (must be >= 1)."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


class SimpleCLI:
    """Simple command-line interface for sixfour testing."""

    def __init__(self, out=None):
        """Initialize the CLI."""
        self.args = None
        self.out = out or sys.stdout

    def print(self, message: str = "") -> None:
        print(message, file=self.out)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='sixfour', description='sixfour engine CLI')
        parser.add_argument('--debug-level', default=None,
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            help='Logging level')

        # Main commands
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        # Analyze command
        analyze_parser = subparsers.add_parser('analyze', help='Analyze a board position')
        analyze_parser.add_argument('--position', type=str, required=True,
                                    help=f'{ROWS * COLS} comma-separated cell values (0/1/2)')
        analyze_parser.add_argument('--player', choices=['X', 'O'], default=None,
                                    help='Player to move (default: inferred from piece counts)')
        analyze_parser.add_argument('--difficulty', choices=DIFFICULTY_CHOICES, default='hard',
                                    help='Opponent tier used for the suggestion')
        analyze_parser.add_argument('--depth', type=positive_int, default=4, help='Hard search depth')

        # Self-play command
        selfplay_parser = subparsers.add_parser('selfplay', help='Let two opponents play')
        selfplay_parser.add_argument('--x', dest='x_level', choices=DIFFICULTY_CHOICES,
                                     default='medium', help='Tier playing X')
        selfplay_parser.add_argument('--o', dest='o_level', choices=DIFFICULTY_CHOICES,
                                     default='hard', help='Tier playing O')
        selfplay_parser.add_argument('--seed', type=int, default=None, help='Random seed')
        selfplay_parser.add_argument('--depth', type=positive_int, default=4, help='Hard search depth')

        # Benchmark command
        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
        benchmark_parser.add_argument('--iterations', type=positive_int, default=1000,
                                      help='Number of iterations for benchmarking')
        benchmark_parser.add_argument('--depth', type=positive_int, default=4, help='Hard search depth')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug_level:
            debug.set_from_string(self.args.debug_level)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if argv is not None or not self.args:
            self.parse_args(argv)

        if self.args.command == 'analyze':
            return self.analyze_position()
        elif self.args.command == 'selfplay':
            return self.selfplay()
        elif self.args.command == 'benchmark':
            return self.benchmark()

        self.print("Please specify a command. Use --help for options.")
        return 1

    def analyze_position(self) -> int:
        """Report the status of a position and the opponent's suggested move."""
        try:
            board = parse_position(self.args.position)
        except ValueError as e:
            self.print(f"Error parsing position: {e}")
            return 2

        self.print("Loaded position:")
        self.print(board.render())

        result = detect(board)
        if result.status == GameStatus.WON:
            self.print(f"\nWinner: {result.winner} on {result.direction.name.lower()} "
                       f"line {list(result.winning_line)}")
            return 0
        if result.status == GameStatus.DRAW:
            self.print("\nBoard is full: draw")
            return 0

        empty_count = len(board.empty_cells())
        self.print(f"\nIn progress, empty spaces: {empty_count}")

        if self.args.player:
            player = Player.parse(self.args.player)
        else:
            # X moves first unless told otherwise
            player = Player.X if board.count(Player.X) <= board.count(Player.O) else Player.O

        config = AIConfig(search_depth=self.args.depth)
        move = choose_move(board, player, self.args.difficulty, config=config)
        self.print(f"Suggested move for {player} ({self.args.difficulty}): {move}")
        return 0

    def selfplay(self) -> int:
        """Play one game between two opponent tiers."""
        rng = random.Random(self.args.seed)
        config = AIConfig(search_depth=self.args.depth)
        levels = {Player.X: self.args.x_level, Player.O: self.args.o_level}

        game = SixFourGame()
        while not game.is_game_over():
            player = game.get_current_player()
            row, col = game.ai_move(levels[player], config=config, rng=rng)
            self.print(f"{player} ({levels[player]}) plays ({row}, {col})")

        self.print(game.render())
        winner = game.get_winner()
        if winner is None:
            self.print("It's a draw!")
        else:
            self.print(f"{winner} ({levels[winner]}) wins with {list(game.get_winning_line())}")
        return 0

    def benchmark(self) -> int:
        """Benchmark the performance of the engine."""
        iterations = self.args.iterations
        rng = random.Random(0)
        self.print(f"Running benchmark with {iterations} iterations...")

        # Benchmark move making
        game = SixFourGame()
        moves_made = 0
        debug.start_timer("moves")
        for _ in range(iterations):
            if game.make_move(rng.randrange(ROWS), rng.randrange(COLS)):
                moves_made += 1
            if game.is_game_over():
                game.reset()
        moves_time = debug.end_timer("moves")
        self.print(f"Making {moves_made} moves: {moves_time:.6f} seconds total, "
                   f"{moves_time / max(moves_made, 1) * 1000:.6f} ms per move")

        # Benchmark win checking
        boards = []
        for _ in range(iterations):
            grid = np.array([rng.choice((0, 1, 2)) for _ in range(ROWS * COLS)])
            boards.append(Board(grid.reshape(ROWS, COLS)))
        debug.start_timer("win_check")
        for board in boards:
            detect(board)
        win_check_time = debug.end_timer("win_check")
        self.print(f"Performing {iterations} win checks: {win_check_time:.6f} seconds total, "
                   f"{win_check_time / iterations * 1000:.6f} ms per check")

        # Benchmark one hard search from a quiet opening
        board = Board.from_positions(x=[(2, 2)], o=[(3, 3)])
        config = AIConfig(search_depth=self.args.depth)
        debug.start_timer("search")
        move = minimax_move(board, Player.X, config, rng)
        search_time = debug.end_timer("search")
        self.print(f"Depth {self.args.depth} search chose {move} in {search_time:.6f} seconds")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
