"""
cli.py - Command-line interface for Connect Four

Two people share the terminal and take turns dropping pieces. The interface
only talks to the engine through new_game, apply_move and the state queries,
and reacts to the MoveResult of each move. Restarting builds a new engine.

Also provides a position analyser and a small benchmark.
"""

import argparse
import random
import sys
from typing import List, Optional

from connectfour.debug import debug, DebugLevel
from connectfour.game.board import Board
from connectfour.game.results import MoveOutcome, MoveResult, RejectReason
from connectfour.game.rules import GameEngine, analyze_grid, new_game
from connectfour.utils import (ROWS, COLS, DEFAULT_COLORS, Player, parse_position,
                               render_preview_row)

QUIT = "q"
RESTART = "r"

REJECT_MESSAGES = {
    RejectReason.INVALID_COLUMN: "Column {column} is not on the board.",
    RejectReason.COLUMN_FULL: "Column {column} is full.",
    RejectReason.GAME_ALREADY_OVER: "The game is already over.",
}


def positive_int(value: str) -> int:
    """argparse type for sizes and counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four')
    parser.add_argument('--debug_level',
                        choices=[level.name.lower() for level in DebugLevel],
                        default='warning',
                        help='Logging verbosity (default: warning)')
    parser.add_argument('--log_file', type=str, default=None,
                        help='Also write log output to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play a two-player game')
    play_parser.add_argument('--p1-color', dest='p1_color', default=DEFAULT_COLORS[0],
                             help='Colour name for the first player')
    play_parser.add_argument('--p2-color', dest='p2_color', default=DEFAULT_COLORS[1],
                             help='Colour name for the second player')
    play_parser.add_argument('--rows', type=positive_int, default=ROWS, help='Board height')
    play_parser.add_argument('--cols', type=positive_int, default=COLS, help='Board width')

    test_parser = subparsers.add_parser('test', help='Analyse a board position')
    test_parser.add_argument('--position', type=str, required=True,
                             help='Comma-separated cell values (0 empty, 1, 2), top row first')
    test_parser.add_argument('--rows', type=positive_int, default=ROWS, help='Board height')
    test_parser.add_argument('--cols', type=positive_int, default=COLS, help='Board width')

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the engine')
    benchmark_parser.add_argument('--iterations', type=positive_int, default=1000,
                                  help='Number of iterations for benchmarking')
    benchmark_parser.add_argument('--seed', type=int, default=None,
                                  help='Seed for the random moves')

    return parser


class SimpleCLI:
    """Terminal front end for the Connect Four engine."""

    def __init__(self, args: Optional[argparse.Namespace] = None):
        self.args = args
        self.engine: Optional[GameEngine] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = build_parser().parse_args(argv)
        debug.configure(log_file=self.args.log_file or "")
        debug.set_from_string(self.args.debug_level)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the requested command.

        Returns:
            Process exit code
        """
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'test':
            return self.test_position()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    # Interactive play

    def new_game(self) -> GameEngine:
        self.engine = new_game(self.args.p1_color, self.args.p2_color,
                               self.args.rows, self.args.cols)
        debug.info(f"New game: {self.args.p1_color} vs {self.args.p2_color}", "cli")
        return self.engine

    def play_game(self) -> None:
        """Play games until the players quit."""
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{self.args.cols - 1}) to drop a piece.")
        print(f"Other commands: '{RESTART}' to restart, '{QUIT}' to quit.")

        self.new_game()
        self.show_board()

        while True:
            command = self.read_command()
            if command == QUIT:
                print("Quitting game.")
                return
            if command == RESTART:
                self.new_game()
                print("Game restarted.")
                self.show_board()
                continue
            if command is None:
                continue

            result = self.engine.apply_move(command)
            self.show_result(result, command)

            if result.is_terminal and not self.ask_restart():
                return

    def read_command(self):
        """
        Read one command from the current player.

        Returns:
            A column number, QUIT, RESTART, or None for unreadable input
        """
        label = self.engine.player_label()
        symbol = self.engine.current_player.symbol
        try:
            user_input = input(f"Player {label} ({symbol}) move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESTART):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def ask_restart(self) -> bool:
        try:
            answer = input("Play again? [y/N]: ").strip().lower()
        except EOFError:
            answer = ""

        if answer not in ("y", "yes"):
            return False

        self.new_game()
        self.show_board()
        return True

    def show_board(self) -> None:
        if not self.engine.is_game_over():
            print(render_preview_row(self.engine.board.width, self.engine.current_player))
        print(self.engine.render())

    def show_result(self, result: MoveResult, column: int) -> None:
        """Report the outcome of a move to the players."""
        if result.outcome == MoveOutcome.REJECTED:
            debug.debug(f"Move rejected: {result.reason.name}", "cli")
            print(REJECT_MESSAGES[result.reason].format(column=column))
            return

        self.show_board()

        if result.outcome == MoveOutcome.PLACED_AND_WON:
            print(f"Player {self.engine.player_label(result.player)} won!")
        elif result.outcome == MoveOutcome.PLACED_AND_TIED:
            print("Tie!")

    # Analysis

    def test_position(self) -> int:
        """Analyse the board given by --position."""
        try:
            grid = parse_position(self.args.position, self.args.rows, self.args.cols)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        board = Board.from_grid(grid)
        lines = analyze_grid(board)
        highlight = [cell for line in lines.values() for cell in line]

        print("Loaded position:")
        print(board.render(highlight))

        print("\nWin check:")
        if not lines:
            print("No win detected for any player")
        for player, line in lines.items():
            print(f"Win for {player.name} ({player.symbol}) along {line}")

        if board.is_full():
            print("Board is full")
        else:
            print(f"Empty spaces: {board.count(Player.EMPTY)}")
        print(f"Valid moves: {board.get_valid_moves()}")
        return 0

    def benchmark(self) -> None:
        """Time the engine's basic operations."""
        iterations = self.args.iterations
        rng = random.Random(self.args.seed)
        print(f"Running benchmark with {iterations} iterations...")

        debug.start_timer("board_init")
        for _ in range(iterations):
            Board()
        board_init_time = debug.end_timer("board_init", "cli")
        print(f"Board initialization: {board_init_time:.6f} seconds total, "
              f"{board_init_time / iterations * 1000:.6f} ms per board")

        engine = new_game()
        moves_made = 0
        debug.start_timer("moves")
        for _ in range(iterations):
            if engine.is_game_over():
                engine = new_game()
            if engine.apply_move(rng.randrange(COLS)).accepted:
                moves_made += 1
        moves_time = debug.end_timer("moves", "cli")
        print(f"Making {moves_made} moves: {moves_time:.6f} seconds total, "
              f"{moves_time / max(moves_made, 1) * 1000:.6f} ms per move")

        debug.start_timer("win_scan")
        for _ in range(iterations):
            engine.check_win(Player.ONE)
        scan_time = debug.end_timer("win_scan", "cli")
        print(f"Performing {iterations} win scans: {scan_time:.6f} seconds total, "
              f"{scan_time / iterations * 1000:.6f} ms per scan")

        games = max(1, iterations // 10)
        total_moves = 0
        debug.start_timer("game_simulation")
        for _ in range(games):
            engine = new_game()
            while not engine.is_game_over():
                engine.apply_move(rng.choice(engine.get_valid_moves()))
            total_moves += len(engine.moves)
        simulation_time = debug.end_timer("game_simulation", "cli")
        print(f"Played {games} games with {total_moves} total moves: "
              f"{simulation_time:.6f} seconds total, "
              f"{simulation_time / games * 1000:.6f} ms per game")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
