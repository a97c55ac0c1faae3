"""
cli.py - Command-line interface for the Connect Four rules engine

This module provides a console driver around the Board: a two-player
hot-seat game, a scripted replay of a move list, and a benchmark.
"""

import argparse
import random
import sys
from typing import List, Optional

from connect4_rules.debug import debug, DebugLevel
from connect4_rules.errors import ColumnFull, IllegalColumnIndex
from connect4_rules.game.board import Board
from connect4_rules.game.column import Column
from connect4_rules.utils import COLUMNS, Pawn, Endgame

QUIT = -1


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self):
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four rules engine')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', type=str, default=None, help='Also log to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game at the console')

        replay_parser = subparsers.add_parser('replay', help='Replay a list of moves')
        replay_parser.add_argument('--moves', type=str, required=True,
                                   help='Comma-separated columns, Red moves first (e.g. 3,3,4)')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of random games to play')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command selected on the command line; returns the exit status."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'replay':
            return self.replay()
        elif self.args.command == 'benchmark':
            return self.benchmark()

        print("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> int:
        """Play a hot-seat game; Red (X) moves first."""
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{COLUMNS - 1}) to move, 'q' to quit.")

        board = Board()
        current = Pawn.RED
        print(board.render())

        while True:
            move = self.get_human_move(current)
            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return 0

            try:
                result = board.add_pawn(current, move)
            except ColumnFull as e:
                print(f"Invalid move: {e}")
                continue

            print(board.render())
            if result.is_win():
                print(f"{current.name.capitalize()} ({current}) wins!")
                return 0
            if board.full():
                print("Board is full. It's a draw!")
                return 0
            current = current.other()

    def get_human_move(self, player: Pawn):
        """
        Read one move from the console.

        Returns:
            A Column, QUIT, or None if the input was not usable
        """
        try:
            user_input = input(f"{player.name.capitalize()} ({player}) move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT

        try:
            return Column(int(user_input))
        except IllegalColumnIndex:
            print(f"Column must be between 0 and {COLUMNS - 1}.")
        except ValueError:
            print("Invalid input. Please enter a column number or 'q'.")
        return None

    def replay(self) -> int:
        """Play a scripted move list; any illegal move aborts the replay."""
        try:
            moves = [int(m) for m in self.args.moves.split(',') if m.strip()]
        except ValueError:
            print(f"Error: cannot parse moves '{self.args.moves}'", file=sys.stderr)
            return 1

        board = Board()
        player = Pawn.RED
        result = Endgame.NOT_WIN

        for number, move in enumerate(moves, start=1):
            if result.is_win():
                debug.warning(f"Ignoring {len(moves) - number + 1} move(s) played after the game ended", "cli")
                break
            try:
                result = board.add_pawn(player, Column(move))
            except (IllegalColumnIndex, ColumnFull) as e:
                print(board.render())
                print(f"Error: move {number} ({player.name}): {e}", file=sys.stderr)
                return 1
            player = player.other()

        print(board.render())
        print(f"Result: {result.name}")
        if result.is_win():
            print(f"Winning line: {board.get_winning_line()}")
        elif board.full():
            print("Board is full. Draw.")
        return 0

    def benchmark(self) -> int:
        """Time random games played to the end."""
        iterations = self.args.iterations
        print(f"Running benchmark with {iterations} games...")

        total_moves = 0
        wins = 0
        debug.start_timer("game_simulation")
        for _ in range(iterations):
            board = Board()
            player = Pawn.RED
            while not board.full():
                result = board.add_pawn(player, random.choice(board.valid_columns()))
                total_moves += 1
                if result.is_win():
                    wins += 1
                    break
                player = player.other()
        elapsed = debug.end_timer("game_simulation", "cli")

        print(f"Played {iterations} games ({wins} won, {iterations - wins} full board) "
              f"with {total_moves} moves: {elapsed:.6f} seconds total")
        if total_moves:
            print(f"{elapsed / total_moves * 1000:.6f} ms per move")
        return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    sys.exit(cli.run(argv))


if __name__ == "__main__":
    main()
