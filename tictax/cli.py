"""Console game: a human (X) against the computer (O)."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from pathlib import Path
from typing import TextIO

from tictax.engine import Game, GameFileError, Player, opponent

SAVE_FILENAME = "tictactoe_save.txt"

PLAYER_HUMAN = Player.X
PLAYER_COMPUTER = Player.O

_RULE = "=====================\n"


class _Input:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: deque[str] = deque()

    def token(self) -> str:
        while not self._tokens:
            line = self._stream.readline()
            if not line:
                raise EOFError("input ended")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def discard_line(self) -> None:
        self._tokens.clear()

    def choice(self) -> str:
        """Return the first character of the next token and drop the rest of its line."""
        first = self.token()[0]
        self.discard_line()
        return first

    def number(self) -> int | None:
        """Return the next token as an integer, or None after dropping a bad line."""
        text = self.token()
        try:
            return int(text)
        except ValueError:
            self.discard_line()
            return None

    def wait_for_enter(self) -> None:
        self.discard_line()
        self._stream.readline()


def _is_yes(answer: str) -> bool:
    return answer in ("y", "Y")


def _read_human_move(game: Game, reader: _Input, say) -> tuple[int, int]:
    while True:
        say("Your move (row column): ")
        row = reader.number()
        column = reader.number() if row is not None else None
        if row is None or column is None:
            say("Invalid input. Please enter two numbers (0-2).\n")
        elif not (0 <= row <= 2 and 0 <= column <= 2):
            say("Invalid input. Row and column must be between 0 and 2.\n")
        elif not game.is_empty(row, column):
            say(f"Cell ({row}, {column}) is already taken. Try again.\n")
        else:
            return row, column


def _finished(game: Game, move_count: int) -> bool:
    return (
        game.has_won(PLAYER_HUMAN)
        or game.has_won(PLAYER_COMPUTER)
        or (move_count >= 9 and game.is_draw())
    )


def run(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    save_path: str | Path = SAVE_FILENAME,
) -> Game:
    """Play one game over the given streams and return the final board.

    Raises EOFError if the input ends before the game is over.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    reader = _Input(stdin)

    def say(text: str) -> None:
        stdout.write(text)
        stdout.flush()

    game = Game()
    current = PLAYER_HUMAN
    move_count = 0
    game_over = False

    say(_RULE)
    say(" TicTaX (Console Version)\n")
    say(" Human (X) vs Computer (O)\n")
    say(_RULE)

    say(f"Load a saved game from '{save_path}'? (y/n): ")
    if _is_yes(reader.choice()):
        try:
            current, move_count = game.load(save_path)
        except GameFileError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            say("Failed to load game or no save file found. Starting a new game.\n")
            current = PLAYER_HUMAN
            move_count = 0
        else:
            say(f"Game loaded from {save_path}\n")
            say("Game successfully loaded.\n")
            if _finished(game, move_count):
                say("The loaded game is already complete.\n")
                game_over = True
    else:
        say("Starting a new game.\n")

    if not game_over:
        say("Enter row and column (e.g., 1 1 for center), separated by space.\n")

    while not game_over:
        say(game.render())

        if current == PLAYER_HUMAN:
            row, column = _read_human_move(game, reader, say)
            game.place(row, column, PLAYER_HUMAN)
        else:
            say("\nComputer thinking...\n")
            game.computer_move(PLAYER_COMPUTER)
            say("Computer moved.\n")

        move_count += 1

        if game.has_won(current):
            say(game.render())
            say("\n" + _RULE)
            if current == PLAYER_HUMAN:
                say("  Congratulations! You (X) win!\n")
            else:
                say("  Computer (O) wins!\n")
            say(_RULE)
            game_over = True
        elif move_count == 9 and game.is_draw():
            say(game.render())
            say("\n" + _RULE)
            say("  It's a draw!\n")
            say(_RULE)
            game_over = True

        if not game_over:
            current = opponent(current)
            say(
                f"Save game to '{save_path}'? "
                "(y/n, or any other key to continue): "
            )
            if _is_yes(reader.choice()):
                try:
                    game.save(save_path, current, move_count)
                except GameFileError as exc:
                    print(f"Error: {exc}", file=sys.stderr)
                    say("Failed to save game.\n")
                else:
                    say(f"Game saved to {save_path}\n")

    say("\nGame finished. Press Enter to exit.\n")
    reader.wait_for_enter()
    return game


def main(argv: list[str] | None = None) -> int:
    """Start a console game; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="tictax", description="Play tic-tac-toe against the computer."
    )
    parser.add_argument(
        "--save-file",
        default=SAVE_FILENAME,
        help=f"file used to save and load a game (default: {SAVE_FILENAME})",
    )
    args = parser.parse_args(argv)
    try:
        run(sys.stdin, sys.stdout, args.save_file)
    except EOFError as exc:
        print(f"An error occurred: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())