"""Tic-tac-toe board state, rules and a simple computer opponent."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Iterator, Union

SIZE = 3

WINNING_LINES: tuple[tuple[tuple[int, int], ...], ...] = (
    # Rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)

CENTER = (1, 1)
CORNERS = ((0, 0), (0, 2), (2, 0), (2, 2))
SIDES = ((0, 1), (1, 0), (1, 2), (2, 1))

_SYMBOLS = {0: "-", 1: "X", 2: "O"}


class Player(IntEnum):
    """Contents of a board cell: empty or one of the two players."""

    EMPTY = 0
    X = 1
    O = 2  # noqa: E741


Cell = Union[Player, int]


class GameFileError(Exception):
    """Raised when a saved game cannot be written or read."""


def opponent(player: int) -> Player:
    """Return the other player; anything other than X is answered with X."""
    return Player.O if player == Player.X else Player.X


def _as_cell(value: int) -> Cell:
    try:
        return Player(value)
    except ValueError:
        return value


def _check_position(row: int, column: int) -> None:
    if not (0 <= row < SIZE and 0 <= column < SIZE):
        raise IndexError(f"cell ({row}, {column}) is outside the board")


class Game:
    """A 3x3 board with win, draw and blocking checks."""

    def __init__(self) -> None:
        self.board: list[list[Cell]] = []
        self.reset()

    def reset(self) -> None:
        """Clear every cell."""
        self.board = [[Player.EMPTY] * SIZE for _ in range(SIZE)]

    def _positions(self) -> Iterator[tuple[int, int]]:
        return ((r, c) for r in range(SIZE) for c in range(SIZE))

    def cell(self, row: int, column: int) -> Cell:
        """Return the contents of a cell."""
        _check_position(row, column)
        return self.board[row][column]

    def is_empty(self, row: int, column: int) -> bool:
        """Tell whether a cell holds no mark."""
        return self.cell(row, column) == Player.EMPTY

    def place(self, row: int, column: int, player: int) -> None:
        """Put a player's mark in a cell."""
        _check_position(row, column)
        self.board[row][column] = _as_cell(player)

    def undo(self, row: int, column: int) -> None:
        """Clear a cell."""
        self.place(row, column, Player.EMPTY)

    def has_won(self, player: int) -> bool:
        """Tell whether the player holds a complete line."""
        return any(
            all(self.board[r][c] == player for r, c in line)
            for line in WINNING_LINES
        )

    def needs_block(self, player: int) -> bool:
        """Tell whether the opponent of player has two in a line with the third open."""
        other = opponent(player)
        for line in WINNING_LINES:
            cells = [self.board[r][c] for r, c in line]
            if cells.count(other) == 2 and cells.count(Player.EMPTY) == 1:
                return True
        return False

    def is_draw(self) -> bool:
        """Tell whether the board is full and nobody has won."""
        if any(self.is_empty(r, c) for r, c in self._positions()):
            return False
        return not (self.has_won(Player.X) or self.has_won(Player.O))

    def _would_win(self, row: int, column: int, player: int) -> bool:
        self.place(row, column, player)
        try:
            return self.has_won(player)
        finally:
            self.undo(row, column)

    def _first_winning_cell(self, player: int) -> tuple[int, int] | None:
        return next(
            (
                (r, c)
                for r, c in self._positions()
                if self.is_empty(r, c) and self._would_win(r, c, player)
            ),
            None,
        )

    def computer_move(self, player: int) -> tuple[int, int] | None:
        """Make a move for player and return its cell, or None if the board is full.

        A winning move comes first, then a block, then the centre, the
        corners and the sides.
        """
        choice = self._first_winning_cell(player)
        if choice is None:
            choice = self._first_winning_cell(opponent(player))
        if choice is None:
            choice = next(
                (
                    pos
                    for pos in (CENTER, *CORNERS, *SIDES)
                    if self.is_empty(*pos)
                ),
                None,
            )
        if choice is not None:
            self.place(*choice, player)
        return choice

    def render(self) -> str:
        """Return the board drawn as text."""
        separator = "  -----------\n"
        parts = ["\n  CURRENT BOARD:\n", "   0   1   2 \n", separator]
        for index, row in enumerate(self.board):
            cells = "".join(f"{_SYMBOLS.get(int(value), '?')} | " for value in row)
            parts.append(f"{index}| {cells}\n")
            parts.append(separator)
        parts.append("\n")
        return "".join(parts)

    def save(self, path: str | Path, current_player: int, move_count: int) -> None:
        """Write the board, the player to move and the move count to a file."""
        lines = [" ".join(str(int(value)) for value in row) for row in self.board]
        lines.append(str(int(current_player)))
        lines.append(str(int(move_count)))
        try:
            Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as exc:
            raise GameFileError(f"could not open file {path} for saving") from exc

    def load(self, path: str | Path) -> tuple[Cell, int]:
        """Read a saved game into the board; return (player to move, move count)."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise GameFileError(f"could not open file {path} for loading") from exc

        tokens = iter(text.split())
        values: list[int] = []
        for _ in range(SIZE * SIZE):
            try:
                values.append(int(next(tokens)))
            except (StopIteration, ValueError) as exc:
                raise GameFileError(
                    f"could not read board data from {path}"
                ) from exc
        try:
            player = int(next(tokens))
            move_count = int(next(tokens))
        except (StopIteration, ValueError) as exc:
            raise GameFileError(
                f"could not read player/move count data from {path}"
            ) from exc

        self.board = [
            [_as_cell(v) for v in values[r * SIZE:(r + 1) * SIZE]]
            for r in range(SIZE)
        ]
        return _as_cell(player), move_count