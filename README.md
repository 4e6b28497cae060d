# tictax

A small console game of tic-tac-toe. You play X and the computer plays O.

## Playing

After installing the package, start a game with:

    tictax

To use a save file other than the default `tictactoe_save.txt` in the
current directory, pass `--save-file`:

    tictax --save-file mygame.txt

At the start you are asked whether to load a saved game from that file. Answer
`y` to load it. If the file is missing or cannot be read, a new game starts.
If the loaded game is already won or drawn, the game ends at once.

On your turn, type the row and the column separated by a space, for example
`1 1` for the centre square. Rows and columns are numbered 0 to 2. Input that
is not a number, is out of range, or names a taken cell is rejected, and you
are asked again.

After every move that does not end the game, you are offered a save. Answer
`y` to write the board, the player whose turn is next and the number of moves
made so far to the save file.

The command exits with status 1 if input ends before the game is over.

## How the computer plays

The computer takes the first option that applies:

1. a move that wins at once;
2. a move that stops you winning on your next turn;
3. the centre square;
4. a free corner, in the order top left, top right, bottom left, bottom right;
5. a free side square, in the order top, left, right, bottom.

The computer does not look further ahead than one move, so it can be beaten.

## Using the engine

```python
from tictax.engine import Game, Player

game = Game()
game.place(1, 1, Player.X)
cell = game.computer_move(Player.O)   # (row, column) played, or None if full
print(game.render())
print(game.has_won(Player.X), game.is_draw())
```

`tictax.engine` provides:

- `Player`: an `IntEnum` with `EMPTY`, `X` and `O`.
- `opponent(player)`: the other player (`X` for anything other than `X`).
- `Game` with `reset`, `cell`, `is_empty`, `place`, `undo`, `has_won`,
  `needs_block`, `is_draw`, `computer_move` and `render`. Positions outside
  the board raise `IndexError`.
- `Game.save(path, current_player, move_count)` writes the game as plain
  text: three lines of cell values, then the next player, then the move count.
- `Game.load(path)` reads such a file into the board and returns
  `(next_player, move_count)`.

Both `save` and `load` raise `GameFileError` when the file cannot be written,
opened or parsed.

`tictax.cli.run(stdin, stdout, save_path)` plays one game over the given text
streams and returns the final `Game`.

## Tests

    pip install -e .[test]
    pytest