import io

import pytest

from tictax.cli import main, run
from tictax.engine import Game, Player


def _play(lines, save_path):
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    game = run(stdin, stdout, save_path)
    return game, stdout.getvalue()


def _count(game, player):
    return sum(game.cell(r, c) == player for r in range(3) for c in range(3))


def test_human_wins(tmp_path):
    lines = ["n", "0 0", "n", "n", "2 2", "n", "n", "2 0", "n", "n", "2 1", ""]
    game, out = _play(lines, tmp_path / "save.txt")
    assert "Congratulations! You (X) win!" in out
    assert game.has_won(Player.X)
    assert not game.has_won(Player.O)
    assert _count(game, Player.X) == _count(game, Player.O) + 1
    assert "Starting a new game." in out


def test_computer_wins(tmp_path):
    lines = ["n", "0 1", "n", "n", "2 1", "n", "n", "1 0", "n", ""]
    game, out = _play(lines, tmp_path / "save.txt")
    assert "Computer (O) wins!" in out
    assert game.has_won(Player.O)
    assert _count(game, Player.X) == _count(game, Player.O)


def test_invalid_inputs_are_reported(tmp_path):
    stdin = io.StringIO("n\nabc\n5 5\n0 0\nn\nn\n1 1\n")
    stdout = io.StringIO()
    with pytest.raises(EOFError):
        run(stdin, stdout, tmp_path / "save.txt")
    out = stdout.getvalue()
    assert "Invalid input. Please enter two numbers (0-2)." in out
    assert "Invalid input. Row and column must be between 0 and 2." in out
    assert "Cell (1, 1) is already taken. Try again." in out


def test_save_then_load(tmp_path):
    path = tmp_path / "save.txt"
    stdin = io.StringIO("n\n0 0\ny\n")
    stdout = io.StringIO()
    with pytest.raises(EOFError):
        run(stdin, stdout, path)
    assert f"Game saved to {path}" in stdout.getvalue()

    check = Game()
    assert check.load(path) == (Player.O, 1)
    assert check.cell(0, 0) == Player.X

    stdin = io.StringIO("y\n")
    stdout = io.StringIO()
    with pytest.raises(EOFError):
        run(stdin, stdout, path)
    out = stdout.getvalue()
    assert "Game successfully loaded." in out
    assert "Computer thinking..." in out


def test_loaded_finished_game(tmp_path):
    path = tmp_path / "save.txt"
    saved = Game()
    for column in range(3):
        saved.place(0, column, Player.X)
    saved.place(1, 0, Player.O)
    saved.place(1, 1, Player.O)
    saved.save(path, Player.O, 5)

    game, out = _play(["y", ""], path)
    assert "The loaded game is already complete." in out
    assert "Your move" not in out
    assert game.has_won(Player.X)


def test_load_failure_starts_new_game(tmp_path):
    stdin = io.StringIO("y\n")
    stdout = io.StringIO()
    with pytest.raises(EOFError):
        run(stdin, stdout, tmp_path / "missing.txt")
    out = stdout.getvalue()
    assert "Failed to load game or no save file found. Starting a new game." in out
    assert "Your move (row column): " in out


def test_draw_on_last_move(tmp_path):
    path = tmp_path / "save.txt"
    saved = Game()
    marks = {
        (0, 0): Player.X, (0, 1): Player.O, (0, 2): Player.X,
        (1, 0): Player.X, (1, 1): Player.O, (1, 2): Player.O,
        (2, 0): Player.O, (2, 1): Player.X,
    }
    for (row, column), player in marks.items():
        saved.place(row, column, player)
    saved.save(path, Player.X, 8)

    game, out = _play(["y", "2 2", ""], path)
    assert "It's a draw!" in out
    assert game.is_draw()


def test_main_reports_ended_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n"))
    status = main(["--save-file", str(tmp_path / "save.txt")])
    assert status == 1
    assert "An error occurred" in capsys.readouterr().err


def test_main_finishes_loaded_game(tmp_path, monkeypatch, capsys):
    path = tmp_path / "save.txt"
    saved = Game()
    for row in range(3):
        saved.place(row, 2, Player.O)
    saved.save(path, Player.X, 6)
    monkeypatch.setattr("sys.stdin", io.StringIO("y\n\n"))
    status = main(["--save-file", str(path)])
    assert status == 0
    assert "Game finished. Press Enter to exit." in capsys.readouterr().out