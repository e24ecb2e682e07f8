import pytest

from connectfour.interfaces.cli import SimpleCLI, build_parser, main
from connectfour.utils import Player


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of answers."""
    def _feed(*answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return _feed


def make_cli(argv):
    cli = SimpleCLI()
    cli.parse_args(argv)
    return cli


def test_parser_defaults():
    args = build_parser().parse_args(["play"])
    assert (args.p1_color, args.p2_color) == ("red", "yellow")
    assert (args.rows, args.cols) == (6, 7)
    assert args.debug_level == "warning"


def test_play_until_win(feed_input, capsys):
    feed_input("0", "1", "0", "1", "0", "1", "0", "n")
    cli = make_cli(["play"])
    assert cli.run() == 0

    out = capsys.readouterr().out
    assert "Player red won!" in out
    assert cli.engine.get_winner() == Player.ONE


def test_custom_colours_announce_winner(feed_input, capsys):
    feed_input("0", "1", "0", "1", "0", "1", "6", "1", "n")
    make_cli(["play", "--p1-color", "blue", "--p2-color", "green"]).run()
    assert "Player green won!" in capsys.readouterr().out


def test_play_reports_rejections(feed_input, capsys):
    feed_input("x", "9", "q")
    make_cli(["play"]).run()

    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Column 9 is not on the board." in out
    assert "Quitting game." in out


def test_full_column_message(feed_input, capsys):
    feed_input("0", "0", "0", "q")
    make_cli(["play", "--rows", "2", "--cols", "2"]).run()
    assert "Column 0 is full." in capsys.readouterr().out


def test_tie_and_play_again(feed_input, capsys):
    feed_input("0", "1", "0", "1", "y", "1", "q")
    cli = make_cli(["play", "--rows", "2", "--cols", "2"])
    cli.run()

    out = capsys.readouterr().out
    assert "Tie!" in out
    assert cli.engine.moves == [1]


def test_restart_builds_new_engine(feed_input, capsys):
    feed_input("3", "r", "q")
    cli = make_cli(["play"])
    cli.run()

    assert "Game restarted." in capsys.readouterr().out
    assert cli.engine.moves == []


def test_end_of_input_quits(feed_input, capsys):
    feed_input("3")
    make_cli(["play"]).run()
    assert "Quitting game." in capsys.readouterr().out


def test_position_with_win(capsys):
    position = ",".join(["0"] * 35 + ["1", "1", "1", "1", "2", "2", "2"])
    assert main(["test", "--position", position]) == 0

    out = capsys.readouterr().out
    assert "Win for ONE (X)" in out
    assert "Empty spaces: 35" in out
    assert "Valid moves: [0, 1, 2, 3, 4, 5, 6]" in out


def test_position_without_win(capsys):
    assert main(["test", "--position", "1,2,2,1", "--rows", "2", "--cols", "2"]) == 0
    out = capsys.readouterr().out
    assert "No win detected for any player" in out
    assert "Board is full" in out


def test_bad_position(capsys):
    assert main(["test", "--position", "1,2,3"]) == 1
    assert "Error parsing position" in capsys.readouterr().out


def test_benchmark(capsys):
    assert main(["benchmark", "--iterations", "20", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Board initialization" in out
    assert "Played 2 games" in out


def test_missing_command(capsys):
    assert main([]) == 1
    assert "Please specify a command" in capsys.readouterr().out


def test_identical_colours_can_play(feed_input, capsys):
    feed_input("0", "1", "0", "1", "0", "1", "0", "n")
    cli = make_cli(["play", "--p1-color", "red", "--p2-color", "red"])
    assert cli.run() == 0
    assert "Player red won!" in capsys.readouterr().out
    assert cli.engine.get_winner() == Player.ONE


@pytest.mark.parametrize("argv, message", [
    (["play", "--rows", "0"], "must be a positive integer, got 0"),
    (["play", "--cols", "-2"], "must be a positive integer, got -2"),
    (["test", "--position", "0", "--rows", "0"], "must be a positive integer, got 0"),
    (["play", "--rows", "six"], "invalid int value: 'six'"),
    (["benchmark", "--iterations", "0"], "must be a positive integer, got 0"),
])
def test_non_positive_sizes_are_usage_errors(argv, message, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2
    assert message in capsys.readouterr().err
