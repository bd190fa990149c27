import pytest

from tinyshell.colors import ConsoleColor, parse_color, reset_color, set_color


def test_parse_known():
    assert parse_color("red") is ConsoleColor.RED
    assert parse_color("light_cyan") is ConsoleColor.LIGHT_CYAN


def test_parse_unknown_defaults_to_white():
    assert parse_color("purple") is ConsoleColor.WHITE
    assert parse_color("RED") is ConsoleColor.WHITE


@pytest.mark.parametrize("color", list(ConsoleColor))
def test_every_name_parses(color):
    assert parse_color(color.name.lower()) is color


def test_set_color_red(capsys):
    set_color(ConsoleColor.RED)
    assert capsys.readouterr().out == "\x1b[31m"


def test_set_color_bright_white(capsys):
    set_color(ConsoleColor.BRIGHT_WHITE)
    assert capsys.readouterr().out == "\x1b[97m"


def test_int_and_enum_agree(capsys):
    set_color(12)
    from_int = capsys.readouterr().out
    set_color(ConsoleColor.LIGHT_RED)
    assert capsys.readouterr().out == from_int


def test_reset_is_white(capsys):
    reset_color()
    reset_out = capsys.readouterr().out
    set_color(ConsoleColor.WHITE)
    assert capsys.readouterr().out == reset_out


def test_invalid_int_raises():
    with pytest.raises(ValueError):
        set_color(16)