import pytest

from slidecli.commands import (
    AddItemCommand,
    AddSlideCommand,
    CommandRegistry,
    DisplayCommand,
    QuitCommand,
)
from slidecli.parser import CommandParser


@pytest.fixture
def parser():
    return CommandParser()


@pytest.mark.parametrize(
    "line, expected",
    [
        ("add_item", AddItemCommand),
        ("add_slide", AddSlideCommand),
        ("display", DisplayCommand),
        ("quit", QuitCommand),
    ],
)
def test_command_names(parser, line, expected):
    command = parser.parse(line)
    assert type(command) is expected


def test_options_take_type_of_default(parser):
    command = parser.parse("add_item -type Rect -x1 1.5 -y1 4 -slide 2")
    assert command.get_value("-type") == "Rect"
    assert command.get_value("-x1") == 1.5
    assert isinstance(command.get_value("-y1"), float)
    assert command.get_value("-y1") == 4.0
    assert command.get_value("-slide") == 2
    assert isinstance(command.get_value("-slide"), int)


def test_unset_options_keep_defaults(parser):
    command = parser.parse("display -slide 1")
    assert command.get_value("-format") == "console"
    assert command.get_value("-path") == "slide.png"
    assert command.get_value("-slide") == 1


def test_each_parse_gives_fresh_command(parser):
    first = parser.parse("add_item -type Rect")
    second = parser.parse("add_item")
    assert first is not second
    assert second.get_value("-type") == ""


def test_trailing_newline_and_spaces(parser):
    command = parser.parse("  add_item   -type   Group \n")
    assert command.get_value("-type") == "Group"


def test_unknown_command(parser):
    with pytest.raises(ValueError, match=r"Unknown command: \[bogus\]"):
        parser.parse("bogus -x 1")


def test_empty_line_is_unknown_command(parser):
    with pytest.raises(ValueError, match=r"Unknown command: \[\]"):
        parser.parse("")


def test_unknown_option(parser):
    with pytest.raises(ValueError, match=r"Unknown option: \[-z\]"):
        parser.parse("add_item -z 3")


def test_missing_value(parser):
    with pytest.raises(ValueError, match="-x1"):
        parser.parse("add_item -x1")


def test_bad_float(parser):
    with pytest.raises(ValueError, match="-x2"):
        parser.parse("add_item -x2 wide")


def test_bad_int(parser):
    with pytest.raises(ValueError, match="-slide"):
        parser.parse("display -slide one")


def test_uses_given_registry():
    parser = CommandParser(CommandRegistry())
    assert type(parser.parse("quit")) is QuitCommand
    command = parser.parse("display -slide 2")
    assert command.get_value("-slide") == 2
    assert command.get_value("-format") == "console"