"""
Tests for the add_child argument parser.
"""

import pytest

from tutbook.commands.add_child import MESSAGE_USAGE, AddChildCommand
from tutbook.exceptions import (
    DuplicatePrefixError,
    FieldLengthError,
    FormatError,
    MESSAGE_INVALID_COMMAND_FORMAT,
)
from tutbook.parsing.add_child_parser import parse_add_child

INVALID_FORMAT = MESSAGE_INVALID_COMMAND_FORMAT.format(usage=MESSAGE_USAGE)


class TestParseAddChild:
    """Test parsing of add_child arguments."""

    def test_valid_arguments(self):
        """Both fields present yields the command."""
        command = parse_add_child(" /p John Tan /c Emily Tan")
        assert command == AddChildCommand("John Tan", "Emily Tan")

    def test_fields_in_any_order(self):
        """Field order does not matter."""
        command = parse_add_child(" /c Emily Tan /p John Tan")
        assert command == AddChildCommand("John Tan", "Emily Tan")

    def test_extra_whitespace(self):
        """Whitespace around values is trimmed."""
        command = parse_add_child("   /p    John Tan   \t /c  Emily Tan  ")
        assert command == AddChildCommand("John Tan", "Emily Tan")

    @pytest.mark.parametrize(
        "args",
        ["", " /p John Tan", " /c Emily Tan", " John Tan Emily Tan", " x /p John /c Emily"],
        ids=["empty", "missing_child", "missing_parent", "no_prefixes", "with_preamble"],
    )
    def test_invalid_format(self, args):
        """Missing fields or a preamble give the usage message."""
        with pytest.raises(FormatError) as exc_info:
            parse_add_child(args)
        assert str(exc_info.value) == INVALID_FORMAT

    def test_duplicate_parent(self):
        """The parent may only be given once."""
        with pytest.raises(DuplicatePrefixError):
            parse_add_child(" /p John /p Mary /c Emily")

    def test_field_too_long(self):
        """Length errors propagate from the tokenizer."""
        with pytest.raises(FieldLengthError):
            parse_add_child(" /p " + "J" * 51 + " /c Emily")

    def test_marker_inside_name_not_split(self):
        """A slash sequence inside a name stays part of the name."""
        command = parse_add_child(" /p John/co Tan /c Emily")
        assert command.parent_name == "John/co Tan"
