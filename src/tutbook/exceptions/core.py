"""
Exception classes for TutBook command processing.

This module defines specific exception types for the error conditions that
can occur while tokenizing, parsing and executing roster commands.
"""

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from tutbook.parsing.prefix import Prefix

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_DUPLICATE_FIELDS = (
    "Multiple values specified for the following single-valued field(s): "
)


class TutBookError(Exception):
    """Base exception for all TutBook errors."""

    pass


class FormatError(TutBookError):
    """Raised when user input does not conform to the expected format."""

    def __init__(self, message: str):
        """
        Initialize the exception.

        Params:
            message: User-facing description of the format problem
        """
        self.message = message
        super().__init__(message)

    @classmethod
    def invalid_command_format(cls, usage: str) -> "FormatError":
        """Build the standard invalid-format error for a command usage text."""
        return cls(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))


class FieldLengthError(FormatError):
    """Raised when a tagged field value is longer than the allowed limit."""

    def __init__(self, prefix: "Prefix", length: int, limit: int):
        """
        Initialize the exception.

        Params:
            prefix: The prefix whose value is too long
            length: Character length of the trimmed value
            limit: Maximum number of characters allowed
        """
        self.prefix = prefix
        self.length = length
        self.limit = limit
        super().__init__(
            f"Field '{prefix}' must be at most {limit} characters long "
            f"(got {length})"
        )


class DuplicatePrefixError(FormatError):
    """Raised when a single-valued field is specified more than once."""

    def __init__(self, prefixes: Iterable["Prefix"]):
        """
        Initialize the exception.

        Params:
            prefixes: The prefixes that occurred more than once
        """
        self.prefixes = tuple(prefixes)
        super().__init__(
            MESSAGE_DUPLICATE_FIELDS + " ".join(str(p) for p in self.prefixes)
        )


class UnknownCommandError(FormatError):
    """Raised when the command word is not recognized."""

    def __init__(self, command_word: str):
        """
        Initialize the exception.

        Params:
            command_word: The unrecognized command word
        """
        self.command_word = command_word
        super().__init__(MESSAGE_UNKNOWN_COMMAND)


class CommandError(TutBookError):
    """Raised when a well-formed command cannot be executed against the roster."""

    def __init__(self, message: str):
        """
        Initialize the exception.

        Params:
            message: User-facing description of the failure
        """
        self.message = message
        super().__init__(message)
