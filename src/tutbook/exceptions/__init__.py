"""
TutBook exception classes.

This package provides all exception types used throughout TutBook for
consistent error handling and reporting.
"""

from tutbook.exceptions.core import (
    MESSAGE_DUPLICATE_FIELDS,
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
    CommandError,
    DuplicatePrefixError,
    FieldLengthError,
    FormatError,
    TutBookError,
    UnknownCommandError,
)

__all__ = [
    "TutBookError",
    "FormatError",
    "FieldLengthError",
    "DuplicatePrefixError",
    "UnknownCommandError",
    "CommandError",
    "MESSAGE_DUPLICATE_FIELDS",
    "MESSAGE_INVALID_COMMAND_FORMAT",
    "MESSAGE_UNKNOWN_COMMAND",
]
