"""
TutBook command objects.

Each command is produced by the parsing layer and executed against a roster.
"""

from tutbook.commands.add_child import AddChildCommand
from tutbook.commands.base import Command, CommandResult
from tutbook.commands.help import HelpCommand

__all__ = [
    "Command",
    "CommandResult",
    "AddChildCommand",
    "HelpCommand",
]
