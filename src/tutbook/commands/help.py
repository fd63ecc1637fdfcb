"""
Command showing usage instructions for every available command.
"""

from tutbook.commands import add_child
from tutbook.commands.base import Command, CommandResult
from tutbook.model.roster import Roster

COMMAND_WORD = "help"

MESSAGE_USAGE = f"{COMMAND_WORD}: Shows program usage instructions.\nExample: {COMMAND_WORD}"

SHOWING_HELP_MESSAGE = (
    "Opened help window.\n\n"
    "Available Commands:\n\n"
    f"1. {add_child.COMMAND_WORD} - Link a child to a parent\n"
    f"   {add_child.MESSAGE_USAGE}\n\n"
    f"2. {COMMAND_WORD} - Show this help message\n"
    f"   {MESSAGE_USAGE}"
)


class HelpCommand(Command):
    """Shows the help listing."""

    def execute(self, roster: Roster) -> CommandResult:
        return CommandResult(SHOWING_HELP_MESSAGE, show_help=True)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HelpCommand)

    def __hash__(self) -> int:
        return hash(HelpCommand)
