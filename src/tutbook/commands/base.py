"""
Base types shared by all TutBook commands.
"""

from abc import ABC, abstractmethod

from attrs import frozen

from tutbook.model.roster import Roster


@frozen
class CommandResult:
    """
    Outcome of executing a command.

    Params:
        feedback_to_user: Message shown to the user
        show_help: True if the help listing should be displayed
        exit: True if the application should terminate
    """

    feedback_to_user: str
    show_help: bool = False
    exit: bool = False


class Command(ABC):
    """A parsed command ready to run against a roster."""

    @abstractmethod
    def execute(self, roster: Roster) -> CommandResult:
        """
        Execute the command.

        Params:
            roster: Roster the command reads and mutates

        Returns:
            Result describing what happened

        Raises:
            CommandError: When the command cannot be carried out
        """
