"""
Entry point tying command parsing and execution together.
"""

import logging

from tutbook.commands.base import CommandResult
from tutbook.config import DEFAULT_CONFIG, ParserConfig
from tutbook.model.roster import Roster
from tutbook.parsing.command_parser import CommandLineParser

logger = logging.getLogger(__name__)


class LogicManager:
    """Parses user input and runs the resulting command against a roster.

    Parse and execution errors are not caught here; callers report them
    to the user as-is.
    """

    def __init__(self, roster: Roster, config: ParserConfig = DEFAULT_CONFIG):
        self.roster = roster
        self.parser = CommandLineParser(config)

    def execute(self, command_text: str) -> CommandResult:
        """
        Parse and execute one line of user input.

        Params:
            command_text: Full line typed by the user

        Returns:
            Result of the executed command

        Raises:
            FormatError: When the input cannot be parsed
            CommandError: When the command cannot be carried out
        """
        logger.debug("User command: %s", command_text)
        command = self.parser.parse_command(command_text)
        return command.execute(self.roster)
