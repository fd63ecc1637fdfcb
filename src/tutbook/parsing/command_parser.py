"""
Dispatcher turning a full line of user input into a command.

The first whitespace-delimited word selects the command; the rest of the
line, leading whitespace included, is handed to that command's parser.
"""

import logging
import re
from typing import Callable

from tutbook.commands import add_child
from tutbook.commands import help as help_command
from tutbook.commands.base import Command
from tutbook.commands.help import HelpCommand
from tutbook.config import DEFAULT_CONFIG, ParserConfig
from tutbook.exceptions import FormatError, UnknownCommandError
from tutbook.parsing.add_child_parser import parse_add_child

logger = logging.getLogger(__name__)

ArgumentParser = Callable[[str, ParserConfig], Command]


class CommandLineParser:
    """Parser for complete command lines."""

    BASIC_COMMAND_FORMAT = re.compile(
        r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL
    )

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        self.config = config
        self._parsers: dict[str, ArgumentParser] = {
            add_child.COMMAND_WORD: parse_add_child,
            help_command.COMMAND_WORD: lambda args, config: HelpCommand(),
        }

    @property
    def command_words(self) -> list[str]:
        """Command words this parser recognizes, sorted."""
        return sorted(self._parsers)

    def parse_command(self, user_input: str) -> Command:
        """
        Parse one line of user input into a command.

        Params:
            user_input: Full line typed by the user

        Returns:
            The command selected by the first word

        Raises:
            FormatError: When the input is blank or its arguments are invalid
            UnknownCommandError: When the first word is not a known command
        """
        match = self.BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if match is None:
            raise FormatError.invalid_command_format(help_command.MESSAGE_USAGE)

        command_word = match.group("command_word")
        arguments = match.group("arguments")
        logger.debug("Command word: %s; arguments: %r", command_word, arguments)

        parser = self._parsers.get(command_word)
        if parser is None:
            logger.debug("Unknown command word: %s", command_word)
            raise UnknownCommandError(command_word)
        return parser(arguments, self.config)


def parse_command(user_input: str, config: ParserConfig = DEFAULT_CONFIG) -> Command:
    """Convenience function to parse a command line."""
    parser = CommandLineParser(config)
    return parser.parse_command(user_input)
