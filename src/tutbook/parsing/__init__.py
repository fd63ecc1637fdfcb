"""
TutBook command parsing components.

This package provides the prefix tokenizer, its structured result, and the
parsers that turn command lines into command objects.
"""

from tutbook.parsing.add_child_parser import parse_add_child
from tutbook.parsing.argument_map import ArgumentMap
from tutbook.parsing.cli_syntax import PREFIX_CHILD, PREFIX_PARENT
from tutbook.parsing.command_parser import CommandLineParser, parse_command
from tutbook.parsing.prefix import Prefix
from tutbook.parsing.tokenizer import PrefixPosition, find_prefix_positions, tokenize

__all__ = [
    "ArgumentMap",
    "CommandLineParser",
    "Prefix",
    "PrefixPosition",
    "PREFIX_CHILD",
    "PREFIX_PARENT",
    "find_prefix_positions",
    "parse_add_child",
    "parse_command",
    "tokenize",
]
