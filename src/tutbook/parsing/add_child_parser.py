"""
Parser for the ``add_child`` command.
"""

from tutbook.commands.add_child import MESSAGE_USAGE, AddChildCommand
from tutbook.config import DEFAULT_CONFIG, ParserConfig
from tutbook.exceptions import FormatError
from tutbook.parsing.cli_syntax import PREFIX_CHILD, PREFIX_PARENT
from tutbook.parsing.tokenizer import tokenize


def parse_add_child(args: str, config: ParserConfig = DEFAULT_CONFIG) -> AddChildCommand:
    """
    Parse the arguments of ``add_child /p PARENT_NAME /c CHILD_NAME``.

    Params:
        args: Argument text following the command word
        config: Limits applied while tokenizing

    Returns:
        AddChildCommand for the named parent and child

    Raises:
        FormatError: When a field is missing, text precedes the first
            field, a field is repeated, or a field is too long
    """
    arg_map = tokenize(args, PREFIX_PARENT, PREFIX_CHILD, config=config)

    if not arg_map.are_prefixes_present(PREFIX_PARENT, PREFIX_CHILD) or arg_map.preamble:
        raise FormatError.invalid_command_format(MESSAGE_USAGE)

    arg_map.verify_no_duplicate_prefixes_for(PREFIX_PARENT, PREFIX_CHILD)

    return AddChildCommand(
        parent_name=arg_map.get_value(PREFIX_PARENT),
        child_name=arg_map.get_value(PREFIX_CHILD),
    )
