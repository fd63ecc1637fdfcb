"""
Parser configuration for TutBook.

Configuration objects are immutable and are passed explicitly to the parsing
functions that need them; there is no global mutable state.
"""

from attrs import field, frozen, validators

MAX_FIELD_LENGTH = 50


@frozen
class ParserConfig:
    """Limits applied while tokenizing command arguments.

    Params:
        max_field_length: Maximum character length of a trimmed tagged value.
            The preamble is never checked against it.
    """

    max_field_length: int = field(
        default=MAX_FIELD_LENGTH,
        validator=[validators.instance_of(int), validators.ge(1)],
    )


DEFAULT_CONFIG = ParserConfig()
