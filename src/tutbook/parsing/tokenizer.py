"""
Tokenizer for prefix-tagged command arguments.

This module splits an argument string such as ``NAME p/PHONE t/TAG t/TAG``
into a preamble and the values tagged by each recognized prefix. The scan is
a single left-to-right pass; there is no quoting or escaping syntax.

Matching rules:
- A marker is only recognized at the start of the string, right after
  whitespace, or right after the end of the previously recognized marker.
- When several markers match at the same position the longest one wins.
- Marker-like text for prefixes that were not supplied is ordinary text.
"""

import logging
from dataclasses import dataclass

from tutbook.config import DEFAULT_CONFIG, ParserConfig
from tutbook.exceptions import FieldLengthError
from tutbook.parsing.argument_map import ArgumentMap
from tutbook.parsing.prefix import Prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrefixPosition:
    """A recognized marker occurrence and where it starts in the input."""

    prefix: Prefix
    start: int

    @property
    def value_start(self) -> int:
        """Index of the first character after the marker."""
        return self.start + len(self.prefix.marker)


def tokenize(
    args_text: str, *prefixes: Prefix, config: ParserConfig = DEFAULT_CONFIG
) -> ArgumentMap:
    """
    Split ``args_text`` into a preamble and per-prefix values.

    Params:
        args_text: Argument string of a command, possibly empty
        prefixes: Prefixes to recognize; duplicates are ignored
        config: Limits applied to tagged values

    Returns:
        ArgumentMap holding the trimmed preamble and, for every supplied
        prefix, the trimmed values of its occurrences in input order

    Raises:
        FieldLengthError: When any tagged value is longer than
            ``config.max_field_length`` characters after trimming

    Examples:
        tokenize("some preamble t/ 11.00 t/12.00 k/ m/ July", t, k, m)
        -> preamble "some preamble", t: ["11.00", "12.00"], k: [""], m: ["July"]
    """
    unique_prefixes = tuple(dict.fromkeys(prefixes))
    positions = find_prefix_positions(args_text, unique_prefixes)

    preamble_end = positions[0].start if positions else len(args_text)
    preamble = args_text[:preamble_end].strip()

    values: dict[Prefix, list[str]] = {prefix: [] for prefix in unique_prefixes}
    for current, following in zip(positions, positions[1:] + [None]):
        end = following.start if following else len(args_text)
        value = args_text[current.value_start : end].strip()
        if len(value) > config.max_field_length:
            logger.debug(
                "Rejecting value for %s: %d characters exceeds limit of %d",
                current.prefix,
                len(value),
                config.max_field_length,
            )
            raise FieldLengthError(current.prefix, len(value), config.max_field_length)
        values[current.prefix].append(value)

    logger.debug(
        "Tokenized %d field(s) for %d prefix(es)", len(positions), len(unique_prefixes)
    )
    return ArgumentMap(preamble=preamble, values=values)


def find_prefix_positions(
    args_text: str, prefixes: tuple[Prefix, ...]
) -> list[PrefixPosition]:
    """
    Locate every recognized marker occurrence in ``args_text``.

    Params:
        args_text: Argument string to scan
        prefixes: Candidate prefixes

    Returns:
        Marker occurrences ordered by position
    """
    # Longest first so overlapping markers resolve to the longest match
    candidates = sorted(set(prefixes), key=lambda p: (-len(p.marker), p.marker))
    positions: list[PrefixPosition] = []
    previous_marker_end = 0
    index = 0

    while index < len(args_text):
        at_boundary = (
            index == previous_marker_end or args_text[index - 1].isspace()
        )
        match = _match_at(args_text, index, candidates) if at_boundary else None
        if match is None:
            index += 1
            continue
        position = PrefixPosition(match, index)
        positions.append(position)
        index = previous_marker_end = position.value_start

    return positions


def _match_at(text: str, index: int, candidates: list[Prefix]) -> Prefix | None:
    for prefix in candidates:
        if text.startswith(prefix.marker, index):
            return prefix
    return None
