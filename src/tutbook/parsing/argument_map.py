"""
Structured result of tokenizing a command's argument string.
"""

from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

from attrs import field, frozen

from tutbook.exceptions import DuplicatePrefixError
from tutbook.parsing.prefix import Prefix


def _freeze_values(
    values: Mapping[Prefix, Sequence[str]],
) -> Mapping[Prefix, tuple[str, ...]]:
    return MappingProxyType({prefix: tuple(seq) for prefix, seq in values.items()})


def _values_key(
    values: Mapping[Prefix, tuple[str, ...]],
) -> tuple[tuple[Prefix, tuple[str, ...]], ...]:
    return tuple(values.items())


@frozen
class ArgumentMap:
    """
    Ordered, multi-valued mapping from prefixes to their field values.

    Every prefix supplied to the tokenizer has an entry, in supply order,
    holding the values of all its occurrences in input order. An entry may
    be empty when the prefix never occurred.

    Params:
        preamble: Trimmed text preceding the first recognized prefix
        values: Prefix to occurrence values, frozen on construction
    """

    preamble: str = ""
    values: Mapping[Prefix, tuple[str, ...]] = field(
        factory=dict, converter=_freeze_values, eq=_values_key
    )

    def get_preamble(self) -> str:
        """Return the trimmed preamble."""
        return self.preamble

    def get_value(self, prefix: Prefix) -> str | None:
        """
        Return the value of the last occurrence of ``prefix``.

        Params:
            prefix: Prefix to look up

        Returns:
            The last value, or None if the prefix never occurred
        """
        occurrences = self.values.get(prefix, ())
        return occurrences[-1] if occurrences else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        """
        Return every value of ``prefix`` in input order.

        Params:
            prefix: Prefix to look up

        Returns:
            A new list of values; empty if the prefix never occurred
        """
        return list(self.values.get(prefix, ()))

    def is_present(self, prefix: Prefix) -> bool:
        """Check whether ``prefix`` occurred at least once."""
        return bool(self.values.get(prefix))

    def are_prefixes_present(self, *prefixes: Prefix) -> bool:
        """Check whether every one of ``prefixes`` occurred at least once."""
        return all(self.is_present(prefix) for prefix in prefixes)

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """
        Ensure each of ``prefixes`` occurred at most once.

        Params:
            prefixes: Prefixes of fields that must be single-valued

        Raises:
            DuplicatePrefixError: Naming every prefix that occurred more than once
        """
        duplicated = [
            prefix
            for prefix in dict.fromkeys(prefixes)
            if len(self.values.get(prefix, ())) > 1
        ]
        if duplicated:
            raise DuplicatePrefixError(duplicated)

    @property
    def prefixes(self) -> tuple[Prefix, ...]:
        """Prefixes this map was built for, in supply order."""
        return tuple(self.values)

    def __iter__(self) -> Iterator[tuple[Prefix, tuple[str, ...]]]:
        return iter(self.values.items())

    def __len__(self) -> int:
        return len(self.values)
