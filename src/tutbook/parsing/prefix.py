"""
Prefix value type for tagged command arguments.

A prefix is the literal marker text (e.g. ``p/``) that introduces a field in
a command's argument string.
"""

from attrs import field, frozen, validators


@frozen(order=True)
class Prefix:
    """
    Immutable field marker compared by its literal text.

    Equality, hashing and ordering are all by ``marker`` and are case
    sensitive, so ``Prefix("a/")`` and ``Prefix("A/")`` are distinct.

    Params:
        marker: Non-empty marker text
    """

    marker: str = field(validator=[validators.instance_of(str), validators.min_len(1)])

    def __str__(self) -> str:
        """Return the marker text."""
        return self.marker
