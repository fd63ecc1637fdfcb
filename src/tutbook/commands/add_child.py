"""
Command linking an existing student to a parent as their child.
"""

import logging

from attrs import field, frozen

from tutbook.commands.base import Command, CommandResult
from tutbook.exceptions import CommandError
from tutbook.model.person import Person, PersonType
from tutbook.model.roster import Roster

logger = logging.getLogger(__name__)

COMMAND_WORD = "add_child"

MESSAGE_USAGE = (
    f"{COMMAND_WORD}: Links a child to a parent in TutBook.\n"
    "Parameters: /p PARENT_NAME /c CHILD_NAME\n"
    f"Example: {COMMAND_WORD} /p John Tan /c Emily Tan"
)
MESSAGE_SUCCESS = "Linked {child} as child of {parent}"
MESSAGE_PARENT_NOT_FOUND = "Parent not found: {name}. Please ensure the parent exists."
MESSAGE_CHILD_NOT_FOUND = "Student not found: {name}. Please ensure the child exists."
MESSAGE_PARENT_AMBIGUOUS = 'Multiple parents named "{name}" found. Please disambiguate.'
MESSAGE_CHILD_AMBIGUOUS = 'Multiple children named "{name}" found. Please disambiguate.'
MESSAGE_ALREADY_LINKED = "{child} is already linked to parent {parent}."


def _strip(value: str) -> str:
    return value.strip()


@frozen
class AddChildCommand(Command):
    """
    Links a student to a parent, both looked up by name ignoring case.

    Params:
        parent_name: Name of the parent, trimmed on construction
        child_name: Name of the student, trimmed on construction
    """

    parent_name: str = field(converter=_strip)
    child_name: str = field(converter=_strip)

    def execute(self, roster: Roster) -> CommandResult:
        parent = _find_unique(
            roster,
            self.parent_name,
            PersonType.PARENT,
            not_found=MESSAGE_PARENT_NOT_FOUND,
            ambiguous=MESSAGE_PARENT_AMBIGUOUS,
        )
        child = _find_unique(
            roster,
            self.child_name,
            PersonType.STUDENT,
            not_found=MESSAGE_CHILD_NOT_FOUND,
            ambiguous=MESSAGE_CHILD_AMBIGUOUS,
        )

        if parent.has_child(child):
            raise CommandError(
                MESSAGE_ALREADY_LINKED.format(child=child.name, parent=parent.name)
            )

        parent.add_child(child)
        logger.info("Linked %s as child of %s", child.name, parent.name)
        return CommandResult(
            MESSAGE_SUCCESS.format(child=child.name, parent=parent.name)
        )


def _find_unique(
    roster: Roster,
    name: str,
    person_type: PersonType,
    not_found: str,
    ambiguous: str,
) -> Person:
    matches = roster.find_by_name(name, person_type)
    if len(matches) > 1:
        raise CommandError(ambiguous.format(name=name))
    if not matches:
        raise CommandError(not_found.format(name=name))
    return matches[0]
