"""
In-memory roster of persons.
"""

from pydantic import BaseModel, Field

from tutbook.model.person import Person, PersonType


class Roster(BaseModel):
    """Ordered collection of every person known to TutBook."""

    persons: list[Person] = Field(default_factory=list)

    def add_person(self, person: Person) -> None:
        """Append ``person`` to the roster."""
        self.persons.append(person)

    def find_by_name(self, name: str, person_type: PersonType) -> list[Person]:
        """
        Find persons of a given type by name.

        Params:
            name: Name to match, ignoring case and surrounding whitespace
            person_type: Only persons of this type are returned

        Returns:
            Matching persons in roster order
        """
        return [
            person
            for person in self.persons
            if person.person_type == person_type and person.has_name(name)
        ]
