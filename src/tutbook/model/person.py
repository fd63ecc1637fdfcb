"""
Roster entities for TutBook.

Persons are pydantic models. A parent keeps an ordered list of the students
linked to it as children.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class PersonType(Enum):
    """Kind of person stored in the roster."""

    PARENT = "parent"
    STUDENT = "student"


class Person(BaseModel):
    """
    Base class for everyone stored in the roster.

    Names are stored trimmed and must not be blank.
    """

    name: str
    person_type: PersonType

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    def has_name(self, name: str) -> bool:
        """Check whether this person's name matches ``name`` ignoring case."""
        return self.name.casefold() == name.strip().casefold()


class Student(Person):
    """A student who can be linked to one or more parents."""

    person_type: PersonType = PersonType.STUDENT


class Parent(Person):
    """A parent and the students linked to them."""

    person_type: PersonType = PersonType.PARENT
    children: list[Student] = Field(default_factory=list)

    def has_child(self, student: Student) -> bool:
        """Check whether ``student`` is already linked to this parent."""
        return any(child is student for child in self.children)

    def add_child(self, student: Student) -> None:
        """Link ``student`` as a child of this parent."""
        self.children.append(student)
