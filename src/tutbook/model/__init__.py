"""
TutBook roster model.
"""

from tutbook.model.person import Parent, Person, PersonType, Student
from tutbook.model.roster import Roster

__all__ = [
    "Person",
    "PersonType",
    "Parent",
    "Student",
    "Roster",
]
