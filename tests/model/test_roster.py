"""
Tests for roster entities and lookup.
"""

import pytest
from pydantic import ValidationError

from tutbook.model import Parent, PersonType, Roster, Student


class TestPerson:
    """Test person construction."""

    def test_types_set_by_subclass(self):
        assert Parent(name="John").person_type == PersonType.PARENT
        assert Student(name="Emily").person_type == PersonType.STUDENT

    def test_name_trimmed(self):
        assert Student(name="  Emily Tan ").name == "Emily Tan"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError):
            Student(name=name)

    def test_has_name_ignores_case_and_padding(self):
        student = Student(name="Emily Tan")

        assert student.has_name(" emily tan ")
        assert not student.has_name("Emily")


class TestParent:
    def test_add_child(self):
        parent = Parent(name="John")
        child = Student(name="Emily")

        assert not parent.has_child(child)
        parent.add_child(child)
        assert parent.has_child(child)

    def test_same_named_student_is_different_child(self):
        """Linked children are matched by identity, not by name."""
        parent = Parent(name="John")
        parent.add_child(Student(name="Emily"))

        assert not parent.has_child(Student(name="Emily"))

    def test_children_not_shared(self):
        """Each parent starts with its own empty child list."""
        first, second = Parent(name="A"), Parent(name="B")
        first.add_child(Student(name="Emily"))

        assert second.children == []


class TestRoster:
    def test_find_by_name_filters_type(self, roster):
        """Only persons of the requested type are returned."""
        assert roster.find_by_name("John Tan", PersonType.STUDENT) == []
        assert [p.name for p in roster.find_by_name("john tan", PersonType.PARENT)] == [
            "John Tan"
        ]

    def test_find_by_name_returns_all_matches(self, roster):
        roster.add_person(Student(name="EMILY TAN"))

        matches = roster.find_by_name("Emily Tan", PersonType.STUDENT)
        assert [p.name for p in matches] == ["Emily Tan", "EMILY TAN"]

    def test_empty_roster(self):
        assert Roster().find_by_name("anyone", PersonType.PARENT) == []
