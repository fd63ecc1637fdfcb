"""
Shared test fixtures and utilities for the tutbook test suite.
"""

import pytest

from tutbook.model import Parent, Roster, Student
from tutbook.parsing import Prefix


@pytest.fixture
def prefix_a():
    return Prefix("a/")


@pytest.fixture
def prefix_b():
    return Prefix("b/")


@pytest.fixture
def prefix_c():
    return Prefix("c/")


@pytest.fixture
def roster():
    """Roster with two parents and three students, none linked yet.

    Usage:
        def test_something(roster):
            parent = roster.find_by_name("John Tan", PersonType.PARENT)[0]
    """
    roster = Roster()
    roster.add_person(Parent(name="John Tan"))
    roster.add_person(Parent(name="Mary Lim"))
    roster.add_person(Student(name="Emily Tan"))
    roster.add_person(Student(name="Jacob Tan"))
    roster.add_person(Student(name="Alex Lim"))
    return roster
