"""Shared fixtures for the engine tests."""
import pytest

from enrollmate.models import Constraints, Course, Section


def make_section(group, pattern, current=10, total=30, code="TEST 100"):
    return Section(
        group=group,
        meeting_pattern=pattern,
        enrolled_current=current,
        enrolled_total=total,
        course_code=code,
    )


@pytest.fixture
def section_factory():
    """Build sections without spelling out every field."""
    return make_section


@pytest.fixture
def open_constraints():
    """Constraints that admit everything and do not cap results."""
    return Constraints(allow_full=True, allow_at_risk=True,
                       max_full_per_schedule=10, max_results=None)


@pytest.fixture
def three_courses():
    """Three courses whose sections partly overlap."""
    return [
        Course(code="CIS 3100", name="Data Structures", sections=[
            make_section(1, "MW 9:00 AM - 10:30 AM", 25, 30, "CIS 3100"),
            make_section(2, "TTh 1:00 PM - 2:30 PM", 30, 30, "CIS 3100"),
        ]),
        Course(code="MATH 2010", name="Linear Algebra", sections=[
            make_section(1, "MWF 10:00 AM - 11:00 AM", 18, 35, "MATH 2010"),
            make_section(2, "TTh 9:00 AM - 10:30 AM", 12, 35, "MATH 2010"),
        ]),
        Course(code="ENGL 1101", name="Composition", sections=[
            make_section(1, "F 3:00 PM - 5:00 PM", 20, 25, "ENGL 1101"),
            make_section(2, "M 1:00 PM - 2:00 PM", 1, 25, "ENGL 1101"),
        ]),
    ]
