"""
Tests for the pydantic models.
"""
import pytest
from pydantic import ValidationError

from enrollmate.classifier import AT_RISK, FULL, OK
from enrollmate.exceptions import InvalidConstraints, ParseError
from enrollmate.models import Constraints, Course, GenerationRequest, Section


class TestSection:
    """Test section construction and derived fields."""

    def test_pattern_parsed_at_construction(self, section_factory):
        section = section_factory(1, "TTh 9:00 AM - 10:15 AM")
        assert section.days == frozenset({"T", "Th"})
        assert section.start == 540
        assert section.end == 615
        assert section.meeting_pattern == "TTh 9:00 AM - 10:15 AM"

    def test_status_follows_counts(self, section_factory):
        assert section_factory(1, "M 9:00 - 10:00", 10, 30).status == OK
        assert section_factory(1, "M 9:00 - 10:00", 30, 30).status == FULL
        assert section_factory(1, "M 9:00 - 10:00", 0, 30).status == AT_RISK

    def test_malformed_pattern_raises_parse_error(self, section_factory):
        with pytest.raises(ParseError):
            section_factory(1, "XYZ 9:00 AM - 10:00 AM")

    def test_immutable(self, section_factory):
        section = section_factory(1, "M 9:00 - 10:00")
        with pytest.raises(ValidationError):
            section.enrolled_current = 5

    def test_group_must_be_positive(self, section_factory):
        with pytest.raises(ValidationError):
            section_factory(0, "M 9:00 - 10:00")

    def test_supplied_meeting_is_recomputed(self):
        section = Section.model_validate({
            "group": 1,
            "meeting_pattern": "W 1:00 PM - 2:00 PM",
            "enrolled_current": 5,
            "enrolled_total": 20,
            "meeting": {"days": ["M"], "start": 0, "end": 10},
        })
        assert section.days == frozenset({"W"})
        assert (section.start, section.end) == (780, 840)

    def test_from_record(self):
        section = Section.from_record(2, "MWF 8:00 AM - 9:00 AM", "12/30", course_code="CIS 3100")
        assert section.group == 2
        assert (section.enrolled_current, section.enrolled_total) == (12, 30)
        assert section.enrolled == "12/30"
        assert section.label == "CIS 3100 (group 2)"

    def test_from_record_bad_enrollment(self):
        with pytest.raises(ParseError):
            Section.from_record(1, "M 9:00 - 10:00", "twelve")


class TestCourse:
    """Test course validation."""

    def test_sections_tagged_with_course(self):
        course = Course(code="MATH 2010", name="Linear Algebra", sections=[
            {"group": 1, "schedule": "MW 9:00 AM - 10:00 AM", "enrolled": "10/30"},
            Section(group=2, meeting_pattern="TTh 9:00 AM - 10:00 AM",
                    enrolled_current=10, enrolled_total=30),
        ])
        assert [s.course_code for s in course.sections] == ["MATH 2010", "MATH 2010"]
        assert course.sections[1].course_name == "Linear Algebra"

    def test_sections_keep_their_own_code(self, section_factory):
        course = Course(code="A", sections=[section_factory(1, "M 9:00 - 10:00", code="B")])
        assert course.sections[0].course_code == "B"

    def test_empty_sections_rejected(self):
        with pytest.raises(ValidationError):
            Course(code="A", sections=[])

    def test_duplicate_groups_rejected(self, section_factory):
        with pytest.raises(ValidationError):
            Course(code="A", sections=[
                section_factory(1, "M 9:00 - 10:00"),
                section_factory(1, "T 9:00 - 10:00"),
            ])


class TestConstraints:
    """Test constraint validation."""

    def test_defaults(self):
        constraints = Constraints()
        assert constraints.earliest_start == 450
        assert constraints.latest_end == 990
        assert constraints.allow_full is False
        assert constraints.allow_at_risk is True
        assert constraints.max_full_per_schedule == 1
        assert constraints.max_results == 20

    def test_clock_strings(self):
        constraints = Constraints(earliest_start="08:00", latest_end="5:00 PM")
        assert constraints.earliest_start == 480
        assert constraints.latest_end == 1020

    @pytest.mark.parametrize("kwargs", [
        {"max_full_per_schedule": -1},
        {"max_results": 0},
        {"earliest_start": 600, "latest_end": 600},
        {"earliest_start": "17:00", "latest_end": "09:00"},
        {"latest_end": 1500},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidConstraints):
            Constraints(**kwargs)

    def test_unbounded_results(self):
        assert Constraints(max_results=None).max_results is None


class TestGenerationRequest:
    """Test request parsing from config-shaped data."""

    def test_default_constraints(self):
        request = GenerationRequest.model_validate({
            "courses": [{"code": "A", "sections": [
                {"group": 1, "schedule": "M 9:00 - 10:00", "enrolled": "5/20"},
            ]}],
        })
        assert request.constraints == Constraints()
        assert request.courses[0].sections[0].course_code == "A"
