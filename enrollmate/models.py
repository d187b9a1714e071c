"""Pydantic models for courses, sections, constraints and generated schedules."""

from typing import Any, FrozenSet, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from .classifier import Status, classify, parse_enrollment
from .exceptions import InvalidConstraints
from .timeparse import MINUTES_PER_DAY, format_clock, parse_clock, parse_meeting_pattern, sort_days


class MeetingTime(BaseModel):
    """Parsed form of a meeting pattern: a set of days and a half-open minute range."""

    model_config = ConfigDict(frozen=True)

    days: FrozenSet[str]
    start: int
    end: int

    @field_serializer('days')
    def _serialize_days(self, days: FrozenSet[str]) -> List[str]:
        return sort_days(days)

    def __str__(self) -> str:
        return f"{''.join(sort_days(self.days))} {format_clock(self.start)} - {format_clock(self.end)}"


class Section(BaseModel):
    """
    One offering of a course.

    The meeting pattern is parsed once, when the section is built, and the
    result is kept in ``meeting``. A malformed pattern raises ``ParseError``.
    Records in the import shape (``schedule`` and an ``enrolled`` string such
    as ``"12/30"``) are accepted as well.
    """

    model_config = ConfigDict(frozen=True)

    group: int = Field(gt=0)
    meeting_pattern: str
    enrolled_current: int = Field(ge=0)
    enrolled_total: int = Field(ge=0)
    course_code: str = ""
    course_name: str = ""
    meeting: MeetingTime

    @model_validator(mode='before')
    @classmethod
    def _parse_record(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if 'meeting_pattern' not in data and 'schedule' in data:
            data['meeting_pattern'] = data.pop('schedule')
        if isinstance(data.get('enrolled'), str):
            current, total = parse_enrollment(data.pop('enrolled'))
            data.setdefault('enrolled_current', current)
            data.setdefault('enrolled_total', total)

        if 'meeting_pattern' in data:
            days, start, end = parse_meeting_pattern(data['meeting_pattern'])
            data['meeting'] = {'days': days, 'start': start, 'end': end}
        return data

    @classmethod
    def from_record(cls, group: int, schedule: str, enrolled: str,
                    course_code: str = "", course_name: str = "") -> "Section":
        """Build a section from the ``(group, schedule, "current/total")`` import shape."""
        return cls.model_validate({
            'group': group,
            'schedule': schedule,
            'enrolled': enrolled,
            'course_code': course_code,
            'course_name': course_name,
        })

    @property
    def status(self) -> Status:
        return classify(self.enrolled_current, self.enrolled_total)

    @property
    def days(self) -> FrozenSet[str]:
        return self.meeting.days

    @property
    def start(self) -> int:
        return self.meeting.start

    @property
    def end(self) -> int:
        return self.meeting.end

    @property
    def enrolled(self) -> str:
        return f"{self.enrolled_current}/{self.enrolled_total}"

    @property
    def label(self) -> str:
        if self.course_code:
            return f"{self.course_code} (group {self.group})"
        return f"group {self.group}"


class Course(BaseModel):
    """A course and its interchangeable sections, in the order they should be tried."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str = ""
    sections: Tuple[Section, ...] = Field(min_length=1)

    @model_validator(mode='before')
    @classmethod
    def _tag_sections(cls, data: Any) -> Any:
        """Stamp the course code and name onto sections that don't carry one."""
        if not isinstance(data, dict) or 'code' not in data:
            return data

        data = dict(data)
        code = data['code']
        name = data.get('name', "")
        tagged = []
        for section in data.get('sections') or ():
            if isinstance(section, Section):
                if not section.course_code:
                    section = section.model_copy(update={'course_code': code, 'course_name': name})
            elif isinstance(section, dict):
                section = {'course_code': code, 'course_name': name, **section}
            tagged.append(section)
        data['sections'] = tagged
        return data

    @model_validator(mode='after')
    def _unique_groups(self) -> "Course":
        groups = [section.group for section in self.sections]
        if len(set(groups)) != len(groups):
            raise ValueError(f"Duplicate section group numbers in course {self.code}")
        return self


class Constraints(BaseModel):
    """
    Per-request generation settings.

    ``earliest_start``/``latest_end`` form a preference window used only to
    annotate results; they never remove a section from the search. Both
    accept minutes past midnight or a clock string like ``"16:30"``.
    ``max_results=None`` removes the cap on returned schedules.
    """

    model_config = ConfigDict(frozen=True)

    earliest_start: int = 7 * 60 + 30
    latest_end: int = 16 * 60 + 30
    allow_full: bool = False
    allow_at_risk: bool = True
    max_full_per_schedule: int = 1
    max_results: Optional[int] = 20

    @field_validator('earliest_start', 'latest_end', mode='before')
    @classmethod
    def _clock_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_clock(value)
        return value

    @model_validator(mode='after')
    def _check_ranges(self) -> "Constraints":
        if self.max_full_per_schedule < 0:
            raise InvalidConstraints(
                f"max_full_per_schedule must be >= 0, got {self.max_full_per_schedule}"
            )
        if self.max_results is not None and self.max_results < 1:
            raise InvalidConstraints(f"max_results must be >= 1, got {self.max_results}")
        if not 0 <= self.earliest_start < self.latest_end <= MINUTES_PER_DAY:
            raise InvalidConstraints(
                f"Earliest start ({format_clock(self.earliest_start)}) must be before "
                f"latest end ({format_clock(self.latest_end)})"
            )
        return self


class ScheduleMeta(BaseModel):
    """Descriptive metadata attached to every generated schedule."""

    model_config = ConfigDict(frozen=True)

    full_count: int
    latest_end: int
    earliest_start: int
    has_late: bool
    has_early: bool
    ends_by_preferred: bool


class GeneratedSchedule(BaseModel):
    """One section per requested course, plus metadata. ``index`` is the discovery order."""

    model_config = ConfigDict(frozen=True)

    index: int
    sections: Tuple[Section, ...]
    meta: ScheduleMeta


class GenerationRequest(BaseModel):
    """Courses plus the constraints to generate them under, as read from a config file."""

    courses: List[Course] = Field(min_length=1)
    constraints: Constraints = Field(default_factory=Constraints)
