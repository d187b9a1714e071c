"""Schedule generation engine for building a weekly class timetable."""

from .classifier import AT_RISK, FULL, OK, Status, classify, parse_enrollment
from .conflicts import conflicts_with_any, find_conflicts, has_conflict
from .exceptions import (
    EnrollmateError,
    InvalidConstraints,
    ParseError,
    ScheduleConflictError,
    SearchCancelled,
)
from .models import Constraints, Course, GeneratedSchedule, GenerationRequest, MeetingTime, ScheduleMeta, Section
from .ranking import filter_schedules, rank_schedules, sort_schedules, summarize
from .search import ScheduleGenerator, generate
from .timeparse import parse_clock, parse_meeting_pattern
from .timetable import Timetable

__all__ = [
    'AT_RISK',
    'FULL',
    'OK',
    'Status',
    'classify',
    'parse_enrollment',
    'conflicts_with_any',
    'find_conflicts',
    'has_conflict',
    'EnrollmateError',
    'InvalidConstraints',
    'ParseError',
    'ScheduleConflictError',
    'SearchCancelled',
    'Constraints',
    'Course',
    'GeneratedSchedule',
    'GenerationRequest',
    'MeetingTime',
    'ScheduleMeta',
    'Section',
    'filter_schedules',
    'rank_schedules',
    'sort_schedules',
    'summarize',
    'ScheduleGenerator',
    'generate',
    'parse_clock',
    'parse_meeting_pattern',
    'Timetable',
]
