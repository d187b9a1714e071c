"""A hand-picked set of sections that refuses time conflicts."""

import logging
from typing import Iterable, Iterator, List, Optional

from .conflicts import find_conflicts
from .exceptions import ScheduleConflictError
from .models import GeneratedSchedule, Section


logger = logging.getLogger(__name__)


class Timetable:
    """
    Sections a student has picked by hand.

    Adding a section checks it against everything already held with the same
    conflict predicate the generator uses, so a timetable can never hold two
    overlapping sections.
    """

    def __init__(self, sections: Optional[Iterable[Section]] = None):
        self._sections: List[Section] = []
        for section in sections or ():
            self.add(section)

    @classmethod
    def from_generated(cls, schedule: GeneratedSchedule) -> "Timetable":
        """Start editing from a generated schedule."""
        return cls(schedule.sections)

    @property
    def sections(self) -> List[Section]:
        return list(self._sections)

    @property
    def course_count(self) -> int:
        return len(self._sections)

    def conflicts_with(self, section: Section) -> List[Section]:
        """Held sections that clash with ``section``."""
        return find_conflicts(section, self._sections)

    def can_add(self, section: Section) -> bool:
        return not self.conflicts_with(section)

    def add(self, section: Section) -> None:
        """
        Add a section.

        Raises:
            ScheduleConflictError: If the section overlaps a held section.
        """
        clashes = self.conflicts_with(section)
        if clashes:
            logger.debug("Rejected %s: conflicts with %s", section.label, clashes[0].label)
            raise ScheduleConflictError(section, clashes[0])
        self._sections.append(section)

    def remove(self, course_code: str) -> None:
        """Drop the section held for a course. Unknown codes are ignored."""
        self._sections = [s for s in self._sections if s.course_code != course_code]

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __contains__(self, section: object) -> bool:
        return section in self._sections
