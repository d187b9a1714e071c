"""
Backtracking search for conflict-free section combinations.

Each course is one variable whose domain is its admissible sections. The
search assigns courses in input order, trying sections in input order, and
prunes a branch as soon as the new section clashes with one already chosen
or would push the number of FULL sections past the limit.
"""

import itertools
import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .classifier import AT_RISK, FULL
from .conflicts import conflicts_with_any
from .exceptions import SearchCancelled
from .models import Constraints, Course, GeneratedSchedule, Section
from .ranking import annotate, rank_schedules


logger = logging.getLogger(__name__)


def is_admissible(section: Section, constraints: Constraints) -> bool:
    """Check a section's enrollment status against the allow_full/allow_at_risk switches."""
    status = section.status
    if status == FULL and not constraints.allow_full:
        return False
    if status == AT_RISK and not constraints.allow_at_risk:
        return False
    return True


def admissible_sections(course: Course, constraints: Constraints) -> List[Section]:
    """Sections of a course that may appear in a schedule, in input order."""
    return [section for section in course.sections if is_admissible(section, constraints)]


class ScheduleGenerator:
    """
    Enumerates valid section combinations for a list of courses.

    ``cancel`` may be any object with an ``is_set()`` method, such as a
    ``threading.Event``. It is checked at every step of the search and
    raises ``SearchCancelled`` once set.
    """

    def __init__(self, courses: Sequence[Course], constraints: Constraints, cancel=None):
        self.courses = list(courses)
        self.constraints = constraints
        self.cancel = cancel
        self.nodes_visited = 0

    def _domains(self) -> Optional[List[List[Tuple[Section, bool]]]]:
        domains = []
        for course in self.courses:
            sections = admissible_sections(course, self.constraints)
            logger.debug("%s: %d of %d sections admissible", course.code,
                         len(sections), len(course.sections))
            if not sections:
                logger.info("No admissible sections left for %s; nothing to generate", course.code)
                return None
            domains.append([(section, section.status == FULL) for section in sections])
        return domains

    def combinations(self) -> Iterator[Tuple[Section, ...]]:
        """Yield valid combinations lazily, in discovery order."""
        if not self.courses:
            return

        domains = self._domains()
        if domains is None:
            return

        max_full = self.constraints.max_full_per_schedule
        chosen: List[Section] = []

        def backtrack(depth: int, full_count: int) -> Iterator[Tuple[Section, ...]]:
            if self.cancel is not None and self.cancel.is_set():
                raise SearchCancelled(f"Search cancelled after visiting {self.nodes_visited} nodes")
            self.nodes_visited += 1

            if depth == len(domains):
                yield tuple(chosen)
                return

            for section, is_full in domains[depth]:
                if is_full and full_count + 1 > max_full:
                    continue
                if conflicts_with_any(section, chosen):
                    continue
                chosen.append(section)
                yield from backtrack(depth + 1, full_count + is_full)
                chosen.pop()

        yield from backtrack(0, 0)

    def generate(self) -> List[GeneratedSchedule]:
        """Run the search up to ``max_results`` and return the ranked schedules."""
        found = itertools.islice(self.combinations(), self.constraints.max_results)
        schedules = [annotate(combo, self.constraints, index) for index, combo in enumerate(found)]

        capped = (self.constraints.max_results is not None
                  and len(schedules) >= self.constraints.max_results)
        logger.info("Generated %d schedule(s) for %d course(s), %d nodes visited%s",
                    len(schedules), len(self.courses), self.nodes_visited,
                    " (result cap reached)" if capped else "")
        return rank_schedules(schedules)


def generate(courses: Iterable[Union[Course, dict]],
             constraints: Union[Constraints, dict, None] = None,
             cancel=None) -> List[GeneratedSchedule]:
    """
    Generate ranked, conflict-free schedules with one section per course.

    Args:
        courses: Courses in the order they should be assigned. Plain dicts are
            validated into ``Course`` models.
        constraints: Generation constraints; defaults are used when omitted.
        cancel: Optional flag with ``is_set()`` for aborting a long search.

    Returns:
        list: GeneratedSchedule objects in "best" order. Empty when no
        combination is possible, including when a course has no admissible
        section left.

    Raises:
        InvalidConstraints: If the constraints are out of range.
        SearchCancelled: If ``cancel`` was set while searching.
    """
    if constraints is None:
        constraints = Constraints()
    elif isinstance(constraints, dict):
        constraints = Constraints.model_validate(constraints)

    courses = [c if isinstance(c, Course) else Course.model_validate(c) for c in courses]
    return ScheduleGenerator(courses, constraints, cancel=cancel).generate()
