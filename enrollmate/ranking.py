"""Annotation and ordering of generated schedules."""

from typing import Callable, Dict, List, Sequence

from .classifier import FULL
from .models import Constraints, GeneratedSchedule, ScheduleMeta, Section


def annotate(sections: Sequence[Section], constraints: Constraints, index: int) -> GeneratedSchedule:
    """
    Wrap one valid combination with its metadata.

    Args:
        sections: The chosen sections, one per course, in course order.
        constraints: Constraints the combination was generated under; only
            the preference window is read here.
        index: Position in which the search discovered the combination.

    Returns:
        GeneratedSchedule: The annotated, immutable schedule.
    """
    latest_end = max(section.end for section in sections)
    earliest_start = min(section.start for section in sections)

    meta = ScheduleMeta(
        full_count=sum(1 for section in sections if section.status == FULL),
        latest_end=latest_end,
        earliest_start=earliest_start,
        has_late=any(section.end > constraints.latest_end for section in sections),
        has_early=any(section.start < constraints.earliest_start for section in sections),
        ends_by_preferred=latest_end <= constraints.latest_end,
    )
    return GeneratedSchedule(index=index, sections=tuple(sections), meta=meta)


def _best_key(schedule: GeneratedSchedule):
    return (schedule.meta.full_count, schedule.meta.latest_end, schedule.index)


SORT_KEYS: Dict[str, Callable[[GeneratedSchedule], object]] = {
    'best': _best_key,
    'earliest': lambda schedule: schedule.meta.latest_end,
    'fewest_full': lambda schedule: schedule.meta.full_count,
}

FILTERS: Dict[str, Callable[[GeneratedSchedule], bool]] = {
    'all': lambda schedule: True,
    'ends_by_time': lambda schedule: schedule.meta.ends_by_preferred,
    'has_late': lambda schedule: schedule.meta.has_late,
    'has_full': lambda schedule: schedule.meta.full_count > 0,
}


def rank_schedules(schedules: Sequence[GeneratedSchedule]) -> List[GeneratedSchedule]:
    """Order schedules fewest full sections first, then earliest finish, then discovery order."""
    return sorted(schedules, key=_best_key)


def sort_schedules(schedules: Sequence[GeneratedSchedule], by: str = 'best') -> List[GeneratedSchedule]:
    """
    Re-sort an already generated list without searching again.

    ``"earliest"`` and ``"fewest_full"`` sort on a single key; entries that
    tie keep their relative order from ``schedules``.
    """
    if by not in SORT_KEYS:
        raise ValueError(f"Unknown sort mode {by!r}; expected one of {', '.join(SORT_KEYS)}")
    return sorted(schedules, key=SORT_KEYS[by])


def filter_schedules(schedules: Sequence[GeneratedSchedule], kind: str = 'all') -> List[GeneratedSchedule]:
    """Keep the schedules matching one of the result filters."""
    if kind not in FILTERS:
        raise ValueError(f"Unknown filter {kind!r}; expected one of {', '.join(FILTERS)}")
    keep = FILTERS[kind]
    return [schedule for schedule in schedules if keep(schedule)]


def summarize(schedules: Sequence[GeneratedSchedule]) -> Dict[str, int]:
    """Count schedules per result filter."""
    return {
        'total': len(schedules),
        'ends_by_time': len(filter_schedules(schedules, 'ends_by_time')),
        'has_late': len(filter_schedules(schedules, 'has_late')),
        'has_full': len(filter_schedules(schedules, 'has_full')),
    }
