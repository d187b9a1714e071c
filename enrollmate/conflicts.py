"""Time-conflict detection between parsed sections."""

from typing import Iterable, List

from .models import Section


def has_conflict(a, b) -> bool:
    """
    Check whether two sections meet at the same time.

    They conflict when they share at least one day and their half-open
    minute intervals overlap. A class ending at 10:00 does not clash with
    one starting at 10:00. Accepts ``Section`` or ``MeetingTime`` objects.
    """
    return not a.days.isdisjoint(b.days) and a.start < b.end and b.start < a.end


def find_conflicts(candidate: Section, chosen: Iterable[Section]) -> List[Section]:
    """Return every section in ``chosen`` that clashes with ``candidate``."""
    return [section for section in chosen if has_conflict(candidate, section)]


def conflicts_with_any(candidate: Section, chosen: Iterable[Section]) -> bool:
    """Check a candidate against a set of already chosen sections."""
    return any(has_conflict(candidate, section) for section in chosen)
