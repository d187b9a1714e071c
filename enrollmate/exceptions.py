"""Exception types raised by the schedule engine."""


class EnrollmateError(Exception):
    """Base class for all engine errors."""


class ParseError(EnrollmateError):
    """A meeting pattern, clock time or enrollment string could not be parsed."""


class InvalidConstraints(EnrollmateError):
    """Generation constraints were rejected before the search started."""


class ScheduleConflictError(EnrollmateError):
    """A section clashes with one already held in a timetable."""

    def __init__(self, section, clashes_with):
        self.section = section
        self.clashes_with = clashes_with
        super().__init__(
            f"Time conflict: {section.label} conflicts with {clashes_with.label}"
        )


class SearchCancelled(EnrollmateError):
    """The caller asked a running search to stop."""
