"""Parsing of meeting-pattern strings such as ``"MW 10:00 AM - 11:30 AM"``."""

import re
from typing import FrozenSet, List, Tuple

from .exceptions import ParseError


# Two-character tokens must come first so "Th" is never read as "T" + "h".
DAY_TOKENS = ('Th', 'M', 'T', 'W', 'F')
DAY_ORDER = {'M': 0, 'T': 1, 'W': 2, 'Th': 3, 'F': 4}
DAY_NAMES = {'M': 'Monday', 'T': 'Tuesday', 'W': 'Wednesday', 'Th': 'Thursday', 'F': 'Friday'}

MINUTES_PER_DAY = 24 * 60

_CLOCK_RE = re.compile(r'^(\d{1,2}):(\d{2})(?:\s*([AaPp][Mm]))?$')
_PATTERN_RE = re.compile(
    r'^\s*(?P<days>[A-Za-z]+)\s*'
    r'(?P<start>\d{1,2}:\d{2}(?:\s*[AaPp][Mm])?)'
    r'\s*-\s*'
    r'(?P<end>\d{1,2}:\d{2}(?:\s*[AaPp][Mm])?)\s*$'
)


def parse_days(text: str) -> List[str]:
    """Split a contiguous day run like ``"MWF"`` or ``"TTh"`` into day tokens.

    Tokens are matched greedily, longest first. Any character that does not
    start a known token is an error.
    """
    if not text:
        raise ParseError("Empty day pattern")

    tokens = []
    pos = 0
    while pos < len(text):
        for token in DAY_TOKENS:
            if text.startswith(token, pos):
                tokens.append(token)
                pos += len(token)
                break
        else:
            raise ParseError(f"Unrecognized day token {text[pos]!r} in {text!r}")
    return tokens


def parse_clock(text: str) -> int:
    """
    Convert a clock string to minutes past midnight.

    ``"H:MM AM"``/``"H:MM PM"`` are read on the 12-hour clock (12:00 AM is 0,
    12:00 PM is 720). Without a suffix the value is read on the 24-hour
    clock, where ``"24:00"`` denotes the end of the day.
    """
    match = _CLOCK_RE.match(text.strip())
    if not match:
        raise ParseError(f"Malformed time {text!r}")

    hour = int(match.group(1))
    minute = int(match.group(2))
    suffix = match.group(3)

    if minute > 59:
        raise ParseError(f"Minutes out of range in {text!r}")

    if suffix:
        if not 1 <= hour <= 12:
            raise ParseError(f"Hour out of range in {text!r}")
        minutes = (hour % 12) * 60 + minute
        if suffix.upper() == 'PM':
            minutes += 720
        return minutes

    if hour > 24 or (hour == 24 and minute != 0):
        raise ParseError(f"Hour out of range in {text!r}")
    return hour * 60 + minute


def format_clock(minutes: int) -> str:
    """Render minutes past midnight as ``"H:MM AM"``."""
    hour, minute = divmod(minutes % MINUTES_PER_DAY, 60)
    suffix = 'AM' if hour < 12 else 'PM'
    return f"{(hour % 12) or 12}:{minute:02d} {suffix}"


def parse_meeting_pattern(pattern: str) -> Tuple[FrozenSet[str], int, int]:
    """
    Parse a meeting pattern into ``(days, start, end)``.

    Args:
        pattern: String of the form ``<days><start> - <end>``,
            e.g. ``"TTh 9:00 AM - 10:15 AM"``.

    Returns:
        tuple: Frozen set of day tokens and the half-open minute interval.

    Raises:
        ParseError: On an unknown day token, a malformed time range, or a
            start that is not before the end.
    """
    if not isinstance(pattern, str):
        raise ParseError(f"Meeting pattern must be a string, got {type(pattern).__name__}")

    match = _PATTERN_RE.match(pattern)
    if not match:
        raise ParseError(f"Meeting pattern {pattern!r} does not match '<days> <start> - <end>'")

    days = frozenset(parse_days(match.group('days')))
    start = parse_clock(match.group('start'))
    end = parse_clock(match.group('end'))

    if start >= end:
        raise ParseError(f"Start time must be before end time in {pattern!r}")

    return days, start, end


def sort_days(days) -> List[str]:
    """Order day tokens Monday first."""
    return sorted(days, key=DAY_ORDER.__getitem__)
