"""Enrollment status classification for sections."""

import re
from typing import Literal, Tuple

from .exceptions import ParseError


Status = Literal["OK", "AT-RISK", "FULL"]

OK: Status = "OK"
AT_RISK: Status = "AT-RISK"
FULL: Status = "FULL"

_ENROLLED_RE = re.compile(r'^\s*(\d+)\s*/\s*(\d+)\s*$')


def classify(current: int, total: int) -> Status:
    """
    Derive a section's enrollment status from its seat counts.

    A section is FULL once current enrollment reaches capacity (so a zero
    capacity section is always FULL). It is AT-RISK of being cancelled when
    nobody has enrolled, or when a large section (20+ seats) has fewer than
    6 students, or a medium one (10+ seats) has fewer than 2.
    """
    if current < 0 or total < 0:
        raise ValueError(f"Enrollment counts must be non-negative, got {current}/{total}")

    if current >= total:
        return FULL
    if current == 0 or (total >= 20 and current < 6) or (total >= 10 and current < 2):
        return AT_RISK
    return OK


def parse_enrollment(text: str) -> Tuple[int, int]:
    """Split an enrollment string like ``"12/30"`` into ``(current, total)``."""
    match = _ENROLLED_RE.match(text or '')
    if not match:
        raise ParseError(f"Malformed enrollment {text!r}, expected 'current/total'")
    return int(match.group(1)), int(match.group(2))
