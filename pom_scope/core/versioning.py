"""Maven version validity checks."""

import re
from typing import List, Optional

_VERSION_CHARS = re.compile(r'^[a-z0-9.\-]+$', re.IGNORECASE)

# One interval of a version range: [1.0,2.0) / (,1.0] / [1.5]
_INTERVAL = re.compile(
    r'\s*([\[(])\s*([^,\[\]()\s]*)\s*(?:(,)\s*([^,\[\]()\s]*)\s*)?([\])])\s*'
)

_KEYWORDS = {"latest", "release"}


def is_version(value: Optional[str]) -> bool:
    """Check whether a string is a single Maven version.

    Args:
        value: Version text

    Returns:
        True for plain versions such as ``1.2.3``, ``31.1-jre`` or ``2.0-SNAPSHOT``
    """
    if not value:
        return False
    if not _VERSION_CHARS.match(value):
        return False
    if value[0] in ".-" or value[-1] in ".-":
        return False
    if value.lower() in _KEYWORDS:
        return False
    return any(token for token in re.split(r'[.\-]', value))


def _parse_intervals(value: str) -> Optional[List[tuple]]:
    intervals = []
    pos = 0
    while pos < len(value):
        match = _INTERVAL.match(value, pos)
        if not match:
            return None
        intervals.append(match.groups())
        pos = match.end()
        if pos < len(value):
            if value[pos] != ",":
                return None
            pos += 1
            if pos == len(value):
                return None
    return intervals


def is_valid_range(value: Optional[str]) -> bool:
    """Check whether a string is a Maven version range.

    Args:
        value: Range text, e.g. ``[1.0,2.0)`` or ``(,1.0],[1.2,)``

    Returns:
        True if every interval is well formed
    """
    if not value:
        return False

    intervals = _parse_intervals(value)
    if not intervals:
        return False

    for left, lower, comma, upper, right in intervals:
        if not comma:
            # Exact-version interval
            if left != "[" or right != "]" or not is_version(lower):
                return False
            continue

        if not lower and not upper:
            return False
        if lower and not is_version(lower):
            return False
        if upper and not is_version(upper):
            return False
        if not lower and left != "(":
            return False
        if not upper and right != ")":
            return False

    return True


def is_valid_version(value: Optional[str]) -> bool:
    """Default version predicate used by the resolver.

    Args:
        value: Resolved version text

    Returns:
        True if the value is a Maven version or version range
    """
    return is_version(value) or is_valid_range(value)
