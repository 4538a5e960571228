from __future__ import annotations

from numberinput.config import DECIMAL_POINT, GROUP_SEPARATOR, GROUP_SIZE


def group(sanitized: str) -> str:
    """
    Insert thousands separators into the integer part of a sanitized string.

    The integer part is split into runs of three digits counted from the right.
    Leading zeros are grouped like any other digit. Everything from the first
    decimal point on is appended unchanged, so "1234." keeps its trailing point
    and ".5" keeps its empty integer part.

    Args:
        sanitized: Output of `sanitize`, i.e. digits and at most one point.

    Returns:
        The display string.

    Examples:
        >>> group("1234567")
        '1,234,567'
        >>> group("1234.5678")
        '1,234.5678'
    """
    integer, point, fraction = sanitized.partition(DECIMAL_POINT)

    head = len(integer) % GROUP_SIZE or GROUP_SIZE
    groups = [integer[:head]]
    groups.extend(integer[i:i + GROUP_SIZE] for i in range(head, len(integer), GROUP_SIZE))

    return GROUP_SEPARATOR.join(groups) + point + fraction
