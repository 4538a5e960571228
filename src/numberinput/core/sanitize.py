from __future__ import annotations

import re

from numberinput.config import DECIMAL_POINT, GROUP_SEPARATOR

_NOT_DIGIT = re.compile(r"[^0-9]")
_NOT_DIGIT_OR_POINT = re.compile(r"[^0-9.]")


def sanitize(text: str, allow_decimal: bool = False) -> str:
    """
    Strip `text` down to the characters legal for the current mode.

    Only ASCII digits survive in digit mode. In decimal mode the first decimal
    point survives as well; any later point is dropped without touching the
    digits around it.

    Args:
        text: Whatever the user typed or pasted.
        allow_decimal: Whether one decimal point is accepted.

    Returns:
        The sanitized (possibly empty) string.

    Examples:
        >>> sanitize("฿1,234abc")
        '1234'
        >>> sanitize("12..5", allow_decimal=True)
        '12.5'
    """
    if not allow_decimal:
        return _NOT_DIGIT.sub("", text)

    cleaned = _NOT_DIGIT_OR_POINT.sub("", text)
    head, point, tail = cleaned.partition(DECIMAL_POINT)
    return head + point + tail.replace(DECIMAL_POINT, "")


def strip_separators(text: str) -> str:
    """Remove every grouping separator from `text`."""
    return text.replace(GROUP_SEPARATOR, "")
