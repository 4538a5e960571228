"""
Caret mapping across a re-format.

Formatting can insert or remove separators anywhere to the left of the caret,
so raw character indices are meaningless between the edited text and the
formatted one. The caret is tracked by the number of significant characters
(digits and the decimal point) in front of it instead. Separators never count,
which keeps edits next to a separator stable.
"""
from __future__ import annotations

from typing import Optional

from numberinput.config import SIGNIFICANT_CHARS


def clamp_caret(caret: int, text: str) -> int:
    """Clamp `caret` into [0, len(text)]."""
    return max(0, min(caret, len(text)))


def count_significant(text: str, end: Optional[int] = None) -> int:
    """Number of digits and decimal points in `text[:end]`."""
    return sum(1 for char in text[:end] if char in SIGNIFICANT_CHARS)


def map_cursor(old_display: str, old_caret: int, new_display: str) -> int:
    """
    Compute where the caret belongs in `new_display`.

    Args:
        old_display: Text of the field at the moment of the edit (unformatted,
            may contain separators and stray characters).
        old_caret: Caret offset in `old_display`. Out-of-range values are clamped.
        new_display: The freshly sanitized and grouped text.

    Returns:
        Offset in `new_display` right after the character that brings the
        significant count up to the count in front of the old caret, 0 when
        nothing significant preceded the caret, or the end of `new_display`
        when it holds fewer significant characters.
    """
    target = count_significant(old_display, clamp_caret(old_caret, old_display))
    if target == 0:
        return 0

    count = 0
    for index, char in enumerate(new_display):
        if char in SIGNIFICANT_CHARS:
            count += 1
            if count == target:
                return index + 1

    return len(new_display)
