"""
Value synchronisation between the text buffer and the semantic value.

The field owns its raw buffer. The semantic value is derived from it on every
edit (`parse`) and, when the value is replaced from outside, the buffer is
only re-derived (`render_value`) if it no longer means the same number
(`reconcile`). An echo of the value the field just published must never
reformat text the user is still typing.
"""
from __future__ import annotations

import logging
import math
from typing import Optional, Union

import numpy as np

from numberinput.config import DECIMAL_POINT
from numberinput.core.sanitize import sanitize

logger = logging.getLogger(__name__)

Number = Union[int, float]
SemanticValue = Optional[Number]


def parse(raw: str, allow_decimal: bool = False) -> SemanticValue:
    """
    Parse a raw buffer into its semantic value.

    Args:
        raw: Sanitized text without separators.
        allow_decimal: Parse as float when True, as int otherwise.

    Returns:
        The number, or None for an empty buffer, a lone decimal point, or
        anything that is not a finite number.
    """
    if raw in ("", DECIMAL_POINT):
        return None

    try:
        value: Number = float(raw) if allow_decimal else int(raw)
    except ValueError:
        return None

    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def render_value(value: Number, allow_decimal: bool = False) -> str:
    """
    Canonical text for an externally supplied value.

    Floats are written positionally with the shortest digits that round-trip,
    so 12.0 becomes "12" and 1e-07 becomes "0.0000001". The result is run
    through the sanitizer; digit mode drops the fractional part first.
    """
    if isinstance(value, float):
        text = np.format_float_positional(value, trim="-")
    else:
        text = str(int(value))

    if not allow_decimal:
        text = text.partition(DECIMAL_POINT)[0]

    cleaned = sanitize(text, allow_decimal)
    if cleaned != text or (isinstance(value, float) and not allow_decimal and not value.is_integer()):
        logger.warning(f"Value {value!r} cannot be shown exactly, using '{cleaned}'.")
    return cleaned


def reconcile(external: SemanticValue, current_raw: str, allow_decimal: bool = False) -> str:
    """
    Decide which raw buffer the field should hold after an external value change.

    Args:
        external: The new authoritative value (None means "empty").
        current_raw: The buffer the field holds right now.
        allow_decimal: Field mode.

    Returns:
        "" for None, `current_raw` unchanged when it already parses to
        `external` (numeric equality, so "007" survives 7 and "12." survives 12.0),
        otherwise the canonical rendering of `external`.
    """
    if external is None:
        return ""

    if parse(current_raw, allow_decimal) == external:
        return current_raw

    return render_value(external, allow_decimal)
