"""Pure formatting functions: sanitize, group, map the caret, sync the value."""
from numberinput.core.cursor import clamp_caret, count_significant, map_cursor
from numberinput.core.grouping import group
from numberinput.core.sanitize import sanitize, strip_separators
from numberinput.core.sync import Number, SemanticValue, parse, reconcile, render_value

__all__ = [
    "Number",
    "SemanticValue",
    "clamp_caret",
    "count_significant",
    "group",
    "map_cursor",
    "parse",
    "reconcile",
    "render_value",
    "sanitize",
    "strip_separators",
]
