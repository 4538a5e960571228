"""Thousands-grouped numeric text input with caret preservation."""
from numberinput.controller import FieldController, FieldState, FieldView
from numberinput.core import group, map_cursor, parse, reconcile, render_value, sanitize

__all__ = [
    "FieldController",
    "FieldState",
    "FieldView",
    "group",
    "map_cursor",
    "parse",
    "reconcile",
    "render_value",
    "sanitize",
]
