"""
Field Controller
================
The stateful orchestrator bound to one numeric text field.

Why is this file needed?
------------------------
The formatting functions in `numberinput.core` are pure. Something has to own
the raw buffer of a field, push every edit through them, publish the semantic
value, and put the caret back after the host has re-rendered the text. The
controller only talks to a `FieldView` and a scheduler, never to a widget.

States:
    CLEAN: the buffer matches the last published value, no caret pending.
    DIRTY: an edit happened and its caret restoration has not run yet.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QTimer

from numberinput.core import SemanticValue, clamp_caret, group, map_cursor, parse, reconcile, render_value, sanitize

logger = logging.getLogger(__name__)

Scheduler = Callable[[Callable[[], None]], None]


class FieldState(IntEnum):
    """Whether a caret restoration is outstanding."""
    CLEAN = 0
    DIRTY = 1


class FieldView(Protocol):
    """What a host text field must offer to a controller."""
    def set_display(self, text: str) -> None: ...
    def set_caret(self, offset: int) -> None: ...


def next_event_loop_turn(callback: Callable[[], None]) -> None:
    """Run `callback` once the Qt event loop has processed the pending repaint."""
    QTimer.singleShot(0, callback)


class FieldController:
    """
    Owns the raw buffer of one field and keeps text, value and caret in sync.

    Args:
        view: The host field.
        on_change: Called with the new semantic value after every edit.
        value: Initial semantic value.
        allow_decimal: Accept one decimal point. Fixed for the controller's lifetime.
        scheduler: Runs a callback after the host's next render pass.
    """

    def __init__(
        self,
        view: FieldView,
        on_change: Callable[[SemanticValue], None],
        value: SemanticValue = None,
        *,
        allow_decimal: bool = False,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self._view = view
        self._on_change = on_change
        self._allow_decimal = allow_decimal
        self._schedule = scheduler or next_event_loop_turn

        self._raw = "" if value is None else render_value(value, allow_decimal)
        self._value: SemanticValue = value
        self._state = FieldState.CLEAN
        self._generation = 0
        self._pending_caret: Optional[int] = None
        self._disposed = False

    # ---- read-only state ----

    @property
    def allow_decimal(self) -> bool:
        return self._allow_decimal

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def display(self) -> str:
        return group(self._raw)

    @property
    def value(self) -> SemanticValue:
        return self._value

    @property
    def state(self) -> FieldState:
        return self._state

    @property
    def pending_caret(self) -> Optional[int]:
        return self._pending_caret

    @property
    def disposed(self) -> bool:
        return self._disposed

    # ---- transitions ----

    def handle_edit(self, text: str, caret: int) -> str:
        """
        Process one user edit.

        Args:
            text: Full text of the field after the keystroke, as the host reports it.
            caret: Caret offset in `text` after the keystroke.

        Returns:
            The new display string.
        """
        if self._disposed:
            logger.debug("Edit ignored, controller disposed.")
            return self.display

        raw = sanitize(text, self._allow_decimal)
        display = group(raw)
        new_caret = map_cursor(text, caret, display)

        self._raw = raw
        self._value = parse(raw, self._allow_decimal)
        self._generation += 1
        self._pending_caret = new_caret
        self._state = FieldState.DIRTY
        # A later edit or a replacing reset bumps the generation, which turns this
        # restoration into a no-op
        generation = self._generation

        self._view.set_display(display)
        self._on_change(self._value)

        self._schedule(lambda: self.restore_caret(generation))
        return display

    def restore_caret(self, generation: int) -> bool:
        """
        Apply the caret computed by the edit that scheduled `generation`.

        Returns:
            True if the caret was applied, False for a stale or cancelled restoration.
        """
        if self._disposed or generation != self._generation or self._pending_caret is None:
            logger.debug(f"Skipping stale caret restoration (generation {generation}).")
            return False

        self._view.set_caret(clamp_caret(self._pending_caret, self.display))
        self._pending_caret = None
        self._state = FieldState.CLEAN
        return True

    def set_value(self, value: SemanticValue) -> bool:
        """
        Accept a value replaced from outside (form load, reset, store echo).

        Only a value that differs from the current one is reconciled, so a lone
        "." (value None) survives an echo of None. The buffer is kept when it
        already parses to `value`. Otherwise it is replaced and any pending
        caret restoration is dropped, since it was computed for text that no
        longer exists.

        Returns:
            True if the displayed text changed.
        """
        if self._disposed:
            logger.debug("External value ignored, controller disposed.")
            return False
        if value == self._value:
            return False

        self._value = value
        raw = reconcile(value, self._raw, self._allow_decimal)
        if raw == self._raw:
            return False

        self._raw = raw
        self._cancel_pending()
        self._view.set_display(self.display)
        return True

    def dispose(self) -> None:
        """Detach the controller; a restoration that still fires does nothing."""
        self._cancel_pending()
        self._disposed = True

    def _cancel_pending(self) -> None:
        self._generation += 1
        self._pending_caret = None
        self._state = FieldState.CLEAN
