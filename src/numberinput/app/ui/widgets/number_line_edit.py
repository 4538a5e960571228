from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import Qt, QTimer, Signal, Slot
from PySide6.QtWidgets import QLineEdit, QWidget

from numberinput.controller import FieldController
from numberinput.core import SemanticValue

logger = logging.getLogger(__name__)


class NumberLineEdit(QLineEdit):
    """
    Line edit that shows its number with thousands separators while typing.

    User edits (`textEdited`) run through a `FieldController`. Programmatic
    `setText` calls never re-enter the controller. Setting the text moves the
    Qt cursor to the end, so the mapped caret is applied from a zero-interval
    timer, once the event loop has come back around.
    """
    value_changed = Signal(object)

    def __init__(
        self,
        value: SemanticValue = None,
        *,
        allow_decimal: bool = False,
        placeholder: str = "",
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)

        # Owned by the widget, so a pending restoration dies with it
        self._restore_timer = QTimer(self)
        self._restore_timer.setSingleShot(True)
        self._restore_timer.setInterval(0)
        self._restore_timer.timeout.connect(self._run_restoration)
        self._restoration: Optional[Callable[[], None]] = None

        self._controller = FieldController(
            self,
            self.value_changed.emit,
            value,
            allow_decimal=allow_decimal,
            scheduler=self._schedule_restoration,
        )

        if allow_decimal:
            self.setInputMethodHints(Qt.InputMethodHint.ImhFormattedNumbersOnly)
        else:
            self.setInputMethodHints(Qt.InputMethodHint.ImhDigitsOnly)
        if placeholder:
            self.setPlaceholderText(placeholder)

        self.setText(self._controller.display)
        self.textEdited.connect(self._on_text_edited)

    # ---- public API ----

    def value(self) -> SemanticValue:
        return self._controller.value

    def set_value(self, value: SemanticValue) -> None:
        """Replace the value from outside; live text meaning the same number is kept."""
        self._controller.set_value(value)

    def allow_decimal(self) -> bool:
        return self._controller.allow_decimal

    def raw_text(self) -> str:
        """The text without separators."""
        return self._controller.raw

    @property
    def controller(self) -> FieldController:
        return self._controller

    # ---- FieldView ----

    def set_display(self, text: str) -> None:
        if text != self.text():
            self.setText(text)

    def set_caret(self, offset: int) -> None:
        self.setCursorPosition(offset)

    # ---- internals ----

    @Slot(str)
    def _on_text_edited(self, text: str) -> None:
        self._controller.handle_edit(text, self.cursorPosition())

    def _schedule_restoration(self, callback: Callable[[], None]) -> None:
        # Restarting the timer supersedes the previous restoration
        self._restoration = callback
        self._restore_timer.start()

    @Slot()
    def _run_restoration(self) -> None:
        callback, self._restoration = self._restoration, None
        if callback is not None:
            callback()
