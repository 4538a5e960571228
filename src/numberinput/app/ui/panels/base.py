from __future__ import annotations

from PySide6.QtWidgets import QGridLayout, QGroupBox, QLabel, QSizePolicy, QVBoxLayout, QWidget

from numberinput.app.state import Store
from numberinput.app.ui.widgets.number_line_edit import NumberLineEdit

ERROR_STYLE = "color: #b00020;"


class BasePanel(QWidget):
    """
    Base class for form panels. Holds a reference to the global store and lays
    numeric fields out in a grid: label, field, validation message.
    """
    TITLE: str = "Details"

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        box = QGroupBox(self.tr(self.TITLE), self)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(box)
        layout.addStretch()
        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(8)
        self.fields: dict[str, NumberLineEdit] = {}
        self._errors: dict[str, QLabel] = {}
        self._row = 0

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_number(
        self,
        key: str,
        label: str,
        *,
        allow_decimal: bool = False,
        placeholder: str = ""
    ) -> NumberLineEdit:
        row = self._next_row()
        self.grid.addWidget(QLabel(self.tr(label), self), row, 0)

        w = NumberLineEdit(allow_decimal=allow_decimal, placeholder=placeholder, parent=self)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.grid.addWidget(w, row, 1)

        err = QLabel("", self)
        err.setStyleSheet(ERROR_STYLE)
        self.grid.addWidget(err, row, 2)

        self.fields[key] = w
        self._errors[key] = err
        return w

    def values(self) -> dict[str, object]:
        return {k: w.value() for k, w in self.fields.items()}

    def show_errors(self, errors: dict[str, str]) -> None:
        for key, label in self._errors.items():
            label.setText(self.tr(errors.get(key, "")))

    def error_text(self, key: str) -> str:
        return self._errors[key].text()
