from __future__ import annotations

from datetime import datetime

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow, QPlainTextEdit, QSplitter, QToolBar, QVBoxLayout, QWidget
)

from numberinput.app.application import VISIBLE_APP_NAME
from numberinput.app.state import SAMPLE_LISTING, ListingModel, PriceRangeModel, Store
from numberinput.app.ui.panels.listing import ListingPanel
from numberinput.app.ui.panels.price_filter import PriceFilterPanel
from numberinput.core import group, render_value


def format_value(value) -> str:
    """Grouped text for the console, "-" for no value."""
    if value is None:
        return "-"
    return group(render_value(value, allow_decimal=isinstance(value, float)))


class Console(QPlainTextEdit):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)

    def _log(self, level: str, msg: str) -> None:
        self.appendPlainText(f"{datetime.now().strftime('%d.%m.%Y %H:%M:%S')} [{level}] {msg}")

    def info(self, msg: str) -> None:
        self._log("info", msg)

    def warn(self, msg: str) -> None:
        self._log("warn", msg)


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None):
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(900, 600)

        # Global store
        self.store = store or Store()

        central = QWidget(self)
        v = QVBoxLayout(central)
        split = QSplitter(Qt.Orientation.Vertical, central)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        forms = QWidget(split)
        h = QVBoxLayout(forms)
        self.listing_panel = ListingPanel(self.store, parent=forms)
        self.filter_panel = PriceFilterPanel(self.store, parent=forms)
        h.addWidget(self.listing_panel)
        h.addWidget(self.filter_panel)

        self.console = Console(split)
        split.addWidget(forms)
        split.addWidget(self.console)
        split.setStretchFactor(0, 1)
        split.setStretchFactor(1, 0)
        self.setCentralWidget(central)

        self._build_toolbar()

        self.store.listing_changed.connect(self._log_listing)
        self.store.price_range_changed.connect(self._log_price_range)

    def _build_toolbar(self) -> None:
        tb = QToolBar(self.tr("Listing"), self)
        self.addToolBar(tb)

        self.act_load = QAction(self.tr("Load sample"), self)
        self.act_load.triggered.connect(self.load_sample)
        tb.addAction(self.act_load)

        self.act_clear = QAction(self.tr("Clear"), self)
        self.act_clear.triggered.connect(self.clear)
        tb.addAction(self.act_clear)

    def load_sample(self) -> None:
        self.store.load_listing(SAMPLE_LISTING)
        self.console.info(self.tr("Sample listing loaded."))

    def clear(self) -> None:
        self.store.reset_listing()
        self.store.reset_price_range()
        self.console.info(self.tr("Form cleared."))

    def _log_listing(self, listing: ListingModel) -> None:
        parts = [f"{key}={format_value(getattr(listing, key))}" for key in ListingModel.field_names()]
        self.console.info(", ".join(parts))
        for key, msg in self.store.listing_errors().items():
            self.console.warn(f"{key}: {msg}")

    def _log_price_range(self, price_range: PriceRangeModel) -> None:
        self.console.info(
            f"price range {format_value(price_range.min_price)} - {format_value(price_range.max_price)}"
        )
        for key, msg in self.store.price_range_errors().items():
            self.console.warn(f"{key}: {msg}")
