from __future__ import annotations

from PySide6.QtWidgets import QWidget

from numberinput.app.state import PriceRangeModel, Store
from numberinput.app.ui.panels.base import BasePanel


class PriceFilterPanel(BasePanel):
    """Minimum / maximum price of the public listing search."""
    TITLE = "Price range"

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        self._add_number("min_price", "Min. price:", placeholder="Min. price")
        self._add_number("max_price", "Max. price:", placeholder="Max. price")
        for w in self.fields.values():
            w.value_changed.connect(self._relay_changed)

        self.store.price_range_changed.connect(self._on_range_changed)
        self._on_range_changed(self.store.price_range)

    def _relay_changed(self, *_) -> None:
        self.store.set_price_range(
            self.fields["min_price"].value(),
            self.fields["max_price"].value(),
        )

    def _on_range_changed(self, price_range: PriceRangeModel) -> None:
        self.fields["min_price"].set_value(price_range.min_price)
        self.fields["max_price"].set_value(price_range.max_price)
        self.show_errors(self.store.price_range_errors())
