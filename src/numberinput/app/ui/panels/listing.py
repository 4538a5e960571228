from __future__ import annotations

from PySide6.QtWidgets import QWidget

from numberinput.app.state import ListingModel, Store
from numberinput.app.ui.panels.base import BasePanel

# key, label, allow_decimal, placeholder
LISTING_FIELDS = [
    ("price", "Price (THB):", False, "5,000,000"),
    ("bedrooms", "Bedrooms:", False, "3"),
    ("bathrooms", "Bathrooms:", False, "2"),
    ("land_size", "Land size (sqw):", False, "400"),
    ("building_size", "Building size (sqm):", False, "200"),
    ("room_size", "Room size (sqm):", True, "35.5"),
    ("floor", "Floor:", False, "12"),
]


class ListingPanel(BasePanel):
    """
    Numeric details of a listing.

    Every field writes into the store as the user types. The store's echo comes
    straight back through `set_value`, which leaves the live text alone as long
    as it still means the same number.
    """
    TITLE = "Listing details"

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        for key, label, allow_decimal, placeholder in LISTING_FIELDS:
            w = self._add_number(key, label, allow_decimal=allow_decimal, placeholder=placeholder)
            w.value_changed.connect(lambda value, k=key: self.store.set_listing_field(k, value))

        self.store.listing_changed.connect(self._on_listing_changed)
        self._on_listing_changed(self.store.listing)

    def _on_listing_changed(self, listing: ListingModel) -> None:
        for key, w in self.fields.items():
            w.set_value(getattr(listing, key))
        self.show_errors(self.store.listing_errors())
