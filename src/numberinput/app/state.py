from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace

from PySide6.QtCore import QObject, Signal

from numberinput.app.validation import validate_listing, validate_price_range
from numberinput.core import SemanticValue

logger = logging.getLogger(__name__)


@dataclass
class ListingModel:
    """Numeric details of one property listing. None means "not entered"."""
    price: SemanticValue = None
    bedrooms: SemanticValue = None
    bathrooms: SemanticValue = None
    land_size: SemanticValue = None
    building_size: SemanticValue = None
    room_size: SemanticValue = None
    floor: SemanticValue = None

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]


@dataclass
class PriceRangeModel:
    """Price bounds of the public listing filter."""
    min_price: SemanticValue = None
    max_price: SemanticValue = None


SAMPLE_LISTING = ListingModel(
    price=12_500_000,
    bedrooms=3,
    bathrooms=2,
    land_size=400,
    building_size=220,
    room_size=35.5,
    floor=12,
)


class Store(QObject):
    """Central state store with signals for form/field sync."""
    listing_changed = Signal(object)
    price_range_changed = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self.listing = ListingModel()
        self.price_range = PriceRangeModel()

    # ---- listing ----

    def set_listing_field(self, key: str, value: SemanticValue) -> None:
        if key not in ListingModel.field_names():
            raise KeyError(f"Listing has no field '{key}'.")
        self.listing = replace(self.listing, **{key: value})
        logger.debug(f"Listing field '{key}' set to {value!r}")
        self.listing_changed.emit(self.listing)

    def load_listing(self, model: ListingModel) -> None:
        self.listing = replace(model)
        logger.info("Listing loaded.")
        self.listing_changed.emit(self.listing)

    def reset_listing(self) -> None:
        self.listing = ListingModel()
        logger.info("Listing has been reset.")
        self.listing_changed.emit(self.listing)

    def listing_errors(self) -> dict[str, str]:
        return validate_listing(self.listing)

    # ---- price filter ----

    def set_price_range(self, min_price: SemanticValue, max_price: SemanticValue) -> None:
        self.price_range = PriceRangeModel(min_price=min_price, max_price=max_price)
        logger.debug(f"Price range set to {min_price!r} - {max_price!r}")
        self.price_range_changed.emit(self.price_range)

    def reset_price_range(self) -> None:
        self.set_price_range(None, None)

    def price_range_errors(self) -> dict[str, str]:
        return validate_price_range(self.price_range)
