"""
Validation rules for the listing form and the price filter.

Returns a mapping of field name to message; an empty mapping means valid.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numberinput.app.state import ListingModel, PriceRangeModel

REQUIRED = "This field is required"
POSITIVE = "Must be a positive number"
WHOLE = "Must be a whole number"
NOT_NEGATIVE = "Must not be negative"
RANGE_ORDER = "Minimum price must not exceed maximum price"

OPTIONAL_POSITIVE_FIELDS = ("bedrooms", "bathrooms", "land_size", "building_size", "room_size")


def validate_listing(model: ListingModel) -> dict[str, str]:
    errors: dict[str, str] = {}

    if model.price is None:
        errors["price"] = REQUIRED
    elif model.price <= 0:
        errors["price"] = POSITIVE

    for key in OPTIONAL_POSITIVE_FIELDS:
        value = getattr(model, key)
        if value is not None and value <= 0:
            errors[key] = POSITIVE

    if model.floor is not None:
        if float(model.floor) != int(model.floor):
            errors["floor"] = WHOLE
        elif model.floor < 0:
            errors["floor"] = NOT_NEGATIVE

    return errors


def validate_price_range(model: PriceRangeModel) -> dict[str, str]:
    errors: dict[str, str] = {}

    for key in ("min_price", "max_price"):
        value = getattr(model, key)
        if value is not None and value <= 0:
            errors[key] = POSITIVE

    if not errors and model.min_price is not None and model.max_price is not None:
        if model.min_price > model.max_price:
            errors["max_price"] = RANGE_ORDER

    return errors
