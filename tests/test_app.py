import pytest
from PySide6.QtTest import QTest

from numberinput.app.state import SAMPLE_LISTING, ListingModel, PriceRangeModel, Store
from numberinput.app.validation import POSITIVE, RANGE_ORDER, REQUIRED, WHOLE, validate_listing, validate_price_range


# --- validation ---

def test_empty_listing_requires_price():
    assert validate_listing(ListingModel()) == {"price": REQUIRED}


def test_sample_listing_is_valid():
    assert validate_listing(SAMPLE_LISTING) == {}


def test_non_positive_values_are_rejected():
    errors = validate_listing(ListingModel(price=0, bedrooms=0, room_size=0.0))
    assert errors == {"price": POSITIVE, "bedrooms": POSITIVE, "room_size": POSITIVE}


def test_floor_must_be_whole():
    assert validate_listing(ListingModel(price=1, floor=2.5)) == {"floor": WHOLE}
    assert validate_listing(ListingModel(price=1, floor=0)) == {}


def test_price_range_order():
    assert validate_price_range(PriceRangeModel(5_000_000, 1_000_000)) == {"max_price": RANGE_ORDER}
    assert validate_price_range(PriceRangeModel(1_000_000, None)) == {}
    assert validate_price_range(PriceRangeModel(0, None)) == {"min_price": POSITIVE}


# --- store ---

def test_store_emits_on_field_change(qapp):
    store = Store()
    seen = []
    store.listing_changed.connect(seen.append)

    store.set_listing_field("price", 12_500_000)
    assert store.listing.price == 12_500_000
    assert seen[-1].price == 12_500_000


def test_store_rejects_unknown_field(qapp):
    with pytest.raises(KeyError):
        Store().set_listing_field("parking", 2)


def test_store_load_copies_model(qapp):
    store = Store()
    store.load_listing(SAMPLE_LISTING)
    store.set_listing_field("price", 1)
    assert SAMPLE_LISTING.price == 12_500_000


# --- panels / window ---

@pytest.fixture
def window(qapp):
    from numberinput.app.ui.main_window import MainWindow

    win = MainWindow()
    win.show()
    yield win
    win.close()
    win.deleteLater()


def test_typing_into_form_updates_store(window):
    price = window.listing_panel.fields["price"]
    QTest.keyClicks(price, "12500000")
    QTest.qWait(20)

    assert price.text() == "12,500,000"
    assert window.store.listing.price == 12_500_000
    assert price.cursorPosition() == len("12,500,000")
    assert window.listing_panel.error_text("price") == ""


def test_store_echo_keeps_trailing_point(window):
    room = window.listing_panel.fields["room_size"]
    QTest.keyClicks(room, "35.")
    assert room.text() == "35."
    assert window.store.listing.room_size == 35.0
    QTest.keyClicks(room, "5")
    assert window.store.listing.room_size == 35.5


def test_load_sample_and_clear(window):
    window.load_sample()
    fields = window.listing_panel.fields
    assert fields["price"].text() == "12,500,000"
    assert fields["room_size"].text() == "35.5"
    assert fields["floor"].text() == "12"

    window.clear()
    assert all(w.text() == "" for w in fields.values())
    assert window.listing_panel.error_text("price") == REQUIRED


def test_price_filter_reports_inverted_range(window):
    panel = window.filter_panel
    QTest.keyClicks(panel.fields["min_price"], "5000000")
    QTest.keyClicks(panel.fields["max_price"], "1000000")

    assert window.store.price_range == PriceRangeModel(5_000_000, 1_000_000)
    assert panel.error_text("max_price") == RANGE_ORDER
    assert panel.fields["min_price"].text() == "5,000,000"
