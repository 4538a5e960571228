# tests/conftest.py

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeView:
    """Records what a controller pushes to its field."""

    def __init__(self):
        self.text = ""
        self.caret = None
        self.displays = []

    def set_display(self, text):
        self.text = text
        self.displays.append(text)

    def set_caret(self, offset):
        self.caret = offset


class ManualScheduler:
    """Holds deferred callbacks until the test runs them, like a render frame that has not happened yet."""

    def __init__(self):
        self.pending = []

    def __call__(self, callback):
        self.pending.append(callback)

    def run_all(self):
        pending, self.pending = self.pending, []
        return [callback() for callback in pending]


@pytest.fixture(scope="session")
def qapp():
    """
    One QApplication for the whole session, on the offscreen platform so the
    widget tests run headless.
    """
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def view():
    return FakeView()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def published():
    """List collecting every value a controller publishes."""
    return []


@pytest.fixture
def make_controller(view, scheduler, published):
    from numberinput.controller import FieldController

    def factory(value=None, allow_decimal=False):
        return FieldController(view, published.append, value, allow_decimal=allow_decimal, scheduler=scheduler)

    return factory
