"""
Module: conftest.py

Author: Michael Economou
Date: 2026-03-02

Global pytest configuration and fixtures for the listboard test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os

# Qt must not try to open a display while tests run
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from listboard.app.services.list_view_model import ListViewModel
from listboard.models.item_group import CollectionStore


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI tests on CI."""
    _ = session
    _ = config

    if "CI" in os.environ or "GITHUB_ACTIONS" in os.environ:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)


@pytest.fixture
def fruit_data():
    """Fixture providing the built-in fruit groups as plain lists."""
    return [
        ["apple", "banana", "orange", "blueberry"],
        ["grape", "melon", "kiwi", "strawberry"],
        ["pear", "pineapple", "mango", "cherry"],
        ["fig", "date", "plum", "papaya"],
    ]


@pytest.fixture
def fruit_store(fruit_data):
    """Fixture providing a CollectionStore over the fruit groups."""
    return CollectionStore.from_sequences(fruit_data)


@pytest.fixture
def view_model(fruit_store):
    """Fixture providing a ListViewModel on the fruit store, group 0 selected."""
    return ListViewModel(fruit_store)


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication for all GUI tests."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
