"""Shared fixtures for pres tests."""

import pytest

from pres import PresenterRegistry


class ViewContext:
    """Stand-in for a template rendering context."""

    def __init__(self, name: str = "view"):
        self.name = name


@pytest.fixture
def registry():
    """A fresh registry so tests never see each other's presenters."""
    return PresenterRegistry()


@pytest.fixture
def view_context():
    return ViewContext()
