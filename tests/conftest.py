"""Pytest configuration and shared fixtures."""

import pytest

from book_catalog.models import BookFields
from book_catalog.store import CatalogStore


@pytest.fixture
def store() -> CatalogStore:
    """Fresh, empty catalog."""
    return CatalogStore()


@pytest.fixture
def dune() -> BookFields:
    return BookFields(title="Dune", author="Herbert", year=1965)


@pytest.fixture
def neuromancer() -> BookFields:
    return BookFields(title="Neuromancer", author="Gibson", year=1984)
