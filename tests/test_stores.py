"""Tests for the in-memory CatalogStore.

Run with: pytest tests/test_stores.py -v
"""

import pytest

from streaming.domain import ContentId, Movie
from streaming.stores.interfaces import CatalogStore
from streaming.stores.memory_store import InMemoryCatalogStore


class TestInMemoryCatalogStore:
    """Tests for InMemoryCatalogStore."""

    def test_implements_interface(self):
        assert isinstance(InMemoryCatalogStore(), CatalogStore)

    def test_listings_are_copies(self, inception):
        store = InMemoryCatalogStore()
        store.add_content(inception)
        store.list_content().clear()
        assert store.list_content() == [inception]

    def test_increment_unregistered_raises_key_error(self, inception):
        with pytest.raises(KeyError):
            InMemoryCatalogStore().increment_watch_count(inception)

    def test_watch_counts_keyed_by_identity(self):
        store = InMemoryCatalogStore()
        first = Movie(id=ContentId(1), title="Twin", rating=3, duration=90)
        second = Movie(id=ContentId(1), title="Twin", rating=3, duration=90)
        store.add_content(first)
        store.add_content(second)
        store.increment_watch_count(first)
        assert store.watch_counts() == [(first, 1), (second, 0)]

    def test_get_content_missing_returns_none(self):
        assert InMemoryCatalogStore().get_content(ContentId(5)) is None
