"""Tests for the in-memory history store."""

from style_atelier.domain.models import StyledImage
from style_atelier.services.history import HistoryStore


def _entry(entry_id: str) -> StyledImage:
    return StyledImage(
        id=entry_id, url=f"data:image/png;base64,{entry_id}", prompt="p", timestamp=1
    )


def test_record_prepends_newest_first() -> None:
    store = HistoryStore()
    store.record(_entry("a"))
    store.record(_entry("b"))

    assert [entry.id for entry in store.entries()] == ["b", "a"]
    assert len(store) == 2


def test_record_keeps_duplicates() -> None:
    store = HistoryStore()
    entry = _entry("a")
    store.record(entry)
    store.record(entry)

    assert store.entries() == [entry, entry]


def test_get_returns_matching_entry_or_none() -> None:
    store = HistoryStore()
    store.record(_entry("a"))

    assert store.get("a") is not None
    assert store.get("missing") is None


def test_entries_returns_a_copy() -> None:
    store = HistoryStore()
    store.record(_entry("a"))

    store.entries().clear()

    assert len(store) == 1
