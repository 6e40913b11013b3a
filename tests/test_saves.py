from __future__ import annotations

import itertools

import pytest

from pawcast.core.abstractions import CurrentUser
from pawcast.core.saves import SavedItemError, SavedItemStore, SessionFactory, detect_driver

ALICE = CurrentUser(id="alice", email="alice@example.com")
BOB = CurrentUser(id="bob")


@pytest.fixture()
def store(tmp_path) -> SavedItemStore:
    ticks = itertools.count(1)
    clock = lambda: f"2024-05-01T00:00:{next(ticks):02d}+00:00"  # noqa: E731
    return SavedItemStore(SessionFactory(f"sqlite:///{tmp_path / 'saves.db'}"), clock=clock)


def test_save_and_list(store: SavedItemStore) -> None:
    item = store.save(ALICE, "place", "ChIJ123", {"name": "남산공원", "rating": 4.6})

    [listed] = store.list_for(ALICE)
    assert listed.id == item.id
    assert listed.content_data == {"name": "남산공원", "rating": 4.6}
    assert listed.as_dict()["content_type"] == "place"
    assert "user_id" not in listed.as_dict()


def test_items_are_isolated_per_user(store: SavedItemStore) -> None:
    store.save(ALICE, "youtube", "vid1", {"title": "훈련법"})

    assert store.list_for(BOB) == []
    assert store.is_saved(ALICE, "youtube", "vid1")
    assert not store.is_saved(BOB, "youtube", "vid1")
    assert store.delete(BOB, "youtube", "vid1") is False
    assert store.is_saved(ALICE, "youtube", "vid1")


def test_saving_twice_is_idempotent(store: SavedItemStore) -> None:
    first = store.save(ALICE, "product", "p-1", {"title": "사료"})
    second = store.save(ALICE, "product", "p-1", {"title": "changed"})

    assert second.id == first.id
    assert len(store.list_for(ALICE)) == 1


def test_delete_matches_type_and_id(store: SavedItemStore) -> None:
    store.save(ALICE, "web", "shared-id", {})
    store.save(ALICE, "product", "shared-id", {})

    assert store.delete(ALICE, "web", "shared-id") is True
    assert [item.content_type for item in store.list_for(ALICE)] == ["product"]
    assert store.delete(ALICE, "web", "shared-id") is False


def test_list_is_newest_first(store: SavedItemStore) -> None:
    for content_id in ("a", "b", "c"):
        store.save(ALICE, "place", content_id, {})

    assert [item.content_id for item in store.list_for(ALICE)] == ["c", "b", "a"]


@pytest.mark.parametrize("content_type, content_id", [("video", "x"), ("", "x"), ("place", "")])
def test_invalid_items_are_rejected(store: SavedItemStore, content_type: str, content_id: str) -> None:
    with pytest.raises(SavedItemError):
        store.save(ALICE, content_type, content_id, {})


def test_driver_detection() -> None:
    assert detect_driver("sqlite:///tmp/x.db") == ("sqlite", "?")
    with pytest.raises(ValueError):
        detect_driver("postgres://localhost/db")
