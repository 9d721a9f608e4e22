"""Tests for the append-only recognition store."""

import threading

import pytest

from kudos_gateway.models.recognition import Visibility
from kudos_gateway.services.recognition_store import RecognitionStore

from conftest import make_recognition


def test_list_all_preserves_insertion_order():
    store = RecognitionStore()
    for i in (3, 1, 2):
        store.append(make_recognition(str(i), "1", Visibility.PUBLIC))
    assert [r.id for r in store.list_all()] == ["3", "1", "2"]
    assert len(store) == 3


def test_duplicate_id_rejected():
    store = RecognitionStore()
    store.append(make_recognition("1", "1", Visibility.PUBLIC))
    with pytest.raises(ValueError):
        store.append(make_recognition("1", "2", Visibility.PRIVATE))
    assert len(store) == 1


def test_list_all_returns_snapshot():
    store = RecognitionStore()
    store.append(make_recognition("1", "1", Visibility.PUBLIC))
    snapshot = store.list_all()
    store.append(make_recognition("2", "1", Visibility.PUBLIC))
    assert len(snapshot) == 1
    assert len(store.list_all()) == 2


def test_find_by_recipient_is_lazy_and_filtered():
    store = RecognitionStore()
    store.append(make_recognition("1", "a", Visibility.PUBLIC))
    store.append(make_recognition("2", "b", Visibility.PUBLIC))
    store.append(make_recognition("3", "a", Visibility.ANONYMOUS))

    found = store.find_by_recipient("a")
    assert not isinstance(found, list)
    assert [r.id for r in found] == ["1", "3"]
    assert list(store.find_by_recipient("nobody")) == []


def test_concurrent_appends_all_land():
    store = RecognitionStore()

    def writer(prefix):
        for i in range(200):
            store.append(make_recognition(f"{prefix}-{i}", "1", Visibility.PUBLIC))

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [r.id for r in store.list_all()]
    assert len(ids) == 800
    assert len(set(ids)) == 800
