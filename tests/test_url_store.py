"""
URL Store Tests

Tests for per-host insert-if-new semantics, queries and lock discipline.
"""

import threading

import pytest

from hostcrawl.db import HostUrlStore, StorePoisonedError


def test_unseen_host_is_empty():
    store = HostUrlStore()
    assert store.list_urls("never.example") == []
    assert store.count("never.example") == 0


def test_first_insert_reports_all_new():
    store = HostUrlStore()
    new = store.insert_unique("example.com", {"http://example.com", "http://example.com/a"})
    assert sorted(new) == ["http://example.com", "http://example.com/a"]
    assert store.count("example.com") == 2


def test_insert_reports_only_absent_urls():
    store = HostUrlStore()
    store.insert_unique("example.com", ["http://example.com", "http://example.com/a"])

    new = store.insert_unique(
        "example.com", ["http://example.com/a", "http://example.com/b"]
    )

    assert new == ["http://example.com/b"]
    assert sorted(store.list_urls("example.com")) == [
        "http://example.com",
        "http://example.com/a",
        "http://example.com/b",
    ]


def test_insert_is_idempotent():
    store = HostUrlStore()
    assert store.insert_unique("example.com", ["http://example.com/x"]) == [
        "http://example.com/x"
    ]
    assert store.insert_unique("example.com", ["http://example.com/x"]) == []
    assert store.count("example.com") == 1


def test_membership_is_exact_string():
    store = HostUrlStore()
    store.insert_unique("example.com", ["http://example.com/a"])
    new = store.insert_unique(
        "example.com", ["http://example.com/a/", "http://example.com/a?x=1"]
    )
    assert sorted(new) == ["http://example.com/a/", "http://example.com/a?x=1"]
    assert store.count("example.com") == 3


def test_hosts_are_isolated():
    store = HostUrlStore()
    store.insert_unique("example.com", ["http://example.com/a"])
    assert store.insert_unique("other.com", ["http://example.com/a"]) == [
        "http://example.com/a"
    ]
    assert store.count("example.com") == 1
    assert store.count("other.com") == 1


def test_list_urls_returns_copy():
    store = HostUrlStore()
    store.insert_unique("example.com", ["http://example.com/a"])
    urls = store.list_urls("example.com")
    urls.append("http://example.com/injected")
    assert store.count("example.com") == 1


def test_get_domains_and_stats():
    store = HostUrlStore()
    store.insert_unique("a.com", ["http://a.com/1"])
    store.insert_unique("b.com", ["http://b.com/1", "http://b.com/2"])

    assert store.get_domains() == [("b.com", 2), ("a.com", 1)]
    assert store.get_domains(limit=1) == [("b.com", 2)]
    assert store.get_stats() == {"domains": 2, "total_urls": 3}


def test_failed_insert_poisons_store():
    store = HostUrlStore()
    store.insert_unique("example.com", ["http://example.com"])

    def broken_urls():
        yield "http://example.com/a"
        raise ValueError("broken candidate source")

    with pytest.raises(ValueError):
        store.insert_unique("example.com", broken_urls())

    assert store.is_poisoned is True
    with pytest.raises(StorePoisonedError):
        store.count("example.com")
    with pytest.raises(StorePoisonedError):
        store.insert_unique("example.com", ["http://example.com/b"])


def test_concurrent_reads_never_see_partial_inserts():
    store = HostUrlStore()
    batch_size = 10
    batches = 200
    observed = []
    done = threading.Event()

    def writer():
        for i in range(batches):
            store.insert_unique(
                "example.com",
                [f"http://example.com/{i}/{j}" for j in range(batch_size)],
            )
        done.set()

    def reader():
        while not done.is_set():
            observed.append(store.count("example.com"))
        observed.append(store.count("example.com"))

    threads = [threading.Thread(target=writer)] + [
        threading.Thread(target=reader) for _ in range(3)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(count % batch_size == 0 for count in observed)
    assert store.count("example.com") == batch_size * batches


def test_count_never_decreases_for_single_reader():
    store = HostUrlStore()
    counts = []
    done = threading.Event()

    def writer():
        for i in range(500):
            store.insert_unique("example.com", [f"http://example.com/{i}"])
        done.set()

    t = threading.Thread(target=writer)
    t.start()
    while not done.is_set():
        counts.append(store.count("example.com"))
    t.join()

    assert counts == sorted(counts)
