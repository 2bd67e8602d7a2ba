"""
Host URL Store

In-memory mapping of hostname -> set of known URLs, shared by the intake
worker and the query API. Every access goes through one lock.
"""

import threading
from contextlib import contextmanager
from typing import Iterable, Iterator


class StorePoisonedError(RuntimeError):
    """Raised when the store was left in an unknown state by a failed call."""


class HostUrlStore:
    """
    Per-host URL set storage.

    Reads and writes are mutually exclusive. If an exception escapes a
    critical section the store is poisoned and refuses further access.
    """

    def __init__(self):
        self._hosts: dict[str, set[str]] = {}
        self._lock = threading.Lock()
        self._poisoned = False

    @contextmanager
    def _locked(self) -> Iterator[dict[str, set[str]]]:
        with self._lock:
            if self._poisoned:
                raise StorePoisonedError("URL store is poisoned")
            try:
                yield self._hosts
            except Exception:
                self._poisoned = True
                raise

    @property
    def is_poisoned(self) -> bool:
        return self._poisoned

    def insert_unique(self, host: str, urls: Iterable[str]) -> list[str]:
        """
        Insert URLs for a host and return the ones that were not known before.

        Args:
            host: Hostname bucket
            urls: Candidate URLs

        Returns:
            The subset of candidates absent before this call
        """
        with self._locked() as hosts:
            known = hosts.get(host)

            if known is None:
                known = set(urls)
                hosts[host] = known
                return list(known)

            unique_urls = []
            for url in urls:
                if url not in known:
                    known.add(url)
                    unique_urls.append(url)
            return unique_urls

    def list_urls(self, host: str) -> list[str]:
        """Return all URLs known for host (empty if the host was never crawled)."""
        with self._locked() as hosts:
            return list(hosts.get(host, ()))

    def count(self, host: str) -> int:
        """Return number of URLs known for host."""
        with self._locked() as hosts:
            return len(hosts.get(host, ()))

    def get_domains(self, limit: int = 100) -> list[tuple[str, int]]:
        """Get hostnames with their URL counts, largest first."""
        with self._locked() as hosts:
            counts = [(host, len(urls)) for host, urls in hosts.items()]
        counts.sort(key=lambda item: (-item[1], item[0]))
        return counts[:limit]

    def get_stats(self) -> dict:
        """Get store statistics."""
        with self._locked() as hosts:
            return {
                "domains": len(hosts),
                "total_urls": sum(len(urls) for urls in hosts.values()),
            }
