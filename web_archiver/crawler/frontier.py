"""
Frontier (FIFO queue of URLs awaiting a visit) and visited-set bookkeeping.
"""
from __future__ import annotations

from collections import deque
from typing import AbstractSet, Deque, Iterable, Set

__all__ = ("should_crawl", "Frontier")


def should_crawl(url: str, visited: AbstractSet[str]) -> bool:
    """True if *url* has not been dispatched yet."""
    return url not in visited


class Frontier:
    """
    Queue of URLs to visit plus the set of URLs already dispatched.

    A URL is marked visited when it is popped for processing, before it is
    fetched, so a failing URL is attempted only once. Enqueueing checks the
    visited set only: a URL may sit in the queue several times, and every
    pop after the first one is a no-op for the caller.
    """

    def __init__(self, seeds: Iterable[str] = ()) -> None:
        self._queue: Deque[str] = deque(seeds)
        self.visited: Set[str] = set()

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def push(self, url: str) -> None:
        self._queue.append(url)

    def pop(self) -> str:
        """Remove and return the oldest URL; IndexError when the queue is empty."""
        return self._queue.popleft()

    def should_crawl(self, url: str) -> bool:
        return should_crawl(url, self.visited)

    def mark_visited(self, url: str) -> None:
        self.visited.add(url)

    def enqueue_new(self, urls: Iterable[str]) -> int:
        """Append every URL not yet visited to the tail; return how many were added."""
        added = 0
        for url in urls:
            if url not in self.visited:
                self._queue.append(url)
                added += 1
        return added
