from collections import deque
from typing import Deque, Iterable, Optional, Set


class Frontier:
    """
    Breadth-first queue of URLs for one site's crawl.

    A URL is accepted at most once: `offer()` ignores anything already queued
    or already handed out by `next()`. URLs come back in the order they were
    first offered.
    """

    def __init__(self, seeds: Iterable[str] = ()):
        self._pending: Deque[str] = deque()
        self._seen: Set[str] = set()
        self._visited: Set[str] = set()
        for url in seeds:
            self.offer(url)

    def offer(self, url: str) -> bool:
        """Queue `url` unless it was offered before. Returns True if queued."""
        if url in self._seen:
            return False
        self._seen.add(url)
        self._pending.append(url)
        return True

    def next(self) -> Optional[str]:
        """Pop the earliest pending URL and mark it visited; None when empty."""
        if not self._pending:
            return None
        url = self._pending.popleft()
        self._visited.add(url)
        return url

    def is_empty(self) -> bool:
        return not self._pending

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def visited_count(self) -> int:
        return len(self._visited)
