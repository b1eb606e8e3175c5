"""
URL frontier for one crawl: FIFO of pending URLs plus the visited set,
bounded by the page budget.

All mutating methods are synchronous and never yield to the event loop, so on
a single asyncio loop each of them runs atomically with respect to the other
workers. ``claim``/``release`` add in-flight accounting so idle workers wait
for busy ones instead of quitting while more links may still arrive.
"""
from __future__ import annotations

import asyncio
from collections import deque
from typing import Deque, Optional, Set


class Frontier:
    """Shared queue + visited set for the workers of one crawl."""

    def __init__(self, start_url: str, page_budget: int) -> None:
        self.page_budget = page_budget
        self.visited: Set[str] = set()
        self._queue: Deque[str] = deque([start_url])
        self._queued: Set[str] = {start_url}
        self._in_flight = 0
        self._closed = False
        self._changed = asyncio.Condition()

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def in_flight(self) -> int:
        return self._in_flight

    @property
    def closed(self) -> bool:
        return self._closed

    def try_claim_next(self) -> Optional[str]:
        """Pop the next unvisited URL and mark it visited, or return None."""
        while self._queue and len(self.visited) < self.page_budget:
            url = self._queue.popleft()
            self._queued.discard(url)
            if url in self.visited:
                continue
            self.visited.add(url)
            return url
        return None

    def offer(self, url: str) -> bool:
        """Enqueue *url* if it is new and the budget leaves room. No-op otherwise."""
        if url in self.visited or url in self._queued:
            return False
        if len(self.visited) + len(self._queue) >= self.page_budget:
            return False
        self._queue.append(url)
        self._queued.add(url)
        return True

    def is_exhausted(self) -> bool:
        return not self._queue or len(self.visited) >= self.page_budget

    async def claim(self) -> Optional[str]:
        """
        Claim the next URL for a worker.

        Waits while the queue is empty but other workers are still processing
        pages. Returns None once nothing is queued or in flight, the budget is
        spent, or the frontier was closed.
        """
        async with self._changed:
            while not self._closed:
                url = self.try_claim_next()
                if url is not None:
                    self._in_flight += 1
                    return url
                if self._in_flight == 0 or len(self.visited) >= self.page_budget:
                    return None
                await self._changed.wait()
            return None

    async def release(self) -> None:
        """Mark one claimed URL as finished and wake waiting workers."""
        async with self._changed:
            self._in_flight -= 1
            self._changed.notify_all()

    async def close(self) -> None:
        """Stop handing out URLs; claims in progress return None."""
        async with self._changed:
            self._closed = True
            self._changed.notify_all()
