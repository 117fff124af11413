"""FIFO buffer of raw random.org integers with a growing refill size.

random.org asks clients to fetch numbers in blocks rather than one request
per number. The buffer over-fetches, keeps leftovers for later calls, and
grows its refill size after every refill so a busy caller needs fewer
requests over time.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# Fetches exactly ``n`` raw integers, or returns None on failure.
FetchFn = Callable[[int], Optional[list[int]]]


class IntegerBuffer:
    """Raw integers fetched ahead of need.

    Args:
        fetch: Callable returning ``n`` raw integers, or ``None`` on failure.
        initial_batch_size: Minimum number of integers per refill.
        growth_factor: Multiplier applied to the batch size after every
            successful refill.
        max_batch_size: Upper bound on a single fetch and on the batch size.
    """

    def __init__(
        self,
        fetch: FetchFn,
        initial_batch_size: int = 32,
        growth_factor: float = 1.5,
        max_batch_size: int = 10_000,
    ) -> None:
        self._fetch = fetch
        self._values: deque[int] = deque()
        self.batch_size = min(initial_batch_size, max_batch_size)
        self.growth_factor = growth_factor
        self.max_batch_size = max_batch_size
        self.refill_count = 0

    def __len__(self) -> int:
        return len(self._values)

    def take(self, count: int) -> list[int] | None:
        """Remove and return the next *count* raw integers.

        Refills first when fewer than *count* are buffered. Returns ``None``
        if the buffer still holds too few after the refill; integers already
        buffered stay available.
        """
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        if len(self._values) < count:
            self.refill(count - len(self._values))
        if len(self._values) < count:
            return None
        return [self._values.popleft() for _ in range(count)]

    def refill(self, shortfall: int = 0) -> bool:
        """Fetch ``max(shortfall, batch_size)`` integers in capped chunks.

        Integers from chunks that succeeded are kept even when a later
        chunk fails. A short read ends the refill early. Returns True if
        any integers were added.
        """
        wanted = max(shortfall, self.batch_size)
        logger.debug(
            "Refilling buffer: %d wanted, %d buffered, batch size %d",
            wanted,
            len(self._values),
            self.batch_size,
        )

        fetched = 0
        while fetched < wanted:
            chunk = min(wanted - fetched, self.max_batch_size)
            values = self._fetch(chunk)
            if values is None:
                logger.warning(
                    "Buffer refill failed with %d of %d integers fetched",
                    fetched,
                    wanted,
                )
                break
            self._values.extend(values)
            fetched += len(values)
            if len(values) < chunk:
                logger.warning(
                    "Short read from random.org: asked for %d, got %d",
                    chunk,
                    len(values),
                )
                break

        if not fetched:
            return False

        self.refill_count += 1
        self.batch_size = min(
            int(self.batch_size * self.growth_factor), self.max_batch_size
        )
        logger.debug(
            "Buffer refilled (%d refills); next batch size %d",
            self.refill_count,
            self.batch_size,
        )
        return True

    def clear(self) -> None:
        self._values.clear()
