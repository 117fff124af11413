"""High-level random.org client: integers, bytes, sequences and quota.

:class:`RandomOrgClient` ties the pieces together. Integers always come from
one buffer of raw values in random.org's full range, which are rescaled into
whatever bounds each call asks for. Every fetch goes through
:class:`~randomorg.client.http.RandomOrgHttp`, so network failures show up
as a logged warning and a ``None`` return value rather than an exception.

Invalid arguments (bounds outside the service range, inverted bounds,
oversized requests) raise ``ValueError``.
"""

from __future__ import annotations

import logging
import threading

import httpx

from randomorg.client.buffer import IntegerBuffer
from randomorg.client.http import RandomOrgHttp
from randomorg.client.models import (
    ByteRequest,
    IntegerQuery,
    IntegerRange,
    SequenceRange,
)
from randomorg.client.parsing import parse_integer_lines, parse_quota
from randomorg.client.rescale import RAND_MAX, RAND_MIN, rescale
from randomorg.config.settings import RandomOrgSettings

logger = logging.getLogger(__name__)

INTEGERS_PATH = "/integers/"
SEQUENCES_PATH = "/sequences/"
QUOTA_PATH = "/quota/"

# Daily allowance is 1,000,000 bits; 10,000 bits is one percent of it.
BITS_PER_PERCENT = 10_000


class RandomOrgClient:
    """Client for the random.org plain-text HTTP interface.

    Usage::

        with RandomOrgClient() as client:
            die = client.randnum(1, 6)
            key = client.randbyte(16)
    """

    def __init__(
        self,
        settings: RandomOrgSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or RandomOrgSettings()
        self.http = RandomOrgHttp(self.settings, http_client)
        self.buffer = IntegerBuffer(
            self._fetch_integers,
            initial_batch_size=self.settings.initial_batch_size,
            growth_factor=self.settings.batch_growth_factor,
            max_batch_size=self.settings.max_batch_size,
        )
        self._buffer_lock = threading.Lock()

    def __enter__(self) -> "RandomOrgClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    def _quota_allows_fetch(self) -> bool:
        if not self.settings.respect_quota:
            return True
        bits = self.quota_bits()
        if bits is None:
            logger.warning("Quota check failed; not fetching random data")
            return False
        if bits < 0:
            logger.warning(
                "random.org quota is overdrawn (%d bits); back off before retrying",
                bits,
            )
            return False
        return True

    def _fetch_integers(self, num: int) -> list[int] | None:
        """Fetch *num* raw integers in [RAND_MIN, RAND_MAX]."""
        query = IntegerQuery(num=num)
        if not self._quota_allows_fetch():
            return None
        text = self.http.get_text(INTEGERS_PATH, query.to_params())
        if text is None:
            return None
        try:
            values = parse_integer_lines(text)
        except ValueError:
            logger.warning("Bad integer data from random.org: %r", text[:200])
            return None
        out_of_range = [v for v in values if not RAND_MIN <= v <= RAND_MAX]
        if out_of_range:
            logger.warning(
                "random.org returned %d value(s) outside [%d, %d]",
                len(out_of_range),
                RAND_MIN,
                RAND_MAX,
            )
            return None
        logger.info("Fetched %d integers from random.org", len(values))
        return values

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def randnums(
        self,
        count: int,
        minimum: int = RAND_MIN,
        maximum: int = RAND_MAX,
    ) -> list[int] | None:
        """Return *count* integers in [*minimum*, *maximum*] (inclusive).

        Returns ``None`` if the buffer could not be refilled.
        """
        bounds = IntegerRange(minimum=minimum, maximum=maximum)
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")

        with self._buffer_lock:
            raw = self.buffer.take(count)
        if raw is None:
            return None
        return [rescale(value, bounds.minimum, bounds.maximum) for value in raw]

    def randnum(self, minimum: int = RAND_MIN, maximum: int = RAND_MAX) -> int | None:
        """Return one integer in [*minimum*, *maximum*], or ``None`` on failure."""
        values = self.randnums(1, minimum, maximum)
        return values[0] if values is not None else None

    def randbyte(self, length: int = 1) -> bytes | None:
        """Return *length* random bytes (at most 16,384), or ``None``."""
        request = ByteRequest(length=length)
        values = self.randnums(request.length, 0, 255)
        if values is None:
            return None
        return bytes(values)

    def randseq(self, minimum: int, maximum: int) -> list[int] | None:
        """Return every integer in [*minimum*, *maximum*] once, shuffled.

        The span is limited to 10,000 by random.org.
        """
        seq_range = SequenceRange(minimum=minimum, maximum=maximum)
        if not self._quota_allows_fetch():
            return None
        text = self.http.get_text(SEQUENCES_PATH, seq_range.to_params())
        if text is None:
            return None
        try:
            sequence = parse_integer_lines(text)
        except ValueError:
            logger.warning("Bad sequence data from random.org: %r", text[:200])
            return None
        if sorted(sequence) != list(range(seq_range.minimum, seq_range.maximum + 1)):
            logger.warning(
                "random.org sequence for [%d, %d] is not a permutation",
                seq_range.minimum,
                seq_range.maximum,
            )
            return None
        return sequence

    def quota_bits(self) -> int | None:
        """Bits of random data still available to this IP address.

        Can be negative once the allowance is overdrawn. Returns ``None`` when
        the request fails or the response has no number in it.
        """
        text = self.http.get_text(QUOTA_PATH, {"format": "plain"})
        if text is None:
            return None
        bits = parse_quota(text)
        if bits is None:
            logger.warning(
                "Bad data for %s: %r", self.http.url_for(QUOTA_PATH), text[:200]
            )
            return None
        logger.debug("random.org quota: %d bits", bits)
        return bits

    def checkbuf(self) -> int | None:
        """Percentage of the 1,000,000-bit allowance remaining.

        100 means the allowance is full; the value goes negative once it is
        overdrawn. Returns ``None`` when the quota could not be read.
        """
        bits = self.quota_bits()
        if bits is None:
            return None
        return int(bits / BITS_PER_PERCENT)
