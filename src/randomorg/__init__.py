"""Retrieve random numbers and data from random.org.

The module-level functions share one lazily created client, and with it one
integer buffer and one HTTP session::

    import randomorg

    number = randomorg.randnum(0, 10)
    octets = randomorg.randbyte(4)

Network failures are logged and reported as ``None``; invalid arguments raise
``ValueError``.
"""

from __future__ import annotations

import threading

from randomorg.client import RAND_MAX, RAND_MIN, RandomOrgClient
from randomorg.config import RandomOrgSettings
from randomorg.version import __version__

__all__ = [
    "RAND_MAX",
    "RAND_MIN",
    "RandomOrgClient",
    "RandomOrgSettings",
    "__version__",
    "checkbuf",
    "get_default_client",
    "quota_bits",
    "randbyte",
    "randnum",
    "randnums",
    "randseq",
    "reset_default_client",
]

_default_client: RandomOrgClient | None = None
_default_lock = threading.Lock()


def get_default_client() -> RandomOrgClient:
    """Return the shared client, creating it from settings on first use."""
    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = RandomOrgClient()
        return _default_client


def reset_default_client(client: RandomOrgClient | None = None) -> None:
    """Close the shared client and replace it with *client* (or nothing)."""
    global _default_client
    with _default_lock:
        if _default_client is not None and _default_client is not client:
            _default_client.close()
        _default_client = client


def randnum(minimum: int = RAND_MIN, maximum: int = RAND_MAX) -> int | None:
    return get_default_client().randnum(minimum, maximum)


def randnums(
    count: int, minimum: int = RAND_MIN, maximum: int = RAND_MAX
) -> list[int] | None:
    return get_default_client().randnums(count, minimum, maximum)


def randbyte(length: int = 1) -> bytes | None:
    return get_default_client().randbyte(length)


def randseq(minimum: int, maximum: int) -> list[int] | None:
    return get_default_client().randseq(minimum, maximum)


def quota_bits() -> int | None:
    return get_default_client().quota_bits()


def checkbuf() -> int | None:
    return get_default_client().checkbuf()
