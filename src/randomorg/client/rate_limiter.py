"""Centralized pacing for random.org requests.

Produces randomized delays between configurable min and max seconds so an
automated client does not hammer the service with back-to-back requests.
"""

from __future__ import annotations

import logging
import random
import time

logger = logging.getLogger(__name__)


def wait_between_requests(
    min_seconds: float = 0.0,
    max_seconds: float = 0.0,
) -> float:
    """Sleep for a random duration between min_seconds and max_seconds.

    A zero upper bound skips the sleep entirely.

    Args:
        min_seconds: Minimum delay in seconds.
        max_seconds: Maximum delay in seconds.

    Returns:
        The actual delay applied (useful for testing).
    """
    if max_seconds <= 0:
        return 0.0
    delay = random.uniform(min_seconds, max_seconds)
    logger.debug("Rate limit: waiting %.1fs", delay)
    time.sleep(delay)
    return delay
