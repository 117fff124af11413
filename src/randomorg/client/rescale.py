"""Linear rescaling of raw random.org integers into caller bounds.

random.org is always asked for integers in its widest range,
[RAND_MIN, RAND_MAX], so one buffered batch can serve requests for any
bounds. Each raw value is then mapped into the requested range.
"""

from __future__ import annotations

RAND_MIN = -1_000_000_000
RAND_MAX = 1_000_000_000

_SOURCE_SPAN = RAND_MAX - RAND_MIN + 1


def rescale(raw: int, minimum: int, maximum: int) -> int:
    """Map *raw* from [RAND_MIN, RAND_MAX] into [*minimum*, *maximum*].

    Python integers are arbitrary precision and ``//`` floors, so the result
    is exact for any bounds. Both ranges are treated as half-open intervals
    of equal-width buckets, which keeps ``raw == RAND_MAX`` inside the
    target range.

    Raises:
        ValueError: *raw* is outside the source range, or *minimum* is
            greater than *maximum*.
    """
    if not RAND_MIN <= raw <= RAND_MAX:
        raise ValueError(f"raw value {raw} outside [{RAND_MIN}, {RAND_MAX}]")
    if minimum > maximum:
        raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")

    target_span = maximum - minimum + 1
    return minimum + (raw - RAND_MIN) * target_span // _SOURCE_SPAN
