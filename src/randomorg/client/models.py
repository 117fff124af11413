"""Pydantic models for random.org request arguments.

Each model validates what a caller asked for and knows how to render itself
as the plain-text query string random.org expects. Invalid arguments raise
``pydantic.ValidationError``, which is a ``ValueError`` subclass.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from randomorg.client.rescale import RAND_MAX, RAND_MIN

MAX_INTEGERS_PER_REQUEST = 10_000
MAX_BYTES = 16_384
MAX_SEQUENCE_SPAN = 10_000


class IntegerRange(BaseModel):
    """Inclusive target bounds for rescaled integers."""

    minimum: int = Field(default=RAND_MIN, ge=RAND_MIN, le=RAND_MAX)
    maximum: int = Field(default=RAND_MAX, ge=RAND_MIN, le=RAND_MAX)

    @model_validator(mode="after")
    def bounds_ordered(self) -> "IntegerRange":
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum ({self.minimum}) must not exceed maximum ({self.maximum})"
            )
        return self


class IntegerQuery(BaseModel):
    """A single /integers/ request for raw values in the full range."""

    num: int = Field(ge=1, le=MAX_INTEGERS_PER_REQUEST)

    def to_params(self) -> dict[str, Any]:
        return {
            "num": self.num,
            "min": RAND_MIN,
            "max": RAND_MAX,
            "col": 1,
            "base": 10,
            "format": "plain",
            "rnd": "new",
        }


class ByteRequest(BaseModel):
    """Length of a requested random octet string."""

    length: int = Field(default=1, ge=1, le=MAX_BYTES)


class SequenceRange(BaseModel):
    """Inclusive bounds of a /sequences/ shuffle."""

    minimum: int = Field(ge=RAND_MIN, le=RAND_MAX)
    maximum: int = Field(ge=RAND_MIN, le=RAND_MAX)

    @model_validator(mode="after")
    def span_allowed(self) -> "SequenceRange":
        if self.maximum < self.minimum:
            raise ValueError("maximum must be greater than or equal to minimum")
        if self.maximum - self.minimum > MAX_SEQUENCE_SPAN:
            raise ValueError(
                f"random.org restricts sequences to a span of {MAX_SEQUENCE_SPAN}"
            )
        return self

    @property
    def size(self) -> int:
        return self.maximum - self.minimum + 1

    def to_params(self) -> dict[str, Any]:
        return {
            "min": self.minimum,
            "max": self.maximum,
            "col": 1,
            "format": "plain",
            "rnd": "new",
        }
