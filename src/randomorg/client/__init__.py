"""random.org client package.

Public entry point is :class:`RandomOrgClient`; the submodules hold the
transport, buffer, rescaling and request-validation pieces it is built from.
"""

from .buffer import IntegerBuffer
from .http import RandomOrgHttp
from .rescale import RAND_MAX, RAND_MIN, rescale
from .service import RandomOrgClient

__all__ = [
    "RAND_MAX",
    "RAND_MIN",
    "IntegerBuffer",
    "RandomOrgClient",
    "RandomOrgHttp",
    "rescale",
]
