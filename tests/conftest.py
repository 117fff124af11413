"""Shared fixtures: test settings, a respx router for random.org, a client."""

from __future__ import annotations

import logging
import os
from itertools import cycle, islice
from typing import Callable, Iterable

import httpx
import pytest
import respx

import randomorg
from randomorg.client import RAND_MAX, RAND_MIN, RandomOrgClient
from randomorg.config import RandomOrgSettings

BASE_URL = "https://www.random.org"


def integers_responder(values: Iterable[int]) -> Callable[[httpx.Request], httpx.Response]:
    """respx side effect answering /integers/ with exactly ``num`` lines.

    Values are taken from *values* in order, cycling when exhausted.
    """
    source = cycle(list(values))

    def _respond(request: httpx.Request) -> httpx.Response:
        num = int(request.url.params["num"])
        body = "".join(f"{value}\n" for value in islice(source, num))
        return httpx.Response(200, text=body)

    return _respond


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep developer environment variables and log files out of tests."""
    for name in list(os.environ):
        if name.startswith("RANDOMORG_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("RANDOMORG_LOG_DIR", str(tmp_path / "logs"))
    yield
    randomorg.reset_default_client()


@pytest.fixture
def settings() -> RandomOrgSettings:
    return RandomOrgSettings(
        base_url=BASE_URL,
        max_retries=1,
        backoff_base=0,
        backoff_max=0,
        delay_min_seconds=0,
        delay_max_seconds=0,
        respect_quota=False,
    )


@pytest.fixture
def router():
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def client(settings: RandomOrgSettings):
    with RandomOrgClient(settings) as c:
        yield c


@pytest.fixture
def extremes_route(router):
    """/integers/ answering with alternating RAND_MIN, RAND_MAX."""
    return router.get("/integers/").mock(
        side_effect=integers_responder([RAND_MIN, RAND_MAX])
    )


@pytest.fixture
def respond_integers():
    """Factory for /integers/ side effects (see :func:`integers_responder`)."""
    return integers_responder


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger after a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
