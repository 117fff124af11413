"""httpx-based transport for the random.org plain-text endpoints.

Every random.org call is a GET that returns a short ``text/plain`` body.
Transient HTTP and transport errors are retried with exponential backoff via
tenacity; once retries are exhausted the failure is logged and ``None`` is
returned so callers can treat it as a sentinel -- nothing here raises on
network errors.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

import httpx
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from randomorg.client.rate_limiter import wait_between_requests
from randomorg.config.settings import RandomOrgSettings

logger = logging.getLogger(__name__)


def _is_transient(exc: BaseException) -> bool:
    """Transport failures and 5xx responses are worth retrying.

    random.org answers refusals (bad parameters, exhausted quota) with 4xx
    statuses; repeating those only adds load.
    """
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return isinstance(exc, httpx.TransportError)


def build_retrying(settings: RandomOrgSettings) -> Retrying:
    """Create the tenacity controller used for every request."""
    return Retrying(
        stop=stop_after_attempt(settings.max_retries),
        wait=wait_exponential(
            multiplier=1, min=settings.backoff_base, max=settings.backoff_max
        ),
        retry=retry_if_exception(_is_transient),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def _get(client: httpx.Client, url: str, params: dict[str, Any] | None) -> str:
    response = client.get(url, params=params)
    response.raise_for_status()
    return response.text


def fetch_text(
    client: httpx.Client,
    url: str,
    params: dict[str, Any] | None,
    retrying: Retrying,
) -> str | None:
    """GET *url* and return the response body, or ``None`` on failure."""
    try:
        return retrying(_get, client, url, params)
    except httpx.HTTPStatusError as exc:
        response = exc.response
        # random.org explains refusals (e.g. exhausted quota) in the body
        detail = response.text.strip().splitlines()[0] if response.text.strip() else ""
        logger.warning(
            "HTTP GET failed: %d %s for %s %s",
            response.status_code,
            response.reason_phrase,
            url,
            detail,
        )
        return None
    except httpx.TransportError as exc:
        logger.warning("HTTP GET failed for %s: %s", url, exc)
        return None
    except httpx.RequestError as exc:
        # Redirect loops, undecodable bodies and other non-transport errors
        logger.warning("HTTP GET failed for %s: %s: %s", url, type(exc).__name__, exc)
        return None


class RandomOrgHttp:
    """Serialised, paced access to one random.org host.

    random.org asks automated clients not to issue simultaneous requests, so
    a lock guards every GET, and a randomized pause (see
    :mod:`randomorg.client.rate_limiter`) separates consecutive ones.

    The ``httpx.Client`` is closed by :meth:`close` only when it was created
    here; an injected client belongs to the caller.
    """

    def __init__(
        self,
        settings: RandomOrgSettings,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            headers={
                "User-Agent": settings.full_user_agent,
                "Accept": "text/plain",
            },
            timeout=httpx.Timeout(settings.timeout_seconds),
            follow_redirects=True,
        )
        self._retrying = build_retrying(settings)
        self._lock = threading.Lock()
        self._has_requested = False
        self.request_count = 0

    def url_for(self, path: str) -> str:
        return f"{self.settings.base_url.rstrip('/')}/{path.lstrip('/')}"

    def get_text(self, path: str, params: dict[str, Any] | None = None) -> str | None:
        """GET *path* on the configured host; ``None`` on failure."""
        url = self.url_for(path)
        with self._lock:
            if self._has_requested:
                wait_between_requests(
                    self.settings.delay_min_seconds,
                    self.settings.delay_max_seconds,
                )
            self._has_requested = True
            logger.debug("GET %s params=%s", url, params)
            text = fetch_text(self._client, url, params, self._retrying)
            if text is not None:
                self.request_count += 1
            return text

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
