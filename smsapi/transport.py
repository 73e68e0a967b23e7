"""HTTP transport shared by the REST providers.

Every request ends in one of three values: the request never completed
(``TransportFailure``), the server answered outside 2xx (``HttpError``), or a
body came back (``RawBody``). The body is handed on untouched, parsing is
left to the provider's translator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Union

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_REDIRECTS = 10


@dataclass(frozen=True, slots=True)
class TransportFailure:
    """The request could not be sent or completed."""

    reason: str


@dataclass(frozen=True, slots=True)
class HttpError:
    """The server replied with a status outside 200-299."""

    status_code: int


@dataclass(frozen=True, slots=True)
class RawBody:
    """A successful response body, not yet parsed."""

    text: str


TransportOutcome = Union[TransportFailure, HttpError, RawBody]


class HttpTransport:
    """Issues single HTTP requests with fixed timeouts and TLS verification."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_SECONDS,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
            verify=True,
            follow_redirects=True,
            max_redirects=max_redirects,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def execute(
        self,
        url: str,
        *,
        method: str = "POST",
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        json: Any = None,
    ) -> TransportOutcome:
        try:
            response = self._client.request(
                method,
                url,
                headers=headers,
                params=params,
                data=data,
                json=json,
                follow_redirects=True,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            return TransportFailure(f"Request error: {exc}")

        if not 200 <= response.status_code < 300:
            logger.error("%s %s returned HTTP %s", method, url, response.status_code)
            return HttpError(response.status_code)

        return RawBody(response.text)
