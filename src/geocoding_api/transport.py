"""
HTTP transport backed by `requests`.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .base import Transport
from .errors import TransportFailure
from .settings import settings

logger = logging.getLogger(__name__)


class RequestsTransport(Transport):
    """
    Performs GET requests through a persistent `requests.Session`.

    The URL is sent verbatim: the query string is already encoded and must
    not be re-encoded.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            timeout: HTTP request timeout in seconds (defaults to settings)
            session: Session to reuse (one is created if omitted)
        """
        self.timeout = timeout if timeout is not None else settings.timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def fetch(self, url: str) -> bytes:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Geocoding request failed: {e}")
            raise TransportFailure(f"Request failed: {e}") from e

        logger.debug(f"Geocoding request status: {response.status_code}")

        if not 200 <= response.status_code < 300:
            logger.warning(f"Geocoding request returned HTTP {response.status_code}")
            raise TransportFailure(
                f"HTTP {response.status_code}: {response.reason}",
                status_code=response.status_code,
            )

        return response.content

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
