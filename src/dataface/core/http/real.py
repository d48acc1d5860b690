"""Production RegistryHttp implementation backed by httpx."""

import json
import logging

import httpx

from dataface.core.http.abc import HttpError, RegistryHttp

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 15.0


class RealRegistryHttp(RegistryHttp):
    """Fetch JSON documents with a synchronous httpx client.

    A client may be injected (tests pass one built on httpx.MockTransport);
    otherwise a short-lived client is created per request.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._client = client
        self._timeout = timeout

    def get_json(self, url: str) -> object:
        logger.debug("GET %s", url)
        try:
            if self._client is not None:
                response = self._client.get(url, timeout=self._timeout)
            else:
                with httpx.Client(follow_redirects=True) as client:
                    response = client.get(url, timeout=self._timeout)
        except httpx.HTTPError as e:
            raise HttpError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            raise HttpError(f"Request to {url} returned HTTP {response.status_code}")

        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise HttpError(f"Response from {url} is not valid JSON: {e}") from e
