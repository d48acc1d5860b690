"""Fake RegistryHttp implementation for testing."""

from dataface.core.http.abc import HttpError, RegistryHttp


class FakeRegistryHttp(RegistryHttp):
    """In-memory HTTP fake serving pre-decoded JSON documents by URL.

    Constructor Injection:
    - responses: URL -> decoded JSON document returned by get_json()
    - Any URL not in responses raises HttpError, like an unreachable host

    Examples:
        >>> http = FakeRegistryHttp(responses={REGISTRY_URL: {"schema": "..."}})
        >>> http.get_json(REGISTRY_URL)
        {'schema': '...'}
    """

    def __init__(self, *, responses: dict[str, object] | None = None) -> None:
        self._responses = responses or {}
        self._requested_urls: list[str] = []

    @property
    def requested_urls(self) -> list[str]:
        """Read-only access to the URLs requested, in order."""
        return self._requested_urls

    def get_json(self, url: str) -> object:
        self._requested_urls.append(url)
        if url not in self._responses:
            raise HttpError(f"GET {url} failed: connection refused")
        return self._responses[url]
