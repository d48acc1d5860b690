"""HTTP operations used to download the registry index."""

from abc import ABC, abstractmethod


class HttpError(Exception):
    """Raised when an HTTP request fails or its body is not usable.

    Covers transport errors, non-2xx responses and undecodable JSON bodies.
    """


class RegistryHttp(ABC):
    """Abstract interface for fetching JSON documents over HTTPS."""

    @abstractmethod
    def get_json(self, url: str) -> object:
        """GET url and decode the body as JSON.

        Raises:
            HttpError: On transport failure, non-2xx status, or invalid JSON
        """
        ...
