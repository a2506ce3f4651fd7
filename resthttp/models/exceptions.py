from typing import Optional

from httpx import Response


class HttpClientError(Exception):
    """Base class for every error the client raises for a runtime condition."""


class RequestConstructionError(HttpClientError):
    """The method or URL could not be turned into a request."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        self.message = message
        self.url = url
        super().__init__(self.message)


class TransportError(HttpClientError):
    """The request produced no usable response.

    Covers connection failures and timeouts as well as redirect loops and
    bodies that cannot be decoded.
    """

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        self.message = message
        self.url = url
        super().__init__(self.message)


class RemoteError(HttpClientError):
    """The remote host answered with a status the client classifies as a failure.

    The message combines the status code and the request URL, e.g.
    ``"503: (https://host/api/items)"``.
    """

    def __init__(
        self,
        host: str,
        status_code: int,
        url: str,
        message: Optional[str] = None,
        response: Optional[Response] = None,
    ) -> None:
        self.host = host
        self.status_code = status_code
        self.url = url
        self.response = response
        self.message = message or f"{status_code}: ({url})"
        super().__init__(self.message)


class UnauthorizedError(RemoteError):
    def __init__(
        self, host: str, url: str, response: Optional[Response] = None
    ) -> None:
        super().__init__(
            host,
            401,
            url,
            message="Authentication required.",
            response=response,
        )


class NotFoundError(RemoteError):
    def __init__(
        self, host: str, url: str, response: Optional[Response] = None
    ) -> None:
        super().__init__(
            host,
            404,
            url,
            message="Resource not found.",
            response=response,
        )
