from .errors import BaseUrlMissingError
from .exceptions import (
    HttpClientError,
    NotFoundError,
    RemoteError,
    RequestConstructionError,
    TransportError,
    UnauthorizedError,
)

__all__ = [
    "BaseUrlMissingError",
    "HttpClientError",
    "NotFoundError",
    "RemoteError",
    "RequestConstructionError",
    "TransportError",
    "UnauthorizedError",
]
