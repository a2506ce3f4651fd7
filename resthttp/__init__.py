"""Thin JSON HTTP client over httpx.

This package centralizes base-URL handling, optional basic-auth credentials,
JSON content headers and connection-pool tuning, and offers a fluent request
builder.

Example:
```python
    # Optionally set these environment variables:
    # export RESTHTTP_BASE_URL="https://api.example.com/v1"
    # export RESTHTTP_USERNAME="user"
    # export RESTHTTP_PASSWORD="secret"

    from resthttp import HttpClient
    client = HttpClient.from_env()
    response = client.get_from("items/1")
```
"""

from ._config import HttpConfig
from ._http_client import HttpClient
from ._request_builder import RequestBuilder
from ._utils import create_request, raise_for_remote_error, setup_logging
from .models import (
    BaseUrlMissingError,
    HttpClientError,
    NotFoundError,
    RemoteError,
    RequestConstructionError,
    TransportError,
    UnauthorizedError,
)

__all__ = [
    "HttpClient",
    "HttpConfig",
    "RequestBuilder",
    "create_request",
    "raise_for_remote_error",
    "setup_logging",
    "BaseUrlMissingError",
    "HttpClientError",
    "NotFoundError",
    "RemoteError",
    "RequestConstructionError",
    "TransportError",
    "UnauthorizedError",
]
