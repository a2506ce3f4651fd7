import re
from base64 import b64encode
from typing import Any, Optional, Union

import httpx

from ..models.exceptions import RequestConstructionError
from ._user_agent import header_user_agent
from .constants import (
    DEFAULT_REQUEST_TIMEOUT,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    JSON_MEDIA_TYPE,
)

# RFC 7230 token characters
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

TimeoutTypes = Union[float, httpx.Timeout, None]
RequestContent = Any


def join_url(base_url: str, path: str) -> str:
    """Join a base URL and a relative path with exactly one slash.

    Only a single trailing slash of ``base_url`` and a single leading slash of
    ``path`` are removed.

    >>> join_url("https://h/api/", "/items")
    'https://h/api/items'
    """
    return f"{base_url.removesuffix('/')}/{path.removeprefix('/')}"


def basic_auth_value(username: str, password: str) -> str:
    token = b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def validate_method(method: str) -> str:
    if not method or not _METHOD_RE.fullmatch(method):
        raise RequestConstructionError(f"invalid method {method!r}")
    return method.upper()


def set_timeout(request: httpx.Request, timeout: TimeoutTypes) -> httpx.Request:
    request.extensions["timeout"] = httpx.Timeout(timeout).as_dict()
    return request


def has_timeout(request: httpx.Request) -> bool:
    return "timeout" in request.extensions


def apply_default_timeout(request: httpx.Request) -> httpx.Request:
    if not has_timeout(request):
        set_timeout(request, DEFAULT_REQUEST_TIMEOUT)
    return request


def new_request(
    method: str,
    url: Union[httpx.URL, str],
    *,
    content: RequestContent = None,
    headers: Optional[dict[str, str]] = None,
) -> httpx.Request:
    method = validate_method(method)
    try:
        return httpx.Request(method, url, content=content, headers=headers)
    except httpx.InvalidURL as e:
        raise RequestConstructionError(str(e), url=str(url)) from e


def create_request(
    base_url: str,
    path: str,
    method: str,
    content: RequestContent = None,
    username: str = "",
    password: str = "",
    *,
    timeout: TimeoutTypes = None,
) -> httpx.Request:
    """Assemble a request against ``base_url``.

    ``Content-Type`` and ``Accept`` are always ``application/json``, whatever
    the configured accept value is. Basic auth is applied only when both
    ``username`` and ``password`` are non-empty.

    Args:
        base_url: Absolute base URL, with or without a trailing slash.
        path: Path relative to ``base_url``, with or without a leading slash.
        method: HTTP method.
        content: Optional request body.
        username: Basic auth user.
        password: Basic auth password.
        timeout: Deadline for the request. Left unset, the executor applies
            its default.

    Raises:
        RequestConstructionError: If the method or the joined URL is invalid.
    """
    headers = {
        HEADER_CONTENT_TYPE: JSON_MEDIA_TYPE,
        HEADER_ACCEPT: JSON_MEDIA_TYPE,
        **header_user_agent(),
    }

    if username != "" and password != "":
        headers[HEADER_AUTHORIZATION] = basic_auth_value(username, password)

    request = new_request(
        method, join_url(base_url, path), content=content, headers=headers
    )

    if timeout is not None:
        set_timeout(request, timeout)

    return request
