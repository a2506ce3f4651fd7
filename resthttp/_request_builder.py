from typing import Optional

import httpx

from ._utils._request import RequestContent, new_request
from ._utils.constants import JSON_MEDIA_TYPE
from .models.exceptions import RequestConstructionError


class RequestBuilder:
    """Fluent accumulator for a single request.

    >>> request = RequestBuilder().get().path("https://h/items").query_param("b", "2").query_param("a", "1").build()
    >>> str(request.url)
    'https://h/items?a=1&b=2'

    A builder belongs to one caller; it is not safe to mutate from several
    threads. ``build()`` re-derives the query string from the current state
    every time it is called.

    ``as_json()`` only records the accept value, it does not add headers to
    the built request.
    """

    def __init__(self) -> None:
        self._method: Optional[str] = None
        self._path: str = ""
        self._query_params: dict[str, str] = {}
        self._content: RequestContent = None
        self._accept: Optional[str] = None

    @property
    def method(self) -> Optional[str]:
        return self._method

    @property
    def accept(self) -> Optional[str]:
        return self._accept

    @property
    def query_params(self) -> dict[str, str]:
        return dict(self._query_params)

    def get(self) -> "RequestBuilder":
        self._method = "GET"
        return self

    def post(self) -> "RequestBuilder":
        self._method = "POST"
        return self

    def put(self) -> "RequestBuilder":
        self._method = "PUT"
        return self

    def delete(self) -> "RequestBuilder":
        self._method = "DELETE"
        return self

    def path(self, path: str) -> "RequestBuilder":
        self._path = path
        return self

    def query_param(self, key: str, value: str) -> "RequestBuilder":
        self._query_params[key] = value
        return self

    def with_content(self, content: RequestContent) -> "RequestBuilder":
        self._content = content
        return self

    def as_json(self) -> "RequestBuilder":
        self._accept = JSON_MEDIA_TYPE
        return self

    def build(self) -> httpx.Request:
        """Construct the request from the accumulated state.

        The method defaults to GET. Query parameters are merged into any query
        already present in the path and encoded sorted by key.

        Raises:
            RequestConstructionError: If the method or path is invalid.
        """
        return new_request(self._method or "GET", self._url(), content=self._content)

    def _url(self) -> httpx.URL:
        try:
            url = httpx.URL(self._path)
            if self._query_params:
                url = url.copy_with(params=self._merged_params(url))
        except httpx.InvalidURL as e:
            raise RequestConstructionError(str(e), url=self._path) from e

        return url

    def _merged_params(self, url: httpx.URL) -> httpx.QueryParams:
        pairs = url.params.multi_items() + list(self._query_params.items())
        # sorted() is stable, so repeated keys keep their relative order
        return httpx.QueryParams(sorted(pairs, key=lambda pair: pair[0]))
