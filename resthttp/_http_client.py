from logging import getLogger
from typing import Any, Optional

import httpx
from httpx import Request, Response

from ._config import HttpConfig
from ._utils import setup_logging
from ._utils._request import (
    RequestContent,
    TimeoutTypes,
    apply_default_timeout,
    create_request,
)
from ._utils._response import classify_response
from ._utils._transport import create_default_async_client, create_default_client
from .models.exceptions import RemoteError, TransportError


class HttpClient:
    """High-level client for building and sending JSON requests against one base URL.

    Holds a pooled sync transport, created with the client, and a pooled
    async transport, created on the first async call. Both are shared by every
    call. The configuration never changes after construction and the client is
    safe to use from several threads or tasks at once.

    ``close()`` releases the sync pool. Use ``aclose()`` or ``async with``
    once the async verbs have been used so both pools are released.

    Example:
    ```python
        client = HttpClient(HttpConfig(base_url="https://api.example.com", username="u", password="p"))
        response = client.get_from("/items")
        response = await client.post_to_async("items", content=b'{"id": 1}')
    ```
    """

    def __init__(
        self,
        config: HttpConfig,
        *,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if config is None:
            raise TypeError("config is None")

        self._logger = getLogger("resthttp")
        self._config = config
        # Injected transports replace the defaults entirely, the async pool
        # is only created on demand when nothing was injected.
        self._injected = client is not None or async_client is not None
        self._client = client
        if self._client is None and not self._injected:
            self._client = create_default_client()
        self._client_async = async_client

    @classmethod
    def default(cls, base_url: str) -> "HttpClient":
        return cls(HttpConfig.default(base_url))

    @classmethod
    def with_client(
        cls,
        config: HttpConfig,
        client: httpx.Client,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> "HttpClient":
        """Create a client around caller-supplied httpx transports.

        Without ``async_client`` the async verbs raise instead of falling back
        to a default pool.
        """
        if config is None:
            raise TypeError("config is None")
        if client is None:
            raise TypeError("client is None")

        return cls(config, client=client, async_client=async_client)

    @classmethod
    def from_env(cls, *, debug: bool = False, **overrides: Any) -> "HttpClient":
        setup_logging(debug)
        return cls(HttpConfig.from_env(**overrides))

    @property
    def config(self) -> HttpConfig:
        return self._config

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

    async def aclose(self) -> None:
        self.close()
        if self._client_async is not None:
            await self._client_async.aclose()

    def get_from(self, path: str, *, timeout: TimeoutTypes = None) -> Response:
        return self.execute_request(self._create(path, "GET", timeout=timeout))

    def post_to(
        self, path: str, content: RequestContent = None, *, timeout: TimeoutTypes = None
    ) -> Response:
        return self.execute_request(
            self._create(path, "POST", content, timeout=timeout)
        )

    def put_to(
        self, path: str, content: RequestContent = None, *, timeout: TimeoutTypes = None
    ) -> Response:
        return self.execute_request(self._create(path, "PUT", content, timeout=timeout))

    def delete_from(self, path: str, *, timeout: TimeoutTypes = None) -> Response:
        return self.execute_request(self._create(path, "DELETE", timeout=timeout))

    async def get_from_async(
        self, path: str, *, timeout: TimeoutTypes = None
    ) -> Response:
        return await self.execute_request_async(
            self._create(path, "GET", timeout=timeout)
        )

    async def post_to_async(
        self, path: str, content: RequestContent = None, *, timeout: TimeoutTypes = None
    ) -> Response:
        return await self.execute_request_async(
            self._create(path, "POST", content, timeout=timeout)
        )

    async def put_to_async(
        self, path: str, content: RequestContent = None, *, timeout: TimeoutTypes = None
    ) -> Response:
        return await self.execute_request_async(
            self._create(path, "PUT", content, timeout=timeout)
        )

    async def delete_from_async(
        self, path: str, *, timeout: TimeoutTypes = None
    ) -> Response:
        return await self.execute_request_async(
            self._create(path, "DELETE", timeout=timeout)
        )

    def get_request(self, path: str) -> Request:
        return self._create(path, "GET")

    def post_request(self, path: str, content: RequestContent = None) -> Request:
        return self._create(path, "POST", content)

    def put_request(self, path: str, content: RequestContent = None) -> Request:
        return self._create(path, "PUT", content)

    def delete_request(self, path: str) -> Request:
        return self._create(path, "DELETE")

    def execute_request(self, request: Request) -> Response:
        """Send a request through the pooled transport.

        A request without a deadline gets the default 30s one first.

        Raises:
            TransportError: If no usable response was received (connection
                failure, timeout, redirect loop, undecodable body).
            UnauthorizedError: On HTTP 401.
            NotFoundError: On HTTP 404.
        """
        apply_default_timeout(request)
        self._logger.debug(f"Request: {request.method} {request.url}")

        try:
            response = self._sync_client.send(request)
        except httpx.RequestError as e:
            raise self._transport_error(request, e) from e

        return self._handle_response(response)

    async def execute_request_async(self, request: Request) -> Response:
        apply_default_timeout(request)
        self._logger.debug(f"Request: {request.method} {request.url}")

        try:
            response = await self._async_client.send(request)
        except httpx.RequestError as e:
            raise self._transport_error(request, e) from e

        return self._handle_response(response)

    @property
    def _sync_client(self) -> httpx.Client:
        if self._client is None:
            raise RuntimeError("no sync httpx.Client was given to this HttpClient")
        return self._client

    @property
    def _async_client(self) -> httpx.AsyncClient:
        if self._client_async is None:
            if self._injected:
                raise RuntimeError(
                    "no httpx.AsyncClient was given to this HttpClient, "
                    "pass async_client to use the async verbs"
                )
            self._client_async = create_default_async_client()
        return self._client_async

    def _create(
        self,
        path: str,
        method: str,
        content: RequestContent = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> Request:
        return create_request(
            self._config.base_url,
            path,
            method,
            content,
            self._config.username,
            self._config.password,
            timeout=timeout,
        )

    def _handle_response(self, response: Response) -> Response:
        self._logger.debug(f"Response: {response.status_code} {response.request.url}")
        try:
            return classify_response(response)
        except RemoteError as e:
            self._logger.warning(f"{e} ({response.status_code} {response.request.url})")
            raise

    def _transport_error(self, request: Request, error: Exception) -> TransportError:
        url = str(request.url)
        self._logger.warning(f"Transport error for {request.method} {url}: {error!r}")
        return TransportError(str(error) or type(error).__name__, url=url)
