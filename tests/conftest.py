from typing import Callable

import httpx
import pytest

from resthttp import HttpClient, HttpConfig

BASE_URL = "http://test.local/api"
BASIC_JSON = b'{"id":1}'

Handler = Callable[[httpx.Request], httpx.Response]


def echo_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200, content=request.content, headers={"Content-Type": "application/json"}
    )


@pytest.fixture
def config() -> HttpConfig:
    return HttpConfig(base_url=BASE_URL, username="", password="")


@pytest.fixture
def make_client(config: HttpConfig):
    """Build an HttpClient whose transports call ``handler``.

    The async transport is only attached with ``use_async=True``; those
    clients must be closed by the test with ``async with`` or ``aclose()``.
    """
    created: list[HttpClient] = []

    def _make(
        handler: Handler,
        cfg: HttpConfig = config,
        *,
        use_async: bool = False,
        follow_redirects: bool = False,
    ) -> HttpClient:
        transport = httpx.MockTransport(handler)
        client = HttpClient.with_client(
            cfg,
            httpx.Client(transport=transport, follow_redirects=follow_redirects),
            httpx.AsyncClient(transport=transport) if use_async else None,
        )
        created.append(client)
        return client

    yield _make

    for client in created:
        client.close()
