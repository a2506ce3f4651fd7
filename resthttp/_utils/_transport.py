import os
import socket
import ssl
from typing import Any, Dict, List, Tuple

import httpx

from .constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_IDLE_CONNECTION_TIMEOUT,
    DEFAULT_MAX_IDLE_CONNECTIONS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TCP_KEEPALIVE,
    ENV_DISABLE_SSL_VERIFY,
)

DEFAULT_TIMEOUT = httpx.Timeout(DEFAULT_REQUEST_TIMEOUT, connect=DEFAULT_CONNECT_TIMEOUT)

DEFAULT_LIMITS = httpx.Limits(
    max_connections=None,
    max_keepalive_connections=DEFAULT_MAX_IDLE_CONNECTIONS,
    keepalive_expiry=DEFAULT_IDLE_CONNECTION_TIMEOUT,
)


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context():
    # System certificates through truststore when the extra is installed,
    # otherwise certifi plus the usual CA environment variables
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
        requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
        ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def ssl_verification_disabled() -> bool:
    value = os.environ.get(ENV_DISABLE_SSL_VERIFY, "").lower()
    return value in ("1", "true", "yes", "on")


def keepalive_socket_options() -> List[Tuple[int, int, int]]:
    """TCP keep-alive probes after the default idle period.

    Only the options the running platform exposes are returned.
    """
    options = [(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)]

    # Linux names the idle option TCP_KEEPIDLE, macOS names it TCP_KEEPALIVE
    idle_option = getattr(socket, "TCP_KEEPIDLE", None) or getattr(
        socket, "TCP_KEEPALIVE", None
    )
    if idle_option is not None:
        options.append((socket.IPPROTO_TCP, idle_option, DEFAULT_TCP_KEEPALIVE))

    interval_option = getattr(socket, "TCP_KEEPINTVL", None)
    if interval_option is not None:
        options.append((socket.IPPROTO_TCP, interval_option, DEFAULT_TCP_KEEPALIVE))

    return options


def get_httpx_client_kwargs() -> Dict[str, Any]:
    """Get standardized httpx client configuration."""
    client_kwargs: Dict[str, Any] = {
        "follow_redirects": True,
        "timeout": DEFAULT_TIMEOUT,
        "limits": DEFAULT_LIMITS,
        "trust_env": True,
    }

    if ssl_verification_disabled():
        client_kwargs["verify"] = False
    else:
        client_kwargs["verify"] = create_ssl_context()

    # HTTP_PROXY, HTTPS_PROXY, NO_PROXY are read by httpx because of trust_env

    return client_kwargs


def create_default_client() -> httpx.Client:
    kwargs = get_httpx_client_kwargs()
    transport = httpx.HTTPTransport(
        verify=kwargs["verify"],
        limits=kwargs["limits"],
        trust_env=kwargs["trust_env"],
        socket_options=keepalive_socket_options(),
    )
    return httpx.Client(transport=transport, **kwargs)


def create_default_async_client() -> httpx.AsyncClient:
    kwargs = get_httpx_client_kwargs()
    transport = httpx.AsyncHTTPTransport(
        verify=kwargs["verify"],
        limits=kwargs["limits"],
        trust_env=kwargs["trust_env"],
        socket_options=keepalive_socket_options(),
    )
    return httpx.AsyncClient(transport=transport, **kwargs)
