from ._logs import setup_logging
from ._request import create_request, join_url
from ._response import classify_response, raise_for_remote_error
from ._transport import get_httpx_client_kwargs
from ._user_agent import header_user_agent, user_agent_value

__all__ = [
    "setup_logging",
    "create_request",
    "join_url",
    "classify_response",
    "raise_for_remote_error",
    "get_httpx_client_kwargs",
    "header_user_agent",
    "user_agent_value",
]
