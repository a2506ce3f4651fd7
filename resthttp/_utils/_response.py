from httpx import Response

from ..models.exceptions import NotFoundError, RemoteError, UnauthorizedError


def _host(response: Response) -> str:
    return response.request.url.host


def classify_response(response: Response) -> Response:
    """Raise the typed error for 401 and 404, pass everything else through."""
    url = str(response.request.url)

    if response.status_code == 401:
        raise UnauthorizedError(_host(response), url, response=response)

    if response.status_code == 404:
        raise NotFoundError(_host(response), url, response=response)

    return response


def raise_for_remote_error(response: Response) -> Response:
    """Raise for any non-2xx status.

    401 and 404 keep their dedicated errors, every other failure status
    becomes a :class:`RemoteError`.
    """
    classify_response(response)

    if not response.is_success:
        raise RemoteError(
            _host(response),
            response.status_code,
            str(response.request.url),
            response=response,
        )

    return response
