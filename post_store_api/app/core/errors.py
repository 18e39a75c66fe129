"""
Error types for the post store and their HTTP rendering.

Clients of the post store expect failures as a JSON object with a
single ``message`` key rather than FastAPI's ``detail``, so the
errors below carry their own status code and message and are turned
into responses by ``post_store_error_handler``.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class PostStoreError(Exception):
    """Base class for errors answered directly to the client."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFieldError(PostStoreError):
    """A required field is missing or falsy in a write request."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Missing field."


class PostNotFoundError(PostStoreError):
    """No post matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Post not found"


async def post_store_error_handler(request: Request, exc: PostStoreError) -> JSONResponse:
    """Render a :class:`PostStoreError` as a ``{"message": ...}`` response.

    Parameters
    ----------
    request : Request
        The request that failed; used for the log line only.
    exc : PostStoreError
        The error raised by a handler or the service.

    Returns
    -------
    JSONResponse
        Response with ``exc.status_code`` and the error message.
    """
    logger.warning(
        "%s %s -> %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})
