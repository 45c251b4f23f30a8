"""Map domain exceptions to HTTP responses."""

import falcon
import falcon.asgi

from carescope.domain.exceptions import (
    CareScopeError,
    NotFound,
    PermissionDenied,
    Unauthenticated,
    ValidationError,
)


def respond_unauthorized(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}


def respond_error(resp: falcon.asgi.Response, error: CareScopeError) -> None:
    """Set status and body for a domain error.

    Denials never echo the caller's permissions, and out-of-scope records
    answer exactly like missing ones.
    """
    if isinstance(error, Unauthenticated):
        respond_unauthorized(resp)
    elif isinstance(error, PermissionDenied):
        resp.status = falcon.HTTP_403
        resp.media = {"error": "Permission denied"}
    elif isinstance(error, NotFound):
        resp.status = falcon.HTTP_404
        resp.media = {"error": f"{error.entity} not found"}
    elif isinstance(error, ValidationError):
        resp.status = falcon.HTTP_400
        resp.media = {"error": str(error)}
    else:
        raise error
