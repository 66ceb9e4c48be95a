"""
SuperApp Backend — View Invalidation Middleware
=================================================

What:  Collects the view paths a request made stale and reports them to the
       client in the `X-Invalidated-Views` response header.
How:   Before the route runs, a fresh set is placed in a ContextVar. Services
       call `mark_stale("/finance", ...)` after a successful write; the
       middleware joins the set into the header once the response is built.
Who:   Services (writers) and the frontend (reader: it refetches those pages).

Only successful responses report stale views. A write that raised never
reaches `mark_stale`, and error responses never carry the header.

Example:
    POST /api/finance/transactions → 201
    X-Invalidated-Views: /finance,/projects
"""

from contextvars import ContextVar
from typing import Optional, Set

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

INVALIDATED_VIEWS_HEADER = "X-Invalidated-Views"

# The set object is shared with the route's task; mutations are visible here
_stale_views_var: ContextVar[Optional[Set[str]]] = ContextVar("stale_views", default=None)


def mark_stale(*paths: str) -> None:
    """Record view paths whose cached data is now outdated."""
    views = _stale_views_var.get()
    if views is not None:
        views.update(paths)


def stale_views() -> Set[str]:
    """Views marked stale so far in the current request (empty outside one)."""
    return set(_stale_views_var.get() or ())


class ViewInvalidationMiddleware(BaseHTTPMiddleware):
    """Expose the request's stale views as a response header."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        views: Set[str] = set()
        token = _stale_views_var.set(views)
        try:
            response = await call_next(request)
        finally:
            _stale_views_var.reset(token)

        if views and response.status_code < 400:
            response.headers[INVALIDATED_VIEWS_HEADER] = ",".join(sorted(views))
        return response
