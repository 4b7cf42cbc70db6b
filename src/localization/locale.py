"""Locale resolution from the ``language`` cookie.

The resolver copies the cookie verbatim into the per-request rendering
context under ``locality``; the template layer picks its message bundle from
there. Values are not validated.
"""

from typing import Any, Mapping

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

LANGUAGE_COOKIE = "language"
LOCALITY_KEY = "locality"


def resolve_locality(cookies: Mapping[str, str], state: Any) -> str | None:
    """Publish the cookie's language into ``state.context`` if it is set.

    An absent or empty cookie leaves ``state`` untouched.
    """
    language = cookies.get(LANGUAGE_COOKIE)
    if not language:
        return None

    context = getattr(state, "context", None)
    if context is None:
        context = {}
        state.context = context
    context[LOCALITY_KEY] = language
    return language


def render_context(request: Request) -> dict:
    """The rendering context attached to this request, or an empty one."""
    return getattr(request.state, "context", None) or {}


class LocaleMiddleware(BaseHTTPMiddleware):
    """Set the rendering context's locality from the ``language`` cookie."""

    async def dispatch(self, request: Request, call_next) -> Response:
        locality = resolve_locality(request.cookies, request.state)
        if locality:
            structlog.contextvars.bind_contextvars(locality=locality)
        return await call_next(request)
