"""Middleware: ``async (request, next) -> Response`` callables.

The redirect table ships as ``urlshort.redirects.RedirectMiddleware``.
"""

from urlshort.middleware.protocol import Middleware, Next

__all__ = ["Middleware", "Next"]
