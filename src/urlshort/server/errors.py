"""Turn exceptions that escape a route or middleware into responses."""

import logging

from urlshort.errors import HTTPError
from urlshort.http.request import Request
from urlshort.http.response import Response

logger = logging.getLogger("urlshort.server")


def error_response(exc: Exception, request: Request, *, debug: bool) -> Response:
    """Plain-text response for *exc*; must be called from the ``except`` block.

    ``HTTPError`` keeps its status and detail. Anything else is logged
    with its traceback and becomes a 500, whose body names the exception
    only in debug mode.
    """
    if isinstance(exc, HTTPError):
        logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
        body = str(exc) if debug else exc.detail
        return Response(body or str(exc.status), status=exc.status)

    logger.exception("500 %s %s", request.method, request.path)
    body = "Internal Server Error"
    if debug:
        body = f"{body}\n\n{type(exc).__name__}: {exc}"
    return Response(body, status=500)
