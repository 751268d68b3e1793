"""Redirect middleware — the redirect table inside an App's pipeline.

Same lookup as ``RedirectHandler``, shaped as a middleware so it runs
alongside whatever else the app has registered::

    app.add_middleware(RedirectMiddleware(RedirectTable.from_yaml(doc)))
"""

import logging
from collections.abc import Mapping

from urlshort.http.request import Request
from urlshort.http.response import Response, redirect
from urlshort.middleware.protocol import Next
from urlshort.redirects.table import RedirectTable

logger = logging.getLogger("urlshort.redirects")


class RedirectMiddleware:
    """Answer table paths with a redirect; pass the rest to ``next``."""

    __slots__ = ("status", "table")

    def __init__(self, table: Mapping[str, str], *, status: int = 302) -> None:
        self.table = table if isinstance(table, RedirectTable) else RedirectTable(table)
        self.status = status

    async def __call__(self, request: Request, next: Next) -> Response:
        url = self.table.resolve(request.path)
        if url is None:
            return await next(request)
        logger.debug("%d %s %s -> %s", self.status, request.method, request.path, url)
        return redirect(url, status=self.status)
