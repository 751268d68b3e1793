"""ASGI redirect handler — the redirect table in front of a fallback app.

On an HTTP request whose path is in the table, answers with a redirect
to the mapped URL. Everything else (unmatched paths, lifespan scopes)
goes to the fallback application untouched.
"""

import logging
from collections.abc import Mapping

from urlshort._internal.asgi import ASGIApp, Receive, Scope, Send
from urlshort.http.response import redirect
from urlshort.redirects.table import RedirectTable
from urlshort.server.sender import send_response

logger = logging.getLogger("urlshort.redirects")


class RedirectHandler:
    """ASGI application: redirect table hits, delegate misses.

    Usage::

        handler = RedirectHandler(RedirectTable({"/gh": "https://github.com"}), app)
    """

    __slots__ = ("fallback", "status", "table")

    def __init__(
        self,
        table: RedirectTable,
        fallback: ASGIApp,
        *,
        status: int = 302,
    ) -> None:
        self.table = table
        self.fallback = fallback
        self.status = status

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            url = self.table.resolve(scope["path"])
            if url is not None:
                logger.debug("%d %s %s -> %s", self.status, scope["method"], scope["path"], url)
                response = redirect(url, status=self.status)
                await send_response(response, send, method=scope["method"])
                return
        await self.fallback(scope, receive, send)


def map_handler(
    paths_to_urls: Mapping[str, str],
    fallback: ASGIApp,
    *,
    status: int = 302,
) -> RedirectHandler:
    """Redirect each key of *paths_to_urls* to its value; delegate the rest."""
    table = paths_to_urls if isinstance(paths_to_urls, RedirectTable) else RedirectTable(paths_to_urls)
    return RedirectHandler(table, fallback, status=status)


def yaml_handler(yml: str | bytes, fallback: ASGIApp, *, status: int = 302) -> RedirectHandler:
    """Parse *yml* into a redirect table and wrap *fallback* with it.

    Raises:
        RedirectTableError: If *yml* is malformed. Raised here, before
            any request is served.
    """
    return RedirectHandler(RedirectTable.from_yaml(yml), fallback, status=status)


def json_handler(data: str | bytes, fallback: ASGIApp, *, status: int = 302) -> RedirectHandler:
    """Parse *data* (a JSON array of records) and wrap *fallback* with it.

    Raises:
        RedirectTableError: If *data* is malformed.
    """
    return RedirectHandler(RedirectTable.from_json(data), fallback, status=status)
