"""Immutable HTTP response and the redirect constructor.

A ``Response`` is plain data: the sender turns it into ASGI messages,
the test client turns ASGI messages back into one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from urllib.parse import quote


@dataclass(frozen=True, slots=True)
class Response:
    """Status, content type, extra headers and a body.

    ``with_status`` and ``with_header`` return copies, so middleware can
    decorate a response it got from ``next`` without touching it.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        return replace(self, headers=(*self.headers, (name, value)))

    def header(self, name: str) -> str | None:
        """First value of header *name*, compared case-insensitively."""
        wanted = name.lower()
        return next((value for key, value in self.headers if key.lower() == wanted), None)

    @property
    def location(self) -> str | None:
        return self.header("location")

    @property
    def is_redirect(self) -> bool:
        """A 3xx status with somewhere to go."""
        return 300 <= self.status < 400 and self.location is not None

    @property
    def body_bytes(self) -> bytes:
        return self.body.encode("utf-8") if isinstance(self.body, str) else self.body

    @property
    def text(self) -> str:
        return self.body.decode("utf-8") if isinstance(self.body, bytes) else self.body


def location_header(url: str) -> str:
    """Percent-encode the non-ASCII characters of *url* as UTF-8.

    ASCII passes through untouched, existing ``%XX`` escapes included,
    so ``https://ja.wikipedia.org/wiki/日本`` becomes
    ``https://ja.wikipedia.org/wiki/%E6%97%A5%E6%9C%AC``.
    """
    if url.isascii():
        return url
    return "".join(char if char.isascii() else quote(char, safe="") for char in url)


def redirect(url: str, *, status: int = 302) -> Response:
    """An empty-bodied response sending the client to *url*."""
    return Response(status=status, headers=(("Location", location_header(url)),))
