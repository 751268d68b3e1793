"""urlshort exception hierarchy.

Configuration problems surface while things are being built; HTTP
errors are raised while serving and turned into responses by the
request pipeline.
"""

from dataclasses import dataclass


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class ConfigurationError(UrlshortError):
    """Invalid setup, raised before any request is served."""


class RedirectTableError(ConfigurationError):
    """A redirect document could not be turned into a redirect table.

    ``index`` is the position of the offending entry in the document,
    or ``None`` when the document as a whole is malformed.
    """

    def __init__(self, message: str, *, index: int | None = None) -> None:
        if index is not None:
            message = f"entry {index}: {message}"
        super().__init__(message)
        self.index = index


@dataclass(frozen=True, slots=True)
class HTTPError(UrlshortError):
    """Raise from a route handler to answer with *status* and *detail*."""

    status: int
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.status}: {self.detail}" if self.detail else str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404, raised by the router when no route covers the path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
