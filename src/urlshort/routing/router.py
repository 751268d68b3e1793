"""Path-pattern routing for the fallback application.

Patterns are literal paths with ``{name}`` holes (one segment) or a
trailing ``{name:path}`` hole (the rest of the path, slashes included).
Routes are tried in registration order and answer every method.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from urlshort.errors import ConfigurationError, NotFound

_HOLE = re.compile(r"\{(\w+)(?::(\w+))?\}")
_HOLE_PATTERNS = {None: "[^/]+", "path": ".+"}


def compile_pattern(path: str) -> re.Pattern[str]:
    """``/godoc/{pkg}`` -> ``/godoc/(?P<pkg>[^/]+)``."""
    parts: list[str] = []
    end = 0
    for hole in _HOLE.finditer(path):
        name, kind = hole.groups()
        if kind not in _HOLE_PATTERNS:
            msg = f"Route {path!r}: unknown placeholder type {kind!r} (only 'path' is supported)"
            raise ConfigurationError(msg)
        parts.append(re.escape(path[end : hole.start()]))
        parts.append(f"(?P<{name}>{_HOLE_PATTERNS[kind]})")
        end = hole.end()
    parts.append(re.escape(path[end:]))
    return re.compile("".join(parts))


@dataclass(frozen=True, slots=True)
class Route:
    path: str
    handler: Callable[..., Any]
    pattern: re.Pattern[str]

    @classmethod
    def build(cls, path: str, handler: Callable[..., Any]) -> "Route":
        return cls(path, handler, compile_pattern(path))


class Router:
    """An immutable, ordered list of routes."""

    __slots__ = ("_routes",)

    def __init__(self, routes: Iterable[Route] = ()) -> None:
        self._routes = tuple(routes)

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._routes

    def match(self, path: str) -> tuple[Route, dict[str, str]]:
        """First route whose pattern covers all of *path*, with its captures.

        Raises:
            NotFound: If no route matches.
        """
        for route in self._routes:
            found = route.pattern.fullmatch(path)
            if found is not None:
                return route, found.groupdict()
        raise NotFound()
