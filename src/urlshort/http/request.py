"""Immutable view of an ASGI HTTP scope.

Redirects and the fallback routes only look at the method and the path,
so the request carries just that, plus whatever the router captured.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """Method, decoded path and query string of one HTTP request."""

    method: str
    path: str
    query_string: bytes = b""
    path_params: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_scope(cls, scope: dict[str, Any]) -> Request:
        return cls(
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b""),
        )
