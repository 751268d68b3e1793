"""The middleware shape and the ``Next`` callable it receives.

Any async callable taking ``(request, next)`` and returning a Response
qualifies; no base class::

    async def tag(request: Request, next: Next) -> Response:
        response = await next(request)
        return response.with_header("X-Served-By", "urlshort")
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from urlshort.http.request import Request
from urlshort.http.response import Response

# The rest of the pipeline, from this middleware inwards
Next: TypeAlias = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    async def __call__(self, request: Request, next: Next) -> Response: ...
