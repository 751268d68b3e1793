"""One HTTP request through an App: middleware, then the matching route."""

import inspect
from collections.abc import Sequence
from dataclasses import replace

from urlshort._internal.asgi import Scope, Send
from urlshort.errors import ConfigurationError
from urlshort.http.request import Request
from urlshort.http.response import Response
from urlshort.middleware.protocol import Middleware, Next
from urlshort.routing.router import Router
from urlshort.server.errors import error_response
from urlshort.server.sender import send_response


async def handle_request(
    scope: Scope,
    send: Send,
    *,
    router: Router,
    middleware: Sequence[Middleware],
    debug: bool,
) -> None:
    request = Request.from_scope(scope)

    async def endpoint(req: Request) -> Response:
        return await _call_route(router, req)

    chain: Next = endpoint
    for mw in reversed(middleware):
        chain = _link(mw, chain)

    try:
        response = await chain(request)
    except Exception as exc:
        response = error_response(exc, request, debug=debug)

    await send_response(response, send, method=request.method)


def _link(mw: Middleware, inner: Next) -> Next:
    async def call(request: Request) -> Response:
        return await mw(request, inner)

    return call


async def _call_route(router: Router, request: Request) -> Response:
    """Run the matched handler, passing the captures (and ``request``) it declares."""
    route, params = router.match(request.path)
    accepted = inspect.signature(route.handler).parameters
    kwargs: dict[str, object] = {name: value for name, value in params.items() if name in accepted}
    if "request" in accepted:
        kwargs["request"] = replace(request, path_params=params)

    result = route.handler(**kwargs)
    if inspect.isawaitable(result):
        result = await result

    if isinstance(result, Response):
        return result
    if isinstance(result, str):
        return Response(result)
    msg = f"Route {route.path!r} returned {type(result).__name__}; return str or Response."
    raise ConfigurationError(msg)
