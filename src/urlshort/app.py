"""The fallback-side ASGI application.

Routes, middleware (the redirect table among them) and lifespan hooks
are registered up front. The first lifespan or HTTP event compiles them
into a router and a middleware tuple; after that the app refuses changes.
"""

import inspect
import threading
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort.config import AppConfig
from urlshort.middleware.protocol import Middleware
from urlshort.routing.router import Route, Router
from urlshort.server.handler import handle_request

Hook: TypeAlias = Callable[[], Any]


class App:
    """Register routes with ``@app.route(path)``; serve with ``app.run()``.

    Every route answers every HTTP method, and routes are matched in the
    order they were registered.
    """

    __slots__ = ("_compile_lock", "_hooks", "_middleware", "_routes", "_runtime", "config")

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self._routes: list[Route] = []
        self._middleware: list[Middleware] = []
        self._hooks: dict[str, list[Hook]] = {"startup": [], "shutdown": []}
        self._compile_lock = threading.Lock()
        self._runtime: tuple[Router, tuple[Middleware, ...]] | None = None

    def route(self, path: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator: answer *path* (``{name}`` / ``{name:path}`` placeholders allowed)."""

        def register(handler: Callable[..., Any]) -> Callable[..., Any]:
            self._ensure_open()
            self._routes.append(Route.build(path, handler))
            return handler

        return register

    def add_middleware(self, middleware: Middleware) -> None:
        """Append *middleware*; the first one added is the outermost."""
        self._ensure_open()
        self._middleware.append(middleware)

    def add_redirects(self, paths_to_urls: Mapping[str, str]) -> None:
        """Redirect the paths in *paths_to_urls* before any route runs."""
        from urlshort.redirects.middleware import RedirectMiddleware

        self.add_middleware(RedirectMiddleware(paths_to_urls, status=self.config.redirect_status))

    def on_startup(self, hook: Hook) -> Hook:
        self._ensure_open()
        self._hooks["startup"].append(hook)
        return hook

    def on_shutdown(self, hook: Hook) -> Hook:
        self._ensure_open()
        self._hooks["shutdown"].append(hook)
        return hook

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve with pounce on *host*/*port*, defaulting to ``config``."""
        from urlshort.server.serve import run_server

        self._compiled()
        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
            log_level=self.config.log_level,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        router, middleware = self._compiled()
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
        elif scope["type"] == "http":
            await handle_request(
                scope, send, router=router, middleware=middleware, debug=self.config.debug
            )

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            event = (await receive())["type"].removeprefix("lifespan.")
            if event not in self._hooks:
                continue
            try:
                for hook in self._hooks[event]:
                    result = hook()
                    if inspect.isawaitable(result):
                        await result
            except Exception as exc:
                await send({"type": f"lifespan.{event}.failed", "message": str(exc)})
                return
            await send({"type": f"lifespan.{event}.complete"})
            if event == "shutdown":
                return

    def _compiled(self) -> tuple[Router, tuple[Middleware, ...]]:
        # Workers may hit the first request together; compile once.
        if self._runtime is None:
            with self._compile_lock:
                if self._runtime is None:
                    self._runtime = (Router(self._routes), tuple(self._middleware))
        return self._runtime

    def _ensure_open(self) -> None:
        if self._runtime is not None:
            msg = "Cannot modify the app after it has started serving; register everything first."
            raise RuntimeError(msg)
