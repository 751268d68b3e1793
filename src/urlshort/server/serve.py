"""Hand a live ASGI callable to pounce."""


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    log_level: str = "info",
) -> None:
    """Serve *app* on *host*:*port* until interrupted.

    The app is built at runtime (from a redirect file, say) rather than
    importable by name, so this goes through ``pounce.server.Server``
    instead of ``pounce.run``. Needs the ``serve`` extra.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    Server(ServerConfig(host=host, port=port, reload=reload, log_level=log_level), app).run()
