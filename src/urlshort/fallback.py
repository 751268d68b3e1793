"""The default fallback: a greeting for every path and method."""

from urlshort.app import App
from urlshort.config import AppConfig


def default_mux(config: AppConfig | None = None) -> App:
    """An App answering anything with ``config.greeting``."""
    app = App(config)
    greeting = app.config.greeting

    @app.route("/")
    @app.route("/{path:path}")
    def hello() -> str:
        return greeting

    return app
