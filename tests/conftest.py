"""Shared fixtures: a fallback app with real pages to redirect to."""

import pytest

from urlshort.app import App
from urlshort.config import AppConfig

DEFAULT_BODY = "Hello, testing world!"

# (short path, destination URL); destinations are served by the fallback app
HANDLER_TESTS: list[tuple[str, str]] = [
    ("/urlshort-godoc", "http://testserver/godoc/urlshort"),
    ("/yaml-godoc", "/godoc/yaml"),
]


def make_fallback() -> App:
    """Fallback app: a couple of documentation pages, a greeting everywhere else."""
    app = App(AppConfig(greeting=DEFAULT_BODY))

    @app.route("/godoc/{pkg}")
    def godoc(pkg: str) -> str:
        return f"Documentation for {pkg}"

    @app.route("/")
    @app.route("/{path:path}")
    def hello() -> str:
        return DEFAULT_BODY

    return app


@pytest.fixture
def fallback() -> App:
    return make_fallback()
