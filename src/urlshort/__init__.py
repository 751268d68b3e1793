"""urlshort — redirect short paths, fall back to a default handler.

A redirect table maps short paths to destination URLs. Requests for a
path in the table get a 302 to its URL; everything else goes to the
fallback application.

Basic usage::

    from urlshort import default_mux, map_handler, yaml_handler

    mux = default_mux()
    handler = map_handler(
        {
            "/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort",
            "/yaml-godoc": "https://godoc.org/gopkg.in/yaml.v2",
        },
        mux,
    )

    handler = yaml_handler(
        \"\"\"
        - path: /urlshort
          url: https://github.com/gophercises/urlshort
        \"\"\",
        handler,
    )

Serving (``pip install urlshort[serve]``)::

    urlshort serve redirects.yaml
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "Middleware",
    "Next",
    "NotFound",
    "RedirectHandler",
    "RedirectMiddleware",
    "RedirectTable",
    "RedirectTableError",
    "Request",
    "Response",
    "UrlshortError",
    "default_mux",
    "json_handler",
    "load_redirects",
    "map_handler",
    "redirect",
    "yaml_handler",
]


def __getattr__(name: str) -> object:
    """Resolve public names on first access.

    Keeps ``import urlshort`` fast while providing a clean top-level API.
    """
    if name == "App":
        from urlshort.app import App

        return App

    if name == "AppConfig":
        from urlshort.config import AppConfig

        return AppConfig

    if name == "Request":
        from urlshort.http.request import Request

        return Request

    if name in ("Response", "redirect"):
        from urlshort.http import response as _resp

        return getattr(_resp, name)

    if name in ("Middleware", "Next"):
        from urlshort.middleware import protocol as _mw

        return getattr(_mw, name)

    if name == "default_mux":
        from urlshort.fallback import default_mux

        return default_mux

    if name in (
        "RedirectHandler",
        "RedirectMiddleware",
        "RedirectTable",
        "json_handler",
        "load_redirects",
        "map_handler",
        "yaml_handler",
    ):
        from urlshort import redirects as _redirects

        return getattr(_redirects, name)

    if name in (
        "ConfigurationError",
        "HTTPError",
        "NotFound",
        "RedirectTableError",
        "UrlshortError",
    ):
        from urlshort import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
