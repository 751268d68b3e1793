"""Redirects — short paths answered with a redirect, everything else delegated.

A redirect table maps short paths to destination URLs. It is built once,
from a mapping or a YAML/JSON document, and never changes afterwards::

    from urlshort.redirects import map_handler, yaml_handler

    handler = map_handler({"/gh": "https://github.com"}, fallback)
    handler = yaml_handler(Path("redirects.yaml").read_bytes(), fallback)

Malformed documents raise ``RedirectTableError`` while the handler is
being built, never while a request is being served.
"""

from urlshort.redirects.handler import RedirectHandler, json_handler, map_handler, yaml_handler
from urlshort.redirects.middleware import RedirectMiddleware
from urlshort.redirects.table import RedirectEntry, RedirectTable, load_redirects

__all__ = [
    "RedirectEntry",
    "RedirectHandler",
    "RedirectMiddleware",
    "RedirectTable",
    "json_handler",
    "load_redirects",
    "map_handler",
    "yaml_handler",
]
