"""``urlshort serve`` — redirect table in front of the default mux.

Loads the redirect file before binding, so a malformed file stops the
command instead of surfacing on the first request.
"""

import argparse
import logging
from dataclasses import replace

from urlshort.cli._load import load_or_exit
from urlshort.config import AppConfig
from urlshort.fallback import default_mux
from urlshort.redirects.handler import RedirectHandler


def build_config(args: argparse.Namespace) -> AppConfig:
    """Apply CLI overrides on top of the default ``AppConfig``."""
    config = AppConfig()
    overrides: dict[str, object] = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.greeting is not None:
        overrides["greeting"] = args.greeting
    if args.debug:
        overrides["debug"] = True
        overrides["log_level"] = "debug"
    return replace(config, **overrides)


def serve(args: argparse.Namespace) -> None:
    """Load the redirect file, wrap the default mux, and start serving."""
    config = build_config(args)
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    table = load_or_exit(args.redirects)
    handler = RedirectHandler(table, default_mux(config), status=config.redirect_status)

    from urlshort.server.serve import run_server

    run_server(handler, config.host, config.port, log_level=config.log_level)
