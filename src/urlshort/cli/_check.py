"""``urlshort check`` and ``urlshort routes`` — inspect a redirect file."""

import argparse

from urlshort.cli._load import load_or_exit


def run_check(args: argparse.Namespace) -> None:
    """Validate the redirect file and report how many entries it holds."""
    table = load_or_exit(args.redirects)
    print(f"{args.redirects}: {len(table)} redirect(s) OK")


def list_routes(args: argparse.Namespace) -> None:
    """Print ``path -> url`` for every entry, sorted by path."""
    table = load_or_exit(args.redirects)
    for entry in table.entries():
        print(f"{entry.path} -> {entry.url}")
