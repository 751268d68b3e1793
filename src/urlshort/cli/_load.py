"""Redirect file loading shared by every subcommand.

Turns load failures into a one-line message on stderr and exit code 1.
"""

import sys

from urlshort.errors import RedirectTableError
from urlshort.redirects.table import RedirectTable, load_redirects


def load_or_exit(path: str) -> RedirectTable:
    """Load *path* or exit with status 1 and the error on stderr."""
    try:
        return load_redirects(path)
    except (RedirectTableError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
