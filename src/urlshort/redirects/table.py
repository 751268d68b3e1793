"""Immutable redirect table and the document parsers that build it.

Documents are a sequence of ``{path, url}`` records::

    - path: /urlshort
      url: https://github.com/gophercises/urlshort
    - path: /urlshort-final
      url: https://github.com/gophercises/urlshort/tree/solution

YAML goes through PyYAML's ``safe_load``; JSON through the stdlib.
Later entries win when a path appears twice.
"""

from __future__ import annotations

import json as json_module
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from urlshort.errors import RedirectTableError

logger = logging.getLogger("urlshort.redirects")


@dataclass(frozen=True, slots=True)
class RedirectEntry:
    """One ``path -> url`` record from a redirect document."""

    path: str
    url: str


class RedirectTable(Mapping[str, str]):
    """Immutable mapping from short path to destination URL.

    The source mapping is copied at construction; mutating it later
    does not change the table.
    """

    __slots__ = ("_entries",)

    def __init__(self, paths_to_urls: Mapping[str, str] | None = None) -> None:
        object.__setattr__(self, "_entries", dict(paths_to_urls or {}))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "RedirectTable is immutable"
        raise AttributeError(msg)

    def __getitem__(self, path: str) -> str:
        return self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RedirectTable({self._entries!r})"

    def resolve(self, path: str) -> str | None:
        """Return the destination URL for *path*, or ``None`` on a miss."""
        return self._entries.get(path)

    def entries(self) -> list[RedirectEntry]:
        """Return the table as ``RedirectEntry`` records, sorted by path."""
        return [RedirectEntry(path, url) for path, url in sorted(self._entries.items())]

    # -- Constructors --

    @classmethod
    def from_entries(cls, entries: Iterable[RedirectEntry]) -> RedirectTable:
        """Build a table from entries; later duplicates win."""
        return cls({entry.path: entry.url for entry in entries})

    @classmethod
    def from_yaml(cls, yml: str | bytes) -> RedirectTable:
        """Parse a YAML sequence of ``{path, url}`` records.

        Raises:
            RedirectTableError: If the YAML is malformed or not shaped
                like a list of ``{path, url}`` records.
        """
        try:
            document = yaml.safe_load(yml)
        except yaml.YAMLError as exc:
            msg = f"invalid YAML: {exc}"
            raise RedirectTableError(msg) from exc
        return cls.from_entries(parse_entries(document))

    @classmethod
    def from_json(cls, data: str | bytes) -> RedirectTable:
        """Parse a JSON array of ``{"path": ..., "url": ...}`` objects.

        Raises:
            RedirectTableError: If the JSON is malformed or mis-shaped.
        """
        try:
            document = json_module.loads(data)
        except (ValueError, UnicodeDecodeError) as exc:
            msg = f"invalid JSON: {exc}"
            raise RedirectTableError(msg) from exc
        return cls.from_entries(parse_entries(document))


def parse_entries(document: Any) -> list[RedirectEntry]:
    """Validate a decoded document and turn it into entries.

    ``None`` (an empty document) is an empty table.
    """
    if document is None:
        return []
    if not isinstance(document, list):
        msg = f"expected a list of {{path, url}} records, got {type(document).__name__}"
        raise RedirectTableError(msg)

    entries: list[RedirectEntry] = []
    for index, item in enumerate(document):
        if not isinstance(item, Mapping):
            msg = f"expected a {{path, url}} record, got {type(item).__name__}"
            raise RedirectTableError(msg, index=index)
        for key in ("path", "url"):
            if key not in item:
                raise RedirectTableError(f"missing {key!r}", index=index)
            if not isinstance(item[key], str):
                msg = f"{key!r} must be a string, got {type(item[key]).__name__}"
                raise RedirectTableError(msg, index=index)
        entries.append(RedirectEntry(path=item["path"], url=item["url"]))
    return entries


_PARSERS = {
    ".yaml": RedirectTable.from_yaml,
    ".yml": RedirectTable.from_yaml,
    ".json": RedirectTable.from_json,
}


def load_redirects(path: str | Path) -> RedirectTable:
    """Load a redirect table from a ``.yaml``/``.yml``/``.json`` file.

    Raises:
        RedirectTableError: On an unknown extension or a malformed document.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        known = ", ".join(sorted(_PARSERS))
        msg = f"{path}: unsupported redirect file type {path.suffix!r} (expected one of {known})"
        raise RedirectTableError(msg)

    try:
        table = parser(path.read_bytes())
    except RedirectTableError as exc:
        error = RedirectTableError(f"{path}: {exc}")
        error.index = exc.index
        raise error from exc

    logger.info("Loaded %d redirects from %s", len(table), path)
    return table
