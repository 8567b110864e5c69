"""Flatten a RouteTree into an absolute, collision-free RouteTable.

Resolution is a depth-first walk. At each node, with accumulated prefix
``P``, it emits routes first, then recurses into children, then emits
the fallback at ``P/404``. Entry order therefore equals registration
order, which keeps rendered output (sitemaps in particular)
reproducible.
"""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import overload

from roost.errors import DuplicateResolvedPath, RedirectCycle
from roost.routing.endpoint import Endpoint, Redirect
from roost.routing.paths import join_path
from roost.routing.tree import RouteTree

logger = logging.getLogger("roost.resolve")

DEFAULT_FALLBACK_NAME = "404"


class EntrySource(StrEnum):
    """How an entry got into the table."""

    ROUTE = "route"
    REDIRECT = "redirect"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One resolved route.

    Attributes:
        path: Absolute path (always starts with ``/``).
        endpoint: The page or redirect served at ``path``.
        source: Whether the entry is a route, a redirect, or a fallback.
        origin: Human-readable registration site, used in error messages.
    """

    path: str
    endpoint: Endpoint
    source: EntrySource
    origin: str = ""

    @property
    def is_redirect(self) -> bool:
        return isinstance(self.endpoint, Redirect)


class RouteTable(Sequence[RouteEntry]):
    """Immutable, ordered sequence of resolved entries with unique paths."""

    __slots__ = ("_by_path", "_entries")

    def __init__(self, entries: Sequence[RouteEntry] = ()) -> None:
        self._entries: tuple[RouteEntry, ...] = tuple(entries)
        self._by_path: dict[str, RouteEntry] = {}
        for entry in self._entries:
            existing = self._by_path.get(entry.path)
            if existing is not None:
                raise DuplicateResolvedPath(entry.path, existing.origin, entry.origin)
            self._by_path[entry.path] = entry

    @overload
    def __getitem__(self, index: int) -> RouteEntry: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[RouteEntry, ...]: ...

    def __getitem__(self, index: int | slice) -> RouteEntry | tuple[RouteEntry, ...]:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self._entries)

    def __contains__(self, value: object) -> bool:
        if isinstance(value, str):
            return value in self._by_path
        return value in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteTable):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"RouteTable({[entry.path for entry in self._entries]!r})"

    def get(self, path: str) -> RouteEntry | None:
        """Return the entry at ``path``, or ``None``."""
        return self._by_path.get(path)

    def paths(self) -> tuple[str, ...]:
        """All absolute paths, in table order."""
        return tuple(entry.path for entry in self._entries)

    def of_source(self, *sources: EntrySource) -> tuple[RouteEntry, ...]:
        """Entries whose source is one of ``sources``, in table order."""
        return tuple(entry for entry in self._entries if entry.source in sources)

    def pages(self) -> tuple[RouteEntry, ...]:
        """Navigable content pages (explicit page routes only)."""
        return self.of_source(EntrySource.ROUTE)

    def redirects(self) -> tuple[RouteEntry, ...]:
        return self.of_source(EntrySource.REDIRECT)

    def fallbacks(self) -> tuple[RouteEntry, ...]:
        return self.of_source(EntrySource.FALLBACK)


def resolve(tree: RouteTree, *, fallback_name: str = DEFAULT_FALLBACK_NAME) -> RouteTable:
    """Flatten ``tree`` into a :class:`RouteTable`.

    Args:
        tree: Root of the route tree. It is only read.
        fallback_name: Last path segment of fallback pages.

    Raises:
        DuplicateResolvedPath: If two registrations produce the same
            absolute path, naming both registration sites.
    """
    entries: list[RouteEntry] = []
    _walk(tree, "", fallback_name, entries)
    table = RouteTable(entries)
    logger.debug(
        "Resolved %d entries (%d redirects, %d fallbacks)",
        len(table),
        len(table.redirects()),
        len(table.fallbacks()),
    )
    return table


def _walk(
    node: RouteTree,
    prefix: str,
    fallback_name: str,
    entries: list[RouteEntry],
) -> None:
    """Append the entries of ``node`` and its descendants in resolution order."""
    where = prefix or "/"

    for relative, endpoint in node.routes.items():
        source = EntrySource.REDIRECT if isinstance(endpoint, Redirect) else EntrySource.ROUTE
        entries.append(
            RouteEntry(
                path=join_path(prefix, relative),
                endpoint=endpoint,
                source=source,
                origin=f"{source} {relative!r} in tree at {where!r}",
            )
        )

    for child_prefix, child in node.children.items():
        _walk(child, join_path(prefix, child_prefix), fallback_name, entries)

    fallback = node.fallback_endpoint
    if fallback is not None:
        entries.append(
            RouteEntry(
                path=join_path(prefix, fallback_name),
                endpoint=fallback,
                source=EntrySource.FALLBACK,
                origin=f"fallback in tree at {where!r}",
            )
        )


def collapse_redirects(table: RouteTable) -> RouteTable:
    """Rewrite chained redirects to point straight at their final target.

    ``/a -> /b`` and ``/b -> /c`` become ``/a -> /c`` and ``/b -> /c``.
    Entries that are not redirects are returned unchanged.

    Raises:
        RedirectCycle: If a chain of redirects loops back on itself.
    """
    targets = {
        entry.path: entry.endpoint.target
        for entry in table
        if entry.source is EntrySource.REDIRECT and isinstance(entry.endpoint, Redirect)
    }
    if not targets:
        return table

    collapsed: list[RouteEntry] = []
    for entry in table:
        if entry.path not in targets:
            collapsed.append(entry)
            continue

        visited = {entry.path}
        final = targets[entry.path]
        while final in targets:
            if final in visited:
                raise RedirectCycle(final)
            visited.add(final)
            final = targets[final]

        if final == targets[entry.path]:
            collapsed.append(entry)
        else:
            collapsed.append(replace(entry, endpoint=Redirect(final)))

    return RouteTable(collapsed)
