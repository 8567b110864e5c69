"""Render a route table into a FileMap.

Pipeline order:
    1. Collapse redirect chains (if enabled)
    2. Assign output files, rejecting two entries that share one
    3. Render pages, fallbacks, and redirect pages
    4. Run redirect lists, then route lists, in registration order

Steps 1 and 2 run before any page producer is called, so a broken
table fails without rendering anything.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from roost.config import RenderConfig
from roost.errors import OutputPathCollision
from roost.lists.redirects import RedirectRecord
from roost.render.filemap import FileMap
from roost.render.persist import FileWriter, write_atomic
from roost.render.redirect_page import render_redirect_page
from roost.routing.endpoint import Page, Redirect
from roost.routing.paths import output_path
from roost.routing.resolver import EntrySource, RouteEntry, RouteTable, collapse_redirects, resolve
from roost.routing.tree import RouteTree

logger = logging.getLogger("roost.render")

_DEFAULT_CONFIG = RenderConfig()


def render_table(table: RouteTable, config: RenderConfig | None = None) -> FileMap:
    """Render every entry of ``table`` and the configured side files.

    Exceptions raised by page producers or redirect renderers propagate
    unchanged; the whole render is abandoned.

    Raises:
        RedirectCycle: If chain collapsing is enabled and redirects loop.
        OutputPathCollision: If two entries map to the same output file.
    """
    config = config or _DEFAULT_CONFIG
    if config.resolve_redirect_chains:
        table = collapse_redirects(table)

    planned = _plan_outputs(table, config)
    redirect_renderer: Callable[[str], str] = config.redirect_page_renderer or render_redirect_page

    files = FileMap(encoding=config.encoding)
    for entry, out in planned:
        match entry.endpoint:
            case Page(render=produce):
                files.put(out, produce())
            case Redirect(target=target):
                files.put(out, redirect_renderer(target))

    redirects = [
        RedirectRecord(entry.path, entry.endpoint.target)
        for entry in table.redirects()
        if isinstance(entry.endpoint, Redirect)
    ]
    for redirect_list in config.redirect_lists:
        name, content = redirect_list(redirects)
        _put_side_file(files, name, content)

    # Fallback pages are never listed; they are not navigable content.
    for route_list in config.route_lists:
        sources = [EntrySource.ROUTE]
        if route_list.include_redirects:
            sources.append(EntrySource.REDIRECT)
        name, content = route_list([entry.path for entry in table.of_source(*sources)])
        _put_side_file(files, name, content)

    logger.debug("Rendered %d file(s) from %d route(s)", len(files), len(table))
    return files


def _plan_outputs(table: RouteTable, config: RenderConfig) -> list[tuple[RouteEntry, str]]:
    """Pair each entry that produces a page with its output file."""
    planned: list[tuple[RouteEntry, str]] = []
    claimed: dict[str, str] = {}

    for entry in table:
        if entry.source is EntrySource.REDIRECT and not config.redirect_pages:
            continue
        out = output_path(entry.path)
        if out in claimed:
            raise OutputPathCollision(out, claimed[out], entry.path)
        claimed[out] = entry.path
        planned.append((entry, out))

    return planned


def _put_side_file(files: FileMap, name: str, content: str) -> None:
    if name in files:
        logger.debug("Side file %s replaces an earlier entry", name)
    files.put(name, content)


def render(tree: RouteTree, config: RenderConfig | None = None) -> FileMap:
    """Resolve ``tree`` and render it to an in-memory FileMap."""
    config = config or _DEFAULT_CONFIG
    return render_table(resolve(tree, fallback_name=config.fallback_name), config)


def build(
    tree: RouteTree,
    directory: str | Path,
    config: RenderConfig | None = None,
    *,
    writer: FileWriter = write_atomic,
) -> FileMap:
    """Render ``tree`` and write the result under ``directory``.

    Composition, resolution, and rendering errors are raised before any
    file is written.

    Raises:
        PersistError: If some files failed to write; the rest are on disk.
    """
    files = render(tree, config)
    files.write(directory, writer=writer)
    return files
