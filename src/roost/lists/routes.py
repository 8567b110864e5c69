"""Route list generators (sitemaps and plain listings)."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from xml.sax.saxutils import escape

type RouteListRenderer = Callable[[Sequence[str]], str]


@dataclass(frozen=True, slots=True)
class RouteList:
    """A file listing the navigable paths of the site.

    Attributes:
        file_name: Output path relative to the site root.
        render: Formats absolute paths, in table order, as file content.
        include_redirects: Also list paths that are redirects. Fallback
            pages are never listed.
    """

    file_name: str
    render: RouteListRenderer
    include_redirects: bool = False

    def __call__(self, paths: Sequence[str]) -> tuple[str, str]:
        return self.file_name, self.render(paths)


def sitemap(base_url: str, file_name: str = "sitemap.xml") -> RouteList:
    """An XML sitemap with one ``<url>`` per page.

    ``base_url`` is the site origin (``https://example.com``); a trailing
    ``/`` is dropped so ``<loc>`` never contains ``//`` after the host.
    """
    origin = base_url.rstrip("/")

    def render(paths: Sequence[str]) -> str:
        urls = "\n".join(
            f"  <url>\n    <loc>{escape(origin + path)}</loc>\n  </url>" for path in paths
        )
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
            f"{urls}\n"
            "</urlset>"
        )

    return RouteList(file_name, render)


def plain(file_name: str = "routes.txt", base_url: str = "") -> RouteList:
    """One URL (or path, without ``base_url``) per line, newline terminated."""
    origin = base_url.rstrip("/")

    def render(paths: Sequence[str]) -> str:
        return "".join(f"{origin}{path}\n" for path in paths)

    return RouteList(file_name, render)
