"""Redirect list generators for static hosting providers.

Each provider expects its own file name and line syntax. The formats
below are part of the external contract and must match what the host
parses byte for byte.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RedirectRecord:
    """A single redirect from ``source`` to ``target``, both absolute paths."""

    source: str
    target: str


type RedirectListRenderer = Callable[[Sequence[RedirectRecord]], str]


@dataclass(frozen=True, slots=True)
class RedirectList:
    """A file listing redirects for a hosting provider.

    Attributes:
        file_name: Output path relative to the site root.
        render: Formats the redirect records, in table order, as file content.
    """

    file_name: str
    render: RedirectListRenderer

    def __call__(self, redirects: Sequence[RedirectRecord]) -> tuple[str, str]:
        return self.file_name, self.render(redirects)


def _flat_lines(redirects: Sequence[RedirectRecord], status: int | None) -> str:
    suffix = f" {status}" if status is not None else ""
    return "\n".join(f"{r.source} {r.target}{suffix}" for r in redirects)


def cloudflare_pages(status: int | None = None) -> RedirectList:
    """``_redirects`` for Cloudflare Pages.

    One redirect per line, newline separated, no trailing newline::

        /old /new
        /blog/old /blog/ 301

    The status column is only written when ``status`` is given; Cloudflare
    defaults to 302 otherwise.
    """
    return RedirectList("_redirects", lambda redirects: _flat_lines(redirects, status))


def netlify(status: int | None = None) -> RedirectList:
    """``_redirects`` for Netlify, in the same flat ``source target [status]`` format."""
    return RedirectList("_redirects", lambda redirects: _flat_lines(redirects, status))


_TOML_ESCAPES = {"\\": "\\\\", '"': '\\"'}


def _toml_string(value: str) -> str:
    """Quote ``value`` as a TOML basic string."""
    parts: list[str] = []
    for char in value:
        if char in _TOML_ESCAPES:
            parts.append(_TOML_ESCAPES[char])
        elif ord(char) < 0x20 or char == "\x7f":
            parts.append(f"\\u{ord(char):04X}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'


def static_web_server(kind: int = 302) -> RedirectList:
    """``config.toml`` for Static Web Server.

    Writes an ``[advanced]`` table followed by one array-of-tables entry
    per redirect, separated by blank lines::

        [advanced]

        [[advanced.redirects]]
        source = "/old"
        destination = "/new"
        kind = 302

    Paths are written as escaped TOML basic strings.
    """

    def render(redirects: Sequence[RedirectRecord]) -> str:
        blocks = (
            "[[advanced.redirects]]\n"
            f"source = {_toml_string(r.source)}\n"
            f"destination = {_toml_string(r.target)}\n"
            f"kind = {kind}"
            for r in redirects
        )
        return "[advanced]\n\n" + "\n\n".join(blocks)

    return RedirectList("config.toml", render)


PROVIDERS: dict[str, Callable[[], RedirectList]] = {
    "cloudflare": cloudflare_pages,
    "netlify": netlify,
    "static-web-server": static_web_server,
}
