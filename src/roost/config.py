"""Render configuration.

RenderConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Callable
from dataclasses import dataclass

from roost.errors import ConfigurationError
from roost.lists.redirects import RedirectList
from roost.lists.routes import RouteList
from roost.routing.resolver import DEFAULT_FALLBACK_NAME


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Rendering configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RenderConfig(
            redirect_lists=(cloudflare_pages(),),
            route_lists=(sitemap("https://example.com"),),
        )
    """

    # Redirect pages
    redirect_page_renderer: Callable[[str], str] | None = None  # None = built-in meta refresh page
    redirect_pages: bool = True  # False = rely on host redirect lists only
    resolve_redirect_chains: bool = False

    # Side files, folded into the file map in registration order (last write wins)
    redirect_lists: tuple[RedirectList, ...] = ()
    route_lists: tuple[RouteList, ...] = ()

    # Fallback pages resolve to <prefix>/<fallback_name>
    fallback_name: str = DEFAULT_FALLBACK_NAME

    # Text content is stored in the file map as bytes
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        # Accept lists for convenience; the config stays hashable and immutable.
        object.__setattr__(self, "redirect_lists", tuple(self.redirect_lists))
        object.__setattr__(self, "route_lists", tuple(self.route_lists))

        if not self.fallback_name or "/" in self.fallback_name:
            msg = (
                f"fallback_name must be a single path segment, got {self.fallback_name!r}"
            )
            raise ConfigurationError(msg)
        if self.fallback_name in (".", ".."):
            msg = f"fallback_name must not be {self.fallback_name!r}"
            raise ConfigurationError(msg)
        if self.redirect_page_renderer is not None and not callable(self.redirect_page_renderer):
            msg = "redirect_page_renderer must be callable"
            raise ConfigurationError(msg)
