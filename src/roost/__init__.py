"""Roost — bake a composable tree of routes into a static site.

Describe the site as a tree of pages and redirects, then render it to
files in memory or on disk.

Basic usage::

    from roost import RouteTree, page, redirect, render

    blog = RouteTree().route("/", page("<h1>Blog</h1>")).route("/old", redirect("/"))
    site = RouteTree().route("/", page("<h1>Home</h1>")).nest("/blog", blog)

    files = render(site)
    files["blog/index.html"]  # b"<h1>Blog</h1>"

Host-specific side files::

    from roost import RenderConfig, build, cloudflare_pages, sitemap

    config = RenderConfig(
        redirect_lists=(cloudflare_pages(),),
        route_lists=(sitemap("https://example.com"),),
    )
    build(site, "dist", config)
"""

__version__ = "0.1.0"
__all__ = [
    "AlreadyNested",
    "CompositionError",
    "ConfigurationError",
    "ConflictingFallback",
    "DuplicateFallback",
    "DuplicatePrefix",
    "DuplicateResolvedPath",
    "DuplicateRoute",
    "EntrySource",
    "FileMap",
    "InvalidPath",
    "IoFailure",
    "NestingCycle",
    "OutputPathCollision",
    "Page",
    "PersistError",
    "Redirect",
    "RedirectCycle",
    "RedirectList",
    "RedirectRecord",
    "RenderConfig",
    "ResolutionError",
    "RoostError",
    "RouteEntry",
    "RouteList",
    "RouteTable",
    "RouteTree",
    "SiteLoadError",
    "build",
    "cloudflare_pages",
    "collapse_redirects",
    "join_path",
    "netlify",
    "output_path",
    "page",
    "redirect",
    "render",
    "render_redirect_page",
    "render_table",
    "resolve",
    "sitemap",
    "static_web_server",
    "write_file_map",
]

_LAZY_IMPORTS: dict[str, str] = {
    # errors
    "AlreadyNested": "roost.errors",
    "CompositionError": "roost.errors",
    "ConfigurationError": "roost.errors",
    "ConflictingFallback": "roost.errors",
    "DuplicateFallback": "roost.errors",
    "DuplicatePrefix": "roost.errors",
    "DuplicateResolvedPath": "roost.errors",
    "DuplicateRoute": "roost.errors",
    "InvalidPath": "roost.errors",
    "IoFailure": "roost.errors",
    "NestingCycle": "roost.errors",
    "OutputPathCollision": "roost.errors",
    "PersistError": "roost.errors",
    "RedirectCycle": "roost.errors",
    "ResolutionError": "roost.errors",
    "RoostError": "roost.errors",
    "SiteLoadError": "roost.errors",
    # routing
    "Page": "roost.routing.endpoint",
    "Redirect": "roost.routing.endpoint",
    "page": "roost.routing.endpoint",
    "redirect": "roost.routing.endpoint",
    "join_path": "roost.routing.paths",
    "output_path": "roost.routing.paths",
    "RouteTree": "roost.routing.tree",
    "EntrySource": "roost.routing.resolver",
    "RouteEntry": "roost.routing.resolver",
    "RouteTable": "roost.routing.resolver",
    "collapse_redirects": "roost.routing.resolver",
    "resolve": "roost.routing.resolver",
    # config
    "RenderConfig": "roost.config",
    # rendering
    "FileMap": "roost.render.filemap",
    "render_redirect_page": "roost.render.redirect_page",
    "build": "roost.render.renderer",
    "render": "roost.render.renderer",
    "render_table": "roost.render.renderer",
    "write_file_map": "roost.render.persist",
    # side files
    "RedirectList": "roost.lists.redirects",
    "RedirectRecord": "roost.lists.redirects",
    "cloudflare_pages": "roost.lists.redirects",
    "netlify": "roost.lists.redirects",
    "static_web_server": "roost.lists.redirects",
    "RouteList": "roost.lists.routes",
    "sitemap": "roost.lists.routes",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast (kida is only loaded when rendering) while
    providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    module = importlib.import_module(module_path)
    return getattr(module, name)
