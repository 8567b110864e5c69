"""Load the site a CLI command operates on.

A site reference is ``"package.module"`` or ``"package.module:name"``.
``name`` defaults to ``site`` and may be a ``RouteTree`` or a
zero-argument function that builds one. A module-level ``RenderConfig``
named ``render_config`` is picked up as well; command-line flags are
applied on top of it.

Only lookup problems become ``SiteLoadError``. Exceptions raised while a
builder function runs are bugs in the site and propagate unchanged.
"""

import importlib
from dataclasses import dataclass

from roost.config import RenderConfig
from roost.errors import SiteLoadError
from roost.routing.tree import RouteTree

DEFAULT_TREE_NAME = "site"
CONFIG_NAME = "render_config"


@dataclass(frozen=True, slots=True)
class Site:
    """A route tree together with the config its module declares."""

    tree: RouteTree
    config: RenderConfig | None = None


def load_site(reference: str) -> Site:
    """Import the module named by ``reference`` and return its site.

    Raises:
        SiteLoadError: If the module cannot be imported, the name is
            missing, or it does not produce a ``RouteTree``.
    """
    module_name, _, tree_name = reference.partition(":")
    tree_name = tree_name or DEFAULT_TREE_NAME
    if not module_name:
        raise SiteLoadError(reference, "missing module name")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SiteLoadError(reference, f"cannot import {module_name!r} ({exc})") from exc

    try:
        target = getattr(module, tree_name)
    except AttributeError:
        msg = f"module {module_name!r} has no attribute {tree_name!r}"
        raise SiteLoadError(reference, msg) from None

    tree = target() if callable(target) and not isinstance(target, RouteTree) else target
    if not isinstance(tree, RouteTree):
        raise SiteLoadError(reference, f"expected a RouteTree, got {type(tree).__name__}")

    config = getattr(module, CONFIG_NAME, None)
    if config is not None and not isinstance(config, RenderConfig):
        msg = f"{CONFIG_NAME!r} is a {type(config).__name__}, not a RenderConfig"
        raise SiteLoadError(reference, msg)

    return Site(tree, config)
