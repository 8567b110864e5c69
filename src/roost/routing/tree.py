"""Composable route tree.

A ``RouteTree`` is a builder: pages, redirects, nested subtrees, and a
fallback are registered on it, then it is flattened once by
:func:`roost.routing.resolver.resolve`. No resolution logic lives here.
"""

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType

from roost.errors import (
    AlreadyNested,
    ConflictingFallback,
    DuplicateFallback,
    DuplicatePrefix,
    DuplicateRoute,
    NestingCycle,
)
from roost.routing.endpoint import Endpoint, Page, PageProducer, Redirect, as_endpoint
from roost.routing.paths import validate_path


class RouteTree:
    """A node of routes, nested subtrees, and an optional fallback.

    Every operation either succeeds completely or raises a
    ``CompositionError`` and leaves the tree unchanged. Operations return
    the tree so calls can be chained::

        blog = (
            RouteTree()
            .route("/", page("<h1>Blog</h1>"))
            .route("/old", redirect("/"))
            .fallback(page("<h1>No such post</h1>"))
        )
        site = RouteTree().route("/", page("<h1>Home</h1>")).nest("/blog", blog)

    Pages can also be registered with a decorator::

        @site.page("/about")
        def about() -> str:
            return "<h1>About</h1>"
    """

    __slots__ = ("_children", "_fallback", "_parent", "_routes")

    def __init__(self) -> None:
        self._routes: dict[str, Endpoint] = {}
        self._children: dict[str, RouteTree] = {}
        self._fallback: Endpoint | None = None
        self._parent: RouteTree | None = None

    # -- Introspection --

    @property
    def routes(self) -> Mapping[str, Endpoint]:
        """Routes registered at this level, in registration order."""
        return MappingProxyType(self._routes)

    @property
    def children(self) -> Mapping[str, "RouteTree"]:
        """Nested subtrees keyed by prefix, in registration order."""
        return MappingProxyType(self._children)

    @property
    def parent(self) -> "RouteTree | None":
        """The tree this one is nested in, or ``None`` for a root."""
        return self._parent

    @property
    def fallback_endpoint(self) -> Endpoint | None:
        """The fallback set at this level, if any."""
        return self._fallback

    def __len__(self) -> int:
        """Number of entries this tree resolves to, children included."""
        own = len(self._routes) + (self._fallback is not None)
        return own + sum(len(child) for child in self._children.values())

    def __repr__(self) -> str:
        return (
            f"RouteTree(routes={list(self._routes)!r}, "
            f"children={list(self._children)!r}, "
            f"fallback={self._fallback is not None})"
        )

    def _subtrees(self) -> Iterator["RouteTree"]:
        """Yield this tree and every descendant."""
        yield self
        for child in self._children.values():
            yield from child._subtrees()

    # -- Composition --

    def route(self, path: str, endpoint: Endpoint | PageProducer | str) -> "RouteTree":
        """Register ``endpoint`` at ``path`` relative to this tree.

        Raises:
            InvalidPath: If ``path`` is malformed.
            DuplicateRoute: If ``path`` is already registered at this level.
        """
        validate_path(path, kind="route path")
        if path in self._routes:
            raise DuplicateRoute(path)
        resolved = as_endpoint(endpoint)
        if isinstance(resolved, Redirect):
            validate_path(resolved.target, kind="redirect target")
        self._routes[path] = resolved
        return self

    def page(self, path: str) -> Callable[[PageProducer], PageProducer]:
        """Decorator registering a function as the page at ``path``.

        The function is returned unchanged so it can still be called
        directly.
        """

        def decorator(func: PageProducer) -> PageProducer:
            self.route(path, Page(func))
            return func

        return decorator

    def nest(self, prefix: str, subtree: "RouteTree") -> "RouteTree":
        """Mount ``subtree`` under ``prefix``.

        Every path in ``subtree`` resolves to ``join_path(prefix, path)``.
        A prefix of ``"/"`` is equivalent to no prefix. The parent owns the
        subtree afterwards, so it cannot be nested anywhere else.

        Raises:
            InvalidPath: If ``prefix`` is malformed.
            DuplicatePrefix: If ``prefix`` already has a nested tree.
            NestingCycle: If ``subtree`` is this tree or contains it.
            AlreadyNested: If ``subtree`` is already nested in a tree.
        """
        validate_path(prefix, kind="prefix")
        if prefix in self._children:
            raise DuplicatePrefix(prefix)
        if any(node is self for node in subtree._subtrees()):
            raise NestingCycle(prefix)
        if subtree._parent is not None:
            raise AlreadyNested(prefix)
        self._children[prefix] = subtree
        subtree._parent = self
        return self

    def merge(self, other: "RouteTree") -> "RouteTree":
        """Move all routes, subtrees, and the fallback of ``other`` into this tree.

        ``other`` is left empty. All conflicts are checked before anything is moved, so a failed
        merge leaves both trees untouched.

        Raises:
            DuplicateRoute: If both trees register the same path.
            DuplicatePrefix: If both trees nest under the same prefix.
            ConflictingFallback: If both trees define a fallback.
            NestingCycle: If this tree is nested somewhere inside ``other``.
            AlreadyNested: If ``other`` is itself nested in a tree.
        """
        if other is self:
            msg = "Cannot merge a route tree into itself"
            raise ValueError(msg)
        if other._parent is not None:
            raise AlreadyNested

        for path in other._routes:
            if path in self._routes:
                raise DuplicateRoute(path)
        for prefix, child in other._children.items():
            if prefix in self._children:
                raise DuplicatePrefix(prefix)
            if any(node is self for node in child._subtrees()):
                raise NestingCycle(prefix)
        if self._fallback is not None and other._fallback is not None:
            raise ConflictingFallback

        self._routes.update(other._routes)
        self._children.update(other._children)
        for child in other._children.values():
            child._parent = self
        if other._fallback is not None:
            self._fallback = other._fallback

        # ``other`` is consumed so no subtree ends up with two owners.
        other._routes.clear()
        other._children.clear()
        other._fallback = None
        return self

    def fallback(self, endpoint: Endpoint | PageProducer | str) -> "RouteTree":
        """Set the page served for unmatched paths under this tree.

        It resolves to ``<prefix>/404`` (the last segment is configurable
        via ``RenderConfig.fallback_name``).

        Raises:
            DuplicateFallback: If a fallback is already set.
        """
        if self._fallback is not None:
            raise DuplicateFallback
        resolved = as_endpoint(endpoint)
        if isinstance(resolved, Redirect):
            validate_path(resolved.target, kind="redirect target")
        self._fallback = resolved
        return self
