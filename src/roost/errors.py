"""Roost exception hierarchy.

Shared across the route tree, resolver, renderer, and persistence layer
so every module raises and catches the same types.
"""

from dataclasses import dataclass
from pathlib import Path


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when a ``RenderConfig`` is invalid.

    Typically raised from ``RenderConfig.__post_init__``.
    """


# -- Composition (tree-building) errors --


class CompositionError(RoostError):
    """A structural error while building a ``RouteTree``.

    Raised immediately by the failing operation. The tree is left in
    its pre-operation state.
    """


class InvalidPath(CompositionError):  # noqa: N818
    """A route path, prefix, or redirect target is malformed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path {path!r}: {reason}")


class DuplicateRoute(CompositionError):  # noqa: N818
    """A route with the same relative path already exists at this level."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Route {path!r} is already registered at this level")


class DuplicatePrefix(CompositionError):  # noqa: N818
    """A subtree is already nested under the same prefix at this level."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"Prefix {prefix!r} already has a nested tree at this level")


class DuplicateFallback(CompositionError):  # noqa: N818
    """The tree level already has a fallback."""

    def __init__(self) -> None:
        super().__init__("A fallback is already set at this level")


class ConflictingFallback(CompositionError):  # noqa: N818
    """Both trees in a merge define a fallback."""

    def __init__(self) -> None:
        super().__init__("Cannot merge: both trees define a fallback")


class NestingCycle(CompositionError):  # noqa: N818
    """A tree was nested inside itself or one of its own descendants."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(
            f"Cannot nest under {prefix!r}: the subtree contains the parent tree"
        )


class AlreadyNested(CompositionError):  # noqa: N818
    """A tree that is already mounted under a parent was nested or merged again.

    A subtree has exactly one owner. Build a separate tree for each mount
    point instead of sharing one.
    """

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix
        if prefix:
            detail = f"Cannot nest under {prefix!r}: the tree is already nested elsewhere"
        else:
            detail = "Cannot merge a tree that is nested inside another tree"
        super().__init__(detail)


# -- Site loading errors --


class SiteLoadError(RoostError):
    """A ``module:name`` site reference could not be turned into a route tree."""

    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(f"Cannot load site {reference!r}: {reason}")


# -- Resolution errors --


class ResolutionError(RoostError):
    """Raised while flattening a tree, before any page is rendered."""


class DuplicateResolvedPath(ResolutionError):  # noqa: N818
    """Two registrations resolved to the same absolute path."""

    def __init__(self, path: str, first: str = "", second: str = "") -> None:
        self.path = path
        self.first = first
        self.second = second
        if first and second:
            detail = f"Path {path!r} is produced by both {first} and {second}"
        else:
            detail = f"Path {path!r} is produced more than once"
        super().__init__(detail)


class RedirectCycle(ResolutionError):  # noqa: N818
    """Following a chain of redirects leads back to a visited path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cycle in redirects starting at {path!r}")


class OutputPathCollision(ResolutionError):  # noqa: N818
    """Two resolved paths map to the same output file."""

    def __init__(self, output: str, first: str, second: str) -> None:
        self.output = output
        self.first = first
        self.second = second
        super().__init__(
            f"Paths {first!r} and {second!r} both render to {output!r}"
        )


# -- Persistence errors --


@dataclass(frozen=True, slots=True)
class IoFailure:
    """A single file that could not be written.

    Attributes:
        path: FileMap key of the entry.
        error: The underlying exception.
    """

    path: str
    error: Exception

    def __str__(self) -> str:
        return f"{self.path}: {self.error}"


class PersistError(RoostError):
    """One or more files failed to write.

    Raised after every entry has been attempted. Files that were written
    successfully stay on disk, so the partial build can be inspected and
    only ``failures`` need retrying.
    """

    def __init__(self, directory: Path, failures: tuple[IoFailure, ...]) -> None:
        self.directory = directory
        self.failures = failures
        lines = "\n".join(f"  {failure}" for failure in failures)
        super().__init__(
            f"{len(failures)} file(s) failed to write under {directory}:\n{lines}"
        )

    @property
    def paths(self) -> tuple[str, ...]:
        """FileMap keys of every failed write."""
        return tuple(failure.path for failure in self.failures)
