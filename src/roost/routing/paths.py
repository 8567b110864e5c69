"""Path joining, validation, and output file naming.

Every absolute path in a route table is built with :func:`join_path`,
and every output file name with :func:`output_path`. Keeping both in one
place avoids doubled or missing ``/`` separators when trees are nested.
"""

from roost.errors import InvalidPath

_FORBIDDEN_SEGMENTS = frozenset({".", ".."})


def join_path(prefix: str, path: str) -> str:
    """Join a prefix and a relative path with exactly one ``/`` between them.

    Examples::

        join_path("", "/")          -> "/"
        join_path("/", "/about")    -> "/about"
        join_path("/blog", "/")     -> "/blog/"
        join_path("/blog/", "/old") -> "/blog/old"
        join_path("/blog", "old")   -> "/blog/old"
        join_path("/a", "/b/")      -> "/a/b/"
    """
    head = prefix.rstrip("/")
    tail = path.lstrip("/")
    return f"{head}/{tail}"


def validate_path(path: str, *, kind: str = "path") -> None:
    """Reject malformed paths at registration time.

    Paths must be non-empty, start with ``/``, and contain no ``.`` or
    ``..`` segments (those would escape the output directory).

    Raises:
        InvalidPath: Naming the offending value and the reason.
    """
    if not path:
        raise InvalidPath(path, f'{kind} must not be empty, use "/" for the root')
    if not path.startswith("/"):
        raise InvalidPath(path, f"{kind} must start with '/'")
    if any(segment in _FORBIDDEN_SEGMENTS for segment in path.split("/")):
        raise InvalidPath(path, f"{kind} must not contain '.' or '..' segments")


def output_path(path: str) -> str:
    """Map an absolute route path to its output file, relative to the site root.

    Clean URL convention::

        /           -> index.html
        /blog/      -> blog/index.html
        /about      -> about.html
        /blog/404   -> blog/404.html
    """
    relative = path.lstrip("/")
    if not relative or relative.endswith("/"):
        return f"{relative}index.html"
    return f"{relative}.html"
