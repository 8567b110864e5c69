"""Page and Redirect frozen dataclasses.

An endpoint is what a route resolves to: either a page producer or a
redirect target. The set of kinds is closed, so consumers dispatch with
``match`` rather than through a handler protocol.
"""

from collections.abc import Callable
from dataclasses import dataclass

from roost.routing.paths import validate_path

type PageProducer = Callable[[], str]


@dataclass(frozen=True, slots=True)
class Page:
    """A page whose HTML is produced by calling ``render``.

    ``render`` may be called more than once and should return the same
    text each time.
    """

    render: PageProducer

    def __call__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect to an absolute path.

    The target is not checked against the route table, so a redirect
    may point at a path the site does not render.
    """

    target: str


type Endpoint = Page | Redirect


def page(content: PageProducer | str) -> Page:
    """Wrap a producer (or constant HTML) into a ``Page``.

    Usage::

        tree.route("/", page(lambda: "<h1>Home</h1>"))
        tree.route("/about", page("<h1>About</h1>"))
    """
    if isinstance(content, str):
        text = content

        def _constant() -> str:
            return text

        return Page(_constant)
    if not callable(content):
        msg = f"page() expects a callable or a string, got {type(content).__name__}"
        raise TypeError(msg)
    return Page(content)


def redirect(target: str) -> Redirect:
    """Create a redirect to ``target``, which must start with ``/``."""
    validate_path(target, kind="redirect target")
    return Redirect(target)


def as_endpoint(value: Endpoint | PageProducer | str) -> Endpoint:
    """Coerce shorthand values accepted by the tree-building API."""
    match value:
        case Page() | Redirect():
            return value
        case _:
            return page(value)
