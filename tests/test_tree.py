"""Tests for roost.routing.tree — composition operations."""

import pytest

from roost.errors import (
    AlreadyNested,
    ConflictingFallback,
    DuplicateFallback,
    DuplicatePrefix,
    DuplicateRoute,
    InvalidPath,
    NestingCycle,
)
from roost.routing.endpoint import Page, Redirect, page, redirect
from roost.routing.tree import RouteTree


def _home() -> str:
    return "<h1>Home</h1>"


class TestRoute:
    def test_registers_in_order(self) -> None:
        tree = RouteTree().route("/b", page("b")).route("/a", page("a"))
        assert list(tree.routes) == ["/b", "/a"]

    def test_returns_self_for_chaining(self) -> None:
        tree = RouteTree()
        assert tree.route("/", page("x")) is tree

    def test_duplicate_route(self) -> None:
        tree = RouteTree().route("/about", page("one"))
        with pytest.raises(DuplicateRoute) as exc_info:
            tree.route("/about", page("two"))
        assert exc_info.value.path == "/about"
        assert tree.routes["/about"]() == "one"

    def test_duplicate_route_page_and_redirect(self) -> None:
        tree = RouteTree().route("/x", page("x"))
        with pytest.raises(DuplicateRoute):
            tree.route("/x", redirect("/"))

    def test_shorthand_callable(self) -> None:
        tree = RouteTree().route("/", _home)
        endpoint = tree.routes["/"]
        assert isinstance(endpoint, Page)
        assert endpoint() == "<h1>Home</h1>"

    def test_shorthand_string(self) -> None:
        tree = RouteTree().route("/", "<p>hi</p>")
        assert tree.routes["/"]() == "<p>hi</p>"

    def test_invalid_path(self) -> None:
        tree = RouteTree()
        with pytest.raises(InvalidPath):
            tree.route("about", page("x"))
        assert len(tree.routes) == 0

    def test_invalid_redirect_target(self) -> None:
        with pytest.raises(InvalidPath):
            RouteTree().route("/old", Redirect("new"))

    def test_route_and_prefix_namespaces_independent(self) -> None:
        tree = RouteTree().route("/blog", page("x")).nest("/blog", RouteTree())
        assert "/blog" in tree.routes
        assert "/blog" in tree.children


class TestPageDecorator:
    def test_registers_function(self) -> None:
        tree = RouteTree()

        @tree.page("/about")
        def about() -> str:
            return "<h1>About</h1>"

        assert tree.routes["/about"]() == "<h1>About</h1>"
        assert about() == "<h1>About</h1>"

    def test_duplicate(self) -> None:
        tree = RouteTree().route("/about", page("x"))
        with pytest.raises(DuplicateRoute):

            @tree.page("/about")
            def about() -> str:
                return ""


class TestNest:
    def test_registers_child(self) -> None:
        child = RouteTree()
        tree = RouteTree().nest("/blog", child)
        assert tree.children["/blog"] is child

    def test_duplicate_prefix(self) -> None:
        tree = RouteTree().nest("/blog", RouteTree())
        with pytest.raises(DuplicatePrefix) as exc_info:
            tree.nest("/blog", RouteTree())
        assert exc_info.value.prefix == "/blog"

    def test_invalid_prefix(self) -> None:
        with pytest.raises(InvalidPath):
            RouteTree().nest("blog", RouteTree())

    def test_self_nesting(self) -> None:
        tree = RouteTree()
        with pytest.raises(NestingCycle):
            tree.nest("/loop", tree)
        assert len(tree.children) == 0

    def test_ancestor_nesting(self) -> None:
        root = RouteTree()
        child = RouteTree()
        root.nest("/child", child)
        with pytest.raises(NestingCycle):
            child.nest("/root", root)

    def test_sets_parent(self) -> None:
        child = RouteTree()
        tree = RouteTree().nest("/blog", child)
        assert child.parent is tree
        assert tree.parent is None

    def test_already_nested_elsewhere(self) -> None:
        shared = RouteTree().route("/x", page("x"))
        first = RouteTree().nest("/a", shared)
        second = RouteTree()
        with pytest.raises(AlreadyNested) as exc_info:
            second.nest("/b", shared)
        assert exc_info.value.prefix == "/b"
        assert len(second.children) == 0
        assert shared.parent is first

    def test_same_tree_twice_in_one_parent(self) -> None:
        shared = RouteTree().route("/x", page("x"))
        tree = RouteTree().nest("/a", shared)
        with pytest.raises(AlreadyNested):
            tree.nest("/b", shared)
        assert list(tree.children) == ["/a"]


class TestFallback:
    def test_sets_fallback(self) -> None:
        tree = RouteTree().fallback(page("<h1>404</h1>"))
        assert tree.fallback_endpoint is not None
        assert tree.fallback_endpoint() == "<h1>404</h1>"

    def test_duplicate_fallback(self) -> None:
        tree = RouteTree().fallback(page("one"))
        with pytest.raises(DuplicateFallback):
            tree.fallback(page("two"))
        assert tree.fallback_endpoint() == "one"

    def test_shorthand_callable(self) -> None:
        tree = RouteTree().fallback(lambda: "missing")
        assert isinstance(tree.fallback_endpoint, Page)


class TestMerge:
    def test_unions_routes_and_children(self) -> None:
        a = RouteTree().route("/", page("home"))
        b = RouteTree().route("/about", page("about")).nest("/blog", RouteTree())
        a.merge(b)
        assert list(a.routes) == ["/", "/about"]
        assert list(a.children) == ["/blog"]

    def test_takes_fallback(self) -> None:
        a = RouteTree()
        b = RouteTree().fallback(page("nf"))
        a.merge(b)
        assert a.fallback_endpoint is not None

    def test_consumes_other(self) -> None:
        a = RouteTree()
        b = RouteTree().route("/x", page("x")).nest("/y", RouteTree()).fallback(page("nf"))
        a.merge(b)
        assert len(b) == 0
        assert b.fallback_endpoint is None

    def test_duplicate_route_leaves_both_untouched(self) -> None:
        a = RouteTree().route("/", page("a"))
        b = RouteTree().route("/new", page("new")).route("/", page("b"))
        with pytest.raises(DuplicateRoute):
            a.merge(b)
        assert list(a.routes) == ["/"]
        assert list(b.routes) == ["/new", "/"]

    def test_duplicate_prefix(self) -> None:
        a = RouteTree().nest("/blog", RouteTree())
        b = RouteTree().nest("/blog", RouteTree())
        with pytest.raises(DuplicatePrefix):
            a.merge(b)

    def test_conflicting_fallback(self) -> None:
        a = RouteTree().fallback(page("a"))
        b = RouteTree().route("/x", page("x")).fallback(page("b"))
        with pytest.raises(ConflictingFallback):
            a.merge(b)
        assert a.fallback_endpoint() == "a"
        assert "/x" not in a.routes

    def test_merge_into_self(self) -> None:
        tree = RouteTree()
        with pytest.raises(ValueError, match="itself"):
            tree.merge(tree)

    def test_nested_tree_cannot_be_merged(self) -> None:
        blog = RouteTree().route("/", page("blog"))
        site = RouteTree().nest("/blog", blog)
        other = RouteTree()
        with pytest.raises(AlreadyNested):
            other.merge(blog)
        assert list(site.children["/blog"].routes) == ["/"]
        assert len(other) == 0

    def test_reparents_moved_children(self) -> None:
        child = RouteTree()
        a = RouteTree()
        b = RouteTree().nest("/blog", child)
        a.merge(b)
        assert child.parent is a
        with pytest.raises(AlreadyNested):
            RouteTree().nest("/elsewhere", child)


class TestIntrospection:
    def test_len_counts_resolved_entries(self) -> None:
        blog = RouteTree().route("/", page("b")).fallback(page("nf"))
        tree = RouteTree().route("/", page("h")).nest("/blog", blog)
        assert len(tree) == 3

    def test_views_are_read_only(self) -> None:
        tree = RouteTree().route("/", page("h"))
        with pytest.raises(TypeError):
            tree.routes["/x"] = page("x")  # type: ignore[index]

    def test_repr(self) -> None:
        tree = RouteTree().route("/", page("h")).nest("/blog", RouteTree())
        assert repr(tree) == "RouteTree(routes=['/'], children=['/blog'], fallback=False)"
