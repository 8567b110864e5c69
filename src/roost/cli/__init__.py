"""Roost CLI — list resolved routes and build a site to disk.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — bake a composable tree of routes into a static site.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log resolution, rendering, and write summaries",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- roost routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List resolved routes")
    routes_parser.add_argument(
        "site",
        help="Site reference, module[:name] (e.g. mysite:site)",
    )
    routes_parser.add_argument(
        "--fallback-name",
        default=None,
        help="Last path segment of fallback pages (default: 404, or the site's render_config)",
    )

    # -- roost build ------------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Render the site to a directory")
    build_parser.add_argument(
        "site",
        help="Site reference, module[:name] (e.g. mysite:site)",
    )
    build_parser.add_argument("output", help="Output directory")
    build_parser.add_argument(
        "--base-url",
        default=None,
        help="Site origin; writes sitemap.xml when given",
    )
    build_parser.add_argument(
        "--redirects",
        action="append",
        default=[],
        choices=["cloudflare", "netlify", "static-web-server"],
        help="Write a redirect list for a hosting provider (repeatable)",
    )
    build_parser.add_argument(
        "--resolve-chains",
        action="store_true",
        help="Point chained redirects straight at their final target",
    )
    build_parser.add_argument(
        "--no-redirect-pages",
        action="store_true",
        help="Skip HTML pages for redirects (host redirect lists only)",
    )
    build_parser.add_argument(
        "--fallback-name",
        default=None,
        help="Last path segment of fallback pages (default: 404, or the site's render_config)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "routes":
        from roost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "build":
        from roost.cli._build import run_build

        run_build(args)
