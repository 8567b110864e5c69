"""``roost build`` — render a site and write it to a directory.

Composition and resolution errors are reported before anything is
written. Write failures are reported per path after every file has
been attempted; exits with code 1 in either case.
"""

import argparse
import sys
from dataclasses import replace

from roost.cli._site import load_site
from roost.config import RenderConfig
from roost.errors import PersistError, RoostError
from roost.lists.redirects import PROVIDERS
from roost.lists.routes import sitemap
from roost.render.renderer import build


def config_from_args(args: argparse.Namespace, base: RenderConfig | None = None) -> RenderConfig:
    """Apply ``roost build`` flags on top of ``base``.

    Flags only override what they name. Redirect lists and the sitemap
    are appended after the lists ``base`` already carries.
    """
    config = base or RenderConfig()
    overrides: dict[str, object] = {}
    if args.no_redirect_pages:
        overrides["redirect_pages"] = False
    if args.resolve_chains:
        overrides["resolve_redirect_chains"] = True
    if args.fallback_name is not None:
        overrides["fallback_name"] = args.fallback_name
    if args.redirects:
        overrides["redirect_lists"] = (
            *config.redirect_lists,
            *(PROVIDERS[name]() for name in args.redirects),
        )
    if args.base_url:
        overrides["route_lists"] = (*config.route_lists, sitemap(args.base_url))
    return replace(config, **overrides) if overrides else config


def run_build(args: argparse.Namespace) -> None:
    """Build the site named by ``args.site`` into ``args.output``."""
    try:
        site = load_site(args.site)
        config = config_from_args(args, site.config)
        files = build(site.tree, args.output, config)
    except PersistError as exc:
        print(f"Error: {len(exc.failures)} file(s) failed to write:", file=sys.stderr)
        for failure in exc.failures:
            print(f"  {failure}", file=sys.stderr)
        raise SystemExit(1) from exc
    except RoostError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Wrote {len(files)} file(s) to {args.output}")
