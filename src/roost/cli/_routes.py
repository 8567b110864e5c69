"""``roost routes`` — list resolved routes.

Loads a site reference, flattens it, and prints
every entry with its kind, absolute path, and target or origin.
"""

import argparse
import sys

from roost.cli._site import load_site
from roost.errors import RoostError
from roost.routing.endpoint import Redirect
from roost.routing.resolver import DEFAULT_FALLBACK_NAME, resolve


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of KIND, PATH, and TARGET for a site."""
    try:
        site = load_site(args.site)
        fallback_name = args.fallback_name
        if fallback_name is None:
            fallback_name = site.config.fallback_name if site.config else DEFAULT_FALLBACK_NAME
        table = resolve(site.tree, fallback_name=fallback_name)
    except RoostError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not table:
        print("No routes registered.")
        return

    # Build rows: (kind, path, detail)
    rows: list[tuple[str, str, str]] = []
    for entry in table:
        match entry.endpoint:
            case Redirect(target=target):
                detail = f"-> {target}"
            case _:
                detail = entry.origin
        rows.append((str(entry.source), entry.path, detail))

    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_kind}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("KIND", "PATH", "TARGET"))
    sep_len = max_kind + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for kind, path, detail in rows:
        print(fmt.format(kind, path, detail))
