"""Side-file generators — redirect maps and route lists (sitemaps).

Generators are pure formatting functions over a resolved ``RouteTable``.
The renderer folds their output into the same file map as the pages.
"""
