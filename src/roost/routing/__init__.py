"""Routing — composable route trees flattened into an absolute route table.

Trees are built during setup with ``route``, ``nest``, ``merge``, and
``fallback``, then resolved once into an immutable ``RouteTable``.
"""
