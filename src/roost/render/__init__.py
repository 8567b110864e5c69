"""Rendering — route table to file map, and file map to disk.

Pages are rendered in memory into a ``FileMap``; writing it to a
directory is a separate, optional step.
"""
