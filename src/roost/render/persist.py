"""Write a FileMap to a directory.

Writes are independent: a failed entry is recorded and the remaining
entries are still attempted. Every failure is reported together at the
end in a single ``PersistError``, so a partial build stays on disk for
inspection and only the failed paths need retrying.
"""

import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from roost.errors import IoFailure, PersistError

logger = logging.getLogger("roost.persist")


class FileWriter(Protocol):
    """Writes ``data`` to ``path``, creating parent directories as needed."""

    def __call__(self, path: Path, data: bytes) -> None: ...


def write_atomic(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path`` without ever leaving a partial file behind.

    Content goes to a temporary file in the destination directory, which
    is then renamed over ``path``.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _target(root: Path, key: str) -> Path:
    """Filesystem path for a FileMap key, refusing keys that leave ``root``."""
    target = (root / key.lstrip("/")).resolve()
    if not target.is_relative_to(root):
        msg = f"Output path {key!r} escapes the output directory"
        raise ValueError(msg)
    return target


def write_file_map(
    file_map: Mapping[str, bytes],
    directory: str | Path,
    *,
    writer: FileWriter = write_atomic,
) -> tuple[Path, ...]:
    """Write every entry of ``file_map`` under ``directory``.

    Keys are ``/``-separated paths relative to ``directory``.

    Returns:
        The paths written, in file map order.

    Raises:
        PersistError: After all entries were attempted, if any failed.
            Carries one ``IoFailure`` per failed key.
    """
    root = Path(directory).resolve()
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PersistError(root, (IoFailure(".", exc),)) from exc

    written: list[Path] = []
    failures: list[IoFailure] = []

    for key, data in file_map.items():
        try:
            target = _target(root, key)
            writer(target, data)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to write %s: %s", key, exc)
            failures.append(IoFailure(key, exc))
            continue
        written.append(target)

    logger.debug("Wrote %d file(s) to %s", len(written), root)

    if failures:
        raise PersistError(root, tuple(failures))
    return tuple(written)
