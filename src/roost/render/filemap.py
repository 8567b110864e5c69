"""In-memory rendered output: output file path to byte content."""

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roost.render.persist import FileWriter


class FileMap(Mapping[str, bytes]):
    """Rendered files keyed by ``/``-separated path relative to the site root.

    Built incrementally with :meth:`put`. A later ``put`` to the same
    path replaces the earlier content (last write wins). Pages never
    collide with each other, since the renderer rejects that before
    rendering; side files from different generators can, and the one
    registered last is kept.
    """

    __slots__ = ("_encoding", "_files")

    def __init__(self, encoding: str = "utf-8") -> None:
        self._files: dict[str, bytes] = {}
        self._encoding = encoding

    def put(self, path: str, content: str | bytes) -> None:
        """Store ``content`` at ``path``, encoding text with the map's encoding."""
        if isinstance(content, str):
            content = content.encode(self._encoding)
        self._files[path] = content

    def text(self, path: str, encoding: str | None = None) -> str:
        """Decoded content of ``path``. Raises ``KeyError`` if absent."""
        return self._files[path].decode(encoding or self._encoding)

    def __getitem__(self, path: str) -> bytes:
        return self._files[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"FileMap({sorted(self._files)!r})"

    def write(self, directory: str | Path, *, writer: "FileWriter | None" = None) -> tuple[Path, ...]:
        """Write every file under ``directory``. See :func:`write_file_map`."""
        from roost.render.persist import write_atomic, write_file_map

        return write_file_map(self, directory, writer=writer or write_atomic)
