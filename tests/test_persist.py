"""Tests for roost.render.persist — writing a FileMap to disk."""

from pathlib import Path

import pytest

from roost.errors import IoFailure, PersistError
from roost.render.persist import write_atomic, write_file_map


class TestWriteAtomic:
    def test_creates_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "page.html"
        write_atomic(target, b"<p>hi</p>")
        assert target.read_bytes() == b"<p>hi</p>"

    def test_overwrites(self, tmp_path: Path) -> None:
        target = tmp_path / "page.html"
        target.write_bytes(b"old")
        write_atomic(target, b"new")
        assert target.read_bytes() == b"new"

    def test_leaves_no_temp_files(self, tmp_path: Path) -> None:
        write_atomic(tmp_path / "page.html", b"x")
        assert [p.name for p in tmp_path.iterdir()] == ["page.html"]


class TestWriteFileMap:
    def test_writes_all(self, tmp_path: Path) -> None:
        files = {
            "index.html": b"home",
            "blog/index.html": b"blog",
            "blog/old.html": b"redirect",
            "_redirects": b"/blog/old /",
        }
        written = write_file_map(files, tmp_path)
        assert len(written) == 4
        assert (tmp_path / "blog" / "old.html").read_bytes() == b"redirect"
        assert (tmp_path / "_redirects").read_bytes() == b"/blog/old /"

    def test_creates_root(self, tmp_path: Path) -> None:
        root = tmp_path / "new" / "site"
        write_file_map({"index.html": b"x"}, root)
        assert (root / "index.html").exists()

    def test_accepts_str_directory(self, tmp_path: Path) -> None:
        write_file_map({"index.html": b"x"}, str(tmp_path))
        assert (tmp_path / "index.html").read_bytes() == b"x"

    def test_collects_all_failures(self, tmp_path: Path) -> None:
        attempted: list[str] = []

        def flaky(path: Path, data: bytes) -> None:
            attempted.append(path.name)
            if data == b"bad":
                raise OSError(f"cannot write {path.name}")
            write_atomic(path, data)

        files = {"a.html": b"bad", "b.html": b"good", "c.html": b"bad", "d.html": b"good"}
        with pytest.raises(PersistError) as exc_info:
            write_file_map(files, tmp_path, writer=flaky)

        err = exc_info.value
        assert attempted == ["a.html", "b.html", "c.html", "d.html"]
        assert err.paths == ("a.html", "c.html")
        assert all(isinstance(f, IoFailure) for f in err.failures)
        assert isinstance(err.failures[0].error, OSError)
        assert (tmp_path / "b.html").read_bytes() == b"good"
        assert (tmp_path / "d.html").read_bytes() == b"good"
        assert "2 file(s) failed" in str(err)
        assert "a.html: cannot write a.html" in str(err)

    def test_escaping_key_is_failure(self, tmp_path: Path) -> None:
        root = tmp_path / "site"
        with pytest.raises(PersistError) as exc_info:
            write_file_map({"../evil.txt": b"x", "ok.html": b"y"}, root)
        assert exc_info.value.paths == ("../evil.txt",)
        assert not (tmp_path / "evil.txt").exists()
        assert (root / "ok.html").exists()

    def test_directory_conflict_is_failure(self, tmp_path: Path) -> None:
        # "blog" exists as a file, so "blog/index.html" cannot be created.
        files = {"blog": b"file", "blog/index.html": b"page"}
        with pytest.raises(PersistError) as exc_info:
            write_file_map(files, tmp_path)
        assert exc_info.value.paths == ("blog/index.html",)
        assert (tmp_path / "blog").read_bytes() == b"file"
