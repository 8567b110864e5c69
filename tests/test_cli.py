"""Tests for roost.cli — CLI entrypoint and argument parsing."""

import pytest

from roost.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_build_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_site(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_build_missing_output(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "mysite:site"])
        assert exc_info.value.code == 2

    def test_build_unknown_provider(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "mysite:site", "dist", "--redirects", "apache"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "roost" in captured.out
