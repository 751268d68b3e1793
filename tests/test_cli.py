"""Tests for urlshort.cli — serve, check, and routes subcommands."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from urlshort.cli import main
from urlshort.redirects.handler import RedirectHandler
from urlshort.testing import TestClient, assert_redirects_to

YAML_DOC = """
- path: /urlshort
  url: https://github.com/gophercises/urlshort
- path: /final
  url: https://github.com/gophercises/urlshort/tree/solution
"""


@pytest.fixture
def redirects_file(tmp_path: Path) -> Path:
    path = tmp_path / "redirects.yaml"
    path.write_text(YAML_DOC)
    return path


@pytest.fixture
def bad_file(tmp_path: Path) -> Path:
    path = tmp_path / "bad.yaml"
    path.write_text("- path: /urlshort\n")
    return path


class TestCLIHelp:
    @pytest.mark.parametrize("argv", [["--help"], ["serve", "--help"], ["check", "--help"], ["routes", "--help"]])
    def test_help_exits_zero(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["serve", "check", "routes"])
    def test_missing_file_argument(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command])
        assert exc_info.value.code == 2

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "usage:" in capsys.readouterr().out


class TestCheck:
    def test_valid_file(self, redirects_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check", str(redirects_file)])
        assert "2 redirect(s) OK" in capsys.readouterr().out

    def test_invalid_file(self, bad_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", str(bad_file)])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "missing 'url'" in err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", str(tmp_path / "nope.yaml")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestRoutes:
    def test_lists_sorted(self, redirects_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", str(redirects_file)])
        assert capsys.readouterr().out.splitlines() == [
            "/final -> https://github.com/gophercises/urlshort/tree/solution",
            "/urlshort -> https://github.com/gophercises/urlshort",
        ]


class TestServe:
    @patch("urlshort.server.serve.run_server")
    def test_defaults(self, mock_server: MagicMock, redirects_file: Path) -> None:
        main(["serve", str(redirects_file)])

        mock_server.assert_called_once()
        handler, host, port = mock_server.call_args[0]
        assert isinstance(handler, RedirectHandler)
        assert host == "127.0.0.1"
        assert port == 8000
        assert mock_server.call_args[1]["log_level"] == "info"
        assert handler.table.resolve("/urlshort") == "https://github.com/gophercises/urlshort"

    @patch("urlshort.server.serve.run_server")
    def test_overrides(self, mock_server: MagicMock, redirects_file: Path) -> None:
        main(["serve", str(redirects_file), "--host", "0.0.0.0", "--port", "3000", "--debug"])

        _, host, port = mock_server.call_args[0]
        assert (host, port) == ("0.0.0.0", 3000)
        assert mock_server.call_args[1]["log_level"] == "debug"

    @patch("urlshort.server.serve.run_server")
    def test_bad_file_never_starts_server(self, mock_server: MagicMock, bad_file: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["serve", str(bad_file)])
        assert exc_info.value.code == 1
        mock_server.assert_not_called()

    @pytest.mark.asyncio
    async def test_served_handler_behaves(
        self, monkeypatch: pytest.MonkeyPatch, redirects_file: Path
    ) -> None:
        served: list[object] = []
        monkeypatch.setattr(
            "urlshort.server.serve.run_server",
            lambda app, host, port, **kwargs: served.append(app),
        )
        main(["serve", str(redirects_file), "--greeting", "Hi from the CLI"])
        handler = served[0]

        async with TestClient(handler) as client:
            hit = await client.get("/urlshort")
            miss = await client.get("/elsewhere")

        assert_redirects_to(hit, "https://github.com/gophercises/urlshort")
        assert miss.text == "Hi from the CLI"
