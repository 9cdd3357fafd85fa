"""Tests for the server CLI command."""

from typing import Any

import pytest

from videocat.cli.commands import server


@pytest.fixture
def uvicorn_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[tuple, dict[str, Any]]]:
    calls: list[tuple[tuple, dict[str, Any]]] = []
    monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    return calls


class TestServerRun:
    def test_defaults(self, uvicorn_calls) -> None:
        server.run()

        assert uvicorn_calls == [
            (
                ("videocat.application.api.rest.app:app",),
                {"host": "127.0.0.1", "port": 8000, "reload": False},
            )
        ]

    def test_passes_options_through(self, uvicorn_calls) -> None:
        server.run(host="0.0.0.0", port=5005, reload=True)

        args, kwargs = uvicorn_calls[0]
        assert args == (server.APP_IMPORT_PATH,)
        assert kwargs == {"host": "0.0.0.0", "port": 5005, "reload": True}

    def test_cli_parses_flags(self, uvicorn_calls) -> None:
        from videocat.cli.main import app

        try:
            app(["server", "run", "--port", "9001", "--reload"])
        except SystemExit as exc:
            assert exc.code in (0, None)

        assert uvicorn_calls[0][1] == {"host": "127.0.0.1", "port": 9001, "reload": True}
