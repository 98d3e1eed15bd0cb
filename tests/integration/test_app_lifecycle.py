from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Generator, List, Tuple

import pytest
from fastapi.testclient import TestClient

import web.__main__ as entrypoint
import web.main
from tp_rest_api.collection_service import CollectionService
from tp_rest_api.record_store import RecordStore


def test_startup_creates_data_dir_and_logs_counts(
    monkeypatch: pytest.MonkeyPatch,
    store: RecordStore,
    services: Dict[str, CollectionService],
    data_dir: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setattr(web.main, "STORE", store)
    monkeypatch.setattr(web.main, "all_services", lambda: services)
    caplog.set_level(logging.INFO, logger="web.main")

    with TestClient(web.main.app):
        assert data_dir.is_dir()

    messages = [r.getMessage() for r in caplog.records if r.name == "web.main"]
    assert any("products" in m and "0 record(s)" in m for m in messages)
    assert any("orders" in m and "0 record(s)" in m for m in messages)


@pytest.fixture
def isolated_root_logger() -> Generator[logging.Logger, None, None]:
    """Undo logging.basicConfig from the entry point once the test ends."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        yield root
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
        root.setLevel(level)


@pytest.fixture
def server_calls(monkeypatch: pytest.MonkeyPatch) -> List[Tuple[str, object]]:
    """Record socket binding and serving instead of touching the network."""
    calls: List[Tuple[str, object]] = []

    def bind_socket(config):
        calls.append(("bind", config))
        return "bound-socket"

    def run(server, sockets=None):
        calls.append(("run", sockets))

    monkeypatch.setattr(entrypoint.uvicorn.Config, "bind_socket", bind_socket)
    monkeypatch.setattr(entrypoint.uvicorn.Server, "run", run)
    return calls


def test_main_serves_on_fixed_port_and_announces_it(
    isolated_root_logger: logging.Logger,
    server_calls: List[Tuple[str, object]],
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO, logger="web")

    entrypoint.main()

    assert [kind for kind, _ in server_calls] == ["bind", "run"]
    config = server_calls[0][1]
    assert config.app is web.main.app
    assert config.port == 3000
    assert server_calls[1][1] == ["bound-socket"]
    assert any("Server running on http://localhost:3000" in r.getMessage() for r in caplog.records)


def test_main_stays_silent_when_port_is_taken(
    isolated_root_logger: logging.Logger,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def bind_socket(config):
        raise SystemExit(1)

    monkeypatch.setattr(entrypoint.uvicorn.Config, "bind_socket", bind_socket)
    caplog.set_level(logging.INFO, logger="web")

    with pytest.raises(SystemExit):
        entrypoint.main()

    assert not any("Server running" in r.getMessage() for r in caplog.records)

