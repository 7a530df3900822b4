"""Shared test fixtures.

Every test that talks HTTP gets a fresh in-memory fake search service,
injected through ``httpx.MockTransport``, so no network is ever touched.
"""

import json
import logging
from pathlib import Path
from typing import Callable, List, Union

import httpx
import pytest
import structlog

Outcome = Union[int, Exception]


class FakeSearchService:
    """Records every request and answers with queued outcomes.

    Each queued outcome is either a status code or an exception to raise
    (e.g. ``httpx.ConnectError``). Once the queue is empty every request
    gets ``default_status``.
    """

    def __init__(self, default_status: int = 200):
        self.default_status = default_status
        self.outcomes: List[Outcome] = []
        self.requests: List[httpx.Request] = []

    def queue(self, *outcomes: Outcome) -> None:
        self.outcomes.extend(outcomes)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes.pop(0) if self.outcomes else self.default_status
        if isinstance(outcome, Exception):
            raise outcome
        return httpx.Response(outcome, json={"status": outcome})

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    # ── assertions helpers ───────────────────────────────────────────

    @property
    def urls(self) -> List[str]:
        return [str(r.url) for r in self.requests]

    @property
    def bodies(self) -> List[bytes]:
        return [r.content for r in self.requests]


@pytest.fixture()
def search_service() -> FakeSearchService:
    return FakeSearchService()


@pytest.fixture()
def http_client(search_service: FakeSearchService):
    client = search_service.client()
    yield client
    client.close()


@pytest.fixture()
def write_fixture(tmp_path: Path) -> Callable[..., Path]:
    """Write a fixture file into tmp_path; dicts/lists are dumped as JSON."""

    def _write(name: str, content) -> Path:
        path = tmp_path / name
        if isinstance(content, (dict, list)):
            path.write_text(json.dumps(content, indent=2), encoding="utf-8")
        elif isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo setup_logging() calls so console handlers don't leak across tests."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
