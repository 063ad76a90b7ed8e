"""Shared pytest fixtures for all tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from multidict import CIMultiDict

from vendurl.models.options import RunOptions


class FakeResponse:
    """Stands in for an aiohttp response inside `async with session.get(...)`."""

    def __init__(self, status: int = 200, body: str | bytes = "", headers=None):
        self.status = status
        self.body = body
        self.headers = CIMultiDict(headers or {})

    async def text(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        if isinstance(self.body, bytes):
            return self.body.decode(encoding, errors)
        return self.body

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False


class FakeSession:
    """Minimal aiohttp.ClientSession replacement keyed by URL."""

    def __init__(self, responses: dict[str, FakeResponse | Exception]):
        self.responses = responses
        self.requested: list[str] = []
        self.closed = False

    def get(self, url, **kwargs):
        url = str(url)
        self.requested.append(url)
        response = self.responses.get(url, FakeResponse(status=404))
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A temporary project directory that is also the working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return tmp_path


@pytest.fixture
def write_manifest(project_dir: Path):
    """Writes a package.json with the given `vendurl` section."""

    def _write(section: Any, name: str = "mock-project") -> Path:
        path = project_dir / "package.json"
        path.write_text(
            json.dumps({"name": name, "vendurl": section}), encoding="utf-8"
        )
        return path

    return _write


@pytest.fixture
def quiet_options() -> RunOptions:
    return RunOptions(color=False)
