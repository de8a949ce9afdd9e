"""Shared fixtures for dependency_age tests."""

import json
from pathlib import Path

import pytest
import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Serve canned registry documents keyed by URL."""

    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        if url not in self.responses:
            return FakeResponse({"error": "Not found"}, status_code=404)
        return self.responses[url]


@pytest.fixture
def make_project(tmp_path: Path):
    """Write package.json and node_modules/<name>/package.json files."""

    def _make(manifest, installed=None):
        (tmp_path / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
        for name, version in (installed or {}).items():
            package_dir = tmp_path / "node_modules" / name
            package_dir.mkdir(parents=True, exist_ok=True)
            (package_dir / "package.json").write_text(
                json.dumps({"name": name, "version": version}), encoding="utf-8"
            )
        return tmp_path

    return _make
