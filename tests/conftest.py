"""Shared fixtures for the Telerivet client tests."""

import json
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from telerivetapi.projects import Project
from telerivetapi.telerivet_api import TelerivetAPI

_TELERIVET_ENV_VARS = ("TELERIVET_API_KEY", "TELERIVET_API_URL", "TELERIVET_PROJECT_ID", "TELERIVET_TIMEOUT")


@pytest.fixture(autouse=True)
def _clean_telerivet_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove TELERIVET_* env vars so tests don't pick up real credentials."""
    for var in _TELERIVET_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def api() -> MagicMock:
    """A TelerivetAPI double that records requests instead of sending them."""
    return MagicMock(spec=TelerivetAPI)


@pytest.fixture
def project(api: MagicMock) -> Project:
    return Project(api, {
        "id": "PJ1",
        "name": "Clinic reminders",
        "timezone_id": "Africa/Nairobi",
        "vars": {"region": "north"},
    })


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory fixture: build a fake requests.Response."""

    def _make(status_code: int = 200, json_data: Any = None, text: str = "") -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        if json_data is not None:
            text = json.dumps(json_data)
            response.json.return_value = json_data
        else:
            response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text
        response.content = text.encode()
        return response

    return _make
