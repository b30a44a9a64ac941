"""Unit tests for ApiConfig loading."""

from pathlib import Path

import pytest

from telerivetapi.config import ApiConfig
from telerivetapi.consts import API_URL
from telerivetapi.telerivet_api import TelerivetAPI


def test_from_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / "secrets.env"
    env_file.write_text(
        "TELERIVET_API_KEY=file-key\n"
        "TELERIVET_PROJECT_ID=PJ1\n"
        "TELERIVET_TIMEOUT=12.5\n"
    )

    config = ApiConfig.from_env(str(env_file))

    assert config.api_key == "file-key"
    assert config.api_url == API_URL
    assert config.project_id == "PJ1"
    assert config.timeout == 12.5
    assert "file-key" not in repr(config)


def test_environment_wins_over_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / "secrets.env"
    env_file.write_text("TELERIVET_API_KEY=file-key\n")
    monkeypatch.setenv("TELERIVET_API_KEY", "env-key")
    monkeypatch.setenv("TELERIVET_API_URL", "https://telerivet.example.com/v1")

    config = ApiConfig.from_env(str(env_file))

    assert config.api_key == "env-key"
    assert config.api_url == "https://telerivet.example.com/v1"
    assert config.project_id is None
    assert config.timeout is None


def test_missing_api_key(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="TELERIVET_API_KEY"):
        ApiConfig.from_env(str(tmp_path / "missing.env"))


def test_get_api() -> None:
    api = ApiConfig(api_key="key", timeout=3.0).get_api()

    assert isinstance(api, TelerivetAPI)
    api.close()
