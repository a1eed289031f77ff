"""Tests for configuration loading."""

import pytest
import yaml

from backstage_client import Client
from backstage_client.config import ClientConfig, ConfigLoader, load_config


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    for name in ("BACKSTAGE_BASE_URL", "BACKSTAGE_NAMESPACE", "BACKSTAGE_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(ConfigLoader, "USER_CONFIG_DIR", tmp_path / "user")


def test_defaults_without_config(tmp_path):
    config = load_config(tmp_path)

    assert config == ClientConfig()
    assert config.base_url == "http://localhost:7007/api"
    assert config.default_namespace == "default"


def test_load_project_config(tmp_path):
    (tmp_path / "backstage.yaml").write_text(
        yaml.safe_dump(
            {"base_url": "https://backstage.example.com/api", "default_namespace": "team"}
        ),
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.base_url == "https://backstage.example.com/api"
    assert config.default_namespace == "team"


def test_user_config_is_fallback(tmp_path):
    user_dir = tmp_path / "user"
    user_dir.mkdir()
    (user_dir / "backstage.yaml").write_text("timeout: 5\n", encoding="utf-8")

    loader = ConfigLoader(tmp_path / "project")

    assert loader.get_config_path() == user_dir / "backstage.yaml"
    assert loader.load().timeout == 5.0


def test_env_overrides_file(tmp_path, monkeypatch):
    (tmp_path / "backstage.yaml").write_text(
        "base_url: https://file.example.com/api\n", encoding="utf-8"
    )
    monkeypatch.setenv("BACKSTAGE_BASE_URL", "https://env.example.com/api")
    monkeypatch.setenv("BACKSTAGE_TOKEN", "token")

    config = load_config(tmp_path)

    assert config.base_url == "https://env.example.com/api"
    assert config.token == "token"


def test_invalid_yaml_uses_defaults(tmp_path, caplog):
    (tmp_path / "backstage.yaml").write_text("base_url: [unclosed\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config == ClientConfig()
    assert "Failed to load config" in caplog.text


def test_invalid_values_use_defaults(tmp_path, caplog):
    (tmp_path / "backstage.yaml").write_text("timeout: soon\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config == ClientConfig()
    assert "Invalid client configuration" in caplog.text


def test_save_and_reload(tmp_path):
    loader = ConfigLoader(tmp_path)
    config = ClientConfig(base_url="https://saved.example.com/api", timeout=10)

    path = loader.save(config)

    assert path == tmp_path / "backstage.yaml"
    assert "token" not in yaml.safe_load(path.read_text(encoding="utf-8"))
    assert loader.load() == config


def test_client_from_loaded_config(tmp_path):
    (tmp_path / "backstage.yaml").write_text(
        "base_url: https://backstage.example.com/api/\n", encoding="utf-8"
    )

    with Client.from_config(load_config(tmp_path)) as client:
        assert str(client.base_url) == "https://backstage.example.com/api"
