"""Unit tests for ConfigManager load/save."""

from __future__ import annotations

import stat
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from k4a.constants.defaults import CONFIG_ENV_VAR, CONFIG_PATH_DEFAULT
from k4a.models.state.config_manager import (
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
    ContextNotFoundError,
    KafkactlConfig,
)

CONFIG_TEXT = """kafkactl:
  current-context: prod
  contexts:
    - name: dev
      context:
        api: https://ns4kafka.dev.example.com
        user-token: dev-token
        namespace: team-a
    - name: prod
      context:
        api: https://ns4kafka.example.com
        user-token: prod-token
        namespace: team-b
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yml"
    path.write_text(CONFIG_TEXT)
    return path


# =============================================================================
# Location
# =============================================================================


class TestConfigPath:
    def test_env_var_overrides_default(self, monkeypatch: pytest.MonkeyPatch, config_file: Path) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert ConfigManager.config_path() == config_file
        assert ConfigManager.load().current_context == "prod"

    def test_default_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert ConfigManager.config_path() == CONFIG_PATH_DEFAULT

    def test_empty_env_var_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, "")
        assert ConfigManager.config_path() == CONFIG_PATH_DEFAULT


# =============================================================================
# Load
# =============================================================================


class TestConfigLoad:
    def test_load_contexts(self, config_file: Path) -> None:
        config = ConfigManager.load(config_file)
        assert config.current_context == "prod"
        assert config.context_names() == ["dev", "prod"]
        current = config.get_current_context()
        assert current.context.api == "https://ns4kafka.example.com"
        assert current.context.user_token == "prod-token"
        assert current.context.namespace == "team-b"

    def test_empty_current_context_defaults_to_first(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yml"
        path.write_text(CONFIG_TEXT.replace("current-context: prod", "current-context: ''"))
        assert ConfigManager.load(path).current_context == "dev"

    def test_missing_current_context_defaults_to_first(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yml"
        path.write_text(CONFIG_TEXT.replace("  current-context: prod\n", ""))
        assert ConfigManager.load(path).current_context == "dev"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="failed to read config file"):
            ConfigManager.load(tmp_path / "absent.yml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yml"
        path.write_text("kafkactl: [unclosed\n")
        with pytest.raises(ConfigLoadError, match="failed to parse config"):
            ConfigManager.load(path)

    def test_missing_section(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yml"
        path.write_text("other: {}\n")
        with pytest.raises(ConfigLoadError, match="kafkactl configuration not found"):
            ConfigManager.load(path)

    def test_invalid_contexts(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yml"
        path.write_text("kafkactl:\n  contexts: not-a-list\n")
        with pytest.raises(ConfigLoadError, match="invalid kafkactl configuration"):
            ConfigManager.load(path)

    def test_unknown_current_context(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yml"
        path.write_text(CONFIG_TEXT.replace("current-context: prod", "current-context: staging"))
        config = ConfigManager.load(path)
        with pytest.raises(ContextNotFoundError):
            config.get_current_context()


# =============================================================================
# Save
# =============================================================================


class TestConfigSave:
    def test_round_trip(self, config_file: Path) -> None:
        config = ConfigManager.load(config_file)
        config.current_context = "dev"
        ConfigManager.save(config, config_file)

        reloaded = ConfigManager.load(config_file)
        assert reloaded.current_context == "dev"
        assert reloaded.get_current_context().context.user_token == "dev-token"

    def test_writes_kafkactl_key_names(self, config_file: Path) -> None:
        ConfigManager.save(ConfigManager.load(config_file), config_file)
        raw = yaml.safe_load(config_file.read_text())
        assert raw["kafkactl"]["current-context"] == "prod"
        assert raw["kafkactl"]["contexts"][0]["context"]["user-token"] == "dev-token"

    def test_file_mode_is_owner_only(self, config_file: Path) -> None:
        ConfigManager.save(ConfigManager.load(config_file), config_file)
        assert stat.S_IMODE(config_file.stat().st_mode) == 0o600

    def test_keeps_other_sections(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yml"
        path.write_text("editor: vim\n" + CONFIG_TEXT)
        ConfigManager.save(ConfigManager.load(path), path)
        assert yaml.safe_load(path.read_text())["editor"] == "vim"

    def test_keeps_unknown_context_fields(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yml"
        path.write_text(CONFIG_TEXT.replace("namespace: team-a", "namespace: team-a\n        timeout: 30"))
        ConfigManager.save(ConfigManager.load(path), path)
        raw = yaml.safe_load(path.read_text())
        assert raw["kafkactl"]["contexts"][0]["context"]["timeout"] == 30

    def test_creates_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "config.yml"
        config = KafkactlConfig.model_validate({"current-context": "dev", "contexts": [{"name": "dev"}]})
        ConfigManager.save(config, path)
        assert ConfigManager.load(path).context_names() == ["dev"]

    def test_leaves_no_temporary_files(self, config_file: Path) -> None:
        ConfigManager.save(ConfigManager.load(config_file), config_file)
        assert [p.name for p in config_file.parent.iterdir()] == ["config.yml"]

    def test_write_failure(self, config_file: Path) -> None:
        config = ConfigManager.load(config_file)
        with patch("k4a.models.state.config_manager.tempfile.mkstemp", side_effect=OSError("read-only")):
            with pytest.raises(ConfigSaveError, match="read-only"):
                ConfigManager.save(config, config_file)
        assert config_file.read_text() == CONFIG_TEXT
