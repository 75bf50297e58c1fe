"""Unit tests for configuration management."""

from pathlib import Path

import pytest
from pydantic import SecretStr

from storyboard.cli.ui.setup import run_setup_check
from storyboard.config import load_settings
from storyboard.config.loader import ConfigLoader
from storyboard.config.settings import APISettings, AssistSettings, ExportSettings, Settings
from storyboard.models import ExportFormat, Resolution


def _settings_with_key(provider: str, key: str = "") -> Settings:
    s = Settings()
    s.api = APISettings.model_construct(
        anthropic_api_key=SecretStr(key),
        anthropic_model="claude-test",
    )
    s.assist = AssistSettings(provider=provider)
    return s


class TestSettings:
    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        settings = Settings()
        assert settings.build_dir == "build"
        assert settings.build.exports_dir == Path("build") / "exports"
        assert settings.assist.provider == "simulated"
        assert settings.editor.id_strategy == "uuid"
        assert settings.export.resolution == Resolution.FULL_HD

    def test_loads_api_key_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANTHROPIC_API_KEY", "ak")
        monkeypatch.setenv("ANTHROPIC_MODEL", "claude-x")
        s = APISettings()
        assert s.anthropic_api_key.get_secret_value() == "ak"
        assert s.anthropic_model == "claude-x"
        assert "ak" not in repr(s.anthropic_api_key)

    def test_validates_ranges(self) -> None:
        with pytest.raises(ValueError):
            AssistSettings(delay_seconds=-1)
        with pytest.raises(ValueError):
            AssistSettings(provider="openai")
        with pytest.raises(ValueError):
            ExportSettings(resolution="8k")

    def test_export_defaults_to_configuration(self) -> None:
        config = ExportSettings(format="mov", include_captions=False).to_configuration()
        assert config.format == ExportFormat.MOV
        assert config.include_captions is False
        assert config.branding_text == "Storyboard Studio"


class TestConfigLoader:
    def test_load_yaml_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "storyboard.yaml"
        cfg.write_text(
            "assist:\n  delay_seconds: 0\n"
            "editor:\n  id_strategy: counter\n"
            "export:\n  resolution: 4k\n  branding_text: ''\n"
            "build:\n  build_dir: cb\n"
        )
        loader = ConfigLoader(cfg)
        settings = loader.load_settings()
        assert settings.assist.delay_seconds == 0
        assert settings.editor.id_strategy == "counter"
        assert settings.export.resolution == Resolution.UHD
        assert settings.export.branding_text == ""
        assert settings.build.build_dir == "cb"

    def test_find_default_file(self, tmp_path: Path) -> None:
        (tmp_path / "config.yml").write_text("build:\n  build_dir: x\n")
        assert ConfigLoader().find_config_file(tmp_path) == tmp_path / "config.yml"

    def test_empty_file(self, tmp_path: Path) -> None:
        cfg = tmp_path / "storyboard.yaml"
        cfg.write_text("")
        assert ConfigLoader(cfg).load_yaml_config() == {}

    def test_load_settings_function(self, tmp_path: Path) -> None:
        cfg = tmp_path / "config.yaml"
        cfg.write_text("editor:\n  seed_library: false\n")
        s = load_settings(cfg)
        assert s.editor.seed_library is False


class TestRunSetupCheck:
    def test_simulated_needs_no_key(self) -> None:
        assert run_setup_check(_settings_with_key("simulated"))

    def test_anthropic_with_key(self) -> None:
        assert run_setup_check(_settings_with_key("anthropic", "sk-ant-test"))

    def test_anthropic_missing_key(self) -> None:
        assert not run_setup_check(_settings_with_key("anthropic"))
