"""Configuration file loading utilities for Storyboard Studio."""

from pathlib import Path
from typing import Any

import yaml

from .settings import (
    AssistSettings,
    BuildSettings,
    EditorSettings,
    ExportSettings,
    Settings,
)

# Default config file names to search for
DEFAULT_CONFIG_FILES = ["storyboard.yaml", "storyboard.yml", "config.yaml", "config.yml"]

_SECTIONS: dict[str, type[Any]] = {
    "assist": AssistSettings,
    "editor": EditorSettings,
    "export": ExportSettings,
    "build": BuildSettings,
}


class ConfigLoader:
    """Loads configuration from a YAML file; environment variables supply API keys."""

    def __init__(self, config_path: Path | str | None = None) -> None:
        """Initialize the config loader.

        Args:
            config_path: Optional path to a specific config file.
                         If None, searches for default config files.
        """
        self.config_path = Path(config_path) if config_path else None
        self._yaml_config: dict[str, Any] | None = None

    def find_config_file(self, search_dir: Path | None = None) -> Path | None:
        """Find a config file in the given or current directory."""
        if self.config_path and self.config_path.exists():
            return self.config_path

        search_dir = search_dir or Path.cwd()
        for filename in DEFAULT_CONFIG_FILES:
            path = search_dir / filename
            if path.exists():
                return path
        return None

    def load_yaml_config(self, path: Path | None = None) -> dict[str, Any]:
        """Load configuration from a YAML file.

        Returns:
            Dictionary with configuration values, empty dict if no file found.
        """
        if self._yaml_config is not None:
            return self._yaml_config

        config_file = path or self.find_config_file()
        if config_file is None:
            self._yaml_config = {}
            return self._yaml_config

        with open(config_file, encoding="utf-8") as f:
            content = yaml.safe_load(f)
            self._yaml_config = content if content else {}

        return self._yaml_config

    def load_settings(self, config_path: Path | str | None = None) -> Settings:
        """Build settings from the YAML sections.

        API settings always come from environment variables / ``.env``.
        """
        if config_path:
            self.config_path = Path(config_path)
            self._yaml_config = None

        yaml_config = self.load_yaml_config()
        sections = {
            name: model(**(yaml_config.get(name) or {}))
            for name, model in _SECTIONS.items()
        }
        return Settings(**sections)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Convenience function to load settings."""
    loader = ConfigLoader(config_path)
    return loader.load_settings()
