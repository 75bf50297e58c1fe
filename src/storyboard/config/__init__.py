"""Configuration module for Storyboard Studio."""

from .loader import ConfigLoader, load_settings
from .settings import (
    APISettings,
    AssistSettings,
    BuildSettings,
    EditorSettings,
    ExportSettings,
    Settings,
)

__all__ = [
    "APISettings",
    "AssistSettings",
    "BuildSettings",
    "ConfigLoader",
    "EditorSettings",
    "ExportSettings",
    "Settings",
    "load_settings",
]
