"""Pydantic settings models for Storyboard Studio configuration."""

from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from storyboard.models.export import ExportConfiguration, ExportFormat, Resolution


class APISettings(BaseSettings):
    """API key configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    anthropic_api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias="ANTHROPIC_API_KEY",
        description="Anthropic API key for AI-assisted script rewrites",
    )
    anthropic_model: str = Field(
        default="claude-sonnet-4-20250514",
        validation_alias="ANTHROPIC_MODEL",
        description="Anthropic model ID for script rewrites",
    )


class AssistSettings(BaseSettings):
    """AI assist settings."""

    model_config = SettingsConfigDict(extra="ignore")

    provider: Literal["simulated", "anthropic"] = Field(
        default="simulated",
        description="Script assistant: simulated (offline) or anthropic",
    )
    delay_seconds: float = Field(
        default=1.2,
        ge=0.0,
        le=30.0,
        description="Delay of the simulated assistant in seconds",
    )


class EditorSettings(BaseSettings):
    """Editor session settings."""

    model_config = SettingsConfigDict(extra="ignore")

    id_strategy: Literal["uuid", "counter"] = Field(
        default="uuid",
        description="Id allocation: random uuid suffixes or per-prefix counters",
    )
    seed_library: bool = Field(
        default=True,
        description="Start the asset catalog with the stock library assets",
    )
    seed_scenes: bool = Field(
        default=True,
        description="Start the timeline with the three starter scenes",
    )


class ExportSettings(BaseSettings):
    """Default export parameters for new sessions."""

    model_config = SettingsConfigDict(extra="ignore")

    resolution: Resolution = Field(default=Resolution.FULL_HD)
    format: ExportFormat = Field(default=ExportFormat.MP4)
    include_watermark: bool = Field(default=False)
    branding_text: str = Field(default="Storyboard Studio")
    include_captions: bool = Field(default=True)

    def to_configuration(self) -> ExportConfiguration:
        """Build the editable export configuration for a new session."""
        return ExportConfiguration(**self.model_dump())


class BuildSettings(BaseSettings):
    """Build and output settings."""

    model_config = SettingsConfigDict(extra="ignore")

    build_dir: str = Field(
        default="build",
        description="Directory for generated artifacts",
    )

    @property
    def exports_dir(self) -> Path:
        """Render queue directory for export requests."""
        return Path(self.build_dir) / "exports"


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    api: APISettings = Field(default_factory=APISettings)
    assist: AssistSettings = Field(default_factory=AssistSettings)
    editor: EditorSettings = Field(default_factory=EditorSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)
    build: BuildSettings = Field(default_factory=BuildSettings)

    @property
    def build_dir(self) -> str:
        """Convenience accessor for build directory."""
        return self.build.build_dir

    def has_anthropic_key(self) -> bool:
        return bool(self.api.anthropic_api_key.get_secret_value())
