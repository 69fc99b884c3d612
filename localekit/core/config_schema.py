"""Configuration schema validation using Pydantic."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocalizationConfig(BaseModel):
    """Translation source and language selection."""

    default_language: str = Field(default="English", min_length=1)
    preference_key: str = Field(default="Loc_SelectedLanguage", min_length=1)
    source: str | None = "content/localization.xml"
    source_url: str | None = None
    fetch_timeout: float = Field(default=5.0, gt=0)
    fetch_retries: int = Field(default=3, ge=1)


class PreferencesConfig(BaseModel):
    """Preference persistence."""

    path: str = "runtime/preferences.json"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str | None = None
    max_size_mb: float = Field(default=10, gt=0)
    backup_count: int = Field(default=3, ge=0)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v):
        """Validate level is a stdlib logging level name."""
        levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in levels:
            raise ValueError(f"Log level must be one of {sorted(levels)}")
        return v.upper()


class RenderConfig(BaseModel):
    """Render configuration."""

    resolution: list[int] = Field(default=[800, 480], min_length=2, max_length=2)
    fullscreen: bool = False
    title: str = "localekit"
    font_size: int = Field(default=32, gt=0)

    @field_validator("resolution")
    @classmethod
    def validate_resolution(cls, v):
        """Validate resolution is positive."""
        if v[0] <= 0 or v[1] <= 0:
            raise ValueError("Resolution dimensions must be positive")
        return v


class LabelConfig(BaseModel):
    """A label shown by the demo kiosk: lookup key plus its design-time text."""

    key: str
    text: str = ""


class AppConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="allow")

    localization: LocalizationConfig = Field(default_factory=LocalizationConfig)
    preferences: PreferencesConfig = Field(default_factory=PreferencesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    labels: list[LabelConfig] = Field(default_factory=list)


def validate_config(config: dict[str, Any]) -> AppConfig:
    """Validate configuration dictionary.

    Args:
        config: Raw configuration dictionary

    Returns:
        Validated AppConfig

    Raises:
        pydantic.ValidationError: If config is invalid
    """
    return AppConfig(**config)


def config_to_dict(config: AppConfig) -> dict[str, Any]:
    """Convert validated config back to dictionary."""
    return config.model_dump()
