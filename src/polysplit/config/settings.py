"""Configuration settings for Polysplit."""

from pathlib import Path

from pydantic import BaseModel, Field


class SplitterConfig(BaseModel):
    """Configuration for the greedy splitter."""

    max_workers: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Worker threads evaluating edge pairs (1 = sequential)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging if unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolysplitSettings(BaseModel):
    """Main application settings."""

    splitter: SplitterConfig = Field(default_factory=SplitterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolysplitSettings:
    """Get default application settings."""
    return PolysplitSettings()
