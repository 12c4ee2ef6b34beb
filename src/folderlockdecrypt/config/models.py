"""Configuration models using Pydantic for validation."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from ..ledger.exporter import ExportFormat


class DirectorySettings(BaseModel):
    """Default directories used when none are given on the command line."""

    input_dir: Path | None = Field(default=None, description="Directory of hidden files")
    output_dir: Path | None = Field(default=None, description="Directory for restored files")
    export_dir: Path | None = Field(default=None, description="Directory for ledger exports")


class ExportSettings(BaseModel):
    """Ledger export behavior."""

    formats: list[ExportFormat] = Field(
        default_factory=lambda: [ExportFormat.TEXT],
        description="Formats written on export (txt, json)",
    )
    json_indent: int | None = Field(
        default=None, ge=0, description="JSON indentation (empty for compact output)"
    )
    utc_timestamps: bool = Field(
        default=True, description="Stamp export file names with UTC instead of local time"
    )

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[ExportFormat]) -> list[ExportFormat]:
        """Ensure at least one export format is selected."""
        if not v:
            raise ValueError("At least one export format must be selected")
        return list(dict.fromkeys(v))


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=True, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class FolderLockConfig(BaseModel):
    """Main configuration for Folder Lock Decrypt."""

    directories: DirectorySettings = Field(
        default_factory=DirectorySettings, description="Default directories"
    )

    export: ExportSettings = Field(default_factory=ExportSettings, description="Export settings")

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    class Config:
        """Pydantic config."""

        validate_assignment = True
        extra = "forbid"  # Raise error on unknown fields
