"""Configuration module for Folder Lock Decrypt."""

from .manager import ConfigManager, get_config_manager
from .models import (
    DirectorySettings,
    ExportSettings,
    FolderLockConfig,
    LoggingSettings,
)

__all__ = [
    "FolderLockConfig",
    "DirectorySettings",
    "ExportSettings",
    "LoggingSettings",
    "ConfigManager",
    "get_config_manager",
]
