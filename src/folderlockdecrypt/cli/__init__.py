"""Command line interface for Folder Lock Decrypt."""

from .main import cli

__all__ = ["cli"]
