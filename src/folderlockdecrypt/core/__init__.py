"""Core module holding the decrypt session."""

from .session import DecryptSession

__all__ = [
    "DecryptSession",
]
