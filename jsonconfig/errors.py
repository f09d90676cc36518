"""Exception types raised by the JSON config helpers.

Every error carries the offending path (if any) in ``.path``; the underlying
exception is chained as ``__cause__``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class ReadError(ConfigError):
    """File exists but could not be read."""


class ParseError(ConfigError):
    """File content is not valid JSON or does not match the target type."""


class DirectoryError(ConfigError):
    """Parent directory could not be created."""


class SerializeError(ConfigError):
    """Value could not be converted to JSON."""


class WriteError(ConfigError):
    """Serialized content could not be written."""


class HomeDirError(ConfigError):
    """Home directory could not be resolved on this host."""
