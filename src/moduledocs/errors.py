"""Exceptions raised while loading a module.

Header and comment lookups never raise; absence of documentation is
represented by empty strings.
"""

from __future__ import annotations


class LoadError(Exception):
    """Base exception for moduledocs load operations."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class PathNotFoundError(LoadError):
    """Raised when the module directory is missing or not a directory."""


class ParseError(LoadError):
    """Raised when the module has no source files or a file fails to parse."""


class ValuesFileError(LoadError):
    """Raised when the output values document is missing or unparsable."""


class InvalidOptionsError(LoadError):
    """Raised when options cannot drive a load (e.g., values without a path)."""
