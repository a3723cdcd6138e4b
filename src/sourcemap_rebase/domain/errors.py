from __future__ import annotations

"""
Domain Error Taxonomy.

Every failure that aborts a rebase run is expressed as a subclass of
SourcemapRebaseError so the interface layer can map it to an exit code
without inspecting messages.
"""

from typing import Optional


class SourcemapRebaseError(Exception):
    """Base class for all fatal errors raised by a rebase run."""


class ConfigurationError(SourcemapRebaseError):
    """Raised when the run configuration is contradictory or incomplete."""


class DiscoveryError(SourcemapRebaseError):
    """Raised when the package descriptor cannot be located or used."""

    def __init__(self, message: str, search_root: Optional[str] = None):
        self.search_root = search_root
        super().__init__(message)


class ParseError(SourcemapRebaseError):
    """Raised when a sourcemap file cannot be loaded as a valid document."""

    def __init__(self, file_path: str, reason: str):
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Cannot parse sourcemap '{file_path}': {reason}")


class WriteError(SourcemapRebaseError):
    """Raised when a rewritten sourcemap cannot be persisted."""

    def __init__(self, file_path: str, reason: str):
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Cannot write sourcemap '{file_path}': {reason}")
