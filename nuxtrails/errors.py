"""Exceptions raised by nuxtrails.

Every failure the CLI knows how to report derives from ``NuxtrailsError``.
File-system errors are left as ``OSError`` and propagate unchanged.
"""

from __future__ import annotations

from pathlib import Path


class NuxtrailsError(Exception):
    """Base class for all nuxtrails errors."""


class FieldSpecError(NuxtrailsError):
    """Raised when a model name or a ``name:type`` field token is invalid."""


class ToolchainError(NuxtrailsError):
    """Raised when an external command exits non-zero or times out."""

    def __init__(self, message: str, command: str = "", returncode: int = -1, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class ProjectExistsError(NuxtrailsError):
    """Raised when ``new`` targets a directory that already exists."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f'Folder "{path.name}" already exists.')
