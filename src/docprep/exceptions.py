"""Centralized exceptions for docprep."""

from __future__ import annotations

from pathlib import Path


class DocPrepError(Exception):
    """Base exception for all docprep errors."""


class SourceDirectoryNotFoundError(DocPrepError):
    """Raised when the source docs directory is missing or not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Source directory not found: '{path}'")


class TargetDirectoryError(DocPrepError):
    """Raised when the target directory cannot be cleared or created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to prepare target directory '{path}': {reason}")


class DocumentReadError(DocPrepError):
    """Raised when a source document cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read document at '{path}': {reason}")


class DocumentWriteError(DocPrepError):
    """Raised when a prepared document cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write document to '{path}': {reason}")
