"""Exceptions raised or recorded by matchcopy operations.

Fatal errors (DirectoryError, SetupError) are raised to the caller. Per-item
errors (EntryReadError, StemReductionError, CopyError) never leave the batch
that produced them; they are logged and kept as the reason of a Skip record.
"""
from pathlib import Path


class MatchCopyError(Exception):
    """Base class for all matchcopy errors."""


class DirectoryError(MatchCopyError):
    """A directory could not be listed."""

    def __init__(self, path: Path, message: str | None = None):
        self.path = path
        super().__init__(message or f"Cannot read directory: {path}")


class NotADirectory(DirectoryError):
    """The path does not refer to an existing directory."""

    def __init__(self, path: Path):
        super().__init__(path, f"Attempted to read a non-directory as a directory: {path}")


class SetupError(MatchCopyError):
    """The destination directory could not be created."""

    def __init__(self, destination: Path, message: str | None = None):
        self.destination = destination
        super().__init__(message or f"Cannot create destination directory: {destination}")


class EntryReadError(MatchCopyError):
    """A single directory entry could not be read."""


class StemReductionError(MatchCopyError):
    """A file name could not be reduced to a usable stem."""


class CopyError(MatchCopyError):
    """A single file could not be copied."""
