"""Listing of the regular files directly inside a directory."""
import logging
import os
from pathlib import Path

from .batch import BatchResult, Skip
from .errors import DirectoryError, EntryReadError, NotADirectory

logger = logging.getLogger(__name__)


def list_files(path: str | os.PathLike) -> BatchResult:
    """List the regular files that are direct children of a directory.

    Subdirectories and special files are left out without comment. Symlinks count
    as files when they point at a regular file. An entry whose type cannot be read
    is logged and recorded as skipped; the remaining entries are still listed.

    Args:
        path: Directory to list

    Returns:
        BatchResult whose items are the file paths in enumeration order

    Raises:
        NotADirectory: path does not exist or is not a directory
        DirectoryError: path is a directory that cannot be opened
    """
    path = Path(path)

    if not path.is_dir():
        raise NotADirectory(path)

    files: list[Path] = []
    skipped: list[Skip] = []

    try:
        iterator = os.scandir(path)
    except OSError as e:
        raise DirectoryError(path, f"Failed to open directory {path}: {e}") from e

    with iterator:
        while True:
            try:
                entry = next(iterator)
            except StopIteration:
                break
            except OSError as e:
                # The directory stream cannot be resumed after a read error
                logger.error(f"Failed to read a path under {path}. Reason: {e!r}")
                skipped.append(Skip(path, EntryReadError(f"Failed to read entries of {path}: {e}")))
                break

            child = path / entry.name
            try:
                is_file = entry.is_file()
            except OSError as e:
                logger.error(f"Failed to read a path. Path: {child}, Reason: {e!r}")
                skipped.append(Skip(child, EntryReadError(f"Failed to read {child}: {e}")))
                continue

            if is_file:
                files.append(child)

    logger.debug(f"Listed {len(files)} files under {path}")
    return BatchResult(files, skipped)
