import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from .batch import BatchResult, Skip
from .errors import CopyError, SetupError

logger = logging.getLogger(__name__)


def prepare_destination(destination: Path) -> None:
    """Create the destination directory and any missing parents.

    Raises:
        SetupError: The directory cannot be created, or the path is taken by
            something that is not a directory
    """
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SetupError(destination, f"Failed to create destination directory {destination}: {e}") from e


def copy_matching(entries: Iterable[Path], destination: str | os.PathLike) -> BatchResult:
    """Copy files into a destination directory under their own names.

    The destination is created first; a failure there stops everything. After
    that each file is copied on its own: a file that cannot be copied is logged
    and skipped and the rest carry on. Files already in the destination with the
    same name are overwritten.

    Args:
        entries: Files to copy
        destination: Directory to copy into

    Returns:
        BatchResult with the destination path of every copied file and a skip
        record for every file that failed

    Raises:
        SetupError: The destination directory could not be created
    """
    destination = Path(destination)
    prepare_destination(destination)

    copied: list[Path] = []
    skipped: list[Skip] = []

    for entry in entries:
        target = destination / entry.name
        try:
            shutil.copyfile(entry, target)
            shutil.copymode(entry, target)
        except OSError as e:
            logger.error(f"Failed to copy file {entry}, Reason: {e!r}")
            skipped.append(Skip(entry, CopyError(f"Failed to copy {entry} to {target}: {e}")))
            continue

        logger.debug(f"Copied {entry} -> {target}")
        copied.append(target)

    return BatchResult(copied, skipped)
