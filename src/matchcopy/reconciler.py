import logging

from .batch import BatchResult
from .config import RunConfig
from .copier import copy_matching, prepare_destination
from .listing import list_files
from .matcher import compute_matching, compute_missing

logger = logging.getLogger(__name__)


class Reconciler:
    """Workflow layer that runs one reconciliation between two directories.

    A Reconciler composes the lister, the matcher and the copy executor into the
    two user-facing operations:
    - copy_matching_with_comparing(): copy files whose stem exists on both sides
    - get_missing_paths(): report copying-side files with no counterpart

    It holds nothing but the immutable RunConfig it was built with, so several
    reconcilers with different directories can be used side by side.
    """

    def __init__(self, config: RunConfig):
        self._config = config

    @property
    def config(self) -> RunConfig:
        return self._config

    def copy_matching_with_comparing(self) -> BatchResult:
        """Copy files with matching names from the copying into the destination directory.

        Extensions are ignored when names are compared. The destination is
        created before either directory is listed.

        Returns:
            BatchResult with the copied destination paths, and the skips gathered
            while listing, matching and copying

        Raises:
            SetupError: The destination directory could not be created
            DirectoryError: The comparing or copying directory could not be listed
        """
        config = self._config
        prepare_destination(config.destination)

        matching = self._get_matching_paths()
        logger.info(f"Copying {len(matching.items)} matching files into {config.destination}")

        copied = copy_matching(matching.items, config.destination)
        return BatchResult(copied.items, matching.skipped + copied.skipped)

    def get_missing_paths(self) -> BatchResult:
        """Return the files in the copying directory that aren't in the comparing directory.

        Raises:
            DirectoryError: The comparing or copying directory could not be listed
        """
        comparing, copying = self._list_both()
        missing = compute_missing(comparing.items, copying.items)
        return BatchResult(missing.items, comparing.skipped + copying.skipped + missing.skipped)

    def _get_matching_paths(self) -> BatchResult:
        comparing, copying = self._list_both()
        matching = compute_matching(comparing.items, copying.items)
        return BatchResult(matching.items, comparing.skipped + copying.skipped + matching.skipped)

    def _list_both(self) -> tuple[BatchResult, BatchResult]:
        return list_files(self._config.comparing_directory), list_files(self._config.copying_directory)
