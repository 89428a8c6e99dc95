from pathlib import Path
from typing import NamedTuple


class Skip(NamedTuple):
    """An item a batch operation left out, and why.

    Attributes:
        path: The file or directory the failure relates to
        reason: Exception describing the failure
    """
    path: Path
    reason: Exception


class BatchResult(NamedTuple):
    """Outcome of a batch operation over many paths.

    A batch never fails because of a single item: the paths it handled end up in
    ``items`` and the ones it had to leave out end up in ``skipped``.

    Attributes:
        items: Paths produced by the operation, in processing order
        skipped: Per-item failures, in the order they happened
    """
    items: list[Path]
    skipped: list[Skip]
