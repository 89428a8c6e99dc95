"""Name matching between a comparing and a copying directory listing.

Files are compared by stem only: the file name without its final extension.
"render.png" and "render.blend" match, "archive.tar.gz" reduces to
"archive.tar" and therefore does not match "archive.zip".
"""
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from .batch import BatchResult, Skip
from .errors import StemReductionError

logger = logging.getLogger(__name__)


def reduce_to_stem(path: Path) -> str:
    """Strip the directory and the final extension from a path.

    Only the last suffix goes: "a.b.c" becomes "a.b". A leading dot does not
    start an extension, so ".bashrc" stays as it is. Names without an extension
    are returned unchanged, which makes the reduction idempotent.

    Raises:
        StemReductionError: The name is empty or is not valid text (file names
            with undecodable bytes reach Python as lone surrogates)
    """
    name = path.name
    separator = name.rfind('.')
    stem = name[:separator] if separator > 0 else name

    if not stem:
        raise StemReductionError(f"Failed to reduce path to just a file name. Path: {path!r}")

    try:
        stem.encode('utf-8')
    except UnicodeEncodeError as e:
        raise StemReductionError(f"Failed to reduce path to just a file name. Path: {path!r}") from e

    return stem


def _reduce_all(entries: Iterable[Path], skipped: list[Skip]) -> list[tuple[Path, str]]:
    reduced = []
    for entry in entries:
        try:
            reduced.append((entry, reduce_to_stem(entry)))
        except StemReductionError as e:
            logger.warning(str(e))
            skipped.append(Skip(entry, e))
    return reduced


def collect_stems(entries: Iterable[Path]) -> tuple[set[str], list[Skip]]:
    """Build the set of stems for a listing.

    Returns:
        Tuple of (stems, skipped) where skipped holds the entries whose stem could
        not be reduced
    """
    skipped: list[Skip] = []
    stems = {stem for _, stem in _reduce_all(entries, skipped)}
    return stems, skipped


def compute_matching(comparing_entries: Sequence[Path], copying_entries: Sequence[Path]) -> BatchResult:
    """Select the copying-side files whose stem also appears on the comparing side.

    Output keeps the copying entries as they are (extension included) and in their
    input order. Several copying files sharing a stem are each selected on their
    own.
    """
    comparing_stems, skipped = collect_stems(comparing_entries)

    matching = []
    for entry, stem in _reduce_all(copying_entries, skipped):
        if stem in comparing_stems:
            matching.append(entry)
        else:
            logger.info(f"File name {stem!r} was not matching.")

    return BatchResult(matching, skipped)


def compute_missing(comparing_entries: Sequence[Path], copying_entries: Sequence[Path]) -> BatchResult:
    """Select the copying-side files whose stem does not appear on the comparing side.

    This is the complement of compute_matching over the copying entries that have
    a stem; entries without one are neither matching nor missing and only show up
    in ``skipped``.
    """
    comparing_stems, skipped = collect_stems(comparing_entries)

    missing = [
        entry
        for entry, stem in _reduce_all(copying_entries, skipped)
        if stem not in comparing_stems
    ]

    return BatchResult(missing, skipped)
