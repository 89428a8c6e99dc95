from .batch import BatchResult, Skip
from .config import RunConfig, DEFAULT_DESTINATION
from .errors import (
    MatchCopyError,
    DirectoryError,
    NotADirectory,
    SetupError,
    EntryReadError,
    StemReductionError,
    CopyError,
)
from .listing import list_files
from .matcher import reduce_to_stem, compute_matching, compute_missing
from .copier import copy_matching
from .reconciler import Reconciler
from .settings import Settings
