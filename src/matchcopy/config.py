import os
from pathlib import Path
from typing import NamedTuple

# Used when neither the command line nor the settings file name a destination
DEFAULT_DESTINATION = Path('copy_dest')


class RunConfig(NamedTuple):
    """Directories taking part in a single run.

    The value is built once from the command line (or by a library caller) and
    handed to the Reconciler; nothing caches it between runs.

    Attributes:
        comparing_directory: Directory whose file stems form the reference set
        copying_directory: Directory whose files are copied or reported
        destination: Directory matching files are copied into, created on demand
    """
    comparing_directory: Path
    copying_directory: Path
    destination: Path = DEFAULT_DESTINATION

    @classmethod
    def from_paths(cls,
                   comparing_directory: str | os.PathLike,
                   copying_directory: str | os.PathLike,
                   destination: str | os.PathLike | None = None) -> 'RunConfig':
        return cls(
            Path(comparing_directory),
            Path(copying_directory),
            DEFAULT_DESTINATION if destination is None else Path(destination),
        )
