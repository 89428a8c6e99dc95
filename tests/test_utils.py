"""Shared test utilities for matchcopy tests."""
from pathlib import Path


def make_files(directory: Path, *names: str, content: bytes | None = None) -> list[Path]:
    """Create files under directory, each holding its own name unless content is given."""
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for name in names:
        path = directory / name
        path.write_bytes(name.encode() if content is None else content)
        paths.append(path)
    return paths


def names(paths) -> list[str]:
    """Sorted file names of paths, for order-independent comparisons."""
    return sorted(Path(p).name for p in paths)


class FakeEntry:
    """Stand-in for os.DirEntry whose is_file() may fail."""

    def __init__(self, name: str, is_file: bool = True, error: OSError | None = None):
        self.name = name
        self._is_file = is_file
        self._error = error

    def is_file(self):
        if self._error is not None:
            raise self._error
        return self._is_file


class FakeScandir:
    """Stand-in for the iterator returned by os.scandir().

    Steps are yielded in order; a step that is an exception is raised instead.
    """

    def __init__(self, *steps):
        self._steps = iter(steps)
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.closed = True

    def __iter__(self):
        return self

    def __next__(self):
        step = next(self._steps)
        if isinstance(step, Exception):
            raise step
        return step
