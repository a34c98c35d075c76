"""
FileAccessor - thin filesystem wrapper used by the form store.

Kept separate so the store can be exercised against another accessor in
tests. All methods accept ``str`` or ``Path``; ``OSError`` propagates.
"""

from pathlib import Path
from typing import Iterable, List, Union

PathLike = Union[str, Path]


class FileAccessor:
    """Directory and file operations on the local filesystem."""

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def is_file(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    def create_directory_recursively(self, path: PathLike) -> Path:
        """Create ``path`` and any missing parents."""
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def list_entries(self, directory: PathLike) -> List[Path]:
        """Immediate entries of ``directory``, in filesystem order."""
        return list(Path(directory).iterdir())

    def read_file(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()

    def write_file(self, path: PathLike, data: bytes) -> None:
        Path(path).write_bytes(data)

    def join_path(self, segments: Iterable[PathLike]) -> Path:
        segments = list(segments)
        if not segments:
            raise ValueError("join_path needs at least one segment")
        return Path(segments[0]).joinpath(*segments[1:])
