"""Filesystem access used by the scanner, the result channel and the tool locator."""

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, Protocol


class FileSystem(Protocol):
    """The subset of filesystem operations needed to resolve a project identity."""

    def exists(self, path: str) -> bool:
        """Return True if a file or directory exists at path."""
        ...

    def is_dir(self, path: str) -> bool:
        """Return True if path is an existing directory."""
        ...

    def iter_files(self, base: str) -> Iterator[str]:
        """Yield every file below base, recursively."""
        ...

    def open_binary(self, path: str) -> BinaryIO:
        """Open a file for binary reading."""
        ...

    def read_text(self, path: str) -> str:
        """Read a UTF-8 text file."""
        ...

    def delete(self, path: str) -> None:
        """Delete a file."""
        ...

    def temp_dir(self) -> str:
        """Return the directory used for temporary files."""
        ...


class LocalFileSystem:
    """FileSystem backed by the real disk."""

    def exists(self, path: str) -> bool:
        """Return True if a file or directory exists at path."""
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        """Return True if path is an existing directory."""
        return os.path.isdir(path)

    def iter_files(self, base: str) -> Iterator[str]:
        """Yield every file below base, recursively, prefixed with base as given.

        Directory entries are visited in sorted order.
        """
        for dirpath, dirnames, filenames in os.walk(base):
            dirnames.sort()
            for name in sorted(filenames):
                yield os.path.join(dirpath, name)

    def open_binary(self, path: str) -> BinaryIO:
        """Open a file for binary reading."""
        return open(path, "rb")  # noqa: SIM115

    def read_text(self, path: str) -> str:
        """Read a UTF-8 text file."""
        return Path(path).read_text(encoding="utf-8")

    def delete(self, path: str) -> None:
        """Delete a file."""
        os.remove(path)

    def temp_dir(self) -> str:
        """Return the directory used for temporary files."""
        return tempfile.gettempdir()
