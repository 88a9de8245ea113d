"""Temporary files through which the build tool hands back its results."""

import logging
import os
import uuid

from better_secrets.file_system import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)


class ResultChannel:
    """Allocates, reads and removes the pair of result files for one invocation."""

    def __init__(self, fs: FileSystem | None = None) -> None:
        """Initialize the channel on top of a filesystem."""
        self.fs = fs or LocalFileSystem()

    def allocate(self) -> tuple[str, str]:
        """Return two fresh, randomly named paths in the temp directory.

        The files are not created; the build tool writes them.
        """
        temp_dir = self.fs.temp_dir()
        return (
            os.path.join(temp_dir, uuid.uuid4().hex),
            os.path.join(temp_dir, uuid.uuid4().hex),
        )

    def read(self, path: str) -> str | None:
        """Return the trimmed contents of path, or None if it was never written.

        A file that cannot be read or is not valid UTF-8 also reads as None.
        """
        if not self.fs.exists(path):
            return None
        try:
            return self.fs.read_text(path).strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Could not read result file %s: %s", path, e)
            return None

    def cleanup(self, *paths: str) -> None:
        """Delete every path that exists, ignoring deletion errors."""
        for path in paths:
            try:
                if self.fs.exists(path):
                    self.fs.delete(path)
            except OSError as e:
                logger.debug("Could not delete result file %s: %s", path, e)
