"""Logic for discovering SDK-style project files below a directory."""

import fnmatch
import logging
import os

from better_secrets.file_system import FileSystem, LocalFileSystem
from better_secrets.is_web_sdk import WEB_SDK_PREFIX
from better_secrets.parse_project_file import parse_project_file
from better_secrets.project_candidate import ProjectCandidate

logger = logging.getLogger(__name__)

PROJECT_FILE_PATTERN = "*.*proj"
EXCLUDED_EXTENSIONS = (".xproj",)


class ProjectScanner:
    """Walks a directory tree and collects project candidates."""

    def __init__(
        self,
        fs: FileSystem | None = None,
        web_sdk_prefix: str = WEB_SDK_PREFIX,
        excluded_extensions: tuple[str, ...] | list[str] = EXCLUDED_EXTENSIONS,
    ) -> None:
        """Initialize the scanner with a filesystem and matching rules."""
        self.fs = fs or LocalFileSystem()
        self.web_sdk_prefix = web_sdk_prefix
        self.excluded_extensions = {e.lower() for e in excluded_extensions}

    def is_project_file(self, path: str) -> bool:
        """Check if a file name matches the project pattern and is not excluded."""
        name = os.path.basename(path).lower()
        if not fnmatch.fnmatchcase(name, PROJECT_FILE_PATTERN):
            return False
        return os.path.splitext(name)[1] not in self.excluded_extensions

    def scan(self, base_directory: str) -> list[ProjectCandidate]:
        """Return a candidate for every valid project file below base_directory.

        A missing directory yields an empty list. Order follows directory
        enumeration and carries no ranking.
        """
        if not self.fs.is_dir(base_directory):
            return []

        candidates = []
        for path in self.fs.iter_files(base_directory):
            if not self.is_project_file(path):
                continue
            candidate = parse_project_file(
                path, base_directory, self.fs, self.web_sdk_prefix
            )
            if candidate is not None:
                candidates.append(candidate)

        logger.debug(
            "Found %d project candidate(s) under %s", len(candidates), base_directory
        )
        return candidates
