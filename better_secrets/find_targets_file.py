"""Logic for locating the MSBuild extension file shipped with the package."""

import os
import sys

from better_secrets.file_system import FileSystem, LocalFileSystem

TARGETS_FILE_NAME = "SecretManager.targets"
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class MissingExtensionAssetError(FileNotFoundError):
    """Raised when SecretManager.targets cannot be found in any search path."""


def default_search_paths() -> list[str]:
    """Return the directories to search, in priority order."""
    host_dir = os.path.dirname(os.path.abspath(sys.argv[0] or "."))
    return [
        os.path.join(host_dir, "assets"),
        os.path.join(PACKAGE_DIR, "assets"),
        host_dir,
        PACKAGE_DIR,
    ]


def find_targets_file(
    fs: FileSystem | None = None, search_paths: list[str] | None = None
) -> str:
    """Return the first existing targets file along the search paths."""
    fs = fs or LocalFileSystem()
    if search_paths is None:
        search_paths = default_search_paths()

    for directory in search_paths:
        candidate = os.path.join(directory, TARGETS_FILE_NAME)
        if fs.exists(candidate):
            return candidate

    searched = ", ".join(search_paths)
    msg = f"Could not find {TARGETS_FILE_NAME} (searched: {searched})"
    raise MissingExtensionAssetError(msg)
