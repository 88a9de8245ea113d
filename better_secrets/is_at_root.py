"""Predicate for project files that live directly in the scan root."""

import os

_SEPARATORS = "/\\" + os.sep


def _normalize(path: str) -> str:
    return os.path.normpath(path).rstrip(_SEPARATORS).casefold()


def is_at_root(project_path: str, base_directory: str) -> bool:
    """Check if the project file's directory is the base directory.

    Both sides are normalized (so ``"."`` and ``"./app/"`` match the paths
    found beneath them), right-trimmed of separators and compared
    case-insensitively.
    """
    return _normalize(os.path.dirname(project_path)) == _normalize(base_directory)
