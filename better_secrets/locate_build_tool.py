"""Logic for finding the dotnet executable."""

import logging
import os
from collections.abc import Mapping
from typing import Any

from better_secrets.file_system import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

DEFAULT_TOOL_NAME = "dotnet"
DEFAULT_SANDBOX_ENV_VAR = "helix"


def executable_name(tool_name: str, *, windows: bool | None = None) -> str:
    """Return the tool's file name on this platform."""
    if windows is None:
        windows = os.name == "nt"
    return f"{tool_name}.exe" if windows else tool_name


def locate_build_tool(
    settings: Mapping[str, Any] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    host_executable: str | None = None,
    fs: FileSystem | None = None,
    windows: bool | None = None,
) -> str:
    """Resolve the build tool path, falling back to the bare tool name.

    Order:
    1. ``host_override`` from settings, unless the sandbox variable is set.
    2. ``host_executable``, if the caller hosts us inside the tool and its
       file name is the tool's. It is never inferred from ``sys.executable``,
       which is always the Python interpreter.
    3. The tool three directories above ``runtime_directory``.
    4. The bare name, left to the PATH lookup.
    """
    settings = settings or {}
    environ = os.environ if environ is None else environ
    fs = fs or LocalFileSystem()
    tool_name = settings.get("name") or DEFAULT_TOOL_NAME
    sandbox_var = settings.get("sandbox_env_var") or DEFAULT_SANDBOX_ENV_VAR

    override = settings.get("host_override")
    if override and not environ.get(sandbox_var):
        logger.debug("Using build tool override: %s", override)
        return str(override)

    expected = executable_name(tool_name, windows=windows)

    if (
        host_executable
        and os.path.basename(host_executable).lower() == expected.lower()
    ):
        return host_executable

    runtime_directory = settings.get("runtime_directory")
    if runtime_directory:
        candidate = os.path.join(str(runtime_directory), "..", "..", "..", expected)
        if fs.exists(candidate):
            return os.path.normpath(os.path.abspath(candidate))

    return tool_name
