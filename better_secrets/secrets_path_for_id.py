"""Logic for locating the secrets.json file that belongs to a user secrets id."""

import os
from collections.abc import Mapping

SECRETS_FILE_NAME = "secrets.json"
FALLBACK_DIR_ENV = "DOTNET_USER_SECRETS_FALLBACK_DIR"

# Characters rejected in file names on at least one supported platform.
_INVALID_ID_CHARS = frozenset('<>:"/\\|?*') | {chr(c) for c in range(32)}


def secrets_path_for_id(
    user_secrets_id: str, environ: Mapping[str, str] | None = None
) -> str:
    """Return the path of the secrets.json file for user_secrets_id.

    Uses %APPDATA%/Microsoft/UserSecrets when APPDATA is set, otherwise
    ~/.microsoft/usersecrets (HOME, then the fallback directory variable).
    """
    environ = os.environ if environ is None else environ

    if not user_secrets_id or not user_secrets_id.strip():
        msg = "User secrets id must not be empty."
        raise ValueError(msg)
    bad = sorted(set(user_secrets_id) & _INVALID_ID_CHARS)
    if bad:
        msg = f"Invalid character(s) {bad!r} in user secrets id '{user_secrets_id}'."
        raise ValueError(msg)

    app_data = environ.get("APPDATA")
    if app_data:
        return os.path.join(
            app_data, "Microsoft", "UserSecrets", user_secrets_id, SECRETS_FILE_NAME
        )

    root = environ.get("HOME") or environ.get(FALLBACK_DIR_ENV)
    if not root:
        msg = (
            "Could not determine a location for user secrets. "
            f"Set {FALLBACK_DIR_ENV} to choose one."
        )
        raise ValueError(msg)

    return os.path.join(
        root, ".microsoft", "usersecrets", user_secrets_id, SECRETS_FILE_NAME
    )
