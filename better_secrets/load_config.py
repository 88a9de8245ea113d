"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from better_secrets.deep_merge import deep_merge
from better_secrets.is_web_sdk import WEB_SDK_PREFIX
from better_secrets.locate_build_tool import DEFAULT_SANDBOX_ENV_VAR, DEFAULT_TOOL_NAME
from better_secrets.project_scanner import EXCLUDED_EXTENSIONS
from better_secrets.resolution_request import DEFAULT_CONFIGURATION

DEFAULT_CONFIG: dict[str, Any] = {
    "build": {
        "configuration": DEFAULT_CONFIGURATION,
    },
    "build_tool": {
        "name": DEFAULT_TOOL_NAME,
        "host_override": None,
        "runtime_directory": None,
        "sandbox_env_var": DEFAULT_SANDBOX_ENV_VAR,
    },
    "scan": {
        "web_sdk_prefix": WEB_SDK_PREFIX,
        "excluded_extensions": list(EXCLUDED_EXTENSIONS),
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
