"""Data model for a project identity that could not be resolved."""

from dataclasses import dataclass, field
from enum import Enum


class FailureKind(Enum):
    """Why a resolution produced no identifier."""

    PROJECT_NOT_FOUND = "project_not_found"
    MISSING_EXTENSION_ASSET = "missing_extension_asset"
    TOOL_INVOCATION_FAILED = "tool_invocation_failed"
    MISSING_IDENTIFIER = "missing_identifier"


@dataclass(frozen=True)
class ResolutionFailure:
    """A typed failure, with the tool's output kept for diagnostics."""

    kind: FailureKind
    message: str
    project_path: str | None = None
    stdout: tuple[str, ...] = field(default_factory=tuple)
    stderr: tuple[str, ...] = field(default_factory=tuple)
