"""Data model for a successfully resolved project identity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ResolutionResult:
    """The user secrets id (and optional key vault) read from a project."""

    project_path: str
    identifier: str
    secondary_name: str | None = None
    ambiguity: tuple[str, ...] = field(default_factory=tuple)  # competing paths
