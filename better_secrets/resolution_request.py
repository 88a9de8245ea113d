"""Input value for a project identity resolution."""

from dataclasses import dataclass

DEFAULT_CONFIGURATION = "Debug"


@dataclass(frozen=True)
class ResolutionRequest:
    """A directory to resolve and the build configuration to evaluate it with."""

    base_directory: str
    build_configuration: str = ""

    @property
    def configuration(self) -> str:
        """The build configuration, defaulting to Debug when empty."""
        return self.build_configuration or DEFAULT_CONFIGURATION
