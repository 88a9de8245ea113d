"""Data model for a discovered build-project file."""

from dataclasses import dataclass

from better_secrets.is_at_root import is_at_root
from better_secrets.is_web_sdk import WEB_SDK_PREFIX, is_web_sdk


@dataclass(frozen=True)
class ProjectCandidate:
    """A project file that declares an SDK and may hold a user secrets id."""

    path: str
    sdk: str
    is_at_root: bool
    is_web_variant: bool

    @classmethod
    def create(
        cls,
        path: str,
        sdk: str,
        base_directory: str,
        web_sdk_prefix: str = WEB_SDK_PREFIX,
    ) -> "ProjectCandidate":
        """Build a candidate, deriving the root and web flags."""
        return cls(
            path=path,
            sdk=sdk,
            is_at_root=is_at_root(path, base_directory),
            is_web_variant=is_web_sdk(sdk, web_sdk_prefix),
        )
