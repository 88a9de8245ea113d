"""Orchestration of scan, selection and build tool invocation.

The resolver turns a directory into a user secrets id:

    scan -> select -> invoke the build tool -> read the result files

Every step that can fail produces a ResolutionFailure instead of raising, so
callers only need to check which of the two result types they got back. The
temporary result files are removed whichever way the invocation ends.
"""

import logging
from collections.abc import Mapping
from typing import Any

from better_secrets.build_tool_invoker import BuildToolInvoker
from better_secrets.file_system import FileSystem, LocalFileSystem
from better_secrets.find_targets_file import (
    MissingExtensionAssetError,
    find_targets_file,
)
from better_secrets.invocation_spec import ExternalInvocationSpec
from better_secrets.is_web_sdk import WEB_SDK_PREFIX
from better_secrets.load_config import load_config
from better_secrets.locate_build_tool import locate_build_tool
from better_secrets.project_scanner import EXCLUDED_EXTENSIONS, ProjectScanner
from better_secrets.resolution_failure import FailureKind, ResolutionFailure
from better_secrets.resolution_request import ResolutionRequest
from better_secrets.resolution_result import ResolutionResult
from better_secrets.result_channel import ResultChannel
from better_secrets.select_project import ProjectSelection, select_project

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Resolves the user secrets id of the project found in a directory."""

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        fs: FileSystem | None = None,
        invoker: BuildToolInvoker | None = None,
        environ: Mapping[str, str] | None = None,
        asset_search_paths: list[str] | None = None,
    ) -> None:
        """Initialize the resolver and locate the build tool once."""
        self.config = config or load_config()
        self.fs = fs or LocalFileSystem()
        self.invoker = invoker or BuildToolInvoker()
        self.channel = ResultChannel(self.fs)
        self.asset_search_paths = asset_search_paths

        scan_config = self.config.get("scan", {})
        self.scanner = ProjectScanner(
            self.fs,
            web_sdk_prefix=scan_config.get("web_sdk_prefix", WEB_SDK_PREFIX),
            excluded_extensions=scan_config.get(
                "excluded_extensions", EXCLUDED_EXTENSIONS
            ),
        )
        self.executable = locate_build_tool(
            self.config.get("build_tool"), environ=environ, fs=self.fs
        )

    def resolve(
        self, request: ResolutionRequest
    ) -> ResolutionResult | ResolutionFailure:
        """Resolve the identity for request.base_directory."""
        candidates = self.scanner.scan(request.base_directory)
        selection = select_project(candidates)
        if selection is None:
            return ResolutionFailure(
                kind=FailureKind.PROJECT_NOT_FOUND,
                message=f"No .NET project found under '{request.base_directory}'.",
            )

        if selection.is_ambiguous:
            logger.warning("%s", selection.warning())

        try:
            targets_file = find_targets_file(self.fs, self.asset_search_paths)
        except MissingExtensionAssetError as e:
            return ResolutionFailure(
                kind=FailureKind.MISSING_EXTENSION_ASSET,
                message=str(e),
                project_path=selection.path,
            )

        id_file, key_vault_file = self.channel.allocate()
        spec = ExternalInvocationSpec(
            executable=self.executable,
            project_file=selection.path,
            id_file=id_file,
            key_vault_file=key_vault_file,
            configuration=request.configuration,
            targets_file=targets_file,
        )
        try:
            return self._invoke_and_read(spec, selection)
        finally:
            self.channel.cleanup(id_file, key_vault_file)

    def _invoke_and_read(
        self, spec: ExternalInvocationSpec, selection: ProjectSelection
    ) -> ResolutionResult | ResolutionFailure:
        """Run the build tool and turn its result files into a result."""
        try:
            outcome = self.invoker.invoke(spec)
        except OSError as e:
            return ResolutionFailure(
                kind=FailureKind.TOOL_INVOCATION_FAILED,
                message=f"Could not start '{spec.executable}': {e}",
                project_path=spec.project_file,
            )

        if not outcome.succeeded:
            return ResolutionFailure(
                kind=FailureKind.TOOL_INVOCATION_FAILED,
                message=(
                    f"Project '{spec.project_file}' failed to load "
                    f"(exit code {outcome.exit_code})."
                ),
                project_path=spec.project_file,
                stdout=tuple(outcome.stdout),
                stderr=tuple(outcome.stderr),
            )

        identifier = self.channel.read(spec.id_file)
        if not identifier:
            return ResolutionFailure(
                kind=FailureKind.MISSING_IDENTIFIER,
                message=f"Project '{spec.project_file}' has no UserSecretsId.",
                project_path=spec.project_file,
            )

        ambiguity = tuple(selection.candidate_paths) if selection.is_ambiguous else ()
        return ResolutionResult(
            project_path=spec.project_file,
            identifier=identifier,
            secondary_name=self.channel.read(spec.key_vault_file) or None,
            ambiguity=ambiguity,
        )
