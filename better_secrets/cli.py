"""Command-line front end: resolve and print the user secrets id of a project."""

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from better_secrets.identity_resolver import IdentityResolver
from better_secrets.load_config import load_config
from better_secrets.resolution_failure import FailureKind, ResolutionFailure
from better_secrets.resolution_request import ResolutionRequest
from better_secrets.secrets_path_for_id import secrets_path_for_id

FAILURE_MESSAGES = {
    FailureKind.PROJECT_NOT_FOUND: (
        "Could not find a .NET project in the specified directory '{directory}' "
        "to resolve the User Secrets ID from."
    ),
    FailureKind.MISSING_EXTENSION_ASSET: (
        "Fatal error: could not find SecretManager.targets."
    ),
    FailureKind.TOOL_INVOCATION_FAILED: (
        "Could not load project '{project}' with the build tool."
    ),
    FailureKind.MISSING_IDENTIFIER: (
        "Could not determine User Secrets ID for the selected project."
    ),
}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = argparse.ArgumentParser(
        prog="better-secrets",
        description="Find the .NET User Secrets ID of the project in a directory.",
    )
    ap.add_argument(
        "working_directory",
        nargs="?",
        default=None,
        help="Directory containing the .NET project (default: current directory)",
    )
    ap.add_argument(
        "-i",
        "--id",
        dest="user_secrets_id",
        help="Use this User Secrets ID instead of resolving it from a project",
    )
    ap.add_argument(
        "-c",
        "--configuration",
        help="Build configuration used to evaluate the project (default: Debug)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostic output, including build tool decisions",
    )
    return ap


def configure_logging(level: str, *, verbose: bool = False) -> None:
    """Route log records to stderr at the configured level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def report_failure(failure: ResolutionFailure, directory: str) -> None:
    """Print a user-facing message for a failed resolution."""
    template = FAILURE_MESSAGES[failure.kind]
    message = template.format(directory=directory, project=failure.project_path)
    print(f"Error: {message}", file=sys.stderr)
    logging.getLogger(__name__).debug("%s", failure.message)
    for line in failure.stderr or failure.stdout:
        print(f"  {line}", file=sys.stderr)


def print_identity(user_secrets_id: str, key_vault: str | None = None) -> int:
    """Print the resolved id, key vault and secrets file location."""
    try:
        secrets_path = secrets_path_for_id(user_secrets_id)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"UserSecretsId: {user_secrets_id}")
    if key_vault:
        print(f"KeyVault: {key_vault}")
    print(f"Secrets file: {secrets_path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    configure_logging(config["logging"]["level"], verbose=args.verbose)

    if args.user_secrets_id and args.user_secrets_id.strip():
        return print_identity(args.user_secrets_id.strip())

    directory = args.working_directory or os.getcwd()
    if not os.path.isdir(directory):
        print(
            f"Error: The specified directory '{directory}' does not exist.",
            file=sys.stderr,
        )
        return 1

    configuration = args.configuration or config["build"]["configuration"]
    resolver = IdentityResolver(config)
    outcome = resolver.resolve(ResolutionRequest(directory, configuration))

    if isinstance(outcome, ResolutionFailure):
        report_failure(outcome, directory)
        return 1

    if outcome.ambiguity:
        print(
            f"Warning: Multiple .NET projects found in directory '{directory}'. "
            f"Using: '{outcome.project_path}'.",
            file=sys.stderr,
        )
    return print_identity(outcome.identifier, outcome.secondary_name)


if __name__ == "__main__":
    raise SystemExit(main())
