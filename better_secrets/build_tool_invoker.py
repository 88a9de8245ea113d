"""Logic for running the build tool as a subprocess."""

import logging
import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field

from better_secrets.invocation_spec import ExternalInvocationSpec

logger = logging.getLogger(__name__)

ProcessRunner = Callable[..., subprocess.CompletedProcess]


@dataclass
class InvocationOutcome:
    """Exit code and captured output of a finished build tool run."""

    exit_code: int
    stdout: list[str] = field(default_factory=list)
    stderr: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """True when the tool exited with code 0."""
        return self.exit_code == 0


def _non_empty_lines(text: str | None) -> list[str]:
    """Split captured output into lines, dropping blank ones."""
    if not text:
        return []
    return [line for line in text.splitlines() if line.strip()]


class BuildToolInvoker:
    """Runs the build tool and waits for it to exit.

    Both output streams are drained while waiting so a chatty tool cannot
    block on a full pipe. No timeout is applied.
    """

    def __init__(self, runner: ProcessRunner | None = None) -> None:
        """Initialize with a process runner (subprocess.run by default)."""
        self.runner = runner or subprocess.run

    def invoke(self, spec: ExternalInvocationSpec) -> InvocationOutcome:
        """Run the tool described by spec and return its outcome.

        Raises OSError if the executable cannot be started.
        """
        argv = spec.arguments()
        logger.debug("Running: %s", " ".join(argv))
        completed = self.runner(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        outcome = InvocationOutcome(
            exit_code=completed.returncode,
            stdout=_non_empty_lines(completed.stdout),
            stderr=_non_empty_lines(completed.stderr),
        )
        logger.info("Build tool exited with code %d", outcome.exit_code)
        return outcome
