"""Shared fixtures: an in-memory filesystem and a scripted build tool."""

import io
import posixpath
from collections.abc import Iterator

import pytest

from better_secrets.build_tool_invoker import InvocationOutcome
from better_secrets.invocation_spec import ExternalInvocationSpec

TEMP_DIR = "/tmp/better-secrets-tests"
ASSETS_DIR = "/opt/better-secrets/assets"


class InMemoryFileSystem:
    """FileSystem implementation that never touches the disk."""

    def __init__(self, temp_dir: str = TEMP_DIR) -> None:
        """Initialize an empty filesystem with a temp directory."""
        self.files: dict[str, bytes] = {}
        self.dirs: set[str] = set()
        self.undeletable: set[str] = set()
        self._temp_dir = temp_dir
        self._add_dir(temp_dir)

    @staticmethod
    def _norm(path: str) -> str:
        return posixpath.normpath(path)

    def _add_dir(self, path: str) -> None:
        path = self._norm(path)
        while path not in ("/", ""):
            self.dirs.add(path)
            path = posixpath.dirname(path)

    def add_file(self, path: str, content: str | bytes = b"") -> None:
        """Create or overwrite a file, creating parent directories."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        path = self._norm(path)
        self._add_dir(posixpath.dirname(path))
        self.files[path] = content

    def exists(self, path: str) -> bool:
        """Return True if a file or directory exists at path."""
        path = self._norm(path)
        return path in self.files or path in self.dirs

    def is_dir(self, path: str) -> bool:
        """Return True if path is a known directory."""
        return self._norm(path) in self.dirs

    def iter_files(self, base: str) -> Iterator[str]:
        """Yield files below base in insertion order."""
        prefix = self._norm(base).rstrip("/") + "/"
        for path in list(self.files):
            if path.startswith(prefix):
                yield path

    def open_binary(self, path: str) -> io.BytesIO:
        """Open a file as an in-memory stream."""
        path = self._norm(path)
        if path not in self.files:
            raise FileNotFoundError(path)
        return io.BytesIO(self.files[path])

    def read_text(self, path: str) -> str:
        """Read a file as UTF-8 text."""
        with self.open_binary(path) as stream:
            return stream.read().decode("utf-8")

    def delete(self, path: str) -> None:
        """Delete a file, failing for paths marked undeletable."""
        path = self._norm(path)
        if path in self.undeletable:
            raise PermissionError(path)
        if path not in self.files:
            raise FileNotFoundError(path)
        del self.files[path]

    def temp_dir(self) -> str:
        """Return the in-memory temp directory."""
        return self._temp_dir

    def temp_files(self) -> list[str]:
        """List files currently in the temp directory."""
        return list(self.iter_files(self._temp_dir))


class ScriptedInvoker:
    """Stands in for the build tool: writes result files and returns an exit code."""

    def __init__(self, fs: InMemoryFileSystem) -> None:
        """Initialize with the filesystem the result files are written to."""
        self.fs = fs
        self.exit_code = 0
        self.identifier: str | bytes | None = None
        self.key_vault: str | bytes | None = None
        self.error: Exception | None = None
        self.stdout: list[str] = []
        self.stderr: list[str] = []
        self.calls: list[ExternalInvocationSpec] = []

    def invoke(self, spec: ExternalInvocationSpec) -> InvocationOutcome:
        """Record the spec, write the configured outputs and report the exit code."""
        self.calls.append(spec)
        if self.identifier is not None:
            self.fs.add_file(spec.id_file, self.identifier)
        if self.key_vault is not None:
            self.fs.add_file(spec.key_vault_file, self.key_vault)
        if self.error is not None:
            raise self.error
        return InvocationOutcome(
            exit_code=self.exit_code, stdout=self.stdout, stderr=self.stderr
        )


@pytest.fixture
def memory_fs() -> InMemoryFileSystem:
    """Fixture providing an empty in-memory filesystem."""
    return InMemoryFileSystem()


@pytest.fixture
def invoker(memory_fs: InMemoryFileSystem) -> ScriptedInvoker:
    """Fixture providing a scripted build tool bound to memory_fs."""
    return ScriptedInvoker(memory_fs)
