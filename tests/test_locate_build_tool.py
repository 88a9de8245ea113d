"""Tests for finding the dotnet executable."""

import sys

import pytest
from conftest import InMemoryFileSystem

from better_secrets.locate_build_tool import executable_name, locate_build_tool

PYTHON = "/usr/bin/python3"


def test_executable_name_per_platform() -> None:
    """Verify the .exe suffix on Windows only."""
    assert executable_name("dotnet", windows=True) == "dotnet.exe"
    assert executable_name("dotnet", windows=False) == "dotnet"


def test_override_wins(memory_fs: InMemoryFileSystem) -> None:
    """Verify that a configured host override is used first."""
    path = locate_build_tool(
        {"host_override": "/custom/dotnet"},
        environ={},
        host_executable="/opt/dotnet/dotnet",
        fs=memory_fs,
        windows=False,
    )
    assert path == "/custom/dotnet"


def test_override_ignored_in_sandbox(memory_fs: InMemoryFileSystem) -> None:
    """Verify that the sandbox variable disables the override."""
    path = locate_build_tool(
        {"host_override": "/custom/dotnet"},
        environ={"helix": "1"},
        host_executable=PYTHON,
        fs=memory_fs,
        windows=False,
    )
    assert path == "dotnet"


def test_running_host_is_the_tool(memory_fs: InMemoryFileSystem) -> None:
    """Verify that the running executable is used when it is dotnet itself."""
    path = locate_build_tool(
        {},
        environ={},
        host_executable="/opt/dotnet/DOTNET.EXE",
        fs=memory_fs,
        windows=True,
    )
    assert path == "/opt/dotnet/DOTNET.EXE"


def test_found_relative_to_runtime_directory(memory_fs: InMemoryFileSystem) -> None:
    """Verify the lookup three levels above the runtime directory."""
    memory_fs.add_file("/usr/share/dotnet/dotnet")
    path = locate_build_tool(
        {"runtime_directory": "/usr/share/dotnet/shared/Microsoft.NETCore.App/8.0.0"},
        environ={},
        host_executable=PYTHON,
        fs=memory_fs,
        windows=False,
    )
    assert path == "/usr/share/dotnet/dotnet"


def test_falls_back_to_bare_name(memory_fs: InMemoryFileSystem) -> None:
    """Verify that the PATH lookup is left to the OS when nothing else matches."""
    path = locate_build_tool(
        {"runtime_directory": "/nowhere/shared/Microsoft.NETCore.App/8.0.0"},
        environ={},
        host_executable=PYTHON,
        fs=memory_fs,
        windows=False,
    )
    assert path == "dotnet"


def test_custom_tool_name(memory_fs: InMemoryFileSystem) -> None:
    """Verify that the tool name comes from settings."""
    path = locate_build_tool(
        {"name": "dotnet-nightly"},
        environ={},
        host_executable=PYTHON,
        fs=memory_fs,
        windows=False,
    )
    assert path == "dotnet-nightly"


def test_interpreter_is_never_taken_as_host(
    memory_fs: InMemoryFileSystem, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify that the host step only applies to an explicit host executable."""
    monkeypatch.setattr(sys, "executable", "/opt/dotnet/dotnet")
    path = locate_build_tool({}, environ={}, fs=memory_fs, windows=False)
    assert path == "dotnet"
