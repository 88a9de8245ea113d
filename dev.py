"""Local task runner: format, lint and test the resolver, then smoke-test the CLI."""

import argparse
import subprocess
import sys

UV = ["uv", "run"]


def run_command(command: list[str], step_name: str) -> None:
    """Run one task, stopping the whole run if it exits non-zero."""
    print(f"\n==> {step_name}")
    print(f"    {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError as e:
        print(f"\n{step_name} failed with exit code {e.returncode}")
        sys.exit(e.returncode or 1)


def run_gate() -> None:
    """Run the read-only checks that CI enforces."""
    run_command([*UV, "ruff", "format", "--check"], "format check")
    run_command([*UV, "ruff", "check"], "lint")
    run_command([*UV, "pytest"], "tests")


def main() -> None:
    """Fix formatting, run the checks and smoke-test the better-secrets CLI."""
    parser = argparse.ArgumentParser(
        description="Format, lint and test better-secrets."
    )
    parser.add_argument(
        "--ci",
        action="store_true",
        help="Only run the read-only checks; do not rewrite files",
    )
    args = parser.parse_args()

    if not args.ci:
        run_command([*UV, "ruff", "format"], "format")
        run_command([*UV, "ruff", "check", "--fix", "--unsafe-fixes"], "lint fixes")

    run_gate()

    if not args.ci:
        run_command([*UV, "python", "main.py", "--help"], "CLI smoke test")

    print("\nAll checks passed.")


if __name__ == "__main__":
    main()
