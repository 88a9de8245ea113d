"""Run the User Secrets ID resolver from a source checkout."""

import argparse
import subprocess
import sys
from pathlib import Path

from better_secrets.cli import main as cli_main


def run_checks(root_dir: Path) -> None:
    """Run the development checks and exit if they fail."""
    print("--- Running Development Checks ---")
    try:
        subprocess.run([sys.executable, str(root_dir / "dev.py"), "--ci"], check=True)
    except subprocess.CalledProcessError as e:
        print("Development checks failed.")
        sys.exit(e.returncode)


def main() -> int:
    """Optionally run the checks, then hand the remaining arguments to the CLI."""
    parser = argparse.ArgumentParser(
        description="Resolve the .NET User Secrets ID of a project directory.",
        add_help=False,
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before resolving",
    )
    args, rest = parser.parse_known_args()

    if args.dev:
        run_checks(Path(__file__).parent)

    return cli_main(rest)


if __name__ == "__main__":
    raise SystemExit(main())
