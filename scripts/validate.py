#!/usr/bin/env python3
"""
Development validation script.
Runs formatting, linting, type checking, and tests.
"""

import subprocess
import sys
from pathlib import Path


def run_command(cmd: list[str], description: str, cwd: Path) -> bool:
    """Run a command and return True if successful."""
    print(f"🔍 {description}...")
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"❌ {description} failed:")
        if e.stdout:
            print(e.stdout)
        if e.stderr:
            print(e.stderr)
        return False
    print(f"✅ {description} passed")
    return True


def main() -> int:
    """Run all validation checks."""
    root_dir = Path(__file__).parent.parent

    checks = [
        ([sys.executable, "-m", "ruff", "format", "--check", "."], "Code formatting (ruff format)"),
        ([sys.executable, "-m", "ruff", "check", "."], "Linting (ruff check)"),
        ([sys.executable, "-m", "mypy", "site_config/", "helpers/", "utils/"], "Type checking (mypy)"),
        ([sys.executable, "-m", "pytest", "-q"], "Tests (pytest)"),
        ([sys.executable, "-m", "site_config", "check"], "Site config (config/site.yaml)"),
    ]

    failed = []
    for cmd, description in checks:
        if not run_command(cmd, description, root_dir):
            failed.append(description)

    if failed:
        print(f"\n❌ {len(failed)} check(s) failed:")
        for check in failed:
            print(f"  - {check}")
        return 1

    print("\n🎉 All checks passed! Ready for commit.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
