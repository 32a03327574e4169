"""Smoke tests for type checking validation.

These tests verify that mypy type checking passes for rabbitx.
"""

import subprocess
import sys
from pathlib import Path

import pytest


pytestmark = pytest.mark.smoke

MAX_REPORTED_ERRORS = 20


def run_mypy(*args: str, cwd: Path) -> subprocess.CompletedProcess:
    """Run mypy in a subprocess using the current interpreter."""
    return subprocess.run(
        [sys.executable, "-m", "mypy", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
    )


def format_mypy_errors(stdout: str, stderr: str) -> str:
    """Format mypy output into an actionable error message."""
    lines = []
    errors = stdout.strip().splitlines()
    if errors:
        lines.append("Type errors found:")
        lines.extend(f"  {line}" for line in errors[:MAX_REPORTED_ERRORS])
        if len(errors) > MAX_REPORTED_ERRORS:
            lines.append(f"  ... and {len(errors) - MAX_REPORTED_ERRORS} more errors")
    if stderr.strip():
        lines.append(f"mypy stderr: {stderr.strip()}")
    return "\n".join(lines)


@pytest.fixture(scope="module")
def mypy_version(project_root: Path) -> str:
    """Return the installed mypy version, failing when mypy is missing."""
    result = run_mypy("--version", cwd=project_root)
    if result.returncode != 0:
        pytest.fail(
            "mypy is not installed or not accessible.\n"
            f"Error: {result.stderr}\n"
            "Install the test extra with: pip install -e '.[test]'"
        )
    return result.stdout.strip()


def test_mypy_is_installed(mypy_version: str) -> None:
    assert "mypy" in mypy_version.lower(), f"Unexpected mypy version output: {mypy_version}"


def test_rabbitx_type_checking_passes(
    project_root: Path,
    package_dir: Path,
    mypy_version: str,
) -> None:
    """The rabbitx package, its co-located tests included, type-checks cleanly."""
    if not package_dir.exists():
        pytest.skip(f"Source directory not found: {package_dir}")

    result = run_mypy(
        str(package_dir),
        "--ignore-missing-imports",
        "--no-error-summary",
        cwd=project_root,
    )

    if result.returncode != 0:
        pytest.fail(
            f"Type checking failed in rabbitx:\n"
            f"{format_mypy_errors(result.stdout, result.stderr)}\n\n"
            f"Run 'mypy {package_dir}' for full output."
        )
