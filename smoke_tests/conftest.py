"""Pytest configuration and fixtures for smoke tests.

Smoke tests verify basic package health:
- Package imports
- Python syntax
- Type checking
"""

from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).parent.parent
SRC_DIR = PROJECT_ROOT / "src"
PACKAGE_DIR = SRC_DIR / "rabbitx"


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory path."""
    return PROJECT_ROOT


@pytest.fixture(scope="session")
def src_dir() -> Path:
    """Return the src directory path."""
    return SRC_DIR


@pytest.fixture(scope="session")
def package_dir() -> Path:
    """Return the rabbitx package directory path."""
    return PACKAGE_DIR
