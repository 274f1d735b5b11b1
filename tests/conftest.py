"""Pytest configuration for the runml test suite."""

import shutil
import sys
from pathlib import Path

import pytest

# Add project root to path for runml imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def cc() -> str:
    """Path to a C compiler, skipping the test when none is installed."""
    path = shutil.which("cc")
    if path is None:
        pytest.skip("cc not found on PATH")
    return path
