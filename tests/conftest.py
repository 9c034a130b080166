"""Shared test configuration and fixtures."""

import os
import tempfile

import pytest

# Keep module log files out of the working tree
os.environ.setdefault("FONT_INVENTORY_LOG_DIR", tempfile.mkdtemp(prefix="font_inventory_logs_"))

from models.settings import AnalysisSettings  # noqa: E402


@pytest.fixture
def settings():
    """Default settings with file reports disabled."""
    return AnalysisSettings(output_format=())
