"""
Pytest configuration and shared fixtures for the meminfomon test suite.

This module provides common fixtures for fake meminfo sources, configuration
files and counter state used across the test modules.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from meminfomon.config import manager as config_manager  # noqa: E402
from meminfomon.models import MemRange  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Core Fixtures
# ============================================================================


SAMPLE_MEMINFO = """\
MemTotal:       16303412 kB
MemFree:         2087340 kB
MemAvailable:    9876544 kB
Buffers:          412300 kB
Cached:          6921104 kB
SwapCached:            0 kB
Active:          7431208 kB
Inactive:        5190432 kB
Active(anon):    4203812 kB
Inactive(anon):   120044 kB
Dirty:              3200 kB
Writeback:            16 kB
AnonPages:       5300012 kB
HugePages_Total:       0
HugePages_Free:        0
Hugepagesize:       2048 kB
DirectMap4k:      512000 kB
"""


@pytest.fixture
def sample_meminfo_text():
    """A realistic /proc/meminfo snapshot with Dirty=3200 kB, Writeback=16 kB."""
    return SAMPLE_MEMINFO


@pytest.fixture
def meminfo_file(tmp_path, sample_meminfo_text):
    """Write the sample snapshot to a temporary file and return its path."""
    path = tmp_path / "meminfo"
    path.write_text(sample_meminfo_text)
    return path


@pytest.fixture
def tracked_range():
    """A counter state that has already seen a few samples."""
    return MemRange(current=5.0, highest=6.0, units="kB")


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Restore the configuration singleton and root log level around every test."""
    original_path = config_manager._CONFIG_FILE_PATH
    original_level = logging.getLogger().level
    config_manager.clear_config_cache()
    yield
    logging.getLogger().setLevel(original_level)
    config_manager._CONFIG_FILE_PATH = original_path
    config_manager.clear_config_cache()
