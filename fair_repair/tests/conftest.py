"""Pytest configuration and shared fixtures for Fair Repair tests."""

import os
import sys
import pytest


# ============================================================================
# Ensure the repository root is importable (fair_repair package)
# ============================================================================
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fair_repair.utils.rate_logger import configure_logging  # noqa: E402

# Per-lookup debug events are noise in test output
configure_logging("WARNING")


# ============================================================================
# Sample Data Fixtures
# ============================================================================

@pytest.fixture
def manhattan_zip():
    """Manhattan ZIP inside the NY coordinate band."""
    return "10001"


@pytest.fixture
def rural_montana_zip():
    """Montana ZIP far from every listed metro."""
    return "59999"


@pytest.fixture
def malformed_zips():
    """Inputs that must degrade to the national average."""
    return [None, "", "1234", "123456", "abcde", "00000", 10001]


@pytest.fixture
def sample_repair_pricing():
    """Baseline catalog pricing for a brake job."""
    return {
        "total": {"low": 420.0, "high": 610.0},
        "labor": {"low": 180.0, "high": 260.0},
        "parts": {"low": 240.0, "high": 350.0},
    }
