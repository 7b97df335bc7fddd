"""
Pytest configuration and shared fixtures for rustcprobe tests.
"""

import logging

import pytest

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.banners import completed_process, rustc_banners


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require a real rustc on PATH",
    )


def pytest_collection_modifyitems(config, items):
    """
    Skip integration tests unless --integration flag is provided.
    """
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def clean_rustc_env(monkeypatch):
    """Remove RUSTC and RUSTC_WRAPPER so probes use their defaults."""
    monkeypatch.delenv("RUSTC", raising=False)
    monkeypatch.delenv("RUSTC_WRAPPER", raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging.basicConfig(force=True) calls made by CLI tests."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
