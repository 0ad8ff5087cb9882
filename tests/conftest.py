"""
Pytest configuration and shared fixtures.

Registers the integration marker and the --run-integration option used by
tests that call the real Anthropic API.
"""

import pytest
from src.core.config import settings


def pytest_addoption(parser):
    """Add custom command-line options"""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests against the real Anthropic API"
    )


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test requiring a real ANTHROPIC_API_KEY"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is specified"""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --run-integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def api_key():
    """Configure a fake Anthropic key and base URL for the duration of a test"""
    original_key = settings.anthropic_api_key
    original_url = settings.anthropic_base_url
    settings.anthropic_api_key = "test-key"
    settings.anthropic_base_url = "https://api.anthropic.com"
    try:
        yield settings.anthropic_api_key
    finally:
        settings.anthropic_api_key = original_key
        settings.anthropic_base_url = original_url
