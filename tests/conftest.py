"""Root pytest configuration.

Test Structure:
    tests/
    ├── voicehub_identity/     # Identity domain tests (accounts, OAuth)
    │   ├── unit/              # Fast, isolated tests
    │   └── integration/       # Repository tests against SQLite
    └── voicehub/              # API and CLI tests

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests

Pytest Options:
    --run-integration    Run integration tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from voicehub_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests against a real PostgreSQL database (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    run_integration = config.getoption("--run-integration") or os.environ.get(
        "RUN_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if "integration" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def configure_app_settings():
    """Make every test load settings fresh from the environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
