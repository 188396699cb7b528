"""Shared pytest setup.

Tests marked ``external`` talk to the live network (DNS) and are skipped
unless switched on.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocked collaborators)
    ├── integration/       # In-memory/temp SQLite, FastAPI TestClient, CLI
    └── external/          # Live network (DNS) tests

Environment Variables:
    RUN_EXTERNAL=1       Run @pytest.mark.external tests
    RUN_ALL_TESTS=1      Same as --run-all

Pytest Options:
    --run-external       Run external tests
    --run-all            Run every collected test
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from pennywise_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    parser.addoption(
        "--run-external",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.external",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run every test, including external ones",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "external: needs live network access, skipped by default",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip external tests unless explicitly enabled."""
    if config.getoption("--run-all") or _env_flag("RUN_ALL_TESTS"):
        return

    if config.getoption("--run-external") or _env_flag("RUN_EXTERNAL"):
        return

    skip_external = pytest.mark.skip(
        reason="External test - run with --run-external or RUN_EXTERNAL=1",
    )
    for item in items:
        if "external" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_external)


@pytest.fixture(autouse=True)
def clear_settings():
    """Never leak cached settings between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()
