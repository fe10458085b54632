"""Pytest configuration: test environment and shared fixtures."""

import os
from pathlib import Path

# Must be set before anything imports src.app.runtime.context
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["APP_CONFIG_FILE"] = str(Path(__file__).parent.parent / "config.yaml")
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LOG_FILE"] = ""
os.environ["LOG_LEVEL"] = "DEBUG"

from tests.fixtures import *  # noqa: E402,F401,F403
