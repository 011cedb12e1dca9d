"""Test configuration and fixtures for the user lookup service."""

import os

# Must be set before the application configuration is first loaded
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_FILE", "")

from tests.fixtures import *  # noqa: E402,F401,F403
