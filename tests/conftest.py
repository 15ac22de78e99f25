"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-16

Global pytest configuration and fixtures for the autolayername test suite.
"""

import os
import sys

# Add project root to sys.path so 'autolayername' imports without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from autolayername.models.rename_options import RenameOptions
from autolayername.utils.paths import AppPaths
from tests.mocks import MockHost, RecordingNamingManager


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Keep saved settings and logs out of the real user directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("AUTOLAYERNAME_CONFIG_DIR", str(config_dir))
    AppPaths.reset()
    yield config_dir
    AppPaths.reset()


@pytest.fixture
def default_options():
    return RenameOptions()


@pytest.fixture
def all_options():
    """Every inclusion option switched on."""
    return RenameOptions(locked=True, hidden=True, instance=True, rename_custom_names=True)


@pytest.fixture
def mock_host():
    return MockHost()


@pytest.fixture
def naming_manager():
    return RecordingNamingManager()
