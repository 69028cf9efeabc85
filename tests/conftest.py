"""Shared fixtures"""

import pytest
from fastapi.testclient import TestClient

from diff_workbench.services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config manager at a throwaway directory"""
    monkeypatch.setenv("DIFF_WORKBENCH_CONFIG_DIR", str(tmp_path / "config"))
    ConfigManager.reset_instance()
    yield tmp_path / "config"
    ConfigManager.reset_instance()


@pytest.fixture
def client():
    from diff_workbench.main import app

    with TestClient(app) as test_client:
        yield test_client
