"""
Pytest configuration and fixtures for restnaming tests.
"""

import pytest

from restnaming import config


@pytest.fixture(autouse=True)
def fresh_default_config(monkeypatch):
    """Every test starts before the default NamingConfig is built."""
    monkeypatch.setattr(config, "_default_config", None)
    yield


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML naming config into a temporary directory."""
    def _create_file(content: str, name: str = "naming.yaml"):
        file_path = tmp_path / name
        file_path.write_text(content, encoding="utf-8")
        return file_path
    return _create_file
