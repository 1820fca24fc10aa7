"""Pytest configuration for feedsource tests."""

import pytest

from feedsource.config.loader import clear_config_cache


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from real user/project config files."""
    root = tmp_path / "root"
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setenv("FEEDSOURCE_ROOT", str(root))
    monkeypatch.delenv("FEEDSOURCE_CONFIG", raising=False)
    monkeypatch.chdir(workdir)
    clear_config_cache()
    yield root
    clear_config_cache()
