"""Shared fixtures."""

import os

import pytest
from loguru import logger

from webdeploy.config import DeploySettings
from webdeploy.config.settings import ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep WEBDEPLOY_* variables and any .env from the host out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def reset_logging():
    # CLI runs point loguru at streams that close when the runner returns
    yield
    logger.remove()


@pytest.fixture
def settings():
    return DeploySettings()
