"""Shared pytest fixtures for the pkgmgr test suite."""

from __future__ import annotations

import logging
from typing import Dict, Generator

import pytest

from pkgmgr.config import DEBUG_ENV, OVERRIDE_ENV, USER_AGENT_ENV


@pytest.fixture
def clean_env(monkeypatch) -> pytest.MonkeyPatch:
    """Remove every environment signal pkgmgr reads.

    Returns the monkeypatch so tests can set the ones they need:

        def test_something(clean_env):
            clean_env.setenv("PKGMGR", "bun")
    """
    for name in (OVERRIDE_ENV, USER_AGENT_ENV, DEBUG_ENV):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def popen(mocker):
    """Replace subprocess.Popen with a mock whose child exits with 0."""
    mock_popen = mocker.patch("pkgmgr.utils.launcher.subprocess.Popen")
    mock_popen.return_value.wait.return_value = 0
    return mock_popen


@pytest.fixture
def pkgmgr_logger() -> Generator[logging.Logger, None, None]:
    """The package logger, restored to its original state afterwards."""
    logger = logging.getLogger("pkgmgr")
    saved: Dict[str, object] = {
        "handlers": list(logger.handlers),
        "level": logger.level,
        "propagate": logger.propagate,
    }
    yield logger
    logger.handlers = saved["handlers"]
    logger.setLevel(saved["level"])
    logger.propagate = saved["propagate"]
