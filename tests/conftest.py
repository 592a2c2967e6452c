"""Shared test fixtures and configuration.

Keeps the application log out of the real user log directory.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolate_logs(tmp_path):
    """Point the logger at *tmp_path* and reset it around every test."""
    import pomodoro_tui.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("pomodoro_tui").handlers.clear()
    with patch(
        "pomodoro_tui.utils.logger.user_log_dir",
        return_value=str(tmp_path / "logs"),
    ):
        yield tmp_path / "logs"
    for handler in logging.getLogger("pomodoro_tui").handlers:
        handler.close()
    logging.getLogger("pomodoro_tui").handlers.clear()
    logger_mod._logger = None
