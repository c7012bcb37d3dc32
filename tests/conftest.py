import logging

import pytest

from textscan.config import reset_settings
from textscan.utils.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    for name in ("TEXTSCAN_CONFIG_FILE", "TEXTSCAN_LOG_PATH", "TEXTSCAN_LOG_LEVEL", "TEXTSCAN_OUTPUT_INDENT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()

    # configure_json_logger detaches the package logger from the root logger.
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
