# SPDX-License-Identifier: MIT
"""Tests for logging setup."""

from loguru import logger

from maplify.utils import setup_logging


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "maplify.log"

    setup_logging(level="info", log_file=log_file)
    logger.debug("hidden")
    logger.info("visible")
    logger.complete()

    content = log_file.read_text()
    assert "visible" in content
    assert "hidden" not in content

    logger.remove()
