from __future__ import annotations

import io
import logging

from tagtally.logging import get_logger


def test_get_logger_levels() -> None:
    stream = io.StringIO()
    logger = get_logger("tagtally.test-levels", verbose=True, stream=stream)
    assert logger.level == logging.DEBUG
    logger.debug("hello")
    assert "[DEBUG] tagtally.test-levels: hello" in stream.getvalue()

    assert get_logger("tagtally.test-levels").level == logging.INFO
    assert len(logger.handlers) == 1
