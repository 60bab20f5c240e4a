import logging

import pytest
from loguru import logger as loguru_logger

from spl_token_metadata import EncodingError, create_emit_instruction
from spl_token_metadata.core.logger import get_logger


def test_encoding_failure_is_logged_through_loguru(metadata):
    messages = []
    sink_id = loguru_logger.add(messages.append, level="ERROR")
    try:
        with pytest.raises(EncodingError):
            create_emit_instruction(metadata=metadata, start=-1)
    finally:
        loguru_logger.remove(sink_id)
    assert any('"field": "start"' in message for message in messages)


def test_get_logger_does_not_touch_stdlib_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    get_logger("other-service", "DEBUG")
    assert root.handlers == handlers
    assert root.level == level


def test_level_filter():
    messages = []
    sink_id = loguru_logger.add(messages.append, level="DEBUG")
    try:
        log = get_logger("quiet", "ERROR")
        log.info("not shown")
        log.error("shown")
    finally:
        loguru_logger.remove(sink_id)
    assert len(messages) == 1
    assert '"event": "shown"' in messages[0]
