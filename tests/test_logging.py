"""
Tests for logging configuration and bearer-token masking.
"""

import logging

import pytest

from postboard.shared.logging import BearerTokenFilter, configure_logging


def _record(msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord("postboard.test", logging.INFO, __file__, 1, msg, args, None)


class TestBearerTokenFilter:

    def test_masks_token_in_message(self) -> None:
        record = _record("Authorization: Bearer abc123def")
        assert BearerTokenFilter().filter(record) is True
        assert record.getMessage() == "Authorization: Bearer [redacted]"

    def test_masks_token_passed_as_argument(self) -> None:
        record = _record("header=%s user=%s", "bearer deadbeef", "alice")
        BearerTokenFilter().filter(record)
        assert record.getMessage() == "header=bearer [redacted] user=alice"

    def test_leaves_other_messages_alone(self) -> None:
        record = _record("Created post=%s", "p1")
        BearerTokenFilter().filter(record)
        assert record.args == ("p1",)
        assert record.getMessage() == "Created post=p1"


class TestConfigureLogging:

    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        engine_logger = logging.getLogger("sqlalchemy.engine")
        handlers, level, engine_level = root.handlers[:], root.level, engine_logger.level
        root.handlers[:] = []
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        engine_logger.setLevel(engine_level)

    def test_root_handlers_mask_tokens(self) -> None:
        configure_logging("DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert all(
            any(isinstance(f, BearerTokenFilter) for f in handler.filters)
            for handler in root.handlers
        )

    @pytest.mark.parametrize("sql_echo, expected", [(False, logging.WARNING), (True, logging.INFO)])
    def test_sql_echo(self, sql_echo: bool, expected: int) -> None:
        configure_logging("INFO", sql_echo=sql_echo)
        assert logging.getLogger("sqlalchemy.engine").level == expected
