import json
import logging

import app.main  # noqa: F401  (configures logging)
from app.core.logging import get_logger, LogContext, StructuredFormatter


def test_log_context_is_attached_only_inside_block(caplog):
    logger = get_logger("test")

    with caplog.at_level(logging.INFO, logger="gateway.test"):
        with LogContext(telegram_id=1001, path="/api/admin/users"):
            logger.info("inside")
        logger.info("outside")

    inside, outside = caplog.records[-2:]
    assert inside.telegram_id == 1001
    assert inside.path == "/api/admin/users"
    assert not hasattr(outside, "telegram_id")


def test_structured_formatter_includes_context():
    record = logging.LogRecord("gateway.test", logging.WARNING, __file__, 1, "denied", None, None)
    record.telegram_id = 42
    record.upstream_status = 429

    data = json.loads(StructuredFormatter().format(record))

    assert data["message"] == "denied"
    assert data["level"] == "WARNING"
    assert data["telegram_id"] == 42
    assert data["upstream_status"] == 429
