import json
import logging

import pytest

from app.context import init_app_context
from app.utils import logging as app_logging
from app.utils.logging import JSONFormatter, configure_logging, get_logger


@pytest.fixture
def app_logger(monkeypatch):
    logger = logging.getLogger("app")
    level = logger.level
    monkeypatch.setattr(logger, "handlers", [])
    monkeypatch.setattr(app_logging, "_configured", False)
    yield logger
    logger.setLevel(level)


def test_json_formatter_scrubs_secrets():
    record = logging.LogRecord(
        "app.test", logging.INFO, __file__, 10,
        {"order": "o-1", "token": "secret-value", "nested": {"Authorization": "Bearer x"}},
        None, None,
    )
    record.order_id = "o-1"

    out = json.loads(JSONFormatter().format(record))

    assert out["order_id"] == "o-1"
    assert "secret-value" not in out["msg"]
    assert "Bearer x" not in out["msg"]


def test_get_logger_installs_no_handlers(app_logger):
    get_logger("app.services.example")

    assert app_logger.handlers == []
    assert app_logging._configured is False


def test_configure_logging_runs_once(app_logger):
    configure_logging(level="debug", fmt="json")
    configure_logging(level="info", fmt="text")

    assert len(app_logger.handlers) == 1
    assert isinstance(app_logger.handlers[0].formatter, JSONFormatter)
    assert app_logger.level == logging.DEBUG


def test_init_app_context_configures_logging(context, app_logger):
    init_app_context(context)

    assert app_logging._configured is True
    assert len(app_logger.handlers) == 1
