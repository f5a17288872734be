# app/utils/logging.py
import datetime
import json
import logging
import sys

from app.utils.settings import LOG_FORMAT, LOG_LEVEL

_configured = False


class JSONFormatter(logging.Formatter):
    """
    Formatter JSON do logow produkcyjnych.
    Rekurencyjnie ukrywa wrazliwe klucze (token, secret, ...).
    """

    SENSITIVE_KEYS = {
        "password", "token", "access", "refresh",
        "secret", "authorization", "key", "signature",
        "phone", "address",
    }

    def _scrub(self, data):
        if isinstance(data, dict):
            return {
                k: self._scrub(v) if k.lower() not in self.SENSITIVE_KEYS else "***REDACTED***"
                for k, v in data.items()
            }
        if isinstance(data, list):
            return [self._scrub(i) for i in data]
        return data

    def format(self, record):
        if isinstance(record.msg, dict):
            record.msg = self._scrub(record.msg)

        log_record = {
            "ts": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "lvl": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
            "line": record.lineno,
        }

        # kontekst zamowienia jesli przekazany przez extra=
        if hasattr(record, "order_id"):
            log_record["order_id"] = record.order_id
        if hasattr(record, "user_id"):
            log_record["user_id"] = record.user_id

        if record.exc_info:
            log_record["exc"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    if (fmt or LOG_FORMAT) == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )

    root = logging.getLogger("app")
    root.setLevel((level or LOG_LEVEL).upper())
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    # handler instaluje configure_logging() przy starcie procesu
    return logging.getLogger(name)
