import logging
import sys

from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT = "%(timestamp)s %(level)s %(name)s %(module)s %(lineno)d %(message)s"
HANDLER_NAME = "readiness-json"


class ReadinessJsonFormatter(JsonFormatter):
    """Flat JSON records with an epoch timestamp and the upper-cased level name."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("timestamp", record.created)
        log_record["level"] = record.levelname.upper()
        log_record["module"] = record.module
        log_record["lineno"] = record.lineno


def _json_handler(root_logger: logging.Logger):
    for handler in root_logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def setup_logging(log_level_str: str = "INFO"):
    """
    Sends every log record to stdout as one JSON object per line.

    Calling it again only changes the level; the stdout handler is installed once.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if _json_handler(root_logger) is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(ReadinessJsonFormatter(LOG_FORMAT))
        root_logger.addHandler(handler)

    root_logger.info(f"JSON logging at level {logging.getLevelName(log_level)}")
