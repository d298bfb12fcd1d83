import logging
import sys
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "counselor-assessment"
HANDLER_NAME = "assessment-json"

# Per-line fields; `extra` values passed by callers are appended as-is
LOG_FIELDS = "%(levelname)s %(name)s %(funcName)s %(message)s"


def build_json_formatter() -> jsonlogger.JsonFormatter:
    return jsonlogger.JsonFormatter(
        LOG_FIELDS,
        rename_fields={"levelname": "level", "funcName": "function"},
        static_fields={"service": SERVICE_NAME},
        timestamp=True,
    )


def setup_logging(log_level_str: str = "INFO") -> logging.Logger:
    """
    Sends root logging to one JSON stdout handler at the requested level.

    Unknown level names fall back to INFO. Repeated calls (one per app
    instance) only adjust the level.
    """
    log_level = logging.getLevelName(log_level_str.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not any(h.get_name() == HANDLER_NAME for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(build_json_formatter())
        root_logger.addHandler(handler)
    return root_logger
