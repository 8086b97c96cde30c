# logger_setup.py - Logging-Konfiguration (console + optional rotating file)
import logging
import os
import time
import uuid
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from pythonjsonlogger.json import JsonFormatter

from fsa import config

run_id = str(uuid.uuid4())[:8]

# Handlers installed by setup_logging(), removed again on re-setup
_installed_handlers: List[logging.Handler] = []

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(run_id)s %(name)s %(message)s %(event_type)s"


# =================================================================================
# Formatter with UTC timestamps
# =================================================================================
class UTCJsonFormatter(JsonFormatter):
    def formatTime(self, record, datefmt=None):
        ct = time.gmtime(record.created)
        if datefmt:
            if '%f' in datefmt:
                base_fmt = datefmt.replace('.%f', '').rstrip('Z')
                s = time.strftime(base_fmt, ct)
                s = f"{s}.{int(record.msecs):03d}"
                if datefmt.endswith('Z') and not s.endswith('Z'):
                    s += 'Z'
            else:
                s = time.strftime(datefmt, ct)
        else:
            t = time.strftime("%Y-%m-%d %H:%M:%S", ct)
            s = f"{t},{int(record.msecs):03d}"
        return s


# =================================================================================
# Filters
# =================================================================================
class EnsureEventTypeFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, 'event_type'):
            record.event_type = 'GENERAL'
        return True


class AddRunIdFilter(logging.Filter):
    def filter(self, record):
        record.run_id = run_id
        return True


def build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return UTCJsonFormatter(
            JSON_FORMAT,
            rename_fields={'levelname': 'level', 'asctime': 'timestamp'},
            datefmt=config.LOG_DATEFMT,
        )
    return logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def _prepare_handler(handler: logging.Handler, level: int, json_format: bool) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(build_formatter(json_format))
    handler.addFilter(EnsureEventTypeFilter())
    handler.addFilter(AddRunIdFilter())
    return handler


# =================================================================================
# Setup
# =================================================================================
def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> logging.Logger:
    """
    Configure the root logger.

    Arguments left as None fall back to fsa.config (LOG_LEVEL, LOG_FILE,
    LOG_JSON, including runtime overrides). Calling again replaces the
    handlers installed by the previous call.

    Returns:
        The root logger
    """
    level_name = (level or config.get_config('LOG_LEVEL') or 'WARNING').upper()
    log_level = getattr(logging, level_name, logging.WARNING)
    log_file = log_file if log_file is not None else config.get_config('LOG_FILE')
    json_format = json_format if json_format is not None else bool(config.get_config('LOG_JSON'))

    root = logging.getLogger()
    teardown_logging()

    console_handler = _prepare_handler(logging.StreamHandler(), log_level, json_format)
    root.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config.get_config('LOG_MAX_BYTES'),
            backupCount=config.get_config('LOG_BACKUP_COUNT'),
            encoding='utf-8',
            delay=True,
        )
        # File output is always JSON lines
        _prepare_handler(file_handler, log_level, True)
        root.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    root.setLevel(log_level)
    logging.captureWarnings(True)
    return root


def teardown_logging() -> None:
    """Remove and close the handlers installed by setup_logging()"""
    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()
