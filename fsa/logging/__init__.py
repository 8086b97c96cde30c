from .logger_setup import UTCJsonFormatter, setup_logging, teardown_logging

__all__ = [
    'UTCJsonFormatter',
    'setup_logging',
    'teardown_logging',
]
