# config.py – FSA Konfiguration
# ==============================
# - Defaults below; every value in ABSCHNITT 1-2 can be overridden through
#   the environment (FSA_*) or at runtime via set_config_override().

import os
import threading

# =============================================================================
# ABSCHNITT 0: PATHS
# =============================================================================

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# ABSCHNITT 1: LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("FSA_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.environ.get("FSA_LOG_FILE") or None   # None = console only
LOG_JSON = _env_bool("FSA_LOG_JSON", False)         # JSON lines via python-json-logger
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S.%fZ"

# =============================================================================
# ABSCHNITT 2: DEMO CLI
# =============================================================================

DEFINITION_PATH = os.environ.get("FSA_DEFINITION") or None   # None = built-in binary mod-3
INPUT_PROMPT = "Enter input (string of 0 and 1 only): "
SHOW_TRACE = _env_bool("FSA_SHOW_TRACE", False)

# =============================================================================
# ABSCHNITT 3: RUNTIME OVERRIDES
# =============================================================================

_config_overrides = {}
_config_lock = threading.RLock()


def set_config_override(key: str, value) -> None:
    """
    Thread-safe config override.

    Use this instead of assigning to module attributes at runtime.

    Args:
        key: Config variable name (e.g., 'LOG_LEVEL')
        value: New value
    """
    with _config_lock:
        _config_overrides[key] = value


def get_config(key: str, default=None):
    """
    Thread-safe config getter.

    Checks runtime overrides first, then the module-level value.
    """
    with _config_lock:
        if key in _config_overrides:
            return _config_overrides[key]
    return globals().get(key, default)


def clear_config_overrides() -> None:
    """Remove all runtime overrides"""
    with _config_lock:
        _config_overrides.clear()
