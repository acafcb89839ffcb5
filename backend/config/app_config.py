"""
Runtime Configuration

Reads application settings from environment variables.

Includes:
- Database URL (SQLAlchemy format)
- Logging level and optional rotating file log
- Server bind host/port
"""
import os
import logging
from pathlib import Path

from constants import ServerConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "BOOK_MANAGER_"

DATA_DIR = Path.home() / ".book-manager"


def _env(name: str, default: str) -> str:
    return os.environ.get(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    """
    Read a boolean environment flag.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive)
    """
    value = os.environ.get(f"{ENV_PREFIX}{name}")
    if value is None:
        return default
    return value.lower() in ('true', '1', 'yes')


def get_database_url() -> str:
    """
    Resolve the SQLAlchemy database URL.

    Falls back to a SQLite file in the user's data directory, creating
    the directory when needed.
    """
    url = os.environ.get(f"{ENV_PREFIX}DATABASE_URL")
    if url:
        return url

    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{DATA_DIR / 'book_manager.db'}"


def get_log_level() -> int:
    level_name = _env("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{level_name}', using INFO")
        return logging.INFO
    return level


def get_log_file() -> Path | None:
    """
    Location of the rotating log file, or None when file logging is disabled.
    """
    if not _env_flag("LOG_TO_FILE", True):
        return None
    log_dir = Path(_env("LOG_DIR", str(DATA_DIR / "logs"))).expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "backend.log"


def get_server_host() -> str:
    return _env("HOST", ServerConfig.HOST)


def get_server_port() -> int:
    return int(_env("PORT", str(ServerConfig.PORT)))


DATABASE_URL = get_database_url()
