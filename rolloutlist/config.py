from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
from logging.handlers import RotatingFileHandler
import os

LOG_FILE_NAME = "latest.log"
SESSIONS_SUBDIR = "sessions"

DEFAULT_PAGE_SIZE = 25
# Hard cap to bound worst-case work per request.
MAX_SCAN_FILES = 50_000
HEAD_RECORD_LIMIT = 5


@dataclass
class Settings:
    page_size: int = DEFAULT_PAGE_SIZE
    max_scan_files: int = MAX_SCAN_FILES
    codex_home: Path | None = None

    def resolve_codex_home(self) -> Path:
        return self.codex_home or get_codex_home()


def get_codex_home() -> Path:
    env = os.environ.get("CODEX_HOME")
    if env:
        return Path(env).expanduser()
    return Path.home() / ".codex"


def get_sessions_root(codex_home: Path | None = None) -> Path:
    return (codex_home or get_codex_home()) / SESSIONS_SUBDIR


def get_app_home() -> Path:
    env = os.environ.get("ROLLOUTLIST_HOME")
    if env:
        return Path(env).expanduser()
    return Path.home() / ".rolloutlist"


def get_log_dir() -> Path:
    return get_app_home() / "logs"


def configure_logging() -> logging.Logger:
    logger = logging.getLogger("rolloutlist")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = get_log_dir()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Fall back to stderr only if log directory fails.
        logging.basicConfig(level=logging.INFO)
        return logger

    log_path = log_dir / LOG_FILE_NAME
    handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=5)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
