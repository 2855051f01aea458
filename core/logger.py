# core/logger.py
import logging
import os
import sys
from logging.handlers import TimedRotatingFileHandler

CONFIG_HOME = os.getenv("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False
_base_level = logging.INFO


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).lower() == "true"


def _file_handler(path: str) -> logging.Handler:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    # one file per day, LOG_BACKUPS days kept
    return TimedRotatingFileHandler(
        path,
        when="midnight",
        backupCount=int(os.getenv("LOG_BACKUPS", "3")),
        encoding="utf-8",
    )


def setup_logging():
    global _configured, _base_level
    if _configured:
        return

    _base_level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(_base_level)

    if not root.handlers:
        handlers = []
        if _env_flag("LOG_TO_STDOUT"):
            handlers.append(logging.StreamHandler(sys.stdout))
        if _env_flag("LOG_TO_FILE"):
            log_file = os.getenv(
                "LOG_FILE", os.path.join(CONFIG_HOME, "sweetch-bot", "sweetch-bot.log")
            )
            try:
                handlers.append(_file_handler(log_file))
            except OSError as e:
                root.warning("Failed to initialize file logging at %s: %s", log_file, e)

        formatter = logging.Formatter(LOG_FORMAT)
        for handler in handlers:
            handler.setLevel(_base_level)
            handler.setFormatter(formatter)
            root.addHandler(handler)

    _configured = True


def set_debug(enabled: bool) -> None:
    """Apply the config ``debug`` flag; turning it off restores LOG_LEVEL."""
    setup_logging()
    level = logging.DEBUG if enabled else _base_level
    root = logging.getLogger()
    if root.level == level:
        return
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)
    root.info("Log level set to %s.", logging.getLevelName(level))


def get_logger(name: str | None = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
