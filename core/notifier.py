# core/notifier.py
import os
from typing import List

from plyer import notification

from .logger import get_logger
from .models import CatalogRecord
from .report import build_failure_message, build_success_message

logger = get_logger(__name__)

APP_NAME = "sweetch-bot"
# 0 keeps the toast until dismissed where the platform allows it
NOTIFY_TIMEOUT = int(os.getenv("NOTIFY_TIMEOUT", "0"))


def _show(title: str, message: str) -> None:
    notification.notify(
        title=title,
        message=message,
        app_name=APP_NAME,
        timeout=NOTIFY_TIMEOUT,
    )
    logger.info("Notification shown: %s", title)


def notify_success(games: List[CatalogRecord]) -> None:
    _show("Game Available", build_success_message(games))


def notify_failure() -> None:
    _show("No Sales", build_failure_message())
