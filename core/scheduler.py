# core/scheduler.py
import datetime
import time
from typing import Callable, Iterable, Optional

import pytz
import schedule

from .logger import get_logger

logger = get_logger(__name__)

_TIME_FORMATS = ("%I:%M %p", "%I:%M%p", "%H:%M")


def normalize_time(value: str) -> str:
    """
    Convert a configured time of day to the HH:MM form schedule expects.

    "7:00 pm" -> "19:00", "07:30AM" -> "07:30", "21:15" -> "21:15"
    """
    text = value.strip().upper()
    for fmt in _TIME_FORMATS:
        try:
            return datetime.datetime.strptime(text, fmt).strftime("%H:%M")
        except ValueError:
            continue
    raise ValueError(f"Unrecognized time of day: {value!r}")


def build_scheduler(
    run_at: Iterable[str],
    job: Callable[[], None],
    timezone: Optional[str] = None,
) -> schedule.Scheduler:
    scheduler = schedule.Scheduler()
    for value in run_at:
        at = normalize_time(value)
        try:
            # schedule resolves tz names through pytz
            scheduler.every().day.at(at, timezone).do(job)
        except (schedule.ScheduleValueError, pytz.UnknownTimeZoneError) as e:
            raise ValueError(f"Cannot schedule {value!r} in {timezone!r}: {e}") from e
        logger.info("Scheduled daily check at %s (%s).", at, timezone or "local time")
    return scheduler


def run_forever(scheduler: schedule.Scheduler, poll_seconds: float = 1) -> None:
    logger.info("Next check at %s.", scheduler.next_run)
    while True:
        scheduler.run_pending()
        time.sleep(poll_seconds)
