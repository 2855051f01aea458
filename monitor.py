import os
from typing import List, Optional

from core.logger import get_logger, set_debug
from core.acceptability import QueryFn, acceptable_games
from core.config import Config, ConfigError, config_path, load_config, write_default_config
from core.models import CatalogRecord
from core.notifier import notify_failure, notify_success
from core.scheduler import build_scheduler, run_forever
from fetchers import QUERY

logger = get_logger(__name__)

MODE = os.getenv("MODE", "daemon").lower()  # "daemon", "once" or "init"
QUERY_WORKERS = int(os.getenv("QUERY_WORKERS", "1"))


def run_check(
    cfg: Config, query: QueryFn = QUERY, workers: int = QUERY_WORKERS
) -> List[CatalogRecord]:
    games = acceptable_games(cfg.watched_games, query, workers=workers)
    if games:
        logger.info("Games on sale: %s", [g.title for g in games])
        notify_success(games)
    else:
        logger.info("No watched game is on sale.")
        notify_failure()
    return games


def check_cycle(path: Optional[str] = None, query: QueryFn = QUERY) -> None:
    """One scheduled trigger: re-read the watchlist, check, notify."""
    try:
        cfg = load_config(path)
        set_debug(cfg.debug)
        run_check(cfg, query)
    except Exception as e:
        logger.exception("Check cycle failed: %s", e)


def run_once(path: Optional[str] = None) -> int:
    cfg = load_config(path)
    set_debug(cfg.debug)
    run_check(cfg)
    return 0


def run_init(path: Optional[str] = None) -> int:
    path = path or config_path()
    if write_default_config(path):
        print(f"Created {path}; edit it to list the games you want to watch.")
    else:
        print(f"{path} already exists; leaving it as is.")
    return 0


def run_daemon(path: Optional[str] = None) -> None:
    cfg = load_config(path)
    set_debug(cfg.debug)
    if not cfg.run_at:
        raise ConfigError("'schedule.run_at' must list at least one time of day in daemon mode.")

    logger.info(
        "Starting daemon; watching %d game(s), checks at %s.",
        len(cfg.watched_games), ", ".join(cfg.run_at),
    )
    try:
        scheduler = build_scheduler(cfg.run_at, lambda: check_cycle(path), cfg.timezone)
    except ValueError as e:
        raise ConfigError(str(e)) from e
    run_forever(scheduler)


if __name__ == "__main__":
    try:
        if MODE == "init":
            raise SystemExit(run_init())
        elif MODE == "once":
            raise SystemExit(run_once())
        else:
            run_daemon()
    except ConfigError as e:
        logger.error("Config error: %s", e)
        raise SystemExit(1)
    except KeyboardInterrupt:
        logger.info("Monitor interrupted.")
    except Exception as e:
        logger.exception("Fatal monitor error: %s", e)
        raise SystemExit(2)
