# core/acceptability.py
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Sequence

from .logger import get_logger
from .models import CatalogRecord, WatchedGame

logger = get_logger(__name__)

QueryFn = Callable[[str], List[CatalogRecord]]


def is_acceptable(watched: WatchedGame, record: CatalogRecord) -> bool:
    """
    Decide whether one catalog record should trigger a notification.

    With an acceptable price configured, only the effective price counts and
    the discount flag is ignored. Without one, only the discount flag counts.
    """
    if record.title != watched.title:
        return False
    if watched.acceptable_price is not None:
        price = record.effective_price()
        return price is not None and price <= watched.acceptable_price
    return record.is_on_sale()


def filter_acceptable(
    watched: WatchedGame, candidates: Iterable[CatalogRecord]
) -> List[CatalogRecord]:
    accepted = [rec for rec in candidates if is_acceptable(watched, rec)]
    logger.debug(
        "'%s': %d acceptable record(s) (acceptable_price=%s).",
        watched.title, len(accepted), watched.acceptable_price,
    )
    return accepted


def _matches_for(watched: WatchedGame, query: QueryFn) -> List[CatalogRecord]:
    try:
        candidates = query(watched.title)
    except Exception as e:
        logger.exception("Query failed for '%s': %s", watched.title, e)
        return []
    logger.debug("'%s': catalog returned %d record(s).", watched.title, len(candidates))
    return filter_acceptable(watched, candidates)


def acceptable_games(
    watched_games: Sequence[WatchedGame], query: QueryFn, workers: int = 1
) -> List[CatalogRecord]:
    """
    Run every watched title through ``query`` and the acceptability filter.

    A failing query only drops that title's matches. Results are returned in
    watchlist order, also when ``workers > 1`` spreads the queries over a
    thread pool.
    """
    logger.info("Checking %d watched game(s).", len(watched_games))

    if workers > 1 and len(watched_games) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            per_title = list(pool.map(lambda wg: _matches_for(wg, query), watched_games))
    else:
        per_title = [_matches_for(wg, query) for wg in watched_games]

    games = [rec for matches in per_title for rec in matches]
    logger.info("Found %d acceptable game(s).", len(games))
    return games
