# fetchers/eshop.py
import os
from typing import Any, Dict, List, Optional

import requests
from tenacity import retry, wait_exponential_jitter, stop_after_attempt, RetryError

from core.models import CatalogRecord
from core.logger import get_logger

logger = get_logger(__name__)

ESHOP_LANG = os.getenv("ESHOP_LANG", "en").strip() or "en"
ESHOP_SEARCH_URL = os.getenv(
    "ESHOP_SEARCH_URL",
    f"https://searching.nintendo-europe.com/{ESHOP_LANG}/select",
)
ESHOP_ROWS = int(os.getenv("ESHOP_ROWS", "50"))
ESHOP_FILTER = "type:GAME AND system_type:nintendoswitch*"
USER_AGENT = os.getenv(
    "ESHOP_USER_AGENT",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
)

SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})


class EshopError(Exception):
    """eShop search failed or returned something unusable."""


def search_params(title: str) -> Dict[str, Any]:
    return {
        "q": title,
        "fq": ESHOP_FILTER,
        "rows": ESHOP_ROWS,
        "start": 0,
        "wt": "json",
    }


@retry(wait=wait_exponential_jitter(initial=1, max=30), stop=stop_after_attempt(3))
def _fetch(title: str) -> Dict[str, Any]:
    r = SESSION.get(ESHOP_SEARCH_URL, params=search_params(title), timeout=30)
    r.raise_for_status()
    return r.json()


def _as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    return None


def parse_docs(payload: Dict[str, Any]) -> List[CatalogRecord]:
    """
    Map Solr ``response.docs`` to catalog records.

    Only the title and the three price fields are used:
      price_regular_f, price_discounted_f, price_has_discount_b
    Fields the catalog leaves out stay None.
    """
    try:
        docs = payload["response"]["docs"]
    except (KeyError, TypeError) as e:
        raise EshopError(f"Unexpected eShop payload (no response.docs): {e}") from e
    if not isinstance(docs, list):
        raise EshopError("Unexpected eShop payload: response.docs is not a list")

    records: List[CatalogRecord] = []
    for doc in docs:
        if not isinstance(doc, dict) or not isinstance(doc.get("title"), str):
            continue
        records.append(
            CatalogRecord(
                title=doc["title"],
                regular_price=_as_float(doc.get("price_regular_f")),
                discounted_price=_as_float(doc.get("price_discounted_f")),
                has_discount=_as_bool(doc.get("price_has_discount_b")),
            )
        )
    return records


def search_games(title: str) -> List[CatalogRecord]:
    logger.info("Searching eShop for '%s'", title)
    try:
        payload = _fetch(title)
    except RetryError as e:
        logger.error("eShop search failed for '%s' after retries: %s", title, e)
        raise EshopError(f"eShop search failed for '{title}'") from e

    records = parse_docs(payload)
    logger.debug("eShop sample records for '%s': %s", title, records[:3])
    logger.info("eShop: %d result(s) for '%s'", len(records), title)
    return records
