import os

# Keep test runs from writing log files into the user's config dir.
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest

from core.models import CatalogRecord, WatchedGame


@pytest.fixture()
def game1_on_sale() -> CatalogRecord:
    return CatalogRecord(
        title="Game 1", regular_price=7.0, discounted_price=0.5, has_discount=True
    )


@pytest.fixture()
def watchlist() -> list[WatchedGame]:
    return [WatchedGame("Game 1", 10.0), WatchedGame("Game 2")]
