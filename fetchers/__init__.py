# fetchers/__init__.py
from . import eshop

# Query used by the check cycle: title -> list of CatalogRecord, raises on failure
QUERY = eshop.search_games
