from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class WatchedGame:
    """
    One watchlist entry from the config.
    Without an acceptable price, only games the catalog flags as
    discounted are reported.
    """
    title: str
    acceptable_price: Optional[float] = None

    @classmethod
    def from_dict(cls, entry: Dict[str, Any]) -> "WatchedGame":
        price = entry.get("acceptable_price")
        return cls(
            title=entry["title"],
            acceptable_price=float(price) if price is not None else None,
        )


@dataclass(frozen=True)
class CatalogRecord:
    """
    One search result from the eShop catalog.
    Any price field may be missing; missing is not the same as free.
    """
    title: str
    regular_price: Optional[float] = None
    discounted_price: Optional[float] = None
    has_discount: Optional[bool] = None

    def effective_price(self) -> Optional[float]:
        """Lower of the two prices, None when the catalog published neither."""
        prices = [
            p for p in (self.discounted_price, self.regular_price) if p is not None
        ]
        if not prices:
            return None
        return min(prices)

    def is_on_sale(self) -> bool:
        return bool(self.has_discount) if self.has_discount is not None else False

    def discount_percent(self) -> Optional[float]:
        if self.regular_price is None or self.discounted_price is None:
            return None
        if self.regular_price <= 0:
            return None
        return (self.regular_price - self.discounted_price) * 100.0 / self.regular_price
