from core.models import CatalogRecord, WatchedGame


def test_effective_price_takes_lower_of_both_prices():
    rec = CatalogRecord("Game 1", regular_price=7.0, discounted_price=0.5)
    assert rec.effective_price() == 0.5


def test_effective_price_when_discount_above_regular():
    rec = CatalogRecord("Game 1", regular_price=5.0, discounted_price=6.0)
    assert rec.effective_price() == 5.0


def test_effective_price_uses_whichever_is_present():
    assert CatalogRecord("A", regular_price=3.0).effective_price() == 3.0
    assert CatalogRecord("A", discounted_price=2.0).effective_price() == 2.0


def test_effective_price_without_prices_is_none():
    assert CatalogRecord("A").effective_price() is None


def test_zero_price_is_not_missing():
    rec = CatalogRecord("A", regular_price=0.0)
    assert rec.effective_price() == 0.0


def test_is_on_sale_defaults_to_false():
    assert CatalogRecord("A").is_on_sale() is False
    assert CatalogRecord("A", has_discount=False).is_on_sale() is False
    assert CatalogRecord("A", has_discount=True).is_on_sale() is True


def test_discount_percent():
    rec = CatalogRecord("A", regular_price=10.0, discounted_price=2.5)
    assert rec.discount_percent() == 75.0
    assert CatalogRecord("A", regular_price=10.0).discount_percent() is None
    assert CatalogRecord("A", regular_price=0.0, discounted_price=0.0).discount_percent() is None


def test_watched_game_from_dict_ignores_extra_fields():
    game = WatchedGame.from_dict(
        {"title": "Game 1", "acceptable_price": 1, "additional_field": "x"}
    )
    assert game == WatchedGame("Game 1", 1.0)
    assert WatchedGame.from_dict({"title": "Game 2"}).acceptable_price is None
