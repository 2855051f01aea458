from pathlib import Path

from core.models import CatalogRecord
from core.report import build_failure_message, build_success_message


def test_success_message_lists_games_with_prices():
    games = [
        CatalogRecord("Game 1", regular_price=10.0, discounted_price=2.5, has_discount=True),
        CatalogRecord("Game 2", regular_price=3.0),
    ]

    message = build_success_message(games)

    assert message.splitlines() == [
        "2 watched games on sale:",
        "- Game 1: 2.50 (-75%, was 10.00)",
        "- Game 2: 3.00",
    ]


def test_success_message_single_game_without_prices():
    message = build_success_message([CatalogRecord("Game 1", has_discount=True)])

    assert message.splitlines() == [
        "1 watched game on sale:",
        "- Game 1: Unavailable",
    ]


def test_failure_message():
    assert build_failure_message() == "None of your watched games is on sale right now."


def test_templates_live_inside_the_core_package():
    import core.report as report

    assert report.TEMPLATE_DIR.parent == Path(report.__file__).resolve().parent
    assert (report.TEMPLATE_DIR / "notification_success.txt").is_file()
    assert (report.TEMPLATE_DIR / "notification_failure.txt").is_file()


def test_pyproject_ships_templates():
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    text = pyproject.read_text(encoding="utf-8")

    assert "[tool.setuptools.package-data]" in text
    assert 'core = ["templates/*.txt"]' in text
