from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader

from core.models import CatalogRecord

# Resolve template directory relative to this file
TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _price_to_str(price: Optional[float]) -> str:
    if price is None:
        return "Unavailable"
    return f"{price:.2f}"


def build_success_message(games: List[CatalogRecord]) -> str:
    template = env.get_template("notification_success.txt")

    games_data = []
    for game in games:
        pct = game.discount_percent()
        games_data.append(
            {
                "title": game.title,
                "price_str": _price_to_str(game.effective_price()),
                "regular_str": _price_to_str(game.regular_price),
                "pct_str": f"-{pct:.0f}%" if pct is not None and pct > 0 else "",
            }
        )

    return template.render(count=len(games), games=games_data).strip()


def build_failure_message() -> str:
    return env.get_template("notification_failure.txt").render().strip()
