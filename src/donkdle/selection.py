"""Daily and random target selection."""

from __future__ import annotations

import math
import random
from datetime import date
from enum import Enum

from .catalog import CatalogError, LocationCatalog
from .models import Location


class GameMode(str, Enum):
    DAILY = "daily"
    RANDOM = "random"


def daily_seed(day: date) -> int:
    return day.year * 10000 + day.month * 100 + day.day


def daily_index(day: date, count: int) -> int:
    """Deterministic catalog index for ``day``; every player gets the same location."""
    if count <= 0:
        raise ValueError("count must be positive")
    x = math.sin(daily_seed(day)) * 10000
    return math.floor((x - math.floor(x)) * count) % count


def select_target(
    catalog: LocationCatalog,
    mode: GameMode,
    *,
    day: date | None = None,
    rng: random.Random | None = None,
) -> Location:
    if not len(catalog):
        raise CatalogError("Catalog has no playable locations")

    if mode is GameMode.RANDOM:
        return (rng or random.Random()).choice(catalog.locations)

    return catalog[daily_index(day or date.today(), len(catalog))]
