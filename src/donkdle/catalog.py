"""Location catalog loading, validation and lookup."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .models import Location

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "locations.json"
UNKNOWN_REGION = "Unknown"

REGION_DISPLAY_NAMES: dict[str, str] = {
    # Isles
    "Mainisles": "Main Isles",
    "Outerisles": "Outer Isles",
    "Kremisles": "Krem Isles",
    "Earlylobbies": "Early Lobbies",
    "Latelobbies": "Late Lobbies",
    # Japes
    "Japescbs": "Japes CBs",
    "Hillside": "Hillside",
    "Lowlands": "Lowlands",
    "Hivetunnel": "Hive Tunnel",
    "Stormytunnel": "Stormy Tunnel",
    "Cavesandmines": "Caves and Mines",
    # Aztec
    "Azteccbs": "Aztec CBs",
    "Aztectunnels": "Aztec Tunnels",
    "Oasisandtotem": "Oasis and Totem",
    "Tinytemple": "Tiny Temple",
    "Fivedoortemple": "Five Door Temple",
    "Fivedoorship": "Five Door Ship",
    "Llamatemple": "Llama Temple",
    # Factory
    "Factorycbs": "Factory CBs",
    "Storage": "Storage",
    "Testing": "Testing",
    "Productionroom": "Production Room",
    "Researchanddevelopment": "R&D",
    # Galleon
    "Galleoncbs": "Galleon CBs",
    "Galleoncaverns": "Galleon Caverns",
    "Lighthouse": "Lighthouse",
    "Shipyardoutskirts": "Shipyard Outskirts",
    "Treasureroom": "Treasure Room",
    # Forest
    "Forestcbs": "Forest CBs",
    "Forestcenterandbeanstalk": "Center & Beanstalk",
    "Mushroomexterior": "Mushroom Exterior",
    "Mushroominterior": "Mushroom Interior",
    "Mills": "Mills",
    "Owltree": "Owl Tree",
    # Caves
    "Cavescbs": "Caves CBs",
    "Maincaves": "Main Caves",
    "Igloo": "Igloo",
    "Cabins": "Cabins",
    # Castle
    "Castlecbs": "Castle CBs",
    "Castlerooms": "Castle Rooms",
    "Castlesurroundings": "Castle Surroundings",
    "Castleunderground": "Castle Underground",
    # Helm & Jetpac
    "Helm": "Helm",
    "Jetpac": "Jetpac",
}


class CatalogError(RuntimeError):
    """Raised when the location catalog cannot be read or breaks its invariants."""


def format_region_name(region: str) -> str:
    return REGION_DISPLAY_NAMES.get(region, region)


class LocationCatalog:
    """Ordered, read-only collection of guessable locations."""

    def __init__(self, locations: list[Location]) -> None:
        self._locations = list(locations)
        self._by_id: dict[str, Location] = {}
        self._by_name: dict[str, Location] = {}
        for location in self._locations:
            if location.id in self._by_id:
                raise CatalogError(f"Duplicate location id: {location.id}")
            name_key = _name_key(location.name)
            if name_key in self._by_name:
                raise CatalogError(f"Duplicate location name: {location.name}")
            self._by_id[location.id] = location
            self._by_name[name_key] = location

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._locations)

    def __getitem__(self, index: int) -> Location:
        return self._locations[index]

    @property
    def locations(self) -> list[Location]:
        return list(self._locations)

    def get(self, location_id: str) -> Location | None:
        return self._by_id.get(str(location_id))

    def find_by_name(self, name: str) -> Location | None:
        """Case-insensitive exact lookup of a location's display name."""
        return self._by_name.get(_name_key(name))


def _name_key(name: str) -> str:
    return name.strip().lower()


def _is_playable(raw: dict[str, Any]) -> bool:
    region = raw.get("hint_region")
    name = raw.get("name")
    return bool(region) and region != UNKNOWN_REGION and isinstance(name, str) and bool(name.strip())


def _to_location(raw: dict[str, Any]) -> Location:
    kong = raw.get("kong")
    if not isinstance(kong, str) or not kong.strip():
        raise CatalogError(f"Location {raw.get('name')!r} has no kong value")
    level = raw.get("level")
    if not isinstance(level, str) or not level.strip():
        raise CatalogError(f"Location {raw.get('name')!r} has no level")
    if raw.get("id") is None:
        raise CatalogError(f"Location {raw.get('name')!r} has no id")

    moves = raw.get("moves") or []
    return Location(
        id=str(raw["id"]),
        name=raw["name"].strip(),
        hint_region=raw["hint_region"],
        level=level,
        kong=kong,
        moves=tuple(str(move) for move in moves),
    )


def parse_catalog(payload: Any) -> LocationCatalog:
    """Validate raw catalog JSON, dropping entries without a usable name or hint region."""
    if not isinstance(payload, list):
        raise CatalogError("Catalog root must be a list of locations")

    locations: list[Location] = []
    for raw in payload:
        if not isinstance(raw, dict):
            raise CatalogError(f"Catalog entry must be an object, got {type(raw).__name__}")
        if not _is_playable(raw):
            continue
        locations.append(_to_location(raw))
    return LocationCatalog(locations)


def load_catalog(path: str | Path | None = None, *, logger: logging.Logger | None = None) -> LocationCatalog:
    log = logger or logging.getLogger("donkdle.catalog")
    catalog_path = Path(path).expanduser() if path else BUNDLED_CATALOG_PATH

    try:
        payload = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogError(f"Catalog file does not exist: {catalog_path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file is not valid JSON: {catalog_path}") from exc

    catalog = parse_catalog(payload)
    log.info("catalog_loaded", extra={"path": str(catalog_path), "location_count": len(catalog)})
    return catalog
