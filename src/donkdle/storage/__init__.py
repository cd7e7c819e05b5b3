"""Persistence for saved games and player statistics."""

from .key_value import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from .progress import STATS_KEY, ProgressStore, day_key

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "ProgressStore",
    "STATS_KEY",
    "day_key",
]
