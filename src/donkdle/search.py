"""Autocomplete ranking for location names."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import Location

WHOLE_WORD_SCORE = 50
WORD_PREFIX_SCORE = 30
SUBSTRING_SCORE = 10
NAME_PREFIX_BONUS = 100


@dataclass(frozen=True, slots=True)
class SearchHit:
    location: Location
    score: float


def split_terms(query: str) -> list[str]:
    return query.lower().split()


def score_location(location: Location, terms: list[str]) -> float | None:
    """Score ``location`` against the query terms, or ``None`` if any term fails to match."""
    name = location.name.lower()
    words = name.split(" ")

    score = 0.0
    for term in terms:
        if term in words:
            score += WHOLE_WORD_SCORE
        elif any(word.startswith(term) for word in words):
            score += WORD_PREFIX_SCORE
        elif term in name:
            score += SUBSTRING_SCORE
        else:
            return None

    if name.startswith(terms[0]):
        score += NAME_PREFIX_BONUS
    # shorter names are more specific
    score += (100 - len(name)) / 10
    return score


def rank_locations(
    locations: Iterable[Location],
    query: str,
    *,
    limit: int = 15,
    min_length: int = 2,
) -> list[SearchHit]:
    if not query or len(query) < min_length:
        return []

    terms = split_terms(query)
    if not terms:
        return []

    hits: list[SearchHit] = []
    for location in locations:
        score = score_location(location, terms)
        if score is not None:
            hits.append(SearchHit(location=location, score=score))

    hits.sort(key=lambda hit: hit.score, reverse=True)
    return hits[:limit]
