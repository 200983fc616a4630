"""Resolve freeform food names onto canonical catalog entries."""

import re
from dataclasses import dataclass

from meal_nutrients.domain.catalog import UNKNOWN_FOOD_ID, Catalog

MATCH_THRESHOLD = 0.5

STOP_WORDS = frozenset(
    {
        "fresh",
        "raw",
        "sample",
        "store",
        "cooked",
        "whole",
        "plain",
        "piece",
        "pieces",
        "slice",
        "slices",
        "serving",
        "portion",
        "of",
        "and",
        "with",
        "the",
    }
)

# First match wins; an item naming two foods resolves to the earlier entry.
ALIASES: tuple[tuple[str, str], ...] = (
    ("chicken", "chicken-breast-cooked"),
    ("salmon", "salmon-cooked"),
    ("spinach", "spinach-raw"),
    ("broccoli", "broccoli-raw"),
    ("banana", "banana-raw"),
    ("apple", "apple-raw"),
    ("rice", "rice-white-cooked"),
    ("milk", "milk-whole"),
    ("egg", "egg-whole"),
)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class Resolution:
    """Result of resolving a single food name."""

    canonical_id: str
    canonical_name: str


def normalize_name(value: str) -> str:
    """Lowercase and collapse non-alphanumeric runs to single spaces."""
    return _NON_ALNUM.sub(" ", value.lower()).strip()


def tokenize(value: str) -> list[str]:
    """Split a name into matchable tokens."""
    return [
        token
        for token in normalize_name(value).split()
        if len(token) > 1
        and not any(char.isdigit() for char in token)
        and token not in STOP_WORDS
    ]


def token_overlap_score(query_tokens: set[str], candidate_tokens: set[str]) -> float:
    """Fraction of query tokens present in the candidate tokens."""
    if not query_tokens:
        return 0.0
    return len(query_tokens & candidate_tokens) / len(query_tokens)


def match_alias(normalized: str, catalog: Catalog) -> str | None:
    """Return the first alias target whose substring occurs in the name."""
    for substring, canonical_id in ALIASES:
        if substring in normalized and canonical_id in catalog:
            return canonical_id
    return None


def best_candidate(name: str, catalog: Catalog) -> tuple[str, float]:
    """Return the highest scoring candidate id and its score.

    Ties keep the earliest candidate in catalog order.
    """
    query_tokens = set(tokenize(name))
    best_id = UNKNOWN_FOOD_ID
    best_score = 0.0
    if not query_tokens:
        return best_id, best_score
    for food in catalog.candidates():
        score = token_overlap_score(query_tokens, set(tokenize(food.canonical_name)))
        if score > best_score:
            best_id = food.canonical_id
            best_score = score
    return best_id, best_score


def resolve(name: str, catalog: Catalog) -> Resolution:
    """Map a freeform food name to a canonical food in the catalog."""
    normalized = normalize_name(name)
    canonical_id = match_alias(normalized, catalog)
    if canonical_id is None:
        candidate_id, score = best_candidate(name, catalog)
        canonical_id = candidate_id if score >= MATCH_THRESHOLD else UNKNOWN_FOOD_ID
    food = catalog.get(canonical_id)
    canonical_name = food.canonical_name if food is not None else ""
    return Resolution(canonical_id=canonical_id, canonical_name=canonical_name or name)
