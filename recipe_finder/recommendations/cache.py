"""
Short-lived cache of ranked results.

Ranking is a pure function of the request and the catalog, so any two
requests that normalize to the same ingredients, preferences and filters
can share one result until the entry ages out.
"""
from __future__ import annotations

import hashlib
import json
import time
from typing import Any

from .config import DEFAULT_RECOMMENDATION_CONFIG
from .matching import normalize_ingredient
from .models import RecommendationRequest

_MAX_ENTRIES = 512

_entries: dict[str, tuple[float, Any]] = {}
_hits: int = 0
_misses: int = 0


def request_key(request: RecommendationRequest) -> str:
    """Hash a request so ingredient order, case and repeats don't matter."""
    canonical = {
        "ingredients": sorted({normalize_ingredient(i) for i in request.ingredients} - {""}),
        "dietary_preferences": sorted(set(request.dietary_preferences)),
        "difficulty": request.difficulty,
        "max_cooking_time": request.max_cooking_time,
    }
    payload = json.dumps(canonical, sort_keys=True)
    return hashlib.sha256(payload.encode()).hexdigest()[:16]


def cache_get(key: str) -> Any | None:
    global _hits, _misses
    entry = _entries.get(key)
    if entry is not None:
        stored_at, value = entry
        if time.time() - stored_at < DEFAULT_RECOMMENDATION_CONFIG.cache_ttl_seconds:
            _hits += 1
            return value
        _entries.pop(key, None)
    _misses += 1
    return None


def cache_set(key: str, value: Any) -> None:
    if key not in _entries and len(_entries) >= _MAX_ENTRIES:
        # dicts keep insertion order: drop the oldest entry
        _entries.pop(next(iter(_entries), None), None)
    _entries[key] = (time.time(), value)


def get_cache_stats() -> dict:
    lookups = _hits + _misses
    return {
        "size": len(_entries),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / lookups * 100, 1) if lookups else 0.0,
        "ttl_seconds": DEFAULT_RECOMMENDATION_CONFIG.cache_ttl_seconds,
    }


def clear_cache() -> None:
    global _hits, _misses
    _entries.clear()
    _hits = 0
    _misses = 0
