from __future__ import annotations

from collections import Counter
from typing import Any


def _rate(part: int, whole: int) -> float:
    return round(part / whole * 100, 1) if whole else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    lookups = [e for e in events if e["type"] == "substitution_lookup"]
    total = len(searches)

    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    ingredient_counter: Counter[str] = Counter()
    dietary_counter: Counter[str] = Counter()
    difficulty_counter: Counter[str] = Counter()
    for s in searches:
        ingredient_counter.update(s.get("ingredients", []) or [])
        dietary_counter.update(s.get("dietary_preferences", []) or [])
        difficulty_counter[s.get("difficulty", "all")] += 1

    top_ingredients = [
        {"name": n, "count": c} for n, c in ingredient_counter.most_common(10)
    ]

    # time_limited is only set for limits below the default
    filter_counts = {"dietary": 0, "difficulty": 0, "cooking_time": 0}
    for s in searches:
        if s.get("dietary_preferences"):
            filter_counts["dietary"] += 1
        if s.get("difficulty", "all") != "all":
            filter_counts["difficulty"] += 1
        if s.get("time_limited"):
            filter_counts["cooking_time"] += 1

    zero_results = sum(1 for s in searches if s.get("results_returned", 0) == 0)
    cache_hits = sum(1 for s in searches if s.get("cache_hit"))

    missed_lookups = Counter(
        e.get("ingredient", "") for e in lookups if not e.get("found")
    )

    return {
        "total_searches": total,
        "avg_response_time_ms": avg_time,
        "top_ingredients": top_ingredients,
        "dietary_usage": dict(dietary_counter),
        "difficulty_usage": dict(difficulty_counter),
        "filter_usage": {k: _rate(v, total) for k, v in filter_counts.items()},
        "zero_result_rate": _rate(zero_results, total),
        "cache_stats": {
            "hits": cache_hits,
            "misses": total - cache_hits,
            "hit_rate": _rate(cache_hits, total),
        },
        "substitution_lookups": {
            "total": len(lookups),
            "unmatched": [
                {"name": n, "count": c} for n, c in missed_lookups.most_common(10)
            ],
        },
    }
