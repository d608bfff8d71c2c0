from __future__ import annotations

import logging
import time

from ..analytics.store import record_event
from .cache import cache_get, cache_set, request_key
from .config import DEFAULT_RECOMMENDATION_CONFIG
from .data_store import get_catalog, get_recipe
from .filters import find_recipes
from .matching import score_recipe
from .models import (
    RecipeDetailResponse,
    RecommendationRequest,
    RecommendationResponse,
    SubstitutionResponse,
)
from .substitutions import suggest_for_missing, suggest_substitutions

logger = logging.getLogger(__name__)


def _record_search(
    request: RecommendationRequest,
    results_returned: int,
    start_time: float,
    cache_hit: bool,
) -> float:
    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("search", {
        "ingredients": request.ingredients,
        "dietary_preferences": request.dietary_preferences,
        "difficulty": request.difficulty,
        "max_cooking_time": request.max_cooking_time,
        "time_limited": (
            request.max_cooking_time < DEFAULT_RECOMMENDATION_CONFIG.default_max_cooking_time
        ),
        "results_returned": results_returned,
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    })
    return elapsed_ms


def get_recommendations(request: RecommendationRequest) -> RecommendationResponse:
    start_time = time.time()

    # --- Cache check ---
    key = request_key(request)
    cached = cache_get(key)
    if cached is not None:
        logger.debug("Recommendation cache hit", extra={"cache_key": key})
        _record_search(request, cached.total_results, start_time, cache_hit=True)
        return cached

    # --- Score, filter, rank ---
    ranked = find_recipes(
        get_catalog(),
        request.ingredients,
        dietary_preferences=request.dietary_preferences,
        difficulty=request.difficulty,
        max_cooking_time=request.max_cooking_time,
    )

    response = RecommendationResponse(recipes=ranked, total_results=len(ranked))
    cache_set(key, response)

    elapsed_ms = _record_search(request, len(ranked), start_time, cache_hit=False)
    logger.info(
        "Recommendations computed",
        extra={
            "ingredients": len(request.ingredients),
            "dietary_preferences": request.dietary_preferences,
            "difficulty": request.difficulty,
            "max_cooking_time": request.max_cooking_time,
            "results": len(ranked),
            "duration_ms": elapsed_ms,
        },
    )
    return response


def get_recipe_detail(
    recipe_id: str,
    available_ingredients: list[str],
) -> RecipeDetailResponse | None:
    """Score one recipe and suggest substitutes for whatever is missing."""
    recipe = get_recipe(recipe_id)
    if recipe is None:
        return None

    scored = score_recipe(recipe, available_ingredients)
    return RecipeDetailResponse(
        recipe=scored,
        substitutions=suggest_for_missing(scored.missing_ingredients),
    )


def lookup_substitutions(ingredient: str) -> SubstitutionResponse:
    substitutes = suggest_substitutions(ingredient)
    record_event("substitution_lookup", {
        "ingredient": ingredient.strip().lower(),
        "found": bool(substitutes),
    })
    return SubstitutionResponse(ingredient=ingredient, substitutes=substitutes)
