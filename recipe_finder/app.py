from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .logging_config import setup_logging
from .recommendations.cache import get_cache_stats
from .recommendations.config import DEFAULT_RECOMMENDATION_CONFIG
from .recommendations.data_store import CatalogUnavailableError, get_catalog
from .recommendations.models import (
    Difficulty,
    RecipeDetailResponse,
    RecipeListResponse,
    RecommendationRequest,
    RecommendationResponse,
    SubstitutionResponse,
)
from .recommendations.retrieval import (
    get_recipe_detail,
    get_recommendations,
    lookup_substitutions,
)

setup_logging()

app = FastAPI(title="Recipe Finder API", version="1.0.0")


@app.exception_handler(CatalogUnavailableError)
async def catalog_unavailable(request: Request, exc: CatalogUnavailableError) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content={"detail": "Failed to load recipes. Please try again."},
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    cfg = DEFAULT_RECOMMENDATION_CONFIG
    cuisines = sorted({r.cuisine for r in get_catalog() if r.cuisine})
    return {
        "cuisines": cuisines,
        "difficulties": ["all"] + [d.value for d in Difficulty],
        "dietary_options": list(cfg.dietary_options),
        "cooking_time": {
            "min": cfg.min_cooking_time,
            "max": cfg.default_max_cooking_time,
            "step": cfg.cooking_time_step,
            "default": cfg.default_max_cooking_time,
        },
    }


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/recipes", response_model=RecipeListResponse)
def list_recipes(limit: int | None = Query(default=None, ge=1)) -> RecipeListResponse:
    catalog = get_catalog()
    recipes = catalog[:limit] if limit else list(catalog)
    return RecipeListResponse(recipes=recipes, total=len(catalog))


@app.get("/recipes/popular", response_model=RecipeListResponse)
def popular_recipes() -> RecipeListResponse:
    catalog = get_catalog()
    return RecipeListResponse(
        recipes=catalog[: DEFAULT_RECOMMENDATION_CONFIG.popular_limit],
        total=len(catalog),
    )


@app.get("/recipes/{recipe_id}", response_model=RecipeDetailResponse)
def recipe_detail(
    recipe_id: str,
    ingredients: list[str] = Query(default=[]),
) -> RecipeDetailResponse:
    detail = get_recipe_detail(recipe_id, ingredients)
    if detail is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return detail


# ── Matching endpoints ───────────────────────────────────────────────────


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(body: RecommendationRequest) -> RecommendationResponse:
    return get_recommendations(body)


@app.get("/substitutions", response_model=SubstitutionResponse)
def substitutions(ingredient: str = Query(..., min_length=1)) -> SubstitutionResponse:
    return lookup_substitutions(ingredient)


# ── Operational endpoints ────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
