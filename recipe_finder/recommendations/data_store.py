from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .cache import clear_cache
from .config import DEFAULT_RECOMMENDATION_CONFIG
from .models import Recipe

logger = logging.getLogger(__name__)

_catalog_adapter = TypeAdapter(list[Recipe])

_catalog: list[Recipe] | None = None


class CatalogUnavailableError(RuntimeError):
    """The recipe catalog could not be loaded."""


def _load(path: Path) -> list[Recipe]:
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        recipes = _catalog_adapter.validate_python(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        logger.error("Failed to load recipe catalog from %s", path, exc_info=True)
        raise CatalogUnavailableError(f"Failed to load recipes from {path}") from exc

    # Same ordering the hosted store returned: by name.
    recipes.sort(key=lambda r: r.name)
    logger.info("Loaded recipe catalog", extra={"path": str(path), "recipes": len(recipes)})
    return recipes


def get_catalog() -> list[Recipe]:
    """Return the in-memory recipe catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = _load(DEFAULT_RECOMMENDATION_CONFIG.catalog_path)
    return _catalog


def get_recipe(recipe_id: str) -> Recipe | None:
    for recipe in get_catalog():
        if recipe.id == recipe_id:
            return recipe
    return None


def set_catalog(recipes: list[Recipe] | None) -> None:
    """Replace the loaded catalog; ``None`` forces a reload on next access."""
    global _catalog
    _catalog = None if recipes is None else sorted(recipes, key=lambda r: r.name)
    # Cached rankings were computed against the old catalog.
    clear_cache()
