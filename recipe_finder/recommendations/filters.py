from __future__ import annotations

from collections.abc import Iterable, Sequence

from .matching import score_recipe
from .models import Recipe, ScoredRecipe

NO_DIFFICULTY_FILTER = "all"


def filter_by_dietary(
    recipes: Sequence[ScoredRecipe],
    preferences: Iterable[str],
) -> list[ScoredRecipe]:
    """Keep recipes tagged with *every* requested preference."""
    wanted = set(preferences)
    if not wanted:
        return list(recipes)
    return [r for r in recipes if wanted.issubset(r.dietary_tags)]


def filter_by_difficulty(recipes: Sequence[ScoredRecipe], level: str) -> list[ScoredRecipe]:
    if level == NO_DIFFICULTY_FILTER:
        return list(recipes)
    return [r for r in recipes if r.difficulty.value == level]


def filter_by_time(recipes: Sequence[ScoredRecipe], max_minutes: int) -> list[ScoredRecipe]:
    return [r for r in recipes if r.cooking_time <= max_minutes]


def rank_recipes(recipes: Sequence[ScoredRecipe]) -> list[ScoredRecipe]:
    """Best match first, quicker recipe first on equal match."""
    # sorted() is stable, so full ties keep catalog order.
    return sorted(recipes, key=lambda r: (-r.match_percentage, r.cooking_time))


def find_recipes(
    catalog: Sequence[Recipe],
    available_ingredients: Iterable[str],
    dietary_preferences: Iterable[str] = (),
    difficulty: str = NO_DIFFICULTY_FILTER,
    max_cooking_time: int = 120,
) -> list[ScoredRecipe]:
    """Score the whole catalog, filter it, and rank what survives."""
    available = list(available_ingredients)
    scored = [score_recipe(recipe, available) for recipe in catalog]
    scored = filter_by_dietary(scored, dietary_preferences)
    scored = filter_by_difficulty(scored, difficulty)
    scored = filter_by_time(scored, max_cooking_time)
    return rank_recipes(scored)
