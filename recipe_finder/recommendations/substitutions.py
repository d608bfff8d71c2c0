from __future__ import annotations

from collections.abc import Iterable

from .matching import normalize_ingredient

# Walked top to bottom; the first hit wins.
SUBSTITUTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("heavy cream", ("milk + butter", "coconut cream", "greek yogurt")),
    ("sour cream", ("greek yogurt", "plain yogurt")),
    ("butter", ("margarine", "coconut oil", "olive oil")),
    ("eggs", ("flax eggs", "chia seeds", "applesauce")),
    ("white wine", ("chicken broth", "apple juice", "white grape juice")),
    ("fish sauce", ("soy sauce", "worcestershire sauce")),
    ("parmesan cheese", ("pecorino", "nutritional yeast", "aged cheddar")),
)


def suggest_substitutions(missing_ingredient: str) -> list[str]:
    """Return substitutes for a missing ingredient, or an empty list."""
    normalized = normalize_ingredient(missing_ingredient)
    if not normalized:
        return []

    for ingredient, subs in SUBSTITUTIONS:
        if ingredient in normalized or normalized in ingredient:
            return list(subs)

    return []


def suggest_for_missing(missing_ingredients: Iterable[str]) -> dict[str, list[str]]:
    """Map each missing ingredient that has known substitutes to them."""
    suggestions: dict[str, list[str]] = {}
    for name in missing_ingredients:
        subs = suggest_substitutions(name)
        if subs:
            suggestions[name] = subs
    return suggestions
