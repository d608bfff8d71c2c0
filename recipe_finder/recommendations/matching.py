from __future__ import annotations

from collections.abc import Iterable

from .models import Recipe, ScoredRecipe

# Canonical name -> known variants.
SIMILARITY_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("tomato", ("tomatoes", "tomato sauce")),
    ("cheese", ("cheddar", "mozzarella", "parmesan", "feta")),
    ("pasta", ("spaghetti", "linguine", "noodles")),
    ("chicken", ("chicken breast", "chicken thigh")),
    ("oil", ("olive oil", "vegetable oil", "sesame oil")),
    ("onion", ("red onion", "white onion", "onions")),
    ("pepper", ("bell pepper", "black pepper")),
)


def normalize_ingredient(name: str) -> str:
    """Lower-case and strip an ingredient name for comparison."""
    return name.strip().lower()


def _in_group(ingredient: str, base: str, variations: tuple[str, ...]) -> bool:
    return base in ingredient or any(v in ingredient for v in variations)


def are_ingredients_similar(ing1: str, ing2: str) -> bool:
    """Return True if both names fall in the same substitution group.

    Each side is checked against the group on its own, so "black pepper" and
    "bell pepper" are similar through the shared "pepper" group.
    """
    for base, variations in SIMILARITY_GROUPS:
        if _in_group(ing1, base, variations) and _in_group(ing2, base, variations):
            return True
    return False


def ingredient_matches(recipe_ing: str, available_ing: str) -> bool:
    """Matching predicate between two already-normalized names."""
    if not recipe_ing or not available_ing:
        return False
    return (
        available_ing in recipe_ing
        or recipe_ing in available_ing
        or are_ingredients_similar(recipe_ing, available_ing)
    )


def _match_percentage(matched: int, total: int) -> int:
    if total <= 0:
        return 0
    # Integer round-half-up of 100 * matched / total.
    return (200 * matched + total) // (2 * total)


def score_recipe(recipe: Recipe, available_ingredients: Iterable[str]) -> ScoredRecipe:
    """
    Score a single recipe against the ingredients on hand.

    Every recipe ingredient is matched existentially: one available
    ingredient may satisfy several recipe ingredients. Blank available
    entries are ignored; if nothing is left, the recipe scores 0 and all its
    ingredients are reported missing.
    """
    recipe_ingredients = [normalize_ingredient(i.name) for i in recipe.ingredients]
    available = list(
        dict.fromkeys(
            n for n in (normalize_ingredient(a) for a in available_ingredients) if n
        )
    )

    if not available:
        return ScoredRecipe(
            **dict(recipe),
            match_percentage=0,
            matched_ingredients=[],
            missing_ingredients=recipe_ingredients,
        )

    matched: list[str] = []
    missing: list[str] = []
    for recipe_ing in recipe_ingredients:
        if any(ingredient_matches(recipe_ing, a) for a in available):
            matched.append(recipe_ing)
        else:
            missing.append(recipe_ing)

    return ScoredRecipe(
        **dict(recipe),
        match_percentage=_match_percentage(len(matched), len(recipe_ingredients)),
        matched_ingredients=matched,
        missing_ingredients=missing,
    )
