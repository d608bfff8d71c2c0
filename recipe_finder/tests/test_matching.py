from __future__ import annotations

from recipe_finder.recommendations.matching import (
    are_ingredients_similar,
    ingredient_matches,
    normalize_ingredient,
    score_recipe,
)
from recipe_finder.recommendations.models import Recipe


def make_recipe(*ingredients: str, recipe_id: str = "r1", cooking_time: int = 30) -> Recipe:
    return Recipe(
        id=recipe_id,
        name=f"Recipe {recipe_id}",
        difficulty="Easy",
        cooking_time=cooking_time,
        ingredients=[{"name": name, "amount": "1"} for name in ingredients],
    )


def test_normalize_is_idempotent():
    once = normalize_ingredient("  Olive Oil ")
    assert once == "olive oil"
    assert normalize_ingredient(once) == once


def test_empty_available_short_circuits():
    recipe = make_recipe(" Tomato ", "Cheese")
    scored = score_recipe(recipe, [])

    assert scored.match_percentage == 0
    assert scored.matched_ingredients == []
    assert scored.missing_ingredients == ["tomato", "cheese"]


def test_blank_available_entries_count_as_empty():
    scored = score_recipe(make_recipe("tomato"), ["", "   "])

    assert scored.match_percentage == 0
    assert scored.missing_ingredients == ["tomato"]


def test_substring_match_either_direction():
    assert score_recipe(make_recipe("Tomatoes"), ["tomato"]).matched_ingredients == ["tomatoes"]
    assert score_recipe(make_recipe("egg"), ["eggs"]).matched_ingredients == ["egg"]


def test_substitution_group_match():
    scored = score_recipe(make_recipe("cheddar"), ["parmesan"])

    assert scored.match_percentage == 100
    assert scored.matched_ingredients == ["cheddar"]


def test_group_check_is_independent_per_side():
    # Both sides claim the "pepper" group on their own.
    assert are_ingredients_similar("black pepper", "bell pepper")
    assert not are_ingredients_similar("basil", "parmesan")


def test_empty_names_never_match():
    assert not ingredient_matches("", "tomato")
    assert not ingredient_matches("tomato", "")


def test_partition_invariant():
    recipe = make_recipe("Pasta", "Tomatoes", "mozzarella", "saffron", "basil")
    scored = score_recipe(recipe, ["spaghetti", "cheddar"])

    names = [normalize_ingredient(i.name) for i in recipe.ingredients]
    assert set(scored.matched_ingredients).isdisjoint(scored.missing_ingredients)
    assert sorted(scored.matched_ingredients + scored.missing_ingredients) == sorted(names)
    assert scored.matched_ingredients == ["pasta", "mozzarella"]
    assert scored.missing_ingredients == ["tomatoes", "saffron", "basil"]


def test_scoring_ignores_case_and_whitespace_of_input():
    recipe = make_recipe("Garlic", "Onion", "Rice")
    plain = score_recipe(recipe, ["garlic", "rice"])
    noisy = score_recipe(recipe, ["  GARLIC ", "Rice", "rice"])

    assert plain.match_percentage == noisy.match_percentage == 67
    assert plain.matched_ingredients == noisy.matched_ingredients


def test_percentage_rounds_half_up():
    recipe = make_recipe(*[f"item{i}" for i in range(8)])
    # 1 / 8 = 12.5%
    assert score_recipe(recipe, ["item0"]).match_percentage == 13


def test_one_available_ingredient_satisfies_many():
    recipe = make_recipe("olive oil", "sesame oil", "salt")
    scored = score_recipe(recipe, ["oil"])

    assert scored.matched_ingredients == ["olive oil", "sesame oil"]
    assert scored.match_percentage == 67


def test_recipe_without_ingredients_scores_zero():
    assert score_recipe(make_recipe(), ["tomato"]).match_percentage == 0


def test_scoring_does_not_touch_recipe():
    recipe = make_recipe("  Tomato ")
    scored = score_recipe(recipe, ["tomato"])

    assert recipe.ingredients[0].name == "  Tomato "
    assert scored.ingredients[0].name == "  Tomato "
    assert scored.id == recipe.id
