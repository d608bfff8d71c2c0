import json
from pathlib import Path

import pandas as pd

from recipe_finder.data_ingestion.config import IngestionConfig
from recipe_finder.data_ingestion.ingest import CANONICAL_FIELDS, normalize_catalog, run_ingestion
from recipe_finder.recommendations.models import Recipe


def _export_rows() -> list[dict]:
    return [
        {
            "id": "b-2",
            "name": "Shakshuka",
            "description": "Eggs poached in spiced tomato sauce.",
            "cuisine": "Middle Eastern",
            "difficulty": "easy",
            "cooking_time": 25,
            "servings": 2,
            "ingredients": json.dumps([{"name": "eggs", "amount": "4"}, {"name": "tomato sauce", "amount": "2 cups"}]),
            "instructions": json.dumps([{"step": 1, "instruction": "Simmer sauce."}, {"step": 2, "instruction": "Poach eggs."}]),
            "dietary_tags": "{vegetarian,\"gluten-free\"}",
            "calories": 320,
            "protein": 18,
            "carbs": 20,
            "fat": 17,
        },
        {
            "id": "a-1",
            "name": "Avocado Toast",
            "description": "",
            "cuisine": "American",
            "difficulty": "Easy",
            "cooking_time": 5,
            "servings": 1,
            "ingredients": json.dumps(["bread", "avocado"]),
            "instructions": json.dumps(["Toast bread.", "Mash avocado on top."]),
            "dietary_tags": json.dumps(["vegan"]),
            "calories": 280,
            "protein": None,
            "carbs": 30,
            "fat": 15,
        },
        # no ingredients
        {"id": "c-3", "name": "Air", "difficulty": "Easy", "cooking_time": 0, "ingredients": "[]"},
        # unknown difficulty
        {"id": "d-4", "name": "Mystery", "difficulty": "Impossible", "cooking_time": 10,
         "ingredients": json.dumps(["salt"])},
        # negative cooking time
        {"id": "e-5", "name": "Time Travel Soup", "difficulty": "Hard", "cooking_time": -5,
         "ingredients": json.dumps(["water"])},
        # unreadable ingredient column
        {"id": "f-6", "name": "Broken", "difficulty": "Medium", "cooking_time": 10,
         "ingredients": "not json"},
        # step number that isn't a number
        {"id": "g-7", "name": "Wordy Steps", "difficulty": "Easy", "cooking_time": 10,
         "ingredients": json.dumps(["flour"]),
         "instructions": json.dumps([{"step": "one", "instruction": "Mix."}])},
    ]


def test_normalize_catalog_drops_malformed_rows():
    recipes = normalize_catalog(pd.DataFrame(_export_rows()))

    assert [r.id for r in recipes] == ["b-2", "a-1"]

    shakshuka, toast = recipes
    assert shakshuka.difficulty.value == "Easy"
    assert shakshuka.dietary_tags == ["vegetarian", "gluten-free"]
    assert [i.name for i in shakshuka.ingredients] == ["eggs", "tomato sauce"]

    assert [(s.step, s.instruction) for s in toast.instructions] == [
        (1, "Toast bread."),
        (2, "Mash avocado on top."),
    ]
    assert toast.ingredients[0].amount == ""
    assert toast.protein == 0.0


def test_run_ingestion_writes_sorted_catalog(tmp_path: Path):
    source = tmp_path / "recipes.csv"
    pd.DataFrame(_export_rows()).to_csv(source, index=False)

    cfg = IngestionConfig(
        source_csv=source,
        processed_data_dir=tmp_path / "processed",
    )

    output_path = run_ingestion(config=cfg)

    assert output_path.is_file(), "Catalog JSON should be created"

    with output_path.open(encoding="utf-8") as f:
        payload = json.load(f)
    assert [r["name"] for r in payload] == ["Avocado Toast", "Shakshuka"]
    assert set(payload[0]) == set(CANONICAL_FIELDS)
    assert all(Recipe.model_validate(r) for r in payload)


def test_unreadable_step_number_drops_only_that_row():
    df = pd.DataFrame([
        {"id": "a", "name": "Good", "difficulty": "Easy", "cooking_time": 10,
         "ingredients": json.dumps(["flour"]),
         "instructions": json.dumps([{"step": 1, "instruction": "Mix."}])},
        {"id": "b", "name": "Bad", "difficulty": "Easy", "cooking_time": 10,
         "ingredients": json.dumps(["flour"]),
         "instructions": json.dumps([{"step": "one", "instruction": "Mix."}])},
    ])

    assert [r.id for r in normalize_catalog(df)] == ["a"]
