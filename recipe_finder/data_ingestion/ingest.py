from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, List

import pandas as pd
from pydantic import ValidationError

from ..recommendations.models import Difficulty, Recipe
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)


CANONICAL_FIELDS: List[str] = [
    "id",
    "name",
    "description",
    "cuisine",
    "difficulty",
    "cooking_time",
    "servings",
    "ingredients",
    "instructions",
    "dietary_tags",
    "calories",
    "protein",
    "carbs",
    "fat",
    "image_url",
    "created_at",
]

_TEXT_COLUMNS = ["id", "name", "description", "cuisine", "difficulty", "image_url", "created_at"]
_NUTRITION_COLUMNS = ["calories", "protein", "carbs", "fat"]
_DIFFICULTIES = {d.value.lower(): d.value for d in Difficulty}


def _parse_array(value: Any) -> list | None:
    """
    Parse a nested column exported as JSON or as a Postgres array literal.

    Returns None when the cell cannot be read, so the row gets dropped.
    """
    if isinstance(value, list):
        return value
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return []
    text = str(value).strip()
    if not text:
        return []

    # Postgres text[] literal, e.g. {vegan,"gluten-free"}
    if text.startswith("{") and text.endswith("}"):
        inner = text[1:-1].strip()
        if not inner:
            return []
        return [part.strip().strip('"') for part in inner.split(",") if part.strip()]

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, list) else None


def _to_ingredients(items: list) -> list[dict[str, str]]:
    out: list[dict[str, str]] = []
    for item in items:
        if isinstance(item, dict):
            name = str(item.get("name") or "").strip()
            amount = str(item.get("amount") or "").strip()
        else:
            name, amount = str(item).strip(), ""
        if name:
            out.append({"name": name, "amount": amount})
    return out


def _to_instructions(items: list) -> list[dict[str, Any]] | None:
    """Return None if a step number can't be read as an int."""
    out: list[dict[str, Any]] = []
    for position, item in enumerate(items, start=1):
        if isinstance(item, dict):
            text = str(item.get("instruction") or "").strip()
            step = item.get("step") or position
        else:
            text, step = str(item).strip(), position
        if text:
            try:
                step = int(step)
            except (TypeError, ValueError):
                return None
            out.append({"step": step, "instruction": text})
    return out


def _row_to_record(row: pd.Series) -> dict[str, Any] | None:
    ingredients = _parse_array(row.get("ingredients"))
    instructions = _parse_array(row.get("instructions"))
    tags = _parse_array(row.get("dietary_tags"))
    if ingredients is None or instructions is None or tags is None:
        return None

    steps = _to_instructions(instructions)
    if steps is None:
        return None

    difficulty = _DIFFICULTIES.get(str(row.get("difficulty", "")).strip().lower())
    if difficulty is None or pd.isna(row.get("cooking_time")):
        return None

    record: dict[str, Any] = {
        "id": str(row["id"]).strip(),
        "name": str(row["name"]).strip(),
        "description": row.get("description", ""),
        "cuisine": row.get("cuisine", ""),
        "difficulty": difficulty,
        "cooking_time": int(row["cooking_time"]),
        "servings": int(row["servings"]) if pd.notna(row.get("servings")) else 1,
        "ingredients": _to_ingredients(ingredients),
        "instructions": steps,
        "dietary_tags": [str(t).strip() for t in tags if str(t).strip()],
        "image_url": row.get("image_url") or None,
        "created_at": row.get("created_at") or None,
    }
    for col in _NUTRITION_COLUMNS:
        record[col] = float(row[col]) if pd.notna(row.get(col)) else 0.0

    if not record["id"] or not record["name"] or not record["ingredients"]:
        return None
    return record


def normalize_catalog(df: pd.DataFrame) -> list[Recipe]:
    """Turn a raw export into validated recipes, skipping malformed rows."""
    df = df.copy()
    for col in _TEXT_COLUMNS:
        if col not in df.columns:
            df[col] = ""
        df[col] = df[col].fillna("").astype(str)
    for col in ["cooking_time", "servings", *_NUTRITION_COLUMNS]:
        if col not in df.columns:
            df[col] = pd.NA
        df[col] = pd.to_numeric(df[col], errors="coerce")

    recipes: list[Recipe] = []
    skipped = 0
    for _, row in df.iterrows():
        record = _row_to_record(row)
        if record is None:
            skipped += 1
            continue
        try:
            recipes.append(Recipe.model_validate(record))
        except ValidationError:
            skipped += 1

    if skipped:
        logger.warning(
            "Skipped malformed recipe rows",
            extra={"skipped": skipped, "kept": len(recipes)},
        )
    return recipes


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Execute the catalog ingestion job.

    Steps:
    - Read the CSV export.
    - Normalize rows into the canonical Recipe schema.
    - Persist the catalog as JSON, ordered by name.
    """
    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    df = pd.read_csv(config.source_csv, dtype={"id": str})
    recipes = sorted(normalize_catalog(df), key=lambda r: r.name)

    output_path = config.processed_path
    payload = [r.model_dump(mode="json", include=set(CANONICAL_FIELDS)) for r in recipes]
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)

    logger.info(
        "Catalog ingestion complete",
        extra={"recipes": len(recipes), "output": str(output_path)},
    )
    return output_path


if __name__ == "__main__":
    from ..logging_config import setup_logging

    setup_logging()
    cfg = IngestionConfig(source_csv=Path(sys.argv[1])) if len(sys.argv) > 1 else DEFAULT_INGESTION_CONFIG
    path = run_ingestion(cfg)
    print(f"Ingestion complete. Catalog saved to: {path}")
