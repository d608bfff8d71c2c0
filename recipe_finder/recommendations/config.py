from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "recipes.json"


@dataclass(frozen=True)
class RecommendationConfig:
    catalog_path: Path = Path(os.getenv("RECIPE_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    cache_ttl_seconds: int = int(os.getenv("RECIPE_CACHE_TTL", "300"))
    default_max_cooking_time: int = 120
    min_cooking_time: int = 10
    cooking_time_step: int = 5
    popular_limit: int = 6
    dietary_options: tuple[str, ...] = ("vegetarian", "vegan", "gluten-free")


DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()
