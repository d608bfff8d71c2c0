from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Difficulty(str, Enum):
    easy = "Easy"
    medium = "Medium"
    hard = "Hard"


DifficultyFilter = Literal["all", "Easy", "Medium", "Hard"]


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    amount: str = ""


class InstructionStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: int
    instruction: str


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    cuisine: str = ""
    difficulty: Difficulty
    cooking_time: int = Field(..., ge=0, description="Minutes")
    servings: int = Field(default=1, ge=0)
    ingredients: list[Ingredient] = Field(default_factory=list)
    instructions: list[InstructionStep] = Field(default_factory=list)
    dietary_tags: list[str] = Field(default_factory=list)
    calories: float = Field(default=0.0, ge=0.0)
    protein: float = Field(default=0.0, ge=0.0)
    carbs: float = Field(default=0.0, ge=0.0)
    fat: float = Field(default=0.0, ge=0.0)
    image_url: str | None = None
    created_at: str | None = None


class ScoredRecipe(Recipe):
    match_percentage: int = Field(..., ge=0, le=100)
    matched_ingredients: list[str] = Field(default_factory=list)
    missing_ingredients: list[str] = Field(default_factory=list)


class RecommendationRequest(BaseModel):
    ingredients: list[str] = Field(
        default_factory=list,
        description="Ingredients on hand, free-form",
    )
    dietary_preferences: list[str] = Field(
        default_factory=list,
        description='Tags every result must carry, e.g. ["vegan"]',
    )
    difficulty: DifficultyFilter = "all"
    max_cooking_time: int = Field(default=120, ge=0)

    @field_validator("ingredients")
    @classmethod
    def _clean_ingredients(cls, value: list[str]) -> list[str]:
        # Same hygiene as the ingredient input box: trimmed, lower-cased, unique.
        cleaned: list[str] = []
        for item in value:
            item = item.strip().lower()
            if item and item not in cleaned:
                cleaned.append(item)
        return cleaned

    @field_validator("dietary_preferences")
    @classmethod
    def _unique_preferences(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(p for p in value if p))


class RecommendationResponse(BaseModel):
    recipes: list[ScoredRecipe]
    total_results: int


class RecipeListResponse(BaseModel):
    recipes: list[Recipe]
    total: int


class RecipeDetailResponse(BaseModel):
    recipe: ScoredRecipe
    substitutions: dict[str, list[str]] = Field(default_factory=dict)


class SubstitutionResponse(BaseModel):
    ingredient: str
    substitutes: list[str]
