"""Pydantic schemas for recipes, recipe listings and favorites."""

from typing import Any, List, Optional
from datetime import datetime

from pydantic import Field, field_validator

from domain.schemas.base import CamelModel


def truncate_to_int(value: Any) -> Any:
    """Minutes arrive as form strings; "12.5" and 12.5 both become 12.

    Anything that does not look like a number is passed through for the
    regular integer validation to reject.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return int(float(text))
        except (ValueError, OverflowError):
            return value
    return value


class RecipeCreate(CamelModel):
    """Recipe creation input. Defaults mirror the column defaults."""

    name: Optional[str] = None
    category: str = "Nigerian"
    cooking_time: int = 30
    prep_time: int = 10
    rating: float = Field(0.0, ge=0, le=5)
    description: str = ""
    ingredients: Optional[List[Any]] = None
    instructions: Optional[List[Any]] = None

    @field_validator("cooking_time", "prep_time", mode="before")
    @classmethod
    def whole_minutes(cls, v):
        return truncate_to_int(v)


class RecipeUpdate(CamelModel):
    """Partial recipe update. Every field is explicit and optional."""

    name: Optional[str] = None
    category: Optional[str] = None
    cooking_time: Optional[int] = None
    prep_time: Optional[int] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    description: Optional[str] = None
    ingredients: Optional[List[Any]] = None
    instructions: Optional[List[Any]] = None

    @field_validator("cooking_time", "prep_time", mode="before")
    @classmethod
    def whole_minutes(cls, v):
        return truncate_to_int(v)


class RecipeFilters(CamelModel):
    q: Optional[str] = None
    category: Optional[str] = None
    min_rating: Optional[float] = None
    max_cooking_time: Optional[int] = None


class RecipeResponse(CamelModel):
    id: int
    name: str
    category: str
    cooking_time: int
    prep_time: int
    rating: float
    description: str
    image: str
    ingredients: List[Any]
    instructions: List[Any]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user_id: int


class RecipeListItem(RecipeResponse):
    author_name: str = "Unknown"


class RecipeDetail(RecipeListItem):
    author_joined_at: Optional[datetime] = None


class RecipeSummary(CamelModel):
    """Owner-scoped listing entry; the caller already knows the author."""

    id: int
    name: str
    category: str
    cooking_time: int
    prep_time: int
    rating: float
    description: str
    image: str
    created_at: Optional[datetime] = None


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_recipes: int
    limit: int


class RecipeListResponse(CamelModel):
    recipes: List[RecipeListItem]
    pagination: Pagination


class RecipeMutationResponse(CamelModel):
    message: str
    recipe: RecipeResponse


class FavoriteToggleResponse(CamelModel):
    message: str
    recipe_id: int
    favorited: bool
