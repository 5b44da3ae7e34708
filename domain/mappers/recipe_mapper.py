"""
Recipe domain mappers.
"""

from domain.models import Recipe
from domain.schemas.recipe_schemas import (
    RecipeResponse,
    RecipeListItem,
    RecipeDetail,
    RecipeSummary,
)


class RecipeMapper:
    """Mapper for recipe-related transformations."""

    @staticmethod
    def to_response(recipe: Recipe) -> RecipeResponse:
        return RecipeResponse.model_validate(recipe)

    @staticmethod
    def to_list_item(recipe: Recipe) -> RecipeListItem:
        # author_name falls back to "Unknown" when the owner row is gone
        return RecipeListItem.model_validate(recipe)

    @staticmethod
    def to_detail(recipe: Recipe) -> RecipeDetail:
        detail = RecipeDetail.model_validate(recipe)
        if recipe.user is not None:
            detail.author_joined_at = recipe.user.created_at
        return detail

    @staticmethod
    def to_summary(recipe: Recipe) -> RecipeSummary:
        return RecipeSummary.model_validate(recipe)
