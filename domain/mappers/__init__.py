"""
Domain mappers package - ORM to DTO transformations.
"""

from domain.mappers.user_mapper import UserMapper
from domain.mappers.recipe_mapper import RecipeMapper

__all__ = ["UserMapper", "RecipeMapper"]
