"""
Recipe Repository - Data access layer for recipe operations
"""

from typing import List, Optional, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session, Query, joinedload

from repositories.base import BaseRepository
from domain.models import Recipe
from domain.schemas.recipe_schemas import RecipeFilters


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def get_with_author(self, recipe_id: int) -> Optional[Recipe]:
        """Get recipe by ID with its owner eagerly loaded"""
        return (
            self.db.query(Recipe)
            .options(joinedload(Recipe.user))
            .filter(Recipe.id == recipe_id)
            .first()
        )

    def _filtered(self, filters: RecipeFilters) -> Query:
        query = self.db.query(Recipe)

        if filters.category:
            query = query.filter(Recipe.category == filters.category)
        if filters.min_rating is not None:
            query = query.filter(Recipe.rating >= filters.min_rating)
        if filters.max_cooking_time is not None:
            query = query.filter(Recipe.cooking_time <= filters.max_cooking_time)
        if filters.q:
            pattern = f"%{filters.q}%"
            query = query.filter(
                or_(Recipe.name.ilike(pattern), Recipe.description.ilike(pattern))
            )
        return query

    def search(
        self, filters: RecipeFilters, page: int = 1, limit: int = 20
    ) -> Tuple[List[Recipe], int]:
        """Search recipes with filters and 1-indexed pagination

        Args:
            filters: Optional text / category / rating / cooking time filters
            page: Page number starting at 1
            limit: Page size

        Returns:
            (recipes on the page newest first, total matching count)
        """
        query = self._filtered(filters)
        total = query.count()
        recipes = (
            query.options(joinedload(Recipe.user))
            .order_by(Recipe.created_at.desc(), Recipe.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return recipes, total

    def list_by_user(self, user_id: int) -> List[Recipe]:
        """Get all recipes owned by a user, newest first"""
        return (
            self.db.query(Recipe)
            .filter(Recipe.user_id == user_id)
            .order_by(Recipe.created_at.desc(), Recipe.id.desc())
            .all()
        )
