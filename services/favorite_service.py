from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from app.exceptions import NotFoundError, ConflictError
from domain.mappers import RecipeMapper
from domain.schemas.recipe_schemas import RecipeListItem
from repositories import FavoriteRepository, RecipeRepository

logger = logging.getLogger("recipebox.favorites")


class FavoriteService:
    """Business logic for user/recipe bookmarks"""

    @staticmethod
    def list_favorites(db: Session, user_id: int) -> List[RecipeListItem]:
        """Return the recipes a user has favorited, newest favorite first"""
        recipes = FavoriteRepository(db).list_recipes_for_user(user_id)
        return [RecipeMapper.to_list_item(r) for r in recipes]

    @staticmethod
    def toggle_favorite(db: Session, user_id: int, recipe_id: int) -> bool:
        """
        Add the favorite if absent, remove it if present.

        Returns:
            True if the recipe is now favorited, False if it was removed
        """
        if not RecipeRepository(db).exists(recipe_id):
            raise NotFoundError("Recipe not found")

        fav_repo = FavoriteRepository(db)
        existing = fav_repo.get_pair(user_id, recipe_id)
        if existing:
            fav_repo.delete(existing)
            logger.info(f"favorite_removed user_id={user_id} recipe_id={recipe_id}")
            return False

        try:
            fav_repo.add(user_id, recipe_id)
        except IntegrityError:
            db.rollback()
            raise ConflictError("Recipe is already in favorites")
        logger.info(f"favorite_added user_id={user_id} recipe_id={recipe_id}")
        return True
