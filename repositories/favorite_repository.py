"""
Favorite Repository - Data access layer for user/recipe bookmarks
"""

from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from repositories.base import BaseRepository
from domain.models import Favorite, Recipe


class FavoriteRepository(BaseRepository[Favorite]):
    """Repository for favorite data access"""

    def __init__(self, db: Session):
        super().__init__(db, Favorite)

    def get_pair(self, user_id: int, recipe_id: int) -> Optional[Favorite]:
        return (
            self.db.query(Favorite)
            .filter(Favorite.user_id == user_id, Favorite.recipe_id == recipe_id)
            .first()
        )

    def add(self, user_id: int, recipe_id: int) -> Favorite:
        return self.create(Favorite(user_id=user_id, recipe_id=recipe_id))

    def list_recipes_for_user(self, user_id: int) -> List[Recipe]:
        """Recipes the user has favorited, most recently favorited first"""
        return (
            self.db.query(Recipe)
            .join(Favorite, Favorite.recipe_id == Recipe.id)
            .options(joinedload(Recipe.user))
            .filter(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc(), Favorite.id.desc())
            .all()
        )
