"""
User Repository - Data access layer for accounts
"""

from typing import Optional
from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import User, Recipe, Favorite
from domain.enums import UserRole
from app.security import normalize_email


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive through normalization)"""
        return (
            self.db.query(User).filter(User.email == normalize_email(email)).first()
        )

    def email_taken_by_other(self, email: str, user_id: int) -> bool:
        """True if a user other than ``user_id`` already holds ``email``"""
        existing = self.get_by_email(email)
        return existing is not None and existing.id != user_id

    def create_user(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create a new user. IntegrityError propagates to the caller."""
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=normalize_email(email),
            password_hash=password_hash,
            role=role,
        )
        return self.create(user)

    def count_recipes(self, user_id: int) -> int:
        return self.db.query(Recipe).filter(Recipe.user_id == user_id).count()

    def count_favorites(self, user_id: int) -> int:
        return self.db.query(Favorite).filter(Favorite.user_id == user_id).count()

    def delete_account_rows(self, user_id: int) -> dict:
        """
        Delete favorites, recipes and the user row, in that order.

        Only flushes: the caller owns the transaction and must commit or roll
        back. Favorites other users hold on this user's recipes go too.

        Returns:
            Counts of deleted rows per table
        """
        owned_recipe_ids = select(Recipe.id).where(Recipe.user_id == user_id)

        favorites = (
            self.db.query(Favorite)
            .filter(
                or_(
                    Favorite.user_id == user_id,
                    Favorite.recipe_id.in_(owned_recipe_ids),
                )
            )
            .delete(synchronize_session="fetch")
        )
        recipes = (
            self.db.query(Recipe)
            .filter(Recipe.user_id == user_id)
            .delete(synchronize_session="fetch")
        )
        users = (
            self.db.query(User)
            .filter(User.id == user_id)
            .delete(synchronize_session="fetch")
        )
        self.db.flush()
        return {"favorites": favorites, "recipes": recipes, "users": users}
