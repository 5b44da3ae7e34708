"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import Base, Database
from domain.models.user import User
from domain.models.recipe import Recipe, Favorite

__all__ = [
    # Database
    "Base",
    "Database",
    # Models
    "User",
    "Recipe",
    "Favorite",
]
