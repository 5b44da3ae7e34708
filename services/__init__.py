"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.account_service import AccountService
from services.recipe_service import RecipeService
from services.favorite_service import FavoriteService

__all__ = [
    "AuthService",
    "AccountService",
    "RecipeService",
    "FavoriteService",
]
