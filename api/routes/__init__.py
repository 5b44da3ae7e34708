"""API routes package"""

from . import auth, users, recipes, favorites, health

__all__ = ["auth", "users", "recipes", "favorites", "health"]
