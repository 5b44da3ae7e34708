"""
Domain layer - ORM models, pydantic schemas, mappers and enums for recipes,
users and favorites.
"""

from domain import enums, models, schemas, mappers

__all__ = ["enums", "models", "schemas", "mappers"]
