"""
Domain enums for RecipeBox application.
"""

import enum


class UserRole(str, enum.Enum):
    """Account roles. Role is carried in tokens but ownership rules ignore it."""

    USER = "user"
    ADMIN = "admin"
