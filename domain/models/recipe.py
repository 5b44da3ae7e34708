"""
Recipe and favorite database models.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Float,
    JSON,
    TIMESTAMP,
    ForeignKey,
    CheckConstraint,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.config import DEFAULT_RECIPE_IMAGE
from domain.models.database import Base

# JSON arrays of structured entries; JSONB on PostgreSQL
JSONList = JSON().with_variant(JSONB(), "postgresql")


class Recipe(Base):
    """A recipe owned by exactly one user"""

    __tablename__ = "recipes"
    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_recipes_rating_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False, default="Nigerian")
    cooking_time = Column(Integer, nullable=False, default=30)
    prep_time = Column(Integer, nullable=False, default=10)
    rating = Column(Float, nullable=False, default=0.0)
    description = Column(Text, nullable=False, default="")
    ingredients = Column(JSONList, nullable=False)
    instructions = Column(JSONList, nullable=False)
    image = Column(String(1024), nullable=False, default=DEFAULT_RECIPE_IMAGE)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    user = relationship("User", back_populates="recipes")
    favorites = relationship(
        "Favorite", back_populates="recipe", cascade="all, delete-orphan"
    )

    @property
    def author_name(self) -> str:
        return self.user.display_name if self.user is not None else "Unknown"


class Favorite(Base):
    """One user's bookmark of one recipe"""

    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "recipe_id", name="uq_favorites_user_recipe"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipe_id = Column(
        Integer,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="favorites")
    recipe = relationship("Recipe", back_populates="favorites")
