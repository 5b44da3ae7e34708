"""Favorite (bookmark) routes"""

from typing import List
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import CurrentUser, get_current_user, get_db
from domain.schemas.recipe_schemas import FavoriteToggleResponse, RecipeListItem
from services.favorite_service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["Favorites"])
logger = logging.getLogger("recipebox.api.favorites")


@router.get("", response_model=List[RecipeListItem])
def list_favorites(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """The caller's favorited recipes, most recently favorited first."""
    return FavoriteService.list_favorites(db, current_user.id)


@router.post("/{recipe_id}/toggle", response_model=FavoriteToggleResponse)
def toggle_favorite(
    recipe_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    favorited = FavoriteService.toggle_favorite(db, current_user.id, recipe_id)
    return FavoriteToggleResponse(
        message="Added to favorites" if favorited else "Removed from favorites",
        recipe_id=recipe_id,
        favorited=favorited,
    )
