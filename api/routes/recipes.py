"""
Recipe routes - browsing, search, and owner-only create/update/delete.
Create and update take multipart form data so an image can ride along.
"""

from typing import Any, Dict, List, Optional
import json
import logging

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from adapters.media_adapter import CloudinaryUploader
from api.dependencies import CurrentUser, get_current_user, get_db, get_media_uploader
from api.middleware import describe_validation_errors
from api.uploads import read_image_upload
from app.exceptions import ServiceValidationError
from domain.mappers import RecipeMapper
from domain.schemas.base import MessageResponse
from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeDetail,
    RecipeFilters,
    RecipeListResponse,
    RecipeMutationResponse,
    RecipeSummary,
    RecipeUpdate,
)
from services.recipe_service import RecipeService

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("recipebox.api.recipes")


def _parse_json_list(raw: Optional[str], field: str) -> Optional[Any]:
    """Decode a JSON array sent as a form string; absent stays None"""
    if raw is None or not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ServiceValidationError(f"Invalid {field} format", details=str(e))


def _form_fields(**fields: Optional[str]) -> Dict[str, Any]:
    # Blank form values count as "not sent"
    return {k: v for k, v in fields.items() if v is not None and v.strip() != ""}


def _build(model, data: Dict[str, Any]):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ServiceValidationError(
            "Invalid recipe data", details=describe_validation_errors(e.errors())
        )


@router.get("", response_model=RecipeListResponse)
def list_recipes(
    q: Optional[str] = Query(default=None, description="Substring of name or description"),
    category: Optional[str] = Query(default=None),
    min_rating: Optional[float] = Query(default=None, alias="minRating", ge=0, le=5),
    max_cooking_time: Optional[int] = Query(default=None, alias="maxCookingTime", ge=0),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """
    Search recipes, newest first.

    - **q**: case-insensitive match on name or description
    - **category**: exact category
    - **minRating** / **maxCookingTime**: numeric bounds
    - **page** / **limit**: 1-indexed pagination
    """
    filters = RecipeFilters(
        q=q.strip() if q and q.strip() else None,
        category=category or None,
        min_rating=min_rating,
        max_cooking_time=max_cooking_time,
    )
    return RecipeService.list_recipes(db, filters, page=page, limit=limit)


@router.get("/user/{user_id}", response_model=List[RecipeSummary])
def list_user_recipes(user_id: int, db: Session = Depends(get_db)):
    return RecipeService.list_by_user(db, user_id)


@router.get("/{recipe_id}", response_model=RecipeDetail)
def get_recipe(recipe_id: int, db: Session = Depends(get_db)):
    """Get a single recipe with its author's name and join date."""
    return RecipeService.get_recipe(db, recipe_id)


@router.post(
    "", response_model=RecipeMutationResponse, status_code=status.HTTP_201_CREATED
)
def create_recipe(
    name: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    cooking_time: Optional[str] = Form(None, alias="cookingTime"),
    prep_time: Optional[str] = Form(None, alias="prepTime"),
    rating: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    ingredients: Optional[str] = Form(None),
    instructions: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    uploader: CloudinaryUploader = Depends(get_media_uploader),
):
    data = _form_fields(
        name=name,
        category=category,
        cooking_time=cooking_time,
        prep_time=prep_time,
        rating=rating,
        description=description,
    )
    data["ingredients"] = _parse_json_list(ingredients, "ingredients")
    data["instructions"] = _parse_json_list(instructions, "instructions")
    recipe_in = _build(RecipeCreate, data)

    image_bytes = read_image_upload(image)
    recipe = RecipeService.create_recipe(
        db, current_user.id, recipe_in, image=image_bytes, uploader=uploader
    )
    return RecipeMutationResponse(
        message="Recipe created successfully", recipe=RecipeMapper.to_response(recipe)
    )


@router.put("/{recipe_id}", response_model=RecipeMutationResponse)
def update_recipe(
    recipe_id: int,
    name: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    cooking_time: Optional[str] = Form(None, alias="cookingTime"),
    prep_time: Optional[str] = Form(None, alias="prepTime"),
    rating: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    ingredients: Optional[str] = Form(None),
    instructions: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    uploader: CloudinaryUploader = Depends(get_media_uploader),
):
    """Partial update; only the owner may call it."""
    data = _form_fields(
        name=name,
        category=category,
        cooking_time=cooking_time,
        prep_time=prep_time,
        rating=rating,
        description=description,
    )
    parsed_ingredients = _parse_json_list(ingredients, "ingredients")
    if parsed_ingredients is not None:
        data["ingredients"] = parsed_ingredients
    parsed_instructions = _parse_json_list(instructions, "instructions")
    if parsed_instructions is not None:
        data["instructions"] = parsed_instructions
    changes = _build(RecipeUpdate, data)

    image_bytes = read_image_upload(image)
    recipe = RecipeService.update_recipe(
        db, current_user.id, recipe_id, changes, image=image_bytes, uploader=uploader
    )
    return RecipeMutationResponse(
        message="Recipe updated successfully", recipe=RecipeMapper.to_response(recipe)
    )


@router.delete("/{recipe_id}", response_model=MessageResponse)
def delete_recipe(
    recipe_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    RecipeService.delete_recipe(db, current_user.id, recipe_id)
    return MessageResponse(message="Recipe deleted successfully")
