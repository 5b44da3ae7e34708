"""
Recipe service - recipe CRUD with ownership enforcement and image attachment.
"""

from typing import Any, List, Optional
import logging
import math

from sqlalchemy.orm import Session

from adapters.media_adapter import CloudinaryUploader
from app.config import settings
from app.exceptions import (
    ServiceValidationError,
    ForbiddenError,
    NotFoundError,
    UpstreamError,
)
from domain.mappers import RecipeMapper
from domain.models import Recipe
from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeUpdate,
    RecipeFilters,
    RecipeListResponse,
    RecipeDetail,
    RecipeSummary,
    Pagination,
)
from repositories import RecipeRepository

logger = logging.getLogger("recipebox.recipes")


def _is_non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def _try_upload(
    image: Optional[bytes], uploader: Optional[CloudinaryUploader]
) -> Optional[str]:
    """Upload a recipe image; failures are logged and reported as None."""
    if not image:
        return None
    if uploader is None:
        logger.warning("recipe_image_skipped reason=no_uploader")
        return None
    try:
        return uploader.upload(image, settings.recipe_image_folder)
    except UpstreamError as e:
        logger.error(f"recipe_image_upload_failed error={e.message} details={e.details}")
        return None


class RecipeService:
    """Business logic for recipes"""

    @staticmethod
    def _get_owned_recipe(db: Session, user_id: int, recipe_id: int, action: str) -> Recipe:
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if not recipe:
            raise NotFoundError("Recipe not found")
        # Ownership only: an admin role grants nothing here
        if recipe.user_id != user_id:
            logger.warning(
                f"recipe_{action}_forbidden recipe_id={recipe_id} user_id={user_id} "
                f"owner_id={recipe.user_id}"
            )
            raise ForbiddenError(
                f"Not authorized to {action} this recipe",
                details=f"You can only {action} your own recipes",
            )
        return recipe

    @staticmethod
    def list_recipes(
        db: Session,
        filters: Optional[RecipeFilters] = None,
        page: int = 1,
        limit: int = 20,
    ) -> RecipeListResponse:
        """
        Search recipes and return one page plus pagination totals.

        Args:
            filters: q (name/description substring, case-insensitive), category,
                min_rating, max_cooking_time
            page: 1-indexed page number
            limit: page size

        Returns:
            RecipeListResponse with author-annotated items
        """
        if page < 1:
            raise ServiceValidationError("page must be at least 1")
        if limit < 1:
            raise ServiceValidationError("limit must be at least 1")

        filters = filters or RecipeFilters()
        recipes, total = RecipeRepository(db).search(filters, page=page, limit=limit)
        total_pages = math.ceil(total / limit) if total else 0

        logger.info(
            f"recipes_listed page={page} limit={limit} total={total} "
            f"q={filters.q!r} category={filters.category!r}"
        )
        return RecipeListResponse(
            recipes=[RecipeMapper.to_list_item(r) for r in recipes],
            pagination=Pagination(
                current_page=page,
                total_pages=total_pages,
                total_recipes=total,
                limit=limit,
            ),
        )

    @staticmethod
    def get_recipe(db: Session, recipe_id: int) -> RecipeDetail:
        recipe = RecipeRepository(db).get_with_author(recipe_id)
        if not recipe:
            raise NotFoundError("Recipe not found")
        return RecipeMapper.to_detail(recipe)

    @staticmethod
    def create_recipe(
        db: Session,
        user_id: int,
        data: RecipeCreate,
        image: Optional[bytes] = None,
        uploader: Optional[CloudinaryUploader] = None,
    ) -> Recipe:
        """
        Create a recipe owned by ``user_id``.

        An image that fails to upload does not abort creation; the placeholder
        image is used instead.
        """
        if not data.name or not data.name.strip():
            raise ServiceValidationError("Recipe name is required")
        if not _is_non_empty_list(data.ingredients):
            raise ServiceValidationError(
                "At least one ingredient is required",
                details=f"received: {data.ingredients!r}",
            )
        if not _is_non_empty_list(data.instructions):
            raise ServiceValidationError(
                "At least one instruction is required",
                details=f"received: {data.instructions!r}",
            )

        image_url = _try_upload(image, uploader) or settings.default_recipe_image

        recipe = Recipe(
            name=data.name.strip(),
            category=data.category,
            cooking_time=int(data.cooking_time),
            prep_time=int(data.prep_time),
            rating=float(data.rating),
            description=(data.description or "").strip(),
            ingredients=list(data.ingredients),
            instructions=list(data.instructions),
            image=image_url,
            user_id=user_id,
        )
        recipe = RecipeRepository(db).create(recipe)
        logger.info(f"recipe_created recipe_id={recipe.id} user_id={user_id}")
        return recipe

    @staticmethod
    def update_recipe(
        db: Session,
        user_id: int,
        recipe_id: int,
        data: RecipeUpdate,
        image: Optional[bytes] = None,
        uploader: Optional[CloudinaryUploader] = None,
    ) -> Recipe:
        """
        Apply a partial update to a recipe the caller owns.

        Raises:
            NotFoundError: recipe does not exist
            ForbiddenError: caller is not the owner
            ServiceValidationError: a supplied field is invalid, or nothing to update
        """
        repo = RecipeRepository(db)
        recipe = RecipeService._get_owned_recipe(db, user_id, recipe_id, "update")

        if data.name is not None and not data.name.strip():
            raise ServiceValidationError("Recipe name cannot be empty")
        if data.ingredients is not None and not _is_non_empty_list(data.ingredients):
            raise ServiceValidationError(
                "At least one ingredient is required",
                details=f"received: {data.ingredients!r}",
            )
        if data.instructions is not None and not _is_non_empty_list(data.instructions):
            raise ServiceValidationError(
                "At least one instruction is required",
                details=f"received: {data.instructions!r}",
            )

        changed: List[str] = []
        if data.name is not None:
            recipe.name = data.name.strip()
            changed.append("name")
        if data.category is not None:
            recipe.category = data.category
            changed.append("category")
        if data.cooking_time is not None:
            recipe.cooking_time = int(data.cooking_time)
            changed.append("cooking_time")
        if data.prep_time is not None:
            recipe.prep_time = int(data.prep_time)
            changed.append("prep_time")
        if data.rating is not None:
            recipe.rating = float(data.rating)
            changed.append("rating")
        if data.description is not None:
            recipe.description = data.description
            changed.append("description")
        if data.ingredients is not None:
            recipe.ingredients = list(data.ingredients)
            changed.append("ingredients")
        if data.instructions is not None:
            recipe.instructions = list(data.instructions)
            changed.append("instructions")

        # Upload failure leaves the current image in place
        image_url = _try_upload(image, uploader)
        if image_url:
            recipe.image = image_url
            changed.append("image")

        if not changed:
            db.rollback()
            raise ServiceValidationError("No fields to update")

        recipe = repo.update(recipe)
        logger.info(
            f"recipe_updated recipe_id={recipe_id} user_id={user_id} "
            f"fields={','.join(changed)}"
        )
        return recipe

    @staticmethod
    def delete_recipe(db: Session, user_id: int, recipe_id: int) -> None:
        """Hard-delete a recipe the caller owns; its favorites go with it"""
        recipe = RecipeService._get_owned_recipe(db, user_id, recipe_id, "delete")
        RecipeRepository(db).delete(recipe)
        logger.info(f"recipe_deleted recipe_id={recipe_id} user_id={user_id}")

    @staticmethod
    def list_by_user(db: Session, user_id: int) -> List[RecipeSummary]:
        recipes = RecipeRepository(db).list_by_user(user_id)
        return [RecipeMapper.to_summary(r) for r in recipes]
