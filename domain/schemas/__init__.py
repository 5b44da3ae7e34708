"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.base import CamelModel, MessageResponse
from domain.schemas.user_schemas import (
    SignupRequest,
    LoginRequest,
    ProfileUpdateRequest,
    PasswordChangeRequest,
    DeleteAccountRequest,
    UserResponse,
    UserStats,
    UserProfileResponse,
    PublicProfileResponse,
    AuthResponse,
    ProfileUpdateResponse,
    AvatarResponse,
)
from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeUpdate,
    RecipeFilters,
    RecipeResponse,
    RecipeListItem,
    RecipeDetail,
    RecipeSummary,
    Pagination,
    RecipeListResponse,
    RecipeMutationResponse,
    FavoriteToggleResponse,
)

__all__ = [
    "CamelModel",
    "MessageResponse",
    # User schemas
    "SignupRequest",
    "LoginRequest",
    "ProfileUpdateRequest",
    "PasswordChangeRequest",
    "DeleteAccountRequest",
    "UserResponse",
    "UserStats",
    "UserProfileResponse",
    "PublicProfileResponse",
    "AuthResponse",
    "ProfileUpdateResponse",
    "AvatarResponse",
    # Recipe schemas
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeFilters",
    "RecipeResponse",
    "RecipeListItem",
    "RecipeDetail",
    "RecipeSummary",
    "Pagination",
    "RecipeListResponse",
    "RecipeMutationResponse",
    "FavoriteToggleResponse",
]
