"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import User
from domain.schemas.user_schemas import (
    UserResponse,
    UserStats,
    UserProfileResponse,
    PublicProfileResponse,
)


class UserMapper:
    """Mapper for user-related transformations. Never exposes password_hash."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def to_profile_response(
        user: User, recipes_created: int, favorites: int
    ) -> UserProfileResponse:
        """
        Convert a User plus its derived counts to the self-profile DTO.

        Args:
            user: User ORM instance
            recipes_created: number of recipes the user owns
            favorites: number of favorites the user holds

        Returns:
            UserProfileResponse with a stats block
        """
        return UserProfileResponse(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
            stats=UserStats(recipes_created=recipes_created, favorites=favorites),
        )

    @staticmethod
    def to_public_response(user: User, recipes_count: int) -> PublicProfileResponse:
        return PublicProfileResponse(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            joined_at=user.created_at,
            recipes_count=recipes_count,
        )
