from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from adapters.media_adapter import CloudinaryUploader
from app import security
from app.config import settings
from app.exceptions import (
    ServiceValidationError,
    UnauthorizedError,
    NotFoundError,
    ConflictError,
)
from domain.mappers import UserMapper
from domain.models import User
from domain.schemas.user_schemas import (
    ProfileUpdateRequest,
    PasswordChangeRequest,
    DeleteAccountRequest,
    UserProfileResponse,
    PublicProfileResponse,
)
from repositories import UserRepository

logger = logging.getLogger("recipebox.account")


class AccountService:
    """Business logic for profile reads, profile mutation and account deletion"""

    @staticmethod
    def _get_user_or_404(db: Session, user_id: int) -> User:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def get_profile(db: Session, user_id: int) -> UserProfileResponse:
        """Return the caller's profile with recipe and favorite counts"""
        user_repo = UserRepository(db)
        user = AccountService._get_user_or_404(db, user_id)

        recipes_created = user_repo.count_recipes(user_id)
        favorites = user_repo.count_favorites(user_id)
        logger.info(
            f"profile_fetched user_id={user_id} recipes={recipes_created} "
            f"favorites={favorites}"
        )
        return UserMapper.to_profile_response(user, recipes_created, favorites)

    @staticmethod
    def update_profile(
        db: Session, user_id: int, profile_data: ProfileUpdateRequest
    ) -> User:
        """
        Apply a partial name/email update.

        Only fields present in ``profile_data`` are written. A new email must be
        well formed and not held by another user; the unique constraint on the
        column settles concurrent updates that both pass the pre-check.
        """
        if (
            profile_data.first_name is None
            and profile_data.last_name is None
            and profile_data.email is None
        ):
            raise ServiceValidationError(
                "At least one field (firstName, lastName, or email) is required"
            )

        user_repo = UserRepository(db)
        user = AccountService._get_user_or_404(db, user_id)

        new_email: Optional[str] = None
        if profile_data.email is not None:
            if not security.is_valid_email(profile_data.email):
                raise ServiceValidationError("Invalid email format")
            new_email = security.normalize_email(profile_data.email)
            if user_repo.email_taken_by_other(new_email, user_id):
                raise ConflictError("Email already in use")

        # Unchanged values emit no UPDATE, so updated_at keeps its old value
        if profile_data.first_name is not None:
            user.first_name = profile_data.first_name.strip()
        if profile_data.last_name is not None:
            user.last_name = profile_data.last_name.strip()
        if new_email is not None:
            user.email = new_email

        try:
            user = user_repo.update(user)
        except IntegrityError:
            db.rollback()
            logger.warning(f"profile_update_conflict user_id={user_id}")
            raise ConflictError("Email already in use")

        logger.info(f"profile_updated user_id={user_id}")
        return user

    @staticmethod
    def change_password(
        db: Session, user_id: int, payload: PasswordChangeRequest
    ) -> None:
        """Replace the password after re-verifying the current one.

        Tokens issued before the change stay valid until they expire.
        """
        if not payload.old_password or not payload.new_password:
            raise ServiceValidationError(
                "Both oldPassword and newPassword are required"
            )
        if len(payload.new_password) < settings.min_password_length:
            raise ServiceValidationError(
                f"New password must be at least {settings.min_password_length} "
                "characters long"
            )
        if security.password_too_long(payload.new_password):
            raise ServiceValidationError("New password is too long")

        user_repo = UserRepository(db)
        user = AccountService._get_user_or_404(db, user_id)

        if not security.verify_password(payload.old_password, user.password_hash):
            logger.warning(f"password_change_rejected user_id={user_id}")
            raise UnauthorizedError("Current password is incorrect")

        user.password_hash = security.hash_password(payload.new_password)
        user_repo.update(user)
        logger.info(f"password_changed user_id={user_id}")

    @staticmethod
    def update_avatar(
        db: Session,
        user_id: int,
        image: Optional[bytes],
        uploader: CloudinaryUploader,
    ) -> str:
        """Upload a profile image and return its URL.

        The URL is returned to the client only; the user record has no column
        for it yet.
        """
        if not image:
            raise ServiceValidationError("Profile image is required")

        AccountService._get_user_or_404(db, user_id)
        # UpstreamError propagates unchanged (502)
        image_url = uploader.upload(image, settings.avatar_image_folder)
        logger.info(f"avatar_uploaded user_id={user_id}")
        return image_url

    @staticmethod
    def delete_account(
        db: Session, user_id: int, payload: DeleteAccountRequest
    ) -> None:
        """
        Delete the account after password re-verification.

        Favorites, recipes and the user row are removed in one transaction; if
        any step fails nothing is deleted.
        """
        if not payload.password:
            raise ServiceValidationError("Password is required to delete account")

        user_repo = UserRepository(db)
        user = AccountService._get_user_or_404(db, user_id)

        if not security.verify_password(payload.password, user.password_hash):
            logger.warning(f"account_delete_rejected user_id={user_id}")
            raise UnauthorizedError("Incorrect password")

        try:
            deleted = user_repo.delete_account_rows(user_id)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"account_delete_failed user_id={user_id} error={str(e)}")
            raise

        logger.info(
            f"account_deleted user_id={user_id} recipes={deleted['recipes']} "
            f"favorites={deleted['favorites']}"
        )

    @staticmethod
    def get_public_profile(db: Session, user_id: int) -> PublicProfileResponse:
        """Public view of any user: no email, no password, no auth needed"""
        user = AccountService._get_user_or_404(db, user_id)
        recipes_count = UserRepository(db).count_recipes(user_id)
        return UserMapper.to_public_response(user, recipes_count)
