"""
Auth business logic: signup and login.
"""

from typing import Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from app import security
from app.config import settings
from app.exceptions import ServiceValidationError, UnauthorizedError, ConflictError
from domain.enums import UserRole
from domain.models import User
from domain.schemas.user_schemas import SignupRequest, LoginRequest
from repositories import UserRepository

logger = logging.getLogger("recipebox.auth")


class AuthService:
    """Issues bearer tokens for new and returning users"""

    @staticmethod
    def issue_token(user: User) -> str:
        return security.build_access_token(
            user_id=user.id, email=user.email, role=UserRole(user.role).value
        )

    @staticmethod
    def signup(db: Session, payload: SignupRequest) -> Tuple[User, str]:
        if not (
            payload.first_name
            and payload.last_name
            and payload.email
            and payload.password
        ):
            raise ServiceValidationError("All fields are required")
        if len(payload.password) < settings.min_password_length:
            raise ServiceValidationError(
                f"Password must be at least {settings.min_password_length} characters"
            )
        if security.password_too_long(payload.password):
            raise ServiceValidationError("Password is too long")
        if not security.is_valid_email(payload.email):
            raise ServiceValidationError("Invalid email format")

        user_repo = UserRepository(db)
        if user_repo.get_by_email(payload.email) is not None:
            raise ConflictError("Email already exists")

        try:
            user = user_repo.create_user(
                first_name=payload.first_name.strip(),
                last_name=payload.last_name.strip(),
                email=payload.email,
                password_hash=security.hash_password(payload.password),
            )
        except IntegrityError:
            db.rollback()
            raise ConflictError("Email already exists")

        logger.info(f"user_signed_up user_id={user.id}")
        return user, AuthService.issue_token(user)

    @staticmethod
    def login(db: Session, payload: LoginRequest) -> Tuple[User, str]:
        if not payload.email or not payload.password:
            raise ServiceValidationError("Email and password required")

        user = UserRepository(db).get_by_email(payload.email)
        if user is None or not security.verify_password(
            payload.password, user.password_hash
        ):
            logger.warning("login_rejected")
            raise UnauthorizedError("Invalid email or password")

        logger.info(f"user_logged_in user_id={user.id}")
        return user, AuthService.issue_token(user)
