"""
API dependencies for dependency injection: database sessions, the media
uploader and the authenticated caller.
"""

from typing import Generator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from adapters.media_adapter import CloudinaryUploader
from app import security
from app.exceptions import UnauthorizedError
from domain.enums import UserRole
from domain.models import Database
from domain.schemas.base import CamelModel


class CurrentUser(CamelModel):
    """Identity taken from a verified bearer token. Trusted as-is downstream."""

    id: int
    email: str
    role: UserRole = UserRole.USER


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_db(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from database.get_session()


def get_media_uploader(request: Request) -> CloudinaryUploader:
    return request.app.state.media_uploader


def _extract_bearer_token(authorization: Optional[str]) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise UnauthorizedError("Access denied. No token provided.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise UnauthorizedError("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise UnauthorizedError("Authorization must be: Bearer <token>.")
    return token


def get_bearer_token(authorization: Optional[str] = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


def get_current_user(access_token: str = Depends(get_bearer_token)) -> CurrentUser:
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise UnauthorizedError(str(exc)) from exc

    try:
        role = UserRole(payload.get("role") or UserRole.USER.value)
    except ValueError:
        role = UserRole.USER

    return CurrentUser(
        id=int(payload["sub"]),
        email=str(payload.get("email") or ""),
        role=role,
    )
