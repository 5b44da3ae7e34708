"""Pydantic schemas for accounts, profiles and authentication."""

from typing import Optional
from datetime import datetime

from pydantic import Field, field_validator

from domain.enums import UserRole
from domain.schemas.base import CamelModel


class SignupRequest(CamelModel):
    # Presence and format are checked by AuthService
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class ProfileUpdateRequest(CamelModel):
    """Partial profile update. A field left as None is not touched."""

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=320)

    @field_validator("first_name", "last_name", "email")
    @classmethod
    def blank_is_missing(cls, v):
        if v is not None and not v.strip():
            return None
        return v


class PasswordChangeRequest(CamelModel):
    old_password: Optional[str] = None
    new_password: Optional[str] = None


class DeleteAccountRequest(CamelModel):
    password: Optional[str] = None


class UserResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    role: UserRole = UserRole.USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserStats(CamelModel):
    recipes_created: int = 0
    favorites: int = 0
    # Reviews are not implemented; always reported as zero
    reviews: int = 0


class UserProfileResponse(UserResponse):
    stats: UserStats


class PublicProfileResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    joined_at: Optional[datetime] = None
    recipes_count: int = 0


class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserResponse


class ProfileUpdateResponse(CamelModel):
    message: str
    user: UserResponse


class AvatarResponse(CamelModel):
    message: str
    image_url: str
