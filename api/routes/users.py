"""Account routes: the caller's own profile plus public profiles"""

from typing import Optional
import logging

from fastapi import APIRouter, Body, Depends, File, UploadFile
from sqlalchemy.orm import Session

from adapters.media_adapter import CloudinaryUploader
from api.dependencies import CurrentUser, get_current_user, get_db, get_media_uploader
from api.uploads import read_image_upload
from domain.mappers import UserMapper
from domain.schemas.base import MessageResponse
from domain.schemas.user_schemas import (
    AvatarResponse,
    DeleteAccountRequest,
    PasswordChangeRequest,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    PublicProfileResponse,
    UserProfileResponse,
)
from services.account_service import AccountService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("recipebox.api.users")


@router.get("/me", response_model=UserProfileResponse)
def get_my_profile(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Own profile with recipe and favorite counts."""
    return AccountService.get_profile(db, current_user.id)


@router.put("/me", response_model=ProfileUpdateResponse)
def update_my_profile(
    payload: ProfileUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    user = AccountService.update_profile(db, current_user.id, payload)
    return ProfileUpdateResponse(
        message="Profile updated successfully", user=UserMapper.to_response(user)
    )


@router.put("/me/password", response_model=MessageResponse)
def change_my_password(
    payload: PasswordChangeRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    AccountService.change_password(db, current_user.id, payload)
    return MessageResponse(message="Password updated successfully")


@router.put("/me/avatar", response_model=AvatarResponse)
def upload_my_avatar(
    profile_image: Optional[UploadFile] = File(None, alias="profileImage"),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    uploader: CloudinaryUploader = Depends(get_media_uploader),
):
    """Upload a profile image (multipart field ``profileImage``)."""
    image = read_image_upload(profile_image)
    image_url = AccountService.update_avatar(db, current_user.id, image, uploader)
    return AvatarResponse(
        message="Profile image uploaded successfully", image_url=image_url
    )


@router.delete("/me", response_model=MessageResponse)
def delete_my_account(
    payload: Optional[DeleteAccountRequest] = Body(None),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete the account, its recipes and every related favorite."""
    AccountService.delete_account(db, current_user.id, payload or DeleteAccountRequest())
    return MessageResponse(message="Account deleted successfully")


@router.get("/{user_id}", response_model=PublicProfileResponse)
def get_public_profile(user_id: int, db: Session = Depends(get_db)):
    return AccountService.get_public_profile(db, user_id)
