"""Signup and login routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from domain.mappers import UserMapper
from domain.schemas.user_schemas import SignupRequest, LoginRequest, AuthResponse
from services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger("recipebox.api.auth")


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(payload: SignupRequest, db: Session = Depends(get_db)):
    """Register a new account and return a bearer token for it."""
    user, token = AuthService.signup(db, payload)
    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=UserMapper.to_response(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user, token = AuthService.login(db, payload)
    return AuthResponse(
        message="Login successful", token=token, user=UserMapper.to_response(user)
    )
