from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from app.core.db import get_db
from app.schemas.auth import RegistrationRequest, LoginRequest, LoginResponse, ResetPasswordRequest
from app.services import auth_service, registration_service

router = APIRouter()


@router.post("/register", response_class=PlainTextResponse)
def register(request: RegistrationRequest, db: Session = Depends(get_db)):
    """Register a new user with the regular role"""
    registration_service.register(db, request.name, request.email, request.password)
    return f"User registered successfully for user: {request.email}"


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    token = auth_service.login(db, request.email, request.password)
    return LoginResponse(token=token)


@router.post("/reset-password", response_class=PlainTextResponse)
def reset_password(request: ResetPasswordRequest, db: Session = Depends(get_db)):
    registration_service.reset_password(db, request.email, request.old_password, request.new_password)
    return f"Password reset successfully for user: {request.email}"
