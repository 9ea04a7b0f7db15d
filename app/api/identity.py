import logging
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from app.api.auth import require_user, require_admin
from app.schemas.auth import Principal

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def root():
    return "Welcome to Game Partner Scheduler!"


@router.get("/public", response_class=PlainTextResponse)
def public():
    return "Public endpoint"


@router.get("/user", response_class=PlainTextResponse)
def user(principal: Principal = Depends(require_user)):
    logger.info(f"user endpoint accessed by {principal.user_id}")
    return f"User endpoint. Your Email is: {principal.email} your ID: {principal.user_id}"


@router.get("/admin", response_class=PlainTextResponse)
def admin(principal: Principal = Depends(require_admin)):
    logger.info(f"admin endpoint accessed by {principal.user_id}")
    return f"Admin endpoint. Your ID: {principal.user_id}"
