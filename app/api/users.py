from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.db import get_db
from app.api.auth import require_user, require_admin
from app.schemas.auth import Principal
from app.schemas.user import UserResponse, UserUpdateRequest, PromoteRequest
from app.services import user_service

router = APIRouter()


@router.get("", response_model=List[UserResponse])
def get_users(db: Session = Depends(get_db), principal: Principal = Depends(require_admin)):
    return user_service.list_users(db)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db), principal: Principal = Depends(require_admin)):
    return user_service.get_user(db, user_id)


@router.put("/admin/{user_id}", response_model=UserResponse)
def promote_user(
    user_id: int,
    request: PromoteRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_admin),
):
    """Give the user the admin role"""
    return user_service.promote_to_admin(db, user_id, request.extra_info)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    request: UserUpdateRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_user),
):
    return user_service.update_user(
        db, principal, user_id, name=request.name, email=request.email, extra_info=request.extra_info
    )


@router.delete("/{user_id}", response_model=UserResponse)
def delete_user(user_id: int, db: Session = Depends(get_db), principal: Principal = Depends(require_admin)):
    return user_service.delete_user(db, user_id)
