import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ConflictError, DuplicateEntityError, PermissionDeniedError
from app.models.user import User, Role
from app.repositories.user_repository import UserRepository
from app.repositories.schedule_repository import ScheduleRepository
from app.schemas.auth import Principal
from app.services.registration_service import ensure_unique_identity

logger = logging.getLogger(__name__)


def list_users(db: Session) -> List[User]:
    return UserRepository.get_all(db)


def get_user(db: Session, user_id: int) -> User:
    user = UserRepository.get_by_id(db, user_id)
    if user is None:
        raise NotFoundError(f"User not found. User id: {user_id}")
    return user


def update_user(
    db: Session,
    principal: Principal,
    user_id: int,
    name: str | None = None,
    email: str | None = None,
    extra_info: str | None = None,
) -> User:
    """Users may edit their own profile, admins may edit anyone's."""
    if principal.user_id != user_id and not principal.has_any_role(Role.ADMIN.value):
        raise PermissionDeniedError(f"Not allowed to update user {user_id}")

    user = get_user(db, user_id)
    ensure_unique_identity(db, name, email, exclude_id=user.id)

    if name:
        user.name = name.strip()
    if email:
        user.email = email
    user.extra_info = extra_info

    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent update or registration
        db.rollback()
        raise DuplicateEntityError(f"User with name {name} or email {email} already exists.")
    db.refresh(user)
    logger.info(f"User {user.id} updated by {principal.user_id}")
    return user


def promote_to_admin(db: Session, user_id: int, extra_info: str | None = None) -> User:
    user = get_user(db, user_id)
    user.role = Role.ADMIN.value
    if extra_info is not None:
        user.extra_info = extra_info

    db.commit()
    db.refresh(user)
    logger.info(f"User {user.id} promoted to admin")
    return user


def delete_user(db: Session, user_id: int) -> User:
    """
    Delete a user. Owners of schedules cannot be deleted;
    participations are dropped together with the user.
    """
    user = get_user(db, user_id)
    owned = ScheduleRepository.count_by_owner(db, user_id)
    if owned:
        raise ConflictError(f"User {user_id} owns {owned} schedule(s) and cannot be deleted")

    db.delete(user)
    db.commit()
    logger.info(f"User {user_id} deleted")
    return user
