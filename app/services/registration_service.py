import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateEntityError, InvalidCredentialsError
from app.core.security import hash_password, verify_password, dummy_verify
from app.models.user import User, Role
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def ensure_unique_identity(db: Session, name: str | None, email: str | None, exclude_id: int | None = None):
    """Raise DuplicateEntityError if another user already has this name or email"""
    if name:
        other = UserRepository.get_by_name(db, name)
        if other is not None and other.id != exclude_id:
            raise DuplicateEntityError(f"User with name {name} already exists.")
    if email:
        other = UserRepository.get_by_email(db, email)
        if other is not None and other.id != exclude_id:
            raise DuplicateEntityError(f"User with email {email} already exists.")


def register(db: Session, name: str, email: str, password: str, role: Role = Role.USER) -> User:
    """Create a new account. New users always start as regular users."""
    ensure_unique_identity(db, name, email)

    user = User(
        name=name.strip(),
        email=email.strip().lower(),
        password_hash=hash_password(password),
        role=role.value,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration
        db.rollback()
        raise DuplicateEntityError(f"User with name {name} or email {email} already exists.")
    db.refresh(user)

    logger.info(f"Registered user {user.id} ({user.email})")
    return user


def reset_password(db: Session, email: str, old_password: str, new_password: str) -> None:
    user = UserRepository.get_by_email(db, email)
    if user is None:
        dummy_verify()
    if user is None or not verify_password(old_password, user.password_hash):
        logger.warning("Password reset rejected")
        raise InvalidCredentialsError("Invalid old password or user not found.")

    user.password_hash = hash_password(new_password)
    db.commit()
    logger.info(f"Password reset for user {user.id}")


def ensure_admin(db: Session, name: str, email: str, password: str) -> User | None:
    """
    Create the bootstrap admin account unless that email is already registered.
    Skipped with a warning when the name belongs to another account.
    """
    existing = UserRepository.get_by_email(db, email)
    if existing is not None:
        return existing

    if UserRepository.get_by_name(db, name) is not None:
        logger.warning(f"Bootstrap admin skipped: name {name} is taken by another account")
        return None

    logger.info(f"Creating bootstrap admin {email}")
    return register(db, name, email, password, role=Role.ADMIN)
