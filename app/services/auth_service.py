import logging
from sqlalchemy.orm import Session

from app.core.exceptions import AuthenticationError
from app.core.security import verify_password, dummy_verify, issue_token
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def login(db: Session, email: str, password: str) -> str:
    """
    Check email and password and issue an access token.
    Unknown email and wrong password produce the same error.
    """
    user = UserRepository.get_by_email(db, email)
    if user is None:
        dummy_verify()
        logger.warning("Login rejected")
        raise AuthenticationError("Invalid email or password")

    if not verify_password(password, user.password_hash):
        logger.warning("Login rejected")
        raise AuthenticationError("Invalid email or password")

    logger.info(f"User {user.id} logged in")
    return issue_token(user.id, user.email, user.roles)
