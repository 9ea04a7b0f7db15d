import logging
import jwt
from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext

from app.core.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_HOURS
from app.core.exceptions import ExpiredTokenError, InvalidTokenError
from app.schemas.auth import Principal

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password before storing it"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its stored hash"""
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    """Spend the same time as a real verify when there is no user to check"""
    pwd_context.dummy_verify()


def create_access_token(data: dict) -> str:
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    to_encode.update({"iat": now, "exp": now + timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS)})

    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def issue_token(user_id: int, email: str, roles: list[str]) -> str:
    return create_access_token({"sub": str(user_id), "email": email, "roles": list(roles)})


def decode_access_token(token: str) -> dict:
    """Verify signature and expiry and return the claims"""
    try:
        return jwt.decode(
            token,
            SECRET_KEY,
            algorithms=[ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        logger.info("Rejected token: expired")
        raise ExpiredTokenError("Token has expired")
    except jwt.PyJWTError as e:
        logger.info(f"Rejected token: malformed or bad signature ({e})")
        raise InvalidTokenError("Invalid token")


def verify_token(token: str) -> Principal:
    payload = decode_access_token(token)
    try:
        return Principal(
            user_id=int(payload["sub"]),
            email=payload["email"],
            roles=tuple(payload.get("roles") or ()),
        )
    except (KeyError, TypeError, ValueError):
        logger.info("Rejected token: missing identity claims")
        raise InvalidTokenError("Invalid token")
