from typing import Optional
from pydantic import field_validator

from app.schemas.base import CamelModel


class UserResponse(CamelModel):
    """API-safe representation of a user (no password hash)"""

    id: int
    name: str
    email: str
    role: str
    extra_info: Optional[str] = None


class UserSummary(CamelModel):
    id: int
    name: str


class UserUpdateRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    extra_info: Optional[str] = None

    @field_validator("name")
    @classmethod
    def not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip().lower()
        if "@" not in value:
            raise ValueError("must be an email address")
        return value


class PromoteRequest(CamelModel):
    extra_info: Optional[str] = None
