from pydantic import BaseModel, ConfigDict, field_validator

from app.schemas.base import CamelModel


class RegistrationRequest(CamelModel):
    name: str
    email: str
    password: str

    @field_validator("name", "password")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if "@" not in value:
            raise ValueError("must be an email address")
        return value


class LoginRequest(CamelModel):
    email: str
    password: str


class LoginResponse(CamelModel):
    token: str
    token_type: str = "bearer"


class ResetPasswordRequest(CamelModel):
    email: str
    old_password: str
    new_password: str

    @field_validator("new_password")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class Principal(BaseModel):
    """Authenticated identity reconstructed from a verified token."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    email: str
    roles: tuple[str, ...] = ()

    def has_any_role(self, *roles: str) -> bool:
        return any(role in self.roles for role in roles)
