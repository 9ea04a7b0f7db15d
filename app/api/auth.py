from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.exceptions import AuthenticationError, PermissionDeniedError
from app.core.security import verify_token
from app.models.user import Role
from app.schemas.auth import Principal

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Principal:
    if credentials is None:
        raise AuthenticationError("Missing bearer token")
    return verify_token(credentials.credentials)


def require_roles(*roles: Role):
    """Dependency that lets the request through only for the given roles"""
    allowed = [role.value for role in roles]

    def guard(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.has_any_role(*allowed):
            raise PermissionDeniedError("Access denied: insufficient role")
        return principal

    return guard


require_user = require_roles(Role.USER, Role.ADMIN)
require_admin = require_roles(Role.ADMIN)
