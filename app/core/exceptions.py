class ServiceError(Exception):
    """Base exception for service errors. Carries the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    status_code = 404


class DuplicateEntityError(ServiceError):
    status_code = 409


class ConflictError(ServiceError):
    status_code = 409


class InvalidCredentialsError(ServiceError):
    """Password reset rejected: unknown email or wrong old password."""

    status_code = 409


class AuthenticationError(ServiceError):
    status_code = 401


class InvalidTokenError(AuthenticationError):
    pass


class ExpiredTokenError(AuthenticationError):
    pass


class PermissionDeniedError(ServiceError):
    status_code = 403
