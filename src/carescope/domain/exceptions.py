"""Domain exceptions."""


class CareScopeError(Exception):
    """Base exception for CareScope."""

    pass


class Unauthenticated(CareScopeError):
    """No valid session, or the session's principal cannot act."""

    pass


class PermissionDenied(CareScopeError):
    """Acting principal lacks the permission for the requested action."""

    def __init__(self, message: str = "Permission denied", permission: str | None = None) -> None:
        super().__init__(message)
        self.permission = permission


class ImpersonationViolation(PermissionDenied):
    """Impersonation attempted by a non-admin, while nested, or on an invalid target."""

    pass


class NotFound(CareScopeError):
    """Requested resource was not found or is outside the caller's scope."""

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class ValidationError(CareScopeError):
    """Validation failed for input data."""

    pass
