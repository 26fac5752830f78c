"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed identifier, bad input)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ConflictError(DomainError):
    """Raised when a unique value (handle, display name) is already taken."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"{field} is already in use: {value}")


class InvalidCredentialsError(DomainError):
    """Raised when a handle/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid handle or password")


class UnauthenticatedError(DomainError):
    """Raised when no valid caller identity can be established."""

    pass
