"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised before any store call, so no side effect has happened.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidCredentialsError(DomainError):
    """Raised when admin login credentials do not match."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class AdminSessionError(DomainError):
    """Raised when an admin session token is missing, invalid or expired."""

    pass


class PersistenceError(DomainError):
    """Raised when the data store fails to apply a change.

    The request transaction is rolled back, so no partial change persists.
    """

    pass


class LocationUnavailableError(DomainError):
    """Raised by geolocation clients when no position can be obtained."""

    pass
