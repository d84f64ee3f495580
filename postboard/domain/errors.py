"""
Domain errors for posts and users.

The four DomainError kinds form a closed set. Each carries a fixed
``name`` and ``message`` and is mapped to an HTTP status at the
interface layer. Errors are never wrapped or re-classified.

Authentication failures belong to the auth collaborator and live in
a separate AuthenticationError family.
No framework imports allowed.
"""


class DomainError(Exception):
    """Base error for the closed set of domain errors."""

    name = "DomainError"
    message = "A domain error occurred"

    def __init__(self) -> None:
        super().__init__(self.message)


class OwnershipError(DomainError):
    """Raised when the caller does not own the document being modified."""

    name = "OwnershipError"
    message = "The provided token does not match the owner of this document"


class UserValidationError(DomainError):
    """Raised when the caller is not the user whose record is targeted."""

    name = "UserValidationError"
    message = "The provided token does not match the current user ID"


class DocumentNotFoundError(DomainError):
    """Raised when an ID matches no stored document."""

    name = "DocumentNotFoundError"
    message = "The provided ID doesn't match any documents"


class BadParamsError(DomainError):
    """Raised when a required input is missing, malformed or conflicting."""

    name = "BadParamsError"
    message = "A required parameter was omitted or invalid"


class AuthenticationError(Exception):
    """Raised when a request carries no valid bearer token."""

    name = "AuthenticationError"
    message = "A valid bearer token is required"

    def __init__(self) -> None:
        super().__init__(self.message)


class BadCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not match a user."""

    name = "BadCredentialsError"
    message = "The provided email or password is incorrect"
