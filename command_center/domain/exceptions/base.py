"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent business rule violations or
    domain-specific error conditions.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidRequestException(DomainException):
    """Raised when a request passes schema validation but breaks a cross-field rule."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_REQUEST",
        )


class MissingUserException(DomainException):
    """Raised when a request carries no user identifier."""

    def __init__(self, header_name: str):
        super().__init__(
            message=f"Missing user identifier header: {header_name}",
            code="MISSING_USER_ID",
        )
        self.header_name = header_name
