"""Domain error taxonomy.

These exceptions are carried inside failed Results by the domain and
application layers. Only the HTTP layer raises them (via ``Result.unwrap``)
so the global exception handlers can map them to status codes.
"""
from typing import Dict, List, Optional


class ErrorCodes:
    """Stable error codes exposed in error response bodies"""
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    LOOKUP_FAILED = "LOOKUP_FAILED"
    PAYMENT_VALIDATION_ERROR = "PAYMENT_VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


EMAIL_IN_USE_MESSAGE = "Email is already in use"


class DomainException(Exception):
    """Base class for all domain-specific errors"""

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class EntityNotFoundException(DomainException):
    """Raised when an entity is not found"""

    def __init__(self, entity_name: str, identifier: str) -> None:
        super().__init__(
            f"{entity_name} with identifier '{identifier}' was not found",
            ErrorCodes.ENTITY_NOT_FOUND,
        )
        self.entity_name = entity_name
        self.identifier = identifier


class ConflictException(DomainException):
    """Raised on a uniqueness violation (e.g. duplicate email)"""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCodes.CONFLICT)


class ValidationException(DomainException):
    """
    Raised when input fails structural or business validation.

    ``errors`` holds one ``{"field": ..., "message": ...}`` entry per
    failing field and is returned to the client.
    """

    def __init__(
        self,
        errors: List[Dict[str, str]],
        message: Optional[str] = None,
        code: str = ErrorCodes.VALIDATION_ERROR,
    ) -> None:
        if message is None:
            message = errors[0]["message"] if errors else "Validation failed"
        super().__init__(message, code)
        self.errors = errors

    @classmethod
    def for_field(
        cls, field: str, message: str, code: str = ErrorCodes.VALIDATION_ERROR
    ) -> "ValidationException":
        return cls(errors=[{"field": field, "message": message}], message=message, code=code)


class BusinessRuleViolationException(DomainException):
    """Raised when a domain invariant is breached"""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCodes.BUSINESS_RULE_VIOLATION)


class LookupFailedException(DomainException):
    """
    Raised by the external user port when a lookup could not be completed.

    The underlying cause (timeout, transport error, unexpected status) is
    logged by the adapter and deliberately not part of the message.
    """

    def __init__(self, message: str = "Failed to fetch user from User Service") -> None:
        super().__init__(message, ErrorCodes.LOOKUP_FAILED)
