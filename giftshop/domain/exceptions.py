"""Domain exceptions.

All domain-level errors that represent business rule violations.
A single exception type carries an ``ErrorCode`` so callers can
discriminate failures by kind instead of by class.
"""

from enum import Enum
from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ErrorCode(str, Enum):
    """Kinds of catalog failures with their HTTP status and message."""

    PRODUCT_NOT_FOUND = ("PRODUCT_NOT_FOUND", 404, "Product not found")
    PRODUCT_ALREADY_EXISTS = ("PRODUCT_ALREADY_EXISTS", 409, "Product already exists")
    PRODUCT_OPTIONS_EMPTY = ("PRODUCT_OPTIONS_EMPTY", 400, "Product must have at least one option")
    INVALID_SORT_DIRECTION = ("INVALID_SORT_DIRECTION", 400, "Sort direction must be 'asc' or 'desc'")
    INVALID_SORT_FIELD = ("INVALID_SORT_FIELD", 400, "Unknown product field for sorting")
    CATEGORY_NOT_FOUND = ("CATEGORY_NOT_FOUND", 404, "Category not found")
    CATEGORY_ALREADY_EXISTS = ("CATEGORY_ALREADY_EXISTS", 409, "Category already exists")
    CATEGORY_HAS_PRODUCTS = ("CATEGORY_HAS_PRODUCTS", 409, "Category still has products")
    OPTION_NOT_FOUND = ("OPTION_NOT_FOUND", 404, "Option not found")
    OPTION_ALREADY_EXISTS = ("OPTION_ALREADY_EXISTS", 409, "Option name already used by this product")

    def __new__(cls, value: str, status_code: int, message: str) -> "ErrorCode":
        member = str.__new__(cls, value)
        member._value_ = value
        member.status_code = status_code
        member.default_message = message
        return member


class CatalogError(DomainError):
    """Raised when a catalog operation violates a business rule.

    Attributes:
        code: Kind of failure.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize catalog error.

        Args:
            code: Kind of failure.
            message: Overrides the code's default message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message or code.default_message, details=details)
        self.code = code

    @property
    def status_code(self) -> int:
        """HTTP status associated with the error kind."""
        return self.code.status_code

    def __repr__(self) -> str:
        return f"CatalogError(code={self.code.value}, message={self.message!r})"
