"""Kernel – framework-agnostic building blocks."""

from pagequery.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidFilterFieldError,
    InvalidLimitError,
    InvalidPageError,
    InvalidSortFieldError,
    QueryValidationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidFilterFieldError",
    "InvalidLimitError",
    "InvalidPageError",
    "InvalidSortFieldError",
    "QueryValidationError",
    "ValidationError",
]
