"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                    (domain.py)
    │   └── ValidationError
    │       └── QueryValidationError   (query.py)
    │           ├── InvalidLimitError
    │           ├── InvalidPageError
    │           ├── InvalidFilterFieldError
    │           └── InvalidSortFieldError
    └── ApplicationError               (application.py)
"""

from pagequery.kernel.errors.application import ApplicationError
from pagequery.kernel.errors.base import BaseError
from pagequery.kernel.errors.domain import DomainError, ValidationError
from pagequery.kernel.errors.query import (
    InvalidFilterFieldError,
    InvalidLimitError,
    InvalidPageError,
    InvalidSortFieldError,
    QueryValidationError,
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
