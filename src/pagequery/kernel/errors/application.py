"""Application-layer errors – problems with how the library is wired up."""

from __future__ import annotations

from pagequery.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
