"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi.responses import JSONResponse

from pagequery.config.validation import ConfigError
from pagequery.kernel.errors import BaseError, DomainError, QueryValidationError, ValidationError
from pagequery.observability.logging import get_logger

_log = get_logger(__name__)


class FastAPIExceptionMapper:
    """Register pagequery error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "invalid_limit", "message": "...", "detail": {...}, "errors": [...]}

    Mappings
    --------
    ``QueryValidationError`` → 400
    ``ValidationError``      → 400
    ``DomainError``          → 422
    ``ConfigError``          → 500
    """

    def __init__(self) -> None:
        # More specific subtypes first.
        self._map: list[tuple[type[Exception], int]] = [
            (QueryValidationError, 400),
            (ValidationError, 400),
            (DomainError, 422),
            (ConfigError, 500),
        ]

    @property
    def mappings(self) -> list[tuple[type[Exception], int]]:
        return list(self._map)

    def status_for(self, exc: BaseException) -> int:
        for exc_type, status in self._map:
            if isinstance(exc, exc_type):
                return status
        return 500

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    if isinstance(exc, BaseError):
                        body = exc.to_dict()
                    else:
                        body = {"code": "error", "message": str(exc)}
                    if code >= 500:
                        _log.error("http.error", code=body["code"], status=code)
                    return JSONResponse(status_code=code, content=body)

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
