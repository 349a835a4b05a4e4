"""Typed action errors and their HTTP rendering.

Operations raise ``ActionError`` with a stable ``ErrorCode``; the exception
handlers registered in ``main`` turn it into the failure envelope::

    {"success": false, "error": {"code": "NOT_FOUND", "message": "Page not found."}}
"""

from __future__ import annotations

import enum
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, enum.Enum):
    """Stable error codes surfaced to clients."""

    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"


_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.BAD_REQUEST: 400,
}


class ActionError(Exception):
    """An operation failure carrying a client-facing code and message."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def status_code(self) -> int:
        return _HTTP_STATUS[self.code]

    def to_dict(self) -> dict:
        return {"code": self.code.value, "message": self.message}


def _failure(exc: ActionError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.to_dict()},
    )


async def action_error_handler(request: Request, exc: ActionError) -> JSONResponse:
    logger.debug("%s %s -> %s: %s", request.method, request.url.path, exc.code.value, exc.message)
    return _failure(exc)


def format_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic error entries into one readable line."""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        msg = err.get("msg", "Invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid input."


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_errors(list(exc.errors()))
    logger.debug("%s %s -> BAD_REQUEST: %s", request.method, request.url.path, message)
    return _failure(ActionError(ErrorCode.BAD_REQUEST, message))
