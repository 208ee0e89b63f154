"""
Error kinds surfaced by the API

Every failure leaves the service with the same JSON shape:
    {"error": "<message>", "kind": "<error kind>"}
"""
from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class AppError(Exception):
    """Base class for errors the API reports to clients as-is"""

    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind.value}


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404


class InvalidInputError(AppError):
    kind = ErrorKind.INVALID_INPUT
    status_code = 400


class ConflictError(AppError):
    """Raised for duplicate SKUs, referenced rows and insufficient stock"""

    kind = ErrorKind.CONFLICT
    status_code = 409
