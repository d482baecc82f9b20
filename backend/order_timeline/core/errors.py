"""
errors.py
- Purpose: AppError used across services/routers for consistent errors.
- Pattern: raise AppError(...) in service, handler converts to JSON response.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from fastapi import status as http_status
from order_timeline.core.error_codes import ErrorCode
from order_timeline.core.error_reasons import ErrorReason


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional human-readable message

    def to_dict(self) -> dict[str, Any]:
        reason = _plain(self.reason)
        payload: dict[str, Any] = {
            "error": {
                "code": _plain(self.code),
                "reason": reason,
                "message": self.message if self.message else reason,
            }
        }
        if self.details:
            payload["error"]["details"] = self.details
        return payload


# Convenience constructors
def bad_request(reason: str = ErrorReason.INVALID_INPUT, *, code: ErrorCode = ErrorCode.VALIDATION_ERROR, details: dict | None = None, message: str | None = None) -> AppError:
    return AppError(code=code, reason=_plain(reason), status_code=http_status.HTTP_400_BAD_REQUEST, details=details, message=message)


def unprocessable(reason: str = ErrorReason.INVALID_INPUT, *, code: ErrorCode = ErrorCode.VALIDATION_ERROR, details: dict | None = None, message: str | None = None) -> AppError:
    return AppError(code=code, reason=_plain(reason), status_code=422, details=details, message=message)


def not_found(reason: str = ErrorReason.RESOURCE_NOT_FOUND, *, details: dict | None = None) -> AppError:
    return AppError(code=ErrorCode.NOT_FOUND, reason=_plain(reason), status_code=http_status.HTTP_404_NOT_FOUND, details=details)


def internal_error(reason: str = ErrorReason.UNKNOWN, *, details: dict | None = None) -> AppError:
    return AppError(code=ErrorCode.INTERNAL_ERROR, reason=_plain(reason), status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)
