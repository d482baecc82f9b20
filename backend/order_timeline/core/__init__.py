# order_timeline/core/__init__.py
from order_timeline.core.errors import AppError
from order_timeline.core.error_codes import ErrorCode
from order_timeline.core.error_reasons import ErrorReason

__all__ = ["AppError", "ErrorCode", "ErrorReason"]
