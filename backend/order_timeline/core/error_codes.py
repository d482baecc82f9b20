# order_timeline/core/error_codes.py
from enum import Enum

class ErrorCode(str, Enum):
    UNKNOWN = "UNKNOWN"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Timeline
    INVALID_TRANSACTION_KIND = "INVALID_TRANSACTION_KIND"
    INVALID_ROLE = "INVALID_ROLE"
    FLOW_NOT_DEFINED = "FLOW_NOT_DEFINED"
