"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; they may be surfaced in UI.
"""

from enum import Enum


class ErrorReason(str, Enum):
    UNKNOWN = "Unknown error"

    INVALID_INPUT = "Invalid input"
    RESOURCE_NOT_FOUND = "Resource not found"
    INTERNAL_ERROR = "Internal server error"

    INVALID_TRANSACTION_KIND = "Transaction kind must be 'product' or 'service'"
    INVALID_ROLE = "Role must be 'buyer' or 'seller'"
    FLOW_NOT_DEFINED = "No timeline flow defined"
