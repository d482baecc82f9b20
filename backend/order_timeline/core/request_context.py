"""
Request context helpers.

We keep a small context (request_id, transaction_id) in ContextVars.
The HTTP middleware and the timeline service set these values so logs become
correlatable per request and per order/booking.

No external dependencies.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_transaction_id: ContextVar[Optional[str]] = ContextVar("transaction_id", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    transaction_id: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if transaction_id is not None:
        _transaction_id.set(transaction_id)


def clear_context() -> None:
    _request_id.set(None)
    _transaction_id.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    txid = _transaction_id.get()

    if rid:
        ctx["request_id"] = rid
    if txid:
        ctx["transaction_id"] = txid
    return ctx
