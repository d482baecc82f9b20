"""
mapper.py
- Purpose: Resolve role-ambiguous raw statuses into one canonical display status.
- The backing store keeps a single status field for bookings. "confirmed" (buyer
  wording) and "scheduled" (seller wording) are the same underlying state.
"""

from enum import Enum

from order_timeline.constants.statuses import RawStatus, Role

_ROLE_ALIASED = frozenset({RawStatus.CONFIRMED.value, RawStatus.SCHEDULED.value})

_ALIAS_BY_ROLE = {
    Role.BUYER: RawStatus.CONFIRMED.value,
    Role.SELLER: RawStatus.SCHEDULED.value,
}


def status_value(status) -> str:
    """Plain string value of a status given as enum or str (None -> "")."""
    if status is None:
        return ""
    if isinstance(status, Enum):
        return str(status.value)
    return str(status)


def resolve(raw, role: Role) -> str:
    """
    Never fails: unrecognized raw values pass through unchanged.
    """
    value = status_value(raw)
    if value in _ROLE_ALIASED:
        return _ALIAS_BY_ROLE.get(_as_role(role), value)
    return value


def raw_candidates(display_status, role: Role) -> frozenset[str]:
    """Inverse of resolve(): every raw value that this role sees as `display_status`."""
    value = status_value(display_status)
    if value == _ALIAS_BY_ROLE.get(_as_role(role)):
        return _ROLE_ALIASED
    return frozenset({value})


def _as_role(role) -> Role | None:
    try:
        return Role(status_value(role))
    except ValueError:
        return None
