"""Bit-level role algebra for 128-bit permission masks.

Role ``r`` is bit ``r`` of the mask. Every helper that accepts a raw role
index validates it before shifting, so no mask built here can carry bits at
positions ``>= MAX_ROLES``.
"""

from __future__ import annotations

from typing import Any, Iterable

from role_acl.exceptions import InvalidMask, InvalidRole

MAX_ROLES = 128
EMPTY_MASK = 0
FULL_MASK = (1 << MAX_ROLES) - 1


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_role(role: Any) -> int:
    if not _is_plain_int(role) or not 0 <= role < MAX_ROLES:
        raise InvalidRole(role, max_roles=MAX_ROLES)
    return role


def validate_mask(mask: Any) -> int:
    if not _is_plain_int(mask) or not EMPTY_MASK <= mask <= FULL_MASK:
        raise InvalidMask(mask, bits=MAX_ROLES)
    return mask


def role_bit(role: int) -> int:
    """Return the single-bit mask for ``role``."""

    return 1 << validate_role(role)


def mask_has_role(mask: int, role: int) -> bool:
    return bool(mask & role_bit(role))


def mask_with_role(mask: int, role: int) -> int:
    return mask | role_bit(role)


def mask_without_role(mask: int, role: int) -> int:
    return mask & ~role_bit(role) & FULL_MASK


def mask_from_roles(roles: Iterable[int]) -> int:
    """OR together the bits for every role in ``roles``."""

    mask = EMPTY_MASK
    for role in roles:
        mask |= role_bit(role)
    return mask


def roles_from_mask(mask: int) -> tuple[int, ...]:
    """Return the role indices set in ``mask`` in ascending order."""

    remaining = validate_mask(mask)
    held: list[int] = []
    while remaining:
        low = remaining & -remaining
        held.append(low.bit_length() - 1)
        remaining ^= low
    return tuple(held)


__all__ = [
    "MAX_ROLES",
    "EMPTY_MASK",
    "FULL_MASK",
    "validate_role",
    "validate_mask",
    "role_bit",
    "mask_has_role",
    "mask_with_role",
    "mask_without_role",
    "mask_from_roles",
    "roles_from_mask",
]
