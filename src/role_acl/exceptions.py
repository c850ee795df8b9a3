"""ACL error hierarchy."""

from __future__ import annotations

from typing import Any, Hashable


class RoleAclError(Exception):
    """Base class for role-acl exceptions."""


class InvalidRole(RoleAclError, ValueError):
    """Raised when a role index falls outside ``[0, MAX_ROLES)``."""

    def __init__(self, role: Any, *, max_roles: int = 128) -> None:
        self.role = role
        super().__init__(f"Role {role!r} is not a valid role index (expected int in [0, {max_roles}))")


class InvalidMask(RoleAclError, ValueError):
    """Raised when a permission mask does not fit the mask width."""

    def __init__(self, mask: Any, *, bits: int = 128) -> None:
        self.mask = mask
        super().__init__(f"Mask {mask!r} is not a valid {bits}-bit unsigned permission mask")


class MemberNotFound(RoleAclError, KeyError):
    """Raised when a destructive operation targets a principal with no entry."""

    def __init__(self, principal: Hashable) -> None:
        self.principal = principal
        super().__init__(principal)

    def __str__(self) -> str:
        return f"Principal {self.principal!r} is not a member of this ACL"


class ArithmeticDomainError(RoleAclError, ValueError):
    """Raised for operands outside an arithmetic helper's domain."""


class ArithmeticOverflowError(RoleAclError, OverflowError):
    """Raised when a checked arithmetic helper would lose bits."""


__all__ = [
    "RoleAclError",
    "InvalidRole",
    "InvalidMask",
    "MemberNotFound",
    "ArithmeticDomainError",
    "ArithmeticOverflowError",
]
