"""Keyed access-control list over 128-bit role masks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterator

from role_acl.exceptions import MemberNotFound
from role_acl.models.events import MemberRemoved, RoleGranted, RoleRevoked, RolesSet
from role_acl.observability.logger import AclLogger, NullLogger
from role_acl.roles import (
    EMPTY_MASK,
    mask_has_role,
    mask_with_role,
    mask_without_role,
    roles_from_mask,
    validate_mask,
    validate_role,
)


@dataclass(frozen=True)
class Member:
    """Read-only ``(principal, permission)`` pair produced by enumeration."""

    principal: Hashable
    permission: int

    @property
    def roles(self) -> tuple[int, ...]:
        return roles_from_mask(self.permission)

    def has_role(self, role: int) -> bool:
        return mask_has_role(self.permission, role)


class AccessControlList:
    """Mapping from principal to permission mask.

    Queries (``has_role``, ``get_permission``) treat unknown principals as
    holding no roles. Destructive operations (``remove_role``,
    ``remove_member``) require an existing entry and raise
    :class:`~role_acl.exceptions.MemberNotFound` otherwise. Role indices are
    validated before the entry lookup, so an out-of-range role always reports
    :class:`~role_acl.exceptions.InvalidRole`.

    Instances are not synchronized; callers serialize mutations.
    """

    def __init__(self, *, logger: AclLogger | None = None) -> None:
        self._permissions: dict[Hashable, int] = {}
        self._logger: AclLogger = logger if logger is not None else NullLogger()

    @classmethod
    def new(cls, *, logger: AclLogger | None = None) -> "AccessControlList":
        return cls(logger=logger)

    @property
    def logger(self) -> AclLogger:
        return self._logger

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_role(self, principal: Hashable, role: int) -> bool:
        validate_role(role)
        return mask_has_role(self._permissions.get(principal, EMPTY_MASK), role)

    def get_permission(self, principal: Hashable) -> int:
        return self._permissions.get(principal, EMPTY_MASK)

    def get_members(self) -> list[Member]:
        return [Member(principal, mask) for principal, mask in self._permissions.items()]

    # ------------------------------------------------------------------
    # Mutations
    #
    # Each mutation validates, builds its audit payload and emits it before
    # touching ``_permissions``; a failure at any step leaves the ACL as it was.
    # ------------------------------------------------------------------

    def set_roles(self, principal: Hashable, mask: int) -> None:
        validate_mask(mask)
        payload = RolesSet(
            principal=str(principal),
            previous=self._permissions.get(principal),
            permission=mask,
        )
        self._logger.audit(payload)
        self._permissions[principal] = mask

    def add_role(self, principal: Hashable, role: int) -> None:
        validate_role(role)
        mask = mask_with_role(self._permissions.get(principal, EMPTY_MASK), role)
        payload = RoleGranted(
            principal=str(principal),
            role=role,
            created=principal not in self._permissions,
            permission=mask,
        )
        self._logger.audit(payload)
        self._permissions[principal] = mask

    def remove_role(self, principal: Hashable, role: int) -> None:
        validate_role(role)
        try:
            current = self._permissions[principal]
        except KeyError:
            raise MemberNotFound(principal) from None
        mask = mask_without_role(current, role)
        self._logger.audit(RoleRevoked(principal=str(principal), role=role, permission=mask))
        self._permissions[principal] = mask

    def remove_member(self, principal: Hashable) -> None:
        try:
            mask = self._permissions[principal]
        except KeyError:
            raise MemberNotFound(principal) from None
        self._logger.audit(MemberRemoved(principal=str(principal), permission=mask))
        del self._permissions[principal]

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._permissions)

    def __contains__(self, principal: object) -> bool:
        return principal in self._permissions

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._permissions))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(members={len(self._permissions)})"


__all__ = ["AccessControlList", "Member"]
