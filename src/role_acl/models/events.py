"""Audit payloads for successful ACL mutations.

Each payload knows its own event name relative to the logger namespace, so
emitting one never needs a registry lookup. Payloads are built (and
validated) before the ACL changes.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

ACL_NAMESPACE = "acl"
LOG_FORMATS = ("text", "ndjson")

RoleIndex = Annotated[int, Field(ge=0, lt=128)]
PermissionMask = Annotated[int, Field(ge=0, lt=1 << 128)]


class AuditPayload(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    event: ClassVar[str]

    schema_version: Literal[1] = 1
    principal: str
    permission: PermissionMask


class RoleGranted(AuditPayload):
    event: ClassVar[str] = "role.granted"

    role: RoleIndex
    created: bool


class RoleRevoked(AuditPayload):
    event: ClassVar[str] = "role.revoked"

    role: RoleIndex


class RolesSet(AuditPayload):
    event: ClassVar[str] = "roles.set"

    previous: PermissionMask | None


class MemberRemoved(AuditPayload):
    event: ClassVar[str] = "member.removed"


AUDIT_EVENTS: tuple[type[AuditPayload], ...] = (RoleGranted, RoleRevoked, RolesSet, MemberRemoved)


__all__ = [
    "ACL_NAMESPACE",
    "AUDIT_EVENTS",
    "AuditPayload",
    "LOG_FORMATS",
    "MemberRemoved",
    "RoleGranted",
    "RoleRevoked",
    "RolesSet",
]
