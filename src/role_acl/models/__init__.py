from role_acl.models.events import (
    ACL_NAMESPACE,
    AUDIT_EVENTS,
    AuditPayload,
    MemberRemoved,
    RoleGranted,
    RoleRevoked,
    RolesSet,
)

__all__ = [
    "ACL_NAMESPACE",
    "AUDIT_EVENTS",
    "AuditPayload",
    "MemberRemoved",
    "RoleGranted",
    "RoleRevoked",
    "RolesSet",
]
