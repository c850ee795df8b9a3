"""Keyed access-control lists over 128-bit role masks."""

from importlib import metadata

from role_acl.acl import AccessControlList, Member
from role_acl.exceptions import InvalidMask, InvalidRole, MemberNotFound, RoleAclError
from role_acl.settings import Settings

try:
    __version__ = metadata.version("role-acl")
except metadata.PackageNotFoundError:  # pragma: no cover - uninstalled source tree
    __version__ = "unknown"


__all__ = [
    "AccessControlList",
    "InvalidMask",
    "InvalidRole",
    "Member",
    "MemberNotFound",
    "RoleAclError",
    "Settings",
    "__version__",
]
