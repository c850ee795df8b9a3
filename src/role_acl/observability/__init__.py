from role_acl.observability.context import AclLogContext, create_logger_context, logger_from_settings
from role_acl.observability.formatters import NdjsonFormatter, TextFormatter
from role_acl.observability.logger import AclLogger, NullLogger, validate_namespace

__all__ = [
    "AclLogContext",
    "AclLogger",
    "NdjsonFormatter",
    "NullLogger",
    "TextFormatter",
    "create_logger_context",
    "logger_from_settings",
    "validate_namespace",
]
