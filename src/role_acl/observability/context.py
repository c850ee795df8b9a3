"""Wire an :class:`AclLogger` to console and/or file handlers."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from role_acl.models.events import ACL_NAMESPACE, LOG_FORMATS
from role_acl.observability.formatters import NdjsonFormatter, TextFormatter
from role_acl.observability.logger import AclLogger

if TYPE_CHECKING:
    from role_acl.settings import Settings

AUDIT_LOGGER_NAME = "role_acl.audit"


@dataclass
class AclLogContext:
    """Owns the handlers behind :attr:`logger`; close it to release files."""

    logger: AclLogger
    handlers: list[logging.Handler] = field(default_factory=list)

    def close(self) -> None:
        base = self.logger.logger
        while self.handlers:
            handler = self.handlers.pop()
            base.removeHandler(handler)
            handler.close()

    def __enter__(self) -> "AclLogContext":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()


def create_logger_context(
    *,
    namespace: str = ACL_NAMESPACE,
    log_format: str = "text",
    log_level: int = logging.INFO,
    audit_events: bool = True,
    enable_console_logging: bool = True,
    log_file: Path | None = None,
) -> AclLogContext:
    fmt = (log_format or "text").strip().lower()
    fmt = "ndjson" if fmt == "json" else fmt
    if fmt not in LOG_FORMATS:
        raise ValueError(f"log_format must be one of {LOG_FORMATS} (or 'json')")
    formatter = NdjsonFormatter() if fmt == "ndjson" else TextFormatter()

    handlers: list[logging.Handler] = []
    if enable_console_logging:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    # Not registered with logging's manager; released together with the context.
    base = logging.Logger(AUDIT_LOGGER_NAME, level=log_level)
    base.propagate = False
    for handler in handlers:
        handler.setFormatter(formatter)
        base.addHandler(handler)

    logger = AclLogger(base, namespace=namespace, audit_events=audit_events)
    return AclLogContext(logger=logger, handlers=handlers)


def logger_from_settings(
    settings: "Settings",
    *,
    enable_console_logging: bool = True,
    log_file: Path | None = None,
) -> AclLogContext:
    return create_logger_context(
        log_format=settings.log_format,
        log_level=settings.log_level,
        audit_events=settings.audit_events,
        enable_console_logging=enable_console_logging,
        log_file=log_file,
    )


__all__ = ["AUDIT_LOGGER_NAME", "AclLogContext", "create_logger_context", "logger_from_settings"]
