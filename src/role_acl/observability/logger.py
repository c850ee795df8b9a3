"""Logger adapter that stamps ACL audit records."""

from __future__ import annotations

import logging
import re
import uuid
from typing import Any

from role_acl.models.events import ACL_NAMESPACE, AuditPayload

_NAMESPACE_RE = re.compile(r"^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)*$")


def validate_namespace(namespace: str) -> str:
    """Return ``namespace`` if it is a dotted lowercase identifier path."""

    value = (namespace or "").strip()
    if not _NAMESPACE_RE.match(value):
        raise ValueError(f"Invalid audit namespace {namespace!r} (expected e.g. 'acl' or 'acl.billing')")
    return value


class AclLogger(logging.LoggerAdapter):
    """Adapter that tags every record with the owning ACL's id.

    Plain log lines get the event ``<namespace>.log``; :meth:`audit` records
    use ``<namespace>.<payload.event>`` and carry the payload as ``data``.
    """

    def __init__(
        self,
        logger: logging.Logger,
        *,
        namespace: str = ACL_NAMESPACE,
        acl_id: str | None = None,
        audit_events: bool = True,
    ) -> None:
        self.namespace = validate_namespace(namespace)
        self.acl_id = acl_id or uuid.uuid4().hex
        self.audit_events = audit_events
        super().__init__(logger, {"acl_id": self.acl_id})

    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["acl_id"] = self.acl_id
        extra["event_id"] = uuid.uuid4().hex
        extra.setdefault("event", f"{self.namespace}.log")
        kwargs["extra"] = extra
        return msg, kwargs

    def audit(self, payload: AuditPayload, *, level: int = logging.INFO) -> None:
        if not self.audit_events or not self.isEnabledFor(level):
            return
        event = f"{self.namespace}.{payload.event}"
        self.log(level, event, extra={"event": event, "data": payload.model_dump()})


class NullLogger(AclLogger):
    """Discards everything; the default for a new ACL."""

    def __init__(self) -> None:
        base_logger = logging.Logger("role_acl.null")
        base_logger.addHandler(logging.NullHandler())
        base_logger.propagate = False
        base_logger.disabled = True
        super().__init__(base_logger, acl_id="null", audit_events=False)

    def __bool__(self) -> bool:
        return False


__all__ = ["AclLogger", "NullLogger", "validate_namespace"]
