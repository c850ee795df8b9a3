"""Text and NDJSON renderings of ACL log records."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any


def _timestamp(record: logging.LogRecord) -> str:
    stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def audit_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Collect the fields :class:`~role_acl.observability.logger.AclLogger` stamps."""

    fields: dict[str, Any] = {
        "timestamp": _timestamp(record),
        "level": record.levelname.lower(),
        "acl_id": getattr(record, "acl_id", ""),
        "event_id": getattr(record, "event_id", ""),
        "event": getattr(record, "event", record.name),
        "message": record.getMessage(),
    }
    data = getattr(record, "data", None)
    if data:
        fields["data"] = data
    return fields


class NdjsonFormatter(logging.Formatter):
    """One JSON object per line; masks stay integers."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        fields = audit_fields(record)
        if fields["message"] == fields["event"]:
            del fields["message"]
        return json.dumps(fields, ensure_ascii=False, separators=(",", ":"))


class TextFormatter(logging.Formatter):
    """``[ts] LEVEL event: message key=value ...`` with masks shown in hex."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        fields = audit_fields(record)
        line = f"[{fields['timestamp']}] {fields['level'].upper()} {fields['event']}"
        if fields["message"] != fields["event"]:
            line += f": {fields['message']}"

        data = dict(fields.get("data") or {})
        data.pop("schema_version", None)
        for key in ("principal", "role", "created", "previous", "permission"):
            if key not in data:
                continue
            value = data.pop(key)
            if key in ("permission", "previous") and isinstance(value, int):
                value = hex(value)
            line += f" {key}={value}"
        return line


__all__ = ["NdjsonFormatter", "TextFormatter", "audit_fields"]
