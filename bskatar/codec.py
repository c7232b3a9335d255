"""
Record codec — AvatarConfig to and from the stored record shape.

Stored records are untrusted: they may be missing fields, carry fields from
a newer schema, or hold values this version does not know.  ``from_record``
fills each field on its own so a bad field never spoils the rest.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .models import AvatarConfig
from .taxonomy import COLOR_FIELDS, DEFAULTS, FIELDS, STYLE_DOMAINS, resolve

AVATAR_COLLECTION = "xyz.bskatar.avatar"
AVATAR_RKEY = "self"


def _timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_record(config: AvatarConfig, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Schema tag, the ten fields verbatim, and a creation timestamp."""
    record: Dict[str, Any] = {"$type": AVATAR_COLLECTION}
    record.update(config.to_fields())
    record["createdAt"] = _timestamp(now)
    return record


def _field(record: Dict[str, Any], name: str) -> Any:
    value = record.get(name)
    if name in STYLE_DOMAINS:
        return resolve(name, value)
    if name in COLOR_FIELDS:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return DEFAULTS[name]
    if name == "hasBlush":
        return value if isinstance(value, bool) else DEFAULTS[name]
    return DEFAULTS[name]


def from_record(record: Any) -> AvatarConfig:
    """Decode a stored record; anything missing or unknown becomes the default."""
    if not isinstance(record, dict):
        record = {}
    return AvatarConfig.model_validate({name: _field(record, name) for name in FIELDS})
