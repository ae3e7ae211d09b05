"""Naming and metadata rules for persisted video artifacts."""

import json
import time
import uuid
from typing import Any, Mapping

ARTIFACT_NAMESPACE = "runway"
ARTIFACT_CONTENT_TYPE = "video/mp4"


def build_artifact_key(now: float | None = None) -> str:
    """
    Builds a unique destination key for a video artifact.

    Combines the namespace, a millisecond timestamp and a random suffix,
    e.g. ``runway/1718000000000_3f9a1c.mp4``.
    """
    timestamp_ms = int((time.time() if now is None else now) * 1000)
    suffix = uuid.uuid4().hex[:6]
    return f"{ARTIFACT_NAMESPACE}/{timestamp_ms}_{suffix}.mp4"


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def stringify_metadata(meta: Mapping[str, Any] | None) -> dict[str, str]:
    """Coerces every metadata value to a string, as object metadata requires."""
    if not meta:
        return {}
    return {str(key): _stringify(value) for key, value in meta.items()}
