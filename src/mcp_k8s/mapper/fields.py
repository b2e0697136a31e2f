"""
Typed field extraction from unstructured objects.

Every helper walks a path of keys through nested dicts and returns None when
a key is missing or the value has an unexpected type. Mappers treat None as
"omit from output", so a malformed object never raises.
"""

import re
from datetime import datetime, timezone
from typing import Any

Unstructured = dict[str, Any]

_MISSING = object()

_FRACTION = re.compile(r"\.(\d+)")


def nested_field(obj: Any, *path: str) -> Any:
    """Return the value at `path`, or None if any step is absent."""
    value = obj
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key, _MISSING)
        if value is _MISSING:
            return None
    return value


def nested_string(obj: Any, *path: str) -> str | None:
    value = nested_field(obj, *path)
    return value if isinstance(value, str) else None


def nested_int(obj: Any, *path: str) -> int | None:
    value = nested_field(obj, *path)
    # bool is an int subclass; a JSON true is not a counter
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def nested_bool(obj: Any, *path: str) -> bool | None:
    value = nested_field(obj, *path)
    return value if isinstance(value, bool) else None


def nested_list(obj: Any, *path: str) -> list[Any] | None:
    value = nested_field(obj, *path)
    return value if isinstance(value, list) else None


def nested_map(obj: Any, *path: str) -> dict[str, Any] | None:
    value = nested_field(obj, *path)
    return value if isinstance(value, dict) else None


def get_name(obj: Unstructured) -> str:
    return nested_string(obj, "metadata", "name") or ""


def get_namespace(obj: Unstructured) -> str | None:
    """Namespace of the object, None for cluster-scoped or unset."""
    return nested_string(obj, "metadata", "namespace") or None


def get_labels(obj: Unstructured) -> dict[str, Any] | None:
    return nested_map(obj, "metadata", "labels")


def parse_timestamp(value: str | None) -> datetime | None:
    """
    Parse an RFC 3339 timestamp as found in object metadata.

    Accepts both second precision ("2024-01-01T00:00:00Z") and the
    microsecond MicroTime used by events.k8s.io. Returns None for anything
    unparseable.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    # fromisoformat before 3.11 only takes 3 or 6 fractional digits
    text = _FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0")[:6], text, count=1)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_age(since: datetime, now: datetime | None = None) -> str:
    """
    Format elapsed time the way kubectl does, in coarse buckets.

    Args:
        since: Start of the interval.
        now: End of the interval; defaults to the current UTC time.

    Returns:
        "< 1m", "{n}m", "{n}h" or "{n}d".
    """
    now = now or datetime.now(timezone.utc)
    seconds = (now - since).total_seconds()
    if seconds < 60:
        return "< 1m"
    if seconds < 3600:
        return f"{int(seconds // 60)}m"
    if seconds < 86400:
        return f"{int(seconds // 3600)}h"
    return f"{int(seconds // 86400)}d"


def creation_age(obj: Unstructured) -> str | None:
    """Age of the object from metadata.creationTimestamp."""
    created = parse_timestamp(nested_string(obj, "metadata", "creationTimestamp"))
    return format_age(created) if created else None
