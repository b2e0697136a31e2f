"""Memory quantity parsing for pod resource requests and limits."""

import re

# Multipliers toward MiB. Decimal and binary suffixes are treated alike,
# so "1M" reads as 1 MiB rather than ~0.95 MiB.
_DIVISORS = {
    "": 1024 * 1024,
    "k": 1024,
    "Ki": 1024,
}
_MULTIPLIERS = {
    "M": 1,
    "Mi": 1,
    "G": 1024,
    "Gi": 1024,
    "T": 1024 * 1024,
    "Ti": 1024 * 1024,
}

_QUANTITY_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*([A-Za-z]*)$")


def parse_memory_to_mib(quantity: str) -> int:
    """
    Convert a Kubernetes memory quantity to whole MiB.

    Args:
        quantity: Quantity string such as "128Mi", "1.5Gi" or "500000000".

    Returns:
        MiB truncated toward zero. Empty, malformed or unknown-suffix input
        yields 0, so callers cannot tell "unset" from "unparseable".

    Example:
        ```python
        parse_memory_to_mib("1.5Gi")      # 1536
        parse_memory_to_mib("500000000")  # 476
        parse_memory_to_mib("123")        # 0
        ```
    """
    if not quantity:
        return 0

    match = _QUANTITY_RE.match(quantity.strip())
    if not match:
        return 0

    value = float(match.group(1))
    unit = match.group(2)

    if unit in _DIVISORS:
        return int(value / _DIVISORS[unit])
    if unit in _MULTIPLIERS:
        return int(value * _MULTIPLIERS[unit])
    return 0
