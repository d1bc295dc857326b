"""Typed access to OpenDRIVE nodes.

Every attribute read in the parser goes through this module, so the policy
for absent or malformed values lives in one place:

    * an absent node or attribute yields the caller's default
    * numeric text is read from its leading numeric prefix ("3.5m" -> 3.5,
      "12abc" -> 12); text without such a prefix yields the default
    * booleans are true when the text starts with one of "1tTyY"

Child lookup ignores XML namespaces and skips comments and processing
instructions.
"""
from __future__ import annotations

import re
from typing import Optional

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_TRUE_PREFIXES = ("1", "t", "T", "y", "Y")


def strip_ns(tag) -> str:
    """Remove namespace from an element tag, e.g. '{ns}road' -> 'road'"""
    if not isinstance(tag, str):
        # comments and processing instructions
        return ""
    return tag.split("}", 1)[-1] if "}" in tag else tag


def children(node, tag: str) -> list:
    """Direct children of node named tag, in document order."""
    if node is None:
        return []
    return [c for c in node if strip_ns(c.tag) == tag]


def child(node, tag: str):
    """First direct child of node named tag, or None."""
    if node is None:
        return None
    for c in node:
        if strip_ns(c.tag) == tag:
            return c
    return None


def as_str(node, name: str, default: str = "") -> str:
    if node is None:
        return default
    value = node.get(name)
    if value is None:
        return default
    return str(value)


def as_int(node, name: str, default: int = 0) -> int:
    value = _raw(node, name)
    if value is None:
        return default
    match = _INT_PREFIX.match(value)
    if match is None:
        return default
    return int(match.group(1))


def as_float(node, name: str, default: float = 0.0) -> float:
    value = _raw(node, name)
    if value is None:
        return default
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return default
    return float(match.group(1))


def as_bool(node, name: str, default: bool = False) -> bool:
    value = _raw(node, name)
    if value is None:
        return default
    value = value.strip()
    if not value:
        return default
    return value.startswith(_TRUE_PREFIXES)


def _raw(node, name: str) -> Optional[str]:
    if node is None:
        return None
    return node.get(name)
