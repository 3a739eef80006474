"""Content hashing for cache keys.

The digest is SHA-256 over a compact JSON encoding, so any JSON-like value
hashes the same way the plugin's JavaScript lineage hashed it
(``JSON.stringify`` + ``crypto.subtle.digest``). Integral floats are written
without a fractional part to keep ``left=1`` and ``left=1.0`` on the same
key.
"""

from __future__ import annotations

import hashlib
import json
from enum import Enum
from typing import Any

__all__ = ["calculate_hash", "canonical_json"]


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def canonical_json(value: Any) -> str:
    """Return the compact JSON text that is fed to the digest."""
    return json.dumps(_jsonable(value), separators=(",", ":"), ensure_ascii=False)


async def calculate_hash(value: Any) -> str:
    """Return the lowercase hex SHA-256 digest of *value*'s canonical JSON."""
    return hashlib.sha256(canonical_json(value).encode("utf-8")).hexdigest()
