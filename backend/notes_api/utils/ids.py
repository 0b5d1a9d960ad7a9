"""Note identifiers.

Ids are version-7 UUIDs: a 48-bit Unix timestamp in milliseconds followed by
74 random bits. Generators on different hosts need no coordination, and ids
sort roughly by creation time.
"""
from __future__ import annotations

import secrets
import time
import uuid
from typing import Optional

_RAND_BITS = 74
_RAND_B_BITS = 62


def new_note_id(now_ms: Optional[int] = None) -> str:
    ms = time.time_ns() // 1_000_000 if now_ms is None else now_ms
    rand = secrets.randbits(_RAND_BITS)
    rand_a = rand >> _RAND_B_BITS
    rand_b = rand & ((1 << _RAND_B_BITS) - 1)

    value = (ms & 0xFFFF_FFFF_FFFF) << 80
    value |= 0x7 << 76
    value |= rand_a << 64
    value |= 0b10 << 62
    value |= rand_b
    return str(uuid.UUID(int=value))


def note_id_timestamp(note_id: str) -> int:
    """Return the creation time (ms since epoch) encoded in a note id."""
    return uuid.UUID(note_id).int >> 80
