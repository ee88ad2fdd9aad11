"""UUID helpers for time-ordered identifiers."""

import os
import time
import uuid


def generate_uuid_v7() -> str:
    """Generate a UUIDv7 string.

    The first 48 bits hold the Unix timestamp in milliseconds, so ids
    generated later sort after ids generated earlier (at millisecond
    resolution). The remaining bits are random apart from the version
    and variant fields.
    """
    timestamp_ms = time.time_ns() // 1_000_000
    raw = bytearray(timestamp_ms.to_bytes(6, byteorder="big") + os.urandom(10))

    # version 7 in the high nibble of byte 6, RFC 4122 variant in byte 8
    raw[6] = (raw[6] & 0x0F) | 0x70
    raw[8] = (raw[8] & 0x3F) | 0x80

    return str(uuid.UUID(bytes=bytes(raw)))

