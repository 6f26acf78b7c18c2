"""Siphash key derivation from block headers and solver parameter helpers."""

import hashlib
from datetime import timedelta
from decimal import Decimal
from typing import Optional

DEFAULT_EDGE_BITS = 31
MIN_EDGE_BITS = 31
MAX_EDGE_BITS = 64

_PLATFORMS = {1: "AMD", 2: "NVIDIA"}


def create_siphash_keys(header) -> tuple:
    """Derive four 64-bit siphash keys from the blake2b-256 hash of ``header``."""
    digest = hashlib.blake2b(bytes(header), digest_size=32).digest()
    return tuple(
        int.from_bytes(digest[offset : offset + 8], "little") for offset in range(0, 32, 8)
    )


def set_header_nonce(header, nonce: Optional[int], mutate_nonce: bool) -> tuple:
    """Derive siphash keys, replacing the header's last four bytes with ``nonce`` if asked.

    The nonce is written as a little-endian 32-bit value.
    """
    data = bytes(header)
    if nonce is not None and mutate_nonce:
        if len(data) < 4:
            raise ValueError("header too short to hold a nonce")
        data = data[:-4] + (nonce & 0xFFFFFFFF).to_bytes(4, "little")
    return create_siphash_keys(data)


def fill_default_params(params) -> None:
    """Set the device, platform and edge bits of solver parameters to their defaults."""
    params.device = 0
    params.platform = 0
    params.edge_bits = DEFAULT_EDGE_BITS


def normalize_edge_bits(edge_bits: int) -> int:
    """Clamp a requested graph size to the supported range, falling back to 31.

    Only the low eight bits of the request are considered.
    """
    bits = edge_bits & 0xFF
    if bits < MIN_EDGE_BITS or bits > MAX_EDGE_BITS:
        return DEFAULT_EDGE_BITS
    return bits


def platform_name(platform: int) -> Optional[str]:
    """Return the OpenCL platform vendor for a platform id, or None for the default."""
    return _PLATFORMS.get(platform)


def duration_to_nanos(seconds) -> int:
    """Convert a duration in seconds (number or timedelta) to whole nanoseconds."""
    if isinstance(seconds, timedelta):
        if seconds < timedelta(0):
            raise ValueError("duration may not be negative")
        whole = seconds.days * 86_400 + seconds.seconds
        return whole * 1_000_000_000 + seconds.microseconds * 1_000
    value = Decimal(str(seconds))
    if value < 0:
        raise ValueError("duration may not be negative")
    return int(value * 1_000_000_000)