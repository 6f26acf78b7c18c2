"""Hex encoding of byte strings and decoding of hex strings."""

import string

_HEX_DIGITS = frozenset(string.hexdigits)


def to_hex(data) -> str:
    """Encode bytes (or an iterable of byte values) as a lower-case hex string."""
    return bytes(data).hex()


def from_hex(hex_str: str) -> bytes:
    """Decode a hex string, optionally prefixed with ``0x``, into bytes.

    Raises ValueError when the string is empty, has an odd number of
    digits or contains characters that are not hex digits.
    """
    if hex_str[:2] == "0x":
        hex_str = hex_str[2:]
    digits = hex_str.strip()
    if not digits:
        raise ValueError("empty hex string")
    if len(digits) % 2:
        raise ValueError(f"hex string has an odd number of digits: {digits!r}")
    if not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"invalid hex string: {digits!r}")
    return bytes.fromhex(digits)