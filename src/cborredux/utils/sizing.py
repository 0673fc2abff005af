"""Encoded size and inspection utilities.

This module provides helpers for checking how large a value's CBOR form is
and for viewing it as hex, without handling the raw bytes yourself.
"""

from __future__ import annotations

from typing import Any, Optional

from ..codec.config import EncoderConfig
from ..codec.encoder import Encoder, Replacer


def encoded_size(
    value: Any,
    replacer: Optional[Replacer] = None,
    config: Optional[EncoderConfig] = None,
) -> int:
    """Calculate the encoded size of a value in bytes.

    CBOR sizes depend on the values themselves (integer magnitudes, string
    lengths, replacer output), so the value is encoded and measured.

    Args:
        value: Value graph to measure
        replacer: Transform applied to each TaggedValue (default: identity)
        config: Encoder limits and output options

    Returns:
        Size in bytes

    Raises:
        EncodeError: If the value cannot be encoded

    Example:
        >>> encoded_size(23)
        1
        >>> encoded_size(24)
        2
        >>> encoded_size("x" * 300)
        306  # 0x7F + (2 + 250) + (2 + 50) + 0xFF
    """
    return len(Encoder(replacer=replacer, config=config).encode(value))


def encoded_hex(
    value: Any,
    replacer: Optional[Replacer] = None,
    config: Optional[EncoderConfig] = None,
    sep: str = "",
) -> str:
    """Encode a value and return its CBOR bytes as lowercase hex.

    Args:
        value: Value graph to encode
        replacer: Transform applied to each TaggedValue (default: identity)
        config: Encoder limits and output options
        sep: Separator placed between bytes (e.g. " ")

    Returns:
        Hex string

    Example:
        >>> encoded_hex({"a": 1}, sep=" ")
        'a1 61 61 01'
    """
    data = Encoder(replacer=replacer, config=config).encode(value)
    if sep:
        return data.hex(sep)
    return data.hex()
