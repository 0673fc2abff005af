"""CBOR codec for cborredux.

This module provides the encoder and the byte-level packing it is built on.
"""

from __future__ import annotations

from .bytepack import BytePacker
from .config import EncoderConfig
from .constants import MajorType
from .encoder import Encoder, encode, identity_replacer

__all__ = [
    "encode",
    "Encoder",
    "EncoderConfig",
    "BytePacker",
    "MajorType",
    "identity_replacer",
]
