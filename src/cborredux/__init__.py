"""cborredux: CBOR Encoder

A Python library that encodes in-memory value graphs into CBOR (Concise Binary
Object Representation, RFC 8949), a compact self-describing binary format
readable by any conformant CBOR implementation.

Key Features:
- ints, floats (double or explicit single precision), strings, lists,
  mappings, booleans, None and undefined
- Semantic tags through TaggedValue with a pluggable replacer
- Indefinite-length chunking for long strings
- Explicit errors for unsupported values, integer overflow, cycles and
  excessive nesting

Quick Start:
    >>> from cborredux import Encoder, TaggedValue, encode
    >>>
    >>> encode(256)
    b'\\x19\\x01\\x00'
    >>> encode({"a": 1}).hex()
    'a1616101'
    >>>
    >>> encoder = Encoder(replacer=lambda tag, tagged: tagged)
    >>> encoder.encode(TaggedValue(0, "2013-03-21T20:04:00Z")).hex()[:4]
    'c074'
"""

from __future__ import annotations

from .codec import BytePacker, Encoder, EncoderConfig, MajorType, encode, identity_replacer
from .exceptions import (
    CborReduxError,
    CyclicValueError,
    EncodeError,
    IntegerOverflow,
    RecursionDepthExceeded,
    UnsupportedValueKind,
)
from .models import (
    TAG_DATETIME_STRING,
    TAG_EPOCH_DATETIME,
    UNDEFINED,
    DateTimeString,
    EpochDateTime,
    Float32,
    TaggedValue,
    Undefined,
    datetime_replacer,
)
from .utils import encoded_hex, encoded_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Encoder",
    "EncoderConfig",
    "encode",
    "identity_replacer",
    # Values
    "TaggedValue",
    "DateTimeString",
    "EpochDateTime",
    "TAG_DATETIME_STRING",
    "TAG_EPOCH_DATETIME",
    "datetime_replacer",
    "Float32",
    "Undefined",
    "UNDEFINED",
    # Low-level
    "BytePacker",
    "MajorType",
    # Exceptions
    "CborReduxError",
    "EncodeError",
    "UnsupportedValueKind",
    "IntegerOverflow",
    "RecursionDepthExceeded",
    "CyclicValueError",
    # Sizing
    "encoded_size",
    "encoded_hex",
    # Version
    "__version__",
]
