"""Value types for cborredux.

This module provides TaggedValue and the marker types for CBOR values
that have no native Python spelling.
"""

from __future__ import annotations

from .tagged import (
    TAG_DATETIME_STRING,
    TAG_EPOCH_DATETIME,
    DateTimeString,
    EpochDateTime,
    TaggedValue,
    datetime_replacer,
)
from .values import UNDEFINED, Float32, Undefined

__all__ = [
    "TaggedValue",
    "DateTimeString",
    "EpochDateTime",
    "TAG_DATETIME_STRING",
    "TAG_EPOCH_DATETIME",
    "datetime_replacer",
    "Float32",
    "Undefined",
    "UNDEFINED",
]
