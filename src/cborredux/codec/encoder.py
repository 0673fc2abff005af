"""CBOR encoder for Python value graphs.

This module provides the Encoder class and the encode() convenience function
that convert ints, floats, strings, lists, mappings, booleans, None,
UNDEFINED and TaggedValue instances into RFC 8949 CBOR bytes.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Callable, Optional

from ..exceptions import (
    CyclicValueError,
    EncodeError,
    IntegerOverflow,
    RecursionDepthExceeded,
    UnsupportedValueKind,
)
from ..models.tagged import TaggedValue
from ..models.values import Float32, Undefined
from .bytepack import BytePacker
from .config import EncoderConfig
from .constants import (
    SIMPLE_FALSE,
    SIMPLE_NULL,
    SIMPLE_TRUE,
    SIMPLE_UNDEFINED,
    UINT64_MAX,
    MajorType,
)

logger = logging.getLogger(__name__)

Replacer = Callable[[int, TaggedValue], Any]


def identity_replacer(tag: int, value: TaggedValue) -> Any:
    """Default replacer: hand the tagged value back unchanged."""
    return value


class Encoder:
    """Encodes Python values to CBOR.

    An Encoder holds only its replacer and configuration. Every call to
    encode() writes into a fresh buffer, so results never accumulate across
    calls and a failed call leaves nothing behind.

    The replacer is called exactly once for every TaggedValue met during an
    encode, after the tag number has been written and before the payload.
    Whatever it returns is encoded as the payload; returning the tagged value
    itself means "encode its wrapped value".

    Example:
        ```python
        from cborredux import Encoder, TaggedValue

        encoder = Encoder()
        encoder.encode([10, 20, 30]).hex()   # '830a14181e'
        encoder.encode({"a": 1}).hex()       # 'a1616101'

        def replacer(tag, tagged):
            if tag == 0:
                return tagged.value.isoformat()
            return tagged

        Encoder(replacer=replacer).encode(TaggedValue(0, some_datetime))
        ```
    """

    def __init__(
        self,
        replacer: Optional[Replacer] = None,
        config: Optional[EncoderConfig] = None,
    ) -> None:
        """Initialize an encoder.

        Args:
            replacer: Transform applied to each TaggedValue (default: identity)
            config: Encoder limits and output options (default: EncoderConfig())
        """
        self.replacer: Replacer = replacer if replacer is not None else identity_replacer
        self.config = config if config is not None else EncoderConfig()

    def encode(self, value: Any) -> bytes:
        """Encode one value to CBOR.

        Args:
            value: Value graph to encode

        Returns:
            CBOR bytes for value

        Raises:
            UnsupportedValueKind: If some value in the graph has no CBOR mapping
            IntegerOverflow: If an integer is outside -2**64 .. 2**64-1
            RecursionDepthExceeded: If nesting exceeds config.max_depth or the
                interpreter stack
            CyclicValueError: If a container contains itself
            EncodeError: For other unencodable values
        """
        packer = BytePacker()
        try:
            _EncodeRun(self, packer).encode(value, depth=0)
        except RecursionError as err:
            # max_depth set beyond what the interpreter stack can hold
            raise RecursionDepthExceeded(self.config.max_depth) from err
        encoded = packer.to_bytes()

        logger.debug("Encoded %s to %d bytes", type(value).__name__, len(encoded))
        return encoded


class _EncodeRun:
    """State of a single top-level encode: the output buffer and the active path."""

    def __init__(self, encoder: Encoder, packer: BytePacker) -> None:
        self.replacer = encoder.replacer
        self.config = encoder.config
        self.packer = packer
        # ids of containers currently being encoded (the path from the root)
        self._active: set[int] = set()

    def encode(self, value: Any, depth: int) -> None:
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            self.packer.write_simple(SIMPLE_TRUE if value else SIMPLE_FALSE)
        elif value is None:
            self.packer.write_simple(SIMPLE_NULL)
        elif isinstance(value, Undefined):
            self.packer.write_simple(SIMPLE_UNDEFINED)
        elif isinstance(value, TaggedValue):
            self._encode_tagged(value, depth)
        elif isinstance(value, int):
            self._encode_int(value)
        elif isinstance(value, float):
            self._encode_float(value)
        elif isinstance(value, str):
            self._encode_text(value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self._encode_string(bytes(value), text=False)
        elif isinstance(value, (list, tuple)):
            self._encode_container(value, value, is_map=False, depth=depth)
        elif isinstance(value, Mapping):
            if _is_dense_index(value):
                self._encode_container(value, list(value.values()), is_map=False, depth=depth)
            else:
                self._encode_container(value, value, is_map=True, depth=depth)
        else:
            raise UnsupportedValueKind(value)

    def _encode_int(self, value: int) -> None:
        if value >= 0:
            if value > UINT64_MAX:
                raise IntegerOverflow(value)
            self.packer.write_head(MajorType.UNSIGNED_INT, value)
        else:
            magnitude = -1 - value
            if magnitude > UINT64_MAX:
                raise IntegerOverflow(value)
            self.packer.write_head(MajorType.NEGATIVE_INT, magnitude)

    def _encode_float(self, value: float) -> None:
        if math.isnan(value) and self.config.nan_as_undefined:
            logger.debug("NaN encoded as undefined")
            self.packer.write_simple(SIMPLE_UNDEFINED)
        elif isinstance(value, Float32):
            self.packer.write_float32(value)
        else:
            self.packer.write_float64(value)

    def _encode_text(self, value: str) -> None:
        try:
            data = value.encode("utf-8")
        except UnicodeEncodeError as err:
            raise EncodeError(f"Text is not encodable as UTF-8: {err.reason}") from err
        self._encode_string(data, text=True)

    def _encode_string(self, data: bytes, text: bool) -> None:
        chunk_size = self.config.chunk_size
        if len(data) < chunk_size:
            self.packer.write_head(MajorType.TEXT_STRING, len(data))
            self.packer.write_bytes(data)
            return

        logger.debug(
            "Chunking %d-byte string into %d-byte pieces", len(data), chunk_size
        )
        self.packer.write_indefinite(MajorType.TEXT_STRING)
        view = memoryview(data)
        start = 0
        while start < len(data):
            end = min(start + chunk_size, len(data))
            if text:
                # Each chunk must be valid UTF-8 on its own: never split a code point
                while end < len(data) and data[end] & 0xC0 == 0x80:
                    end -= 1
            self.packer.write_head(MajorType.TEXT_STRING, end - start)
            self.packer.write_bytes(view[start:end])
            start = end
        self.packer.write_break()

    def _encode_container(self, container: Any, members: Any, is_map: bool, depth: int) -> None:
        self._enter(container, depth)
        try:
            if is_map:
                self.packer.write_head(MajorType.MAP, len(members))
                for key, item in members.items():
                    self.encode(key, depth + 1)
                    self.encode(item, depth + 1)
            else:
                self.packer.write_head(MajorType.ARRAY, len(members))
                for item in members:
                    self.encode(item, depth + 1)
        finally:
            self._active.discard(id(container))

    def _encode_tagged(self, tagged: TaggedValue, depth: int) -> None:
        self._enter(tagged, depth)
        try:
            self.packer.write_head(MajorType.TAG, tagged.tag)
            substitute = self.replacer(tagged.tag, tagged)
            if substitute is tagged:
                substitute = tagged.value
            self.encode(substitute, depth + 1)
        finally:
            self._active.discard(id(tagged))

    def _enter(self, node: Any, depth: int) -> None:
        if depth >= self.config.max_depth:
            raise RecursionDepthExceeded(self.config.max_depth)
        if id(node) in self._active:
            raise CyclicValueError(node)
        self._active.add(id(node))


def _is_dense_index(mapping: Mapping[Any, Any]) -> bool:
    """Return True if the keys are exactly the ints 0..n-1 in order.

    An empty mapping is not dense: {} stays a map.
    """
    if not mapping:
        return False
    for expected, key in enumerate(mapping):
        if type(key) is not int or key != expected:
            return False
    return True


def encode(
    value: Any,
    replacer: Optional[Replacer] = None,
    config: Optional[EncoderConfig] = None,
) -> bytes:
    """Encode a value to CBOR with a one-off Encoder.

    Args:
        value: Value graph to encode
        replacer: Transform applied to each TaggedValue (default: identity)
        config: Encoder limits and output options

    Returns:
        CBOR bytes for value

    Examples:
        ```python
        from cborredux import encode

        encode(256)          # b'\\x19\\x01\\x00'
        encode(-1)           # b'\\x20'
        encode([10, 20, 30]) # b'\\x83\\x0a\\x14\\x18\\x1e'
        ```
    """
    return Encoder(replacer=replacer, config=config).encode(value)
