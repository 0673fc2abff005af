"""Tagged value model and built-in tag types.

This module provides the TaggedValue class that pairs a CBOR semantic tag
number with one wrapped value, plus a few subclasses for common RFC 8949 tags.
"""

from __future__ import annotations

import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..codec.constants import UINT64_MAX

TAG_DATETIME_STRING = 0
TAG_EPOCH_DATETIME = 1


class TaggedValue(BaseModel):
    """A CBOR tag number plus the single value it wraps.

    The encoder writes the tag head, hands the instance to its replacer, and
    encodes whatever the replacer returns. With the default replacer the
    wrapped value itself follows the tag.

    Subclasses may pin the tag number with the ``cbor_tag`` class variable,
    in which case ``tag`` can be omitted on construction:

    Example:
        >>> TaggedValue(32, "https://example.com")
        TaggedValue(tag=32, value='https://example.com')
        >>> class Uri(TaggedValue):
        ...     cbor_tag: ClassVar[int | None] = 32
        >>> Uri(value="https://example.com").tag
        32

    Attributes:
        tag: Semantic tag number (0 to 2**64-1)
        value: The wrapped value, encoded after the tag
        cbor_tag: Fixed tag number for subclasses (optional)
    """

    model_config = ConfigDict(
        # Tag numbers are never coerced (True is not tag 1)
        strict=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        frozen=True,
    )

    cbor_tag: ClassVar[int | None] = None

    tag: int = Field(ge=0, le=UINT64_MAX)
    value: Any = None

    def __init__(self, tag: int | None = None, value: Any = None, **data: Any) -> None:
        if tag is None:
            tag = type(self).cbor_tag
        super().__init__(tag=tag, value=value, **data)

    @field_validator("tag")
    @classmethod
    def _check_fixed_tag(cls, tag: int) -> int:
        if cls.cbor_tag is not None and tag != cls.cbor_tag:
            raise ValueError(f"{cls.__name__} requires tag {cls.cbor_tag}, got {tag}")
        return tag


class DateTimeString(TaggedValue):
    """Tag 0: a date/time, carried on the wire as an RFC 3339 text string."""

    cbor_tag: ClassVar[int | None] = TAG_DATETIME_STRING


class EpochDateTime(TaggedValue):
    """Tag 1: a date/time, carried on the wire as seconds since the Unix epoch."""

    cbor_tag: ClassVar[int | None] = TAG_EPOCH_DATETIME


def datetime_replacer(tag: int, tagged: TaggedValue) -> Any:
    """Replacer that turns ``datetime`` payloads of tags 0 and 1 into wire values.

    Tag 0 payloads become ISO 8601 strings and tag 1 payloads become epoch
    seconds (an int when there is no sub-second part). Naive datetimes are
    treated as UTC. Every other tagged value is returned unchanged.

    Example:
        >>> encoder = Encoder(replacer=datetime_replacer)
        >>> encoder.encode(DateTimeString(value=datetime.datetime(2024, 1, 1)))
    """
    payload = tagged.value
    if not isinstance(payload, datetime.datetime):
        return tagged

    if payload.tzinfo is None:
        payload = payload.replace(tzinfo=datetime.timezone.utc)

    if tag == TAG_DATETIME_STRING:
        return payload.isoformat().replace("+00:00", "Z")
    if tag == TAG_EPOCH_DATETIME:
        timestamp = payload.timestamp()
        return int(timestamp) if payload.microsecond == 0 else timestamp
    return tagged
